"""Book data model for the ebookshelf catalogue.

Defines the immutable ``Book`` dataclass used throughout the application
to represent a single electronic book.
"""

from dataclasses import dataclass
from typing import Optional

from .errors import IncompleteDataError, InvalidIdError


def validate_book_id(book_id) -> int:
    """Return *book_id* if it is a positive integer.

    Raises
    ------
    InvalidIdError
        For zero, negative numbers, booleans and non-integers.
    """
    if isinstance(book_id, bool) or not isinstance(book_id, int) or book_id <= 0:
        raise InvalidIdError(f"Invalid book id: {book_id!r}")
    return book_id


@dataclass(frozen=True)
class Book:
    """An electronic book in the catalogue.

    Instances are frozen: assigning to any field raises
    ``dataclasses.FrozenInstanceError``. All string fields are trimmed and
    validated on construction.

    Attributes
    ----------
    book_id : int or None
        Identifier assigned by the repository. ``None`` until stored.
    title : str
        Main title of the book. Never empty.
    author : str
        Author name(s). Never empty.
    category : str
        Genre or subject, may be empty.
    format : str
        File format (e.g. EPUB, PDF, MOBI), may be empty.

    Raises
    ------
    InvalidIdError
        If *book_id* is not a positive integer (or ``None``).
    IncompleteDataError
        If *title* or *author* is empty after trimming.
    """

    book_id: Optional[int]
    title: str
    author: str
    category: str = ""
    format: str = ""

    def __post_init__(self) -> None:
        if self.book_id is not None:
            validate_book_id(self.book_id)

        # Frozen dataclass: write trimmed values through object.__setattr__
        for name in ("title", "author", "category", "format"):
            value = getattr(self, name)
            object.__setattr__(self, name, (value or "").strip())

        if not self.title or not self.author:
            raise IncompleteDataError("Title and author are required")

    @classmethod
    def create(
        cls,
        book_id: Optional[int],
        title: str,
        author: str,
        category: str = "",
        format: str = "",
    ) -> "Book":
        """Build a validated book.

        Parameters
        ----------
        book_id : int or None
            Identifier, or ``None`` for a book not yet stored.
        title, author : str
            Required text fields; surrounding whitespace is removed.
        category, format : str, optional
            Optional text fields; surrounding whitespace is removed.

        Returns
        -------
        Book
            The new immutable book.
        """
        return cls(
            book_id=book_id,
            title=title,
            author=author,
            category=category,
            format=format,
        )

    @property
    def is_persisted(self) -> bool:
        """Whether a repository has assigned an identifier."""
        return self.book_id is not None

    def display_title(self, max_length: int = 50) -> str:
        """Return title truncated with ellipsis if needed."""
        if len(self.title) <= max_length:
            return self.title
        return self.title[: max_length - 3] + "..."

    def display_author(self, max_length: int = 30) -> str:
        """Return author truncated with ellipsis if needed."""
        if len(self.author) <= max_length:
            return self.author
        return self.author[: max_length - 3] + "..."
