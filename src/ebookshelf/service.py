"""Catalogue service for ebookshelf.

``CatalogService`` is the single entry point used by the CLI and the TUI.
It applies the business rules on user input and delegates storage to the
``BookRepository`` it is given.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Optional

from .errors import IncompleteDataError, RepositoryNotReadyError
from .models import Book, validate_book_id
from .repository import BookRepository


@dataclass
class CatalogStats:
    """Summary counts for the catalogue.

    Attributes
    ----------
    total : int
        Number of stored books.
    category_counts : dict of str to int
        Books per category, most common first. Empty categories excluded.
    format_counts : dict of str to int
        Books per format, most common first. Empty formats excluded.
    """

    total: int = 0
    category_counts: dict[str, int] = field(default_factory=dict)
    format_counts: dict[str, int] = field(default_factory=dict)


def _grouped_counts(values: list[str]) -> dict[str, int]:
    counter = Counter(v for v in values if v)
    return dict(counter.most_common())


class CatalogService:
    """Business-rule layer between callers and a ``BookRepository``.

    Parameters
    ----------
    repository : BookRepository
        Storage backend. Required.

    Raises
    ------
    RepositoryNotReadyError
        If *repository* is ``None``.
    """

    def __init__(self, repository: Optional[BookRepository]) -> None:
        if repository is None:
            raise RepositoryNotReadyError("Book repository is not initialised")
        self._repository = repository

    def add_book(
        self, title: str, author: str, category: str = "", format: str = ""
    ) -> Book:
        """Add a book to the catalogue.

        The identifier is assigned by the repository.

        Parameters
        ----------
        title, author : str
            Required; surrounding whitespace is removed.
        category, format : str, optional
            Optional descriptive fields.

        Returns
        -------
        Book
            The stored book with its identifier.

        Raises
        ------
        IncompleteDataError
            If title or author is empty after trimming.
        """
        title = (title or "").strip()
        author = (author or "").strip()
        if not title or not author:
            raise IncompleteDataError("Title and author are required")

        provisional = Book.create(None, title, author, category, format)
        return self._repository.add(provisional)

    def list_books(self) -> list[Book]:
        """Return every book in storage order."""
        return self._repository.list_all()

    def search_books(self, term: str) -> list[Book]:
        """Return books whose title or author contains *term*."""
        return self._repository.search(term)

    def delete_book(self, book_id: int) -> None:
        """Delete the book with *book_id*.

        Raises
        ------
        InvalidIdError
            If *book_id* is not a positive integer.
        NotFoundError
            If no book has *book_id*.
        """
        validate_book_id(book_id)
        self._repository.delete(book_id)

    def peek_next_id(self) -> int:
        """Return the identifier the next added book will receive."""
        return self._repository.peek_next_id()

    def catalog_stats(self) -> CatalogStats:
        """Return totals grouped by category and format."""
        books = self._repository.list_all()
        return CatalogStats(
            total=len(books),
            category_counts=_grouped_counts([b.category for b in books]),
            format_counts=_grouped_counts([b.format for b in books]),
        )
