"""Storage abstraction for the ebookshelf catalogue.

``BookRepository`` is the contract every storage backend implements. The
catalogue service only talks to this interface, so backends (in-memory,
file, database, test doubles) can be swapped without touching callers.
"""

from abc import ABC, abstractmethod
from typing import Optional

from .models import Book


class BookRepository(ABC):
    """Abstract book storage.

    A repository owns its collection of books and the identifier sequence.
    Identifiers start at 1, grow by one per successful insertion and are
    never reused.
    """

    @abstractmethod
    def add(self, book: Optional[Book]) -> Book:
        """Store a book under the next identifier.

        Any identifier on *book* is ignored.

        Parameters
        ----------
        book : Book
            The book to store.

        Returns
        -------
        Book
            The stored book, carrying its assigned identifier.

        Raises
        ------
        MissingBookError
            If *book* is ``None``.
        BookRejectedError
            If the book fails validation while being stored.
        """

    @abstractmethod
    def list_all(self) -> list[Book]:
        """Return all stored books in storage order.

        Returns
        -------
        list of Book
            A new list; an empty store yields ``[]``.
        """

    @abstractmethod
    def search(self, term: str) -> list[Book]:
        """Return books whose title or author contains *term*.

        Matching is case-insensitive. A blank *term* matches nothing.

        Parameters
        ----------
        term : str
            The substring to look for.

        Returns
        -------
        list of Book
            Matches in storage order.
        """

    @abstractmethod
    def delete(self, book_id: int) -> None:
        """Remove the book with *book_id*.

        Raises
        ------
        InvalidIdError
            If *book_id* is zero or negative.
        NotFoundError
            If no stored book has *book_id*.
        """

    @abstractmethod
    def peek_next_id(self) -> int:
        """Return the identifier the next insertion will receive."""

    def count(self) -> int:
        """Return the number of stored books."""
        return len(self.list_all())
