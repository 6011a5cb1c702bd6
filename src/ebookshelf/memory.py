"""In-memory storage backend for the ebookshelf catalogue.

Books live in a Python list for the lifetime of the process. A re-entrant
lock serialises mutations so the Textual search worker threads always see
a consistent snapshot.
"""

import threading
from typing import Optional

from .errors import (
    BookRejectedError,
    BookValidationError,
    MissingBookError,
    NotFoundError,
)
from .models import Book, validate_book_id
from .repository import BookRepository


class InMemoryBookRepository(BookRepository):
    """List-backed ``BookRepository``.

    Removal is stable: deleting a book keeps the remaining books in
    insertion order.
    """

    def __init__(self) -> None:
        self._books: list[Book] = []
        self._next_id = 1
        self._lock = threading.RLock()

    def add(self, book: Optional[Book]) -> Book:
        if book is None:
            raise MissingBookError("No book supplied")

        with self._lock:
            try:
                stored = Book.create(
                    self._next_id,
                    book.title,
                    book.author,
                    book.category,
                    book.format,
                )
            except BookValidationError as e:
                raise BookRejectedError(f"Cannot store book: {e}") from e
            self._books.append(stored)
            self._next_id += 1
            return stored

    def list_all(self) -> list[Book]:
        with self._lock:
            return list(self._books)

    def search(self, term: str) -> list[Book]:
        needle = (term or "").strip().casefold()
        if not needle:
            return []

        with self._lock:
            return [
                book
                for book in self._books
                if needle in book.title.casefold() or needle in book.author.casefold()
            ]

    def delete(self, book_id: int) -> None:
        validate_book_id(book_id)

        with self._lock:
            for index, book in enumerate(self._books):
                if book.book_id == book_id:
                    del self._books[index]
                    return
        raise NotFoundError(f"No book found with id {book_id}")

    def peek_next_id(self) -> int:
        with self._lock:
            return self._next_id

    def count(self) -> int:
        with self._lock:
            return len(self._books)
