"""
Tests for the catalogue service business rules.
"""

import dataclasses

import pytest

from ebookshelf.errors import (
    IncompleteDataError,
    InvalidIdError,
    NotFoundError,
    RepositoryNotReadyError,
)
from ebookshelf.models import Book
from ebookshelf.repository import BookRepository
from ebookshelf.service import CatalogService


class RecordingRepository(BookRepository):
    """Test double that records calls instead of storing books."""

    def __init__(self):
        self.added = []
        self.deleted = []
        self.searched = []

    def add(self, book):
        self.added.append(book)
        return Book.create(len(self.added), book.title, book.author, book.category, book.format)

    def list_all(self):
        return []

    def search(self, term):
        self.searched.append(term)
        return []

    def delete(self, book_id):
        self.deleted.append(book_id)

    def peek_next_id(self):
        return len(self.added) + 1


def test_requires_repository():
    with pytest.raises(RepositoryNotReadyError):
        CatalogService(None)


class TestAddBook:
    def test_add_then_list(self, service):
        expected_id = service.peek_next_id()
        before = len(service.list_books())

        book = service.add_book("  Dune ", " Frank Herbert ", "Sci-Fi", "EPUB")

        books = service.list_books()
        assert len(books) == before + 1
        assert books[-1] == book
        assert book.book_id == expected_id
        assert (book.title, book.author) == ("Dune", "Frank Herbert")

    @pytest.mark.parametrize(
        "title, author", [("", "Author"), ("Title", ""), ("  ", "  ")]
    )
    def test_incomplete_data(self, service, title, author):
        with pytest.raises(IncompleteDataError):
            service.add_book(title, author, "", "")
        assert service.list_books() == []
        assert service.peek_next_id() == 1

    def test_hands_repository_an_unassigned_book(self):
        repo = RecordingRepository()
        CatalogService(repo).add_book("Dune", "Frank Herbert")

        assert len(repo.added) == 1
        assert isinstance(repo.added[0], Book)
        assert repo.added[0].book_id is None

    def test_ids_strictly_increase(self, service):
        ids = [service.add_book(f"Book {i}", "Author").book_id for i in range(5)]
        service.delete_book(ids[-1])
        ids.append(service.add_book("Another", "Author").book_id)

        assert ids == sorted(set(ids))
        assert ids[-1] == 6


class TestDeleteBook:
    @pytest.mark.parametrize("book_id", [0, -5, "3", 2.0, None])
    def test_invalid_id_is_rejected_before_repository(self, book_id):
        repo = RecordingRepository()
        with pytest.raises(InvalidIdError):
            CatalogService(repo).delete_book(book_id)
        assert repo.deleted == []

    def test_never_issued_id(self, service):
        service.add_book("Dune", "Frank Herbert")
        with pytest.raises(NotFoundError):
            service.delete_book(999)

    def test_delete_removes_exactly_one(self, service):
        service.add_book("Dune", "Frank Herbert")
        target = service.add_book("Emma", "Jane Austen")
        service.add_book("Ulysses", "James Joyce")

        service.delete_book(target.book_id)

        books = service.list_books()
        assert len(books) == 2
        assert target.book_id not in [b.book_id for b in books]


class TestListAndSearch:
    def test_empty_list(self, service):
        assert service.list_books() == []

    def test_search_accent_case_insensitive(self, service):
        service.add_book("Cien años de soledad", "García Márquez")
        service.add_book("Dune", "Frank Herbert")

        results = service.search_books("garcía")
        assert [b.author for b in results] == ["García Márquez"]

    @pytest.mark.parametrize("term", ["", "   "])
    def test_blank_search(self, service, term):
        service.add_book("Dune", "Frank Herbert")
        assert service.search_books(term) == []

    def test_search_is_passed_through_unchanged(self):
        repo = RecordingRepository()
        CatalogService(repo).search_books("  MiXeD ")
        assert repo.searched == ["  MiXeD "]

    def test_returned_books_cannot_alter_storage(self, service):
        service.add_book("Dune", "Frank Herbert")

        listed = service.list_books()
        with pytest.raises(dataclasses.FrozenInstanceError):
            listed[0].title = "Changed"
        listed.pop()

        again = service.list_books()
        assert [b.title for b in again] == ["Dune"]


def test_catalog_stats(service):
    service.add_book("Dune", "Frank Herbert", "Science Fiction", "EPUB")
    service.add_book("Neuromancer", "William Gibson", "Science Fiction", "PDF")
    service.add_book("Emma", "Jane Austen", "Novel", "EPUB")
    service.add_book("Untitled Notes", "Anonymous")

    stats = service.catalog_stats()

    assert stats.total == 4
    assert stats.category_counts == {"Science Fiction": 2, "Novel": 1}
    assert list(stats.category_counts)[0] == "Science Fiction"
    assert stats.format_counts == {"EPUB": 2, "PDF": 1}


def test_catalog_stats_empty(service):
    stats = service.catalog_stats()
    assert stats.total == 0
    assert stats.category_counts == {}
    assert stats.format_counts == {}
