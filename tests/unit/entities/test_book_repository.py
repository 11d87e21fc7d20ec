"""Tests for SqlBookRepository against an in-memory SQLite database."""

import math
from typing import Any
from unittest.mock import patch

import pytest
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from src.catalog.entities.book import Book, BookTable, SqlBookRepository


@pytest.fixture
def repository(session: Session) -> SqlBookRepository:
    return SqlBookRepository(session)


@pytest.fixture
def make_book(book_payload: dict[str, Any]):
    def _make(**overrides: Any) -> Book:
        return Book.model_validate({**book_payload, **overrides})

    return _make


class TestCreate:
    def test_persists_and_assigns_identifier(
        self, repository: SqlBookRepository, session: Session, make_book
    ):
        book = make_book()

        assert repository.create(book) is True

        assert book.id is not None
        row = session.get(BookTable, book.id)
        assert row is not None
        assert row.title == "A"
        assert row.acquisition_value == 10.5

    def test_ignores_caller_identifier(self, repository: SqlBookRepository, make_book):
        first = make_book()
        repository.create(first)
        second = make_book(bookId=first.id)

        repository.create(second)

        assert second.id != first.id

    def test_commit_failure_rolls_back_and_raises(
        self, repository: SqlBookRepository, session: Session, make_book
    ):
        with (
            patch.object(session, "commit", side_effect=SQLAlchemyError("disk full")),
            patch.object(session, "rollback", wraps=session.rollback) as rollback,
        ):
            with pytest.raises(SQLAlchemyError):
                repository.create(make_book())

        rollback.assert_called_once()
        assert session.exec(select(BookTable)).all() == []


class TestListAll:
    def test_empty(self, repository: SqlBookRepository):
        assert repository.list_all() == []

    def test_returns_entities_in_identifier_order(
        self, repository: SqlBookRepository, make_book
    ):
        repository.create(make_book(title="First"))
        repository.create(make_book(title="Second"))

        books = repository.list_all()

        assert [book.title for book in books] == ["First", "Second"]
        assert all(isinstance(book, Book) for book in books)
        assert books[0].id < books[1].id


class TestDelete:
    def test_removes_existing_book(self, repository: SqlBookRepository, make_book):
        book = make_book()
        repository.create(book)

        assert repository.delete(book.id) is True
        assert repository.list_all() == []

    def test_missing_book(self, repository: SqlBookRepository):
        assert repository.delete(404) is False

    def test_nan_identifier(self, repository: SqlBookRepository, make_book):
        repository.create(make_book())

        assert repository.delete(math.nan) is False
        assert len(repository.list_all()) == 1

    def test_integral_float_identifier(self, repository: SqlBookRepository, make_book):
        book = make_book()
        repository.create(book)

        assert repository.delete(float(book.id)) is True

    @pytest.mark.parametrize("book_id", [2**63, -(2**63) - 1, 99999999999999999999, 1e20])
    def test_identifier_beyond_integer_key_range(
        self, repository: SqlBookRepository, make_book, book_id
    ):
        repository.create(make_book())

        assert repository.delete(book_id) is False
        assert len(repository.list_all()) == 1


class TestUpdate:
    def test_overwrites_all_fields(self, repository: SqlBookRepository, make_book):
        book = make_book()
        repository.create(book)
        changed = make_book(
            bookId=book.id,
            title="Revised",
            availableCopies=1,
            loanStatus="borrowed",
        )

        assert repository.update(changed) is True

        (stored,) = repository.list_all()
        assert stored.title == "Revised"
        assert stored.available_copies == 1
        assert stored.loan_status == "borrowed"
        assert stored.id == book.id

    def test_missing_book(self, repository: SqlBookRepository, make_book):
        assert repository.update(make_book(bookId=404)) is False

    def test_without_identifier(self, repository: SqlBookRepository, make_book):
        assert repository.update(make_book()) is False

    def test_nan_identifier(self, repository: SqlBookRepository, make_book):
        book = make_book()
        book.id = math.nan

        assert repository.update(book) is False

    def test_identifier_beyond_integer_key_range(
        self, repository: SqlBookRepository, make_book
    ):
        book = make_book()
        book.id = 99999999999999999999

        assert repository.update(book) is False
