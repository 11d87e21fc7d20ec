"""Book repository: the persistence collaborator used by the HTTP layer."""

from typing import Protocol

from loguru import logger
from sqlmodel import Session, select

from .entity import Book, BookId
from .table import BookTable


class BookRepository(Protocol):
    """Operations the book endpoints need from persistence.

    Every method may raise; a falsy result means the operation did not apply.
    """

    def list_all(self) -> list[Book]: ...

    def create(self, book: Book) -> bool: ...

    def delete(self, book_id: BookId) -> bool: ...

    def update(self, book: Book) -> bool: ...


_MIN_ROW_ID = -(2**63)
_MAX_ROW_ID = 2**63 - 1


def _row_id(book_id: BookId | None) -> int | None:
    """Return ``book_id`` as a primary key, or None when it cannot be one."""
    if isinstance(book_id, bool):
        return None
    if isinstance(book_id, float) and book_id.is_integer():
        book_id = int(book_id)
    if not isinstance(book_id, int):
        return None
    # Wider values do not fit the 64-bit integer key column
    if not _MIN_ROW_ID <= book_id <= _MAX_ROW_ID:
        return None
    return book_id


class SqlBookRepository:
    """Data-access layer for books backed by a SQLModel session."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[Book]:
        rows = self._session.exec(select(BookTable).order_by(BookTable.id)).all()
        return [Book.model_validate(row.model_dump()) for row in rows]

    def create(self, book: Book) -> bool:
        row = BookTable(**book.record_fields())
        self._session.add(row)
        self._commit()
        self._session.refresh(row)
        book.id = row.id
        logger.info("Book {} stored", row.id)
        return True

    def delete(self, book_id: BookId) -> bool:
        row = self._get_row(book_id)
        if row is None:
            return False
        removed_id = row.id
        self._session.delete(row)
        self._commit()
        logger.info("Book {} removed", removed_id)
        return True

    def update(self, book: Book) -> bool:
        row = self._get_row(book.id)
        if row is None:
            return False
        for name, value in book.record_fields().items():
            setattr(row, name, value)
        self._session.add(row)
        self._commit()
        logger.info("Book {} updated", row.id)
        return True

    def _get_row(self, book_id: BookId | None) -> BookTable | None:
        row_id = _row_id(book_id)
        if row_id is None:
            logger.warning("Ignoring invalid book identifier {!r}", book_id)
            return None
        return self._session.get(BookTable, row_id)

    def _commit(self) -> None:
        try:
            self._session.commit()
        except Exception:
            self._session.rollback()
            logger.exception("Book transaction failed, rolled back")
            raise
