"""Book database table model."""

from src.catalog.entities._base import EntityTable


class BookTable(EntityTable, table=True):
    """Database persistence model for books.

    Kept apart from the Book entity so the HTTP layer never handles rows.
    """

    __tablename__ = "books"

    title: str
    author: str
    publication_year: str
    publisher: str
    isbn: str
    total_copies: int
    available_copies: int
    acquisition_value: float
    loan_status: str
