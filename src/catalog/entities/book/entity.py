"""Entity: Book."""

from typing import Any

from pydantic import Field

from src.catalog.entities._base import Entity

# Identifiers parsed from a URL can be the NaN sentinel, hence the float.
BookId = int | float


class BookRecord(Entity):
    """Book data as received in a request body.

    Carries no identifier; unknown keys such as ``bookId`` are ignored.
    Field values are not range- or format-checked here.
    """

    title: str = Field(description="Title")
    author: str = Field(description="Author")
    publication_year: str = Field(description="Year of publication")
    publisher: str = Field(description="Publisher")
    isbn: str = Field(description="ISBN")
    total_copies: int = Field(description="Copies owned by the library")
    available_copies: int = Field(description="Copies currently on the shelf")
    acquisition_value: float = Field(description="Price paid for the book")
    loan_status: str = Field(description="Loan status")


class Book(BookRecord):
    """Book entity passed to and returned by the repository."""

    id: BookId | None = Field(default=None, alias="bookId", description="Identifier")

    @classmethod
    def from_record(cls, record: BookRecord) -> "Book":
        """Build a new entity, without identifier, from a request record."""
        return cls.model_validate(record.model_dump())

    def record_fields(self) -> dict[str, Any]:
        """Field values without the identifier, keyed by attribute name."""
        return self.model_dump(exclude={"id"})

