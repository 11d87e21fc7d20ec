from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import Field, SQLModel


class Entity(BaseModel):
    """Base class for domain entities exchanged as camelCase JSON."""

    # Numeric JSON values for text fields (a year, an ISBN) are taken as text
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


class EntityTable(SQLModel, table=False):
    """Base table with an auto-incrementing integer primary key."""

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Unique identifier assigned by the database",
    )
