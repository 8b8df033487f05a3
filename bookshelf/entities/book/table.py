"""Book database table model."""

from sqlmodel import Field, SQLModel


class BookTable(SQLModel, table=True):
    """Database persistence model for books.

    The primary key is left unset on insert so the database assigns it.
    """

    __tablename__ = "book"

    id: int | None = Field(default=None, primary_key=True)
    title: str | None = None
    author: str | None = None
