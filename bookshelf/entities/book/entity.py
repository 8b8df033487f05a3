"""Entity: Book."""

from pydantic import BaseModel, ConfigDict, Field


class BookDetails(BaseModel):
    """Client-supplied fields of a book, used as the create and update body.

    An ``id`` sent by the client is ignored; identifiers are assigned by the store.
    """

    title: str | None = Field(default=None, description="Title")
    author: str | None = Field(default=None, description="Author")


class Book(BaseModel):
    """A stored book.

    Books are immutable once loaded. Updating one produces a new record via
    :meth:`with_details`, which keeps the identifier.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(description="Identifier assigned by the store")
    title: str | None = Field(default=None, description="Title")
    author: str | None = Field(default=None, description="Author")

    def with_details(self, details: BookDetails) -> "Book":
        """Return a copy with title and author replaced."""
        return self.model_copy(update={"title": details.title, "author": details.author})
