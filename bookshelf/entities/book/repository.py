"""Book repository for data access operations."""

from sqlmodel import Session, select

from .entity import Book, BookDetails
from .table import BookTable


class BookRepository:
    """Data-access layer for books.

    The repository flushes but never commits; the caller owns the transaction.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[Book]:
        statement = select(BookTable).order_by(BookTable.id)
        rows = self._session.exec(statement).all()
        return [Book.model_validate(row, from_attributes=True) for row in rows]

    def get(self, book_id: int) -> Book | None:
        row = self._session.get(BookTable, book_id)
        if row is None:
            return None
        return Book.model_validate(row, from_attributes=True)

    def create(self, details: BookDetails) -> Book:
        row = BookTable(title=details.title, author=details.author)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Book.model_validate(row, from_attributes=True)

    def update(self, book: Book) -> Book:
        """Persist title and author of an existing book.

        Raises:
            ValueError: If no book with ``book.id`` is stored.
        """
        row = self._session.get(BookTable, book.id)
        if row is None:
            raise ValueError(f"Book with id {book.id} not found")

        row.sqlmodel_update(book.model_dump(exclude={"id"}))
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Book.model_validate(row, from_attributes=True)

    def delete(self, book_id: int) -> bool:
        """Delete a book, returning False when nothing was stored under ``book_id``."""
        row = self._session.get(BookTable, book_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True
