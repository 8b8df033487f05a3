"""Book API router with CRUD operations."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status
from loguru import logger
from sqlmodel import Session

from bookshelf.api.http.deps import get_session
from bookshelf.entities.book import Book, BookDetails, BookRepository

router = APIRouter()

# Largest value a 64-bit signed INTEGER primary key can hold
MAX_BOOK_ID = 2**63 - 1

BookId = Annotated[int, Path(ge=1, le=MAX_BOOK_ID, description="Book identifier")]


@router.get("", response_model=list[Book])
def list_books(
    session: Session = Depends(get_session),
) -> list[Book]:
    """List all books."""
    repository = BookRepository(session)
    return repository.list_all()


@router.post("", response_model=Book)
def create_book(
    details: BookDetails,
    session: Session = Depends(get_session),
) -> Book:
    """Create a new book with a store-assigned id."""
    repository = BookRepository(session)
    created_book = repository.create(details)
    session.commit()
    logger.bind(book_id=created_book.id).info("book.created")
    return created_book


@router.get("/{book_id}", response_model=Book)
def get_book(
    book_id: BookId,
    session: Session = Depends(get_session),
) -> Book:
    """Get a book by ID."""
    repository = BookRepository(session)
    book = repository.get(book_id)
    if book is None:
        raise HTTPException(status_code=404, detail="Book not found")
    return book


@router.put("/{book_id}", response_model=Book)
def update_book(
    book_id: BookId,
    details: BookDetails,
    session: Session = Depends(get_session),
) -> Book:
    """Replace the title and author of an existing book.

    A missing book is reported as 404; nothing is created.
    """
    repository = BookRepository(session)
    existing = repository.get(book_id)
    if existing is None:
        raise HTTPException(status_code=404, detail="Book not found")

    try:
        updated_book = repository.update(existing.with_details(details))
    except ValueError as e:
        # Deleted between the lookup and the write
        raise HTTPException(status_code=404, detail="Book not found") from e
    session.commit()
    logger.bind(book_id=book_id).info("book.updated")
    return updated_book


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(
    book_id: BookId,
    session: Session = Depends(get_session),
) -> Response:
    """Delete a book. Deleting a missing book is a no-op."""
    repository = BookRepository(session)
    deleted = repository.delete(book_id)
    session.commit()
    logger.bind(book_id=book_id, deleted=deleted).info("book.deleted")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
