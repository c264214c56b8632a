"""Book API router with CRUD operations."""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from loguru import logger
from sqlmodel import Session

from src.bookshelf.api.http.deps import (
    book_access_policy,
    get_book_repository,
    get_db_session,
)
from src.bookshelf.entities.service.book import (
    Book,
    BookCreate,
    BookRepository,
    BookUpdate,
)

router = APIRouter(tags=["books"], dependencies=[Depends(book_access_policy)])

NOT_FOUND = "Not found."


@router.get("/", response_model=list[Book])
def list_books(
    repository: BookRepository = Depends(get_book_repository),
) -> list[Book]:
    """List all books."""
    return repository.list_all()


@router.post("/", response_model=Book, status_code=status.HTTP_201_CREATED)
def create_book(
    book: BookCreate,
    repository: BookRepository = Depends(get_book_repository),
    session: Session = Depends(get_db_session),
) -> Book:
    """Create a new book."""
    created_book = repository.create(book)
    session.commit()
    logger.info("Created book {}", created_book.id)
    return created_book


@router.get("/{book_id:int}/", response_model=Book)
def get_book(
    book_id: int,
    repository: BookRepository = Depends(get_book_repository),
) -> Book:
    """Get a book by ID."""
    book = repository.get(book_id)
    if book is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return book


def _update(
    book_id: int, book_update: BookUpdate, repository: BookRepository, session: Session
) -> Book:
    try:
        updated_book = repository.update(book_id, book_update)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=NOT_FOUND) from e
    session.commit()
    logger.info(
        "Updated book {} fields {}", book_id, sorted(book_update.model_fields_set)
    )
    return updated_book


@router.put("/{book_id:int}/", response_model=Book)
def update_book(
    book_id: int,
    book_update: BookUpdate,
    repository: BookRepository = Depends(get_book_repository),
    session: Session = Depends(get_db_session),
) -> Book:
    """Update a book; only the supplied fields change."""
    return _update(book_id, book_update, repository, session)


@router.patch("/{book_id:int}/", response_model=Book)
def partial_update_book(
    book_id: int,
    book_update: BookUpdate,
    repository: BookRepository = Depends(get_book_repository),
    session: Session = Depends(get_db_session),
) -> Book:
    """Partially update a book."""
    return _update(book_id, book_update, repository, session)


@router.delete("/{book_id:int}/", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(
    book_id: int,
    repository: BookRepository = Depends(get_book_repository),
    session: Session = Depends(get_db_session),
) -> Response:
    """Delete a book."""
    deleted = repository.delete(book_id)
    if not deleted:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    session.commit()
    logger.info("Deleted book {}", book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
