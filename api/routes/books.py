# api/routes/books.py

from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from biblioteca.errors import InvalidOperationError, NotFoundError
from biblioteca.sa.database import get_db
from biblioteca.sa.repositories import BookRepository
from biblioteca.services.catalog_service import CatalogService
from api.deps import get_current_user_id
from api.schemas.book import Book, BookCreate

router = APIRouter(prefix="/books", tags=["books"])

@router.get("", response_model=List[Book])
def get_books(
    title: Optional[str] = Query(None, description="Filter by a fragment of the title"),
    category_id: Optional[int] = Query(None, description="Filter by category"),
    available: Optional[bool] = Query(None, description="Filter by availability"),
    db: Session = Depends(get_db)
):
    """
    List books with their category and authors.

    Args:
        title: Case-insensitive title fragment
        category_id: Only books in this category
        available: Only books that are (or are not) free to borrow
        db: Database session
    """
    return BookRepository(db).search_books(title=title, category_id=category_id, available=available)

@router.get("/{book_id}", response_model=Book)
def get_book(book_id: int, db: Session = Depends(get_db)):
    book = BookRepository(db).get_by_id(book_id)
    if book is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")
    return book

@router.post("", response_model=Book, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(get_current_user_id)])
def create_book(book: BookCreate, db: Session = Depends(get_db)):
    try:
        return CatalogService(db).create_book(**book.model_dump())
    except InvalidOperationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

@router.put("/{book_id}", status_code=status.HTTP_204_NO_CONTENT,
            dependencies=[Depends(get_current_user_id)])
def update_book(book_id: int, book: BookCreate, db: Session = Depends(get_db)):
    try:
        CatalogService(db).update_book(book_id, **book.model_dump())
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")
    except InvalidOperationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(get_current_user_id)])
def delete_book(book_id: int, db: Session = Depends(get_db)):
    try:
        CatalogService(db).delete_book(book_id)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")
    except InvalidOperationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
