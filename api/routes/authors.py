# api/routes/authors.py

from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from biblioteca.sa.database import get_db
from biblioteca.sa.repositories import AuthorRepository
from api.deps import get_current_user_id
from api.schemas.author import Author, AuthorCreate

router = APIRouter(prefix="/authors", tags=["authors"])

@router.get("", response_model=List[Author])
def get_authors(
    query: Optional[str] = Query(None, description="Search authors by first or last name"),
    db: Session = Depends(get_db)
):
    repo = AuthorRepository(db)
    if query:
        return repo.search_authors(query, limit=100)
    return repo.list_authors()

@router.get("/{author_id}", response_model=Author)
def get_author(author_id: int, db: Session = Depends(get_db)):
    author = AuthorRepository(db).get_by_id(author_id)
    if author is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Author not found")
    return author

@router.post("", response_model=Author, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(get_current_user_id)])
def create_author(author: AuthorCreate, db: Session = Depends(get_db)):
    return AuthorRepository(db).create_author(**author.model_dump())

@router.put("/{author_id}", status_code=status.HTTP_204_NO_CONTENT,
            dependencies=[Depends(get_current_user_id)])
def update_author(author_id: int, author: AuthorCreate, db: Session = Depends(get_db)):
    updated = AuthorRepository(db).update_author(author_id, **author.model_dump())
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Author not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete("/{author_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(get_current_user_id)])
def delete_author(author_id: int, db: Session = Depends(get_db)):
    if not AuthorRepository(db).delete_author(author_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Author not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
