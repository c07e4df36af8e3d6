# api/routes/categories.py

from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from biblioteca.errors import InvalidOperationError, NotFoundError
from biblioteca.sa.database import get_db
from biblioteca.sa.repositories import CategoryRepository
from biblioteca.services.catalog_service import CatalogService
from api.deps import get_current_user_id
from api.schemas.category import Category, CategoryCreate

router = APIRouter(prefix="/categories", tags=["categories"])

@router.get("", response_model=List[Category])
def get_categories(db: Session = Depends(get_db)):
    """List all categories with the number of books in each."""
    return CategoryRepository(db).list_categories()

@router.get("/{category_id}", response_model=Category)
def get_category(category_id: int, db: Session = Depends(get_db)):
    category = CategoryRepository(db).get_by_id(category_id)
    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return category

@router.post("", response_model=Category, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(get_current_user_id)])
def create_category(category: CategoryCreate, db: Session = Depends(get_db)):
    repo = CategoryRepository(db)
    created = repo.create_category(category.name, category.description)
    return repo.get_by_id(created.id)

@router.put("/{category_id}", status_code=status.HTTP_204_NO_CONTENT,
            dependencies=[Depends(get_current_user_id)])
def update_category(category_id: int, category: CategoryCreate, db: Session = Depends(get_db)):
    updated = CategoryRepository(db).update_category(category_id, category.name, category.description)
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(get_current_user_id)])
def delete_category(category_id: int, db: Session = Depends(get_db)):
    try:
        CatalogService(db).delete_category(category_id)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    except InvalidOperationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
