# api/schemas/book.py
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field

from api.schemas.author import Author
from api.schemas.category import CategorySummary

class BookBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    isbn: str = Field(..., min_length=1, max_length=20)
    publication_year: Optional[int] = Field(None, ge=1000, le=3000)
    pages: Optional[int] = Field(None, ge=1, le=10000)
    description: Optional[str] = Field(None, max_length=1000)

class BookCreate(BookBase):
    category_id: int
    author_ids: List[int] = []

class Book(BookBase):
    id: int
    available: bool
    category: CategorySummary
    authors: List[Author] = []

    model_config = ConfigDict(from_attributes=True)
