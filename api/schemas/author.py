# api/schemas/author.py
from datetime import date
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class AuthorBase(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    birth_date: Optional[date] = None
    nationality: Optional[str] = Field(None, max_length=50)

class AuthorCreate(AuthorBase):
    pass

class Author(AuthorBase):
    id: int
    full_name: str

    model_config = ConfigDict(from_attributes=True)
