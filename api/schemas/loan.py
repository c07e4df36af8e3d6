# api/schemas/loan.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, computed_field

from biblioteca.sa.models import LoanStatus
from api.schemas.book import Book
from api.schemas.user import Borrower

class LoanCreate(BaseModel):
    book_id: int
    expected_return_date: datetime
    notes: Optional[str] = Field(None, max_length=500)

class LoanReturn(BaseModel):
    notes: Optional[str] = Field(None, max_length=500)

class Loan(BaseModel):
    id: int
    loan_date: datetime
    expected_return_date: datetime
    actual_return_date: Optional[datetime] = None
    notes: Optional[str] = None
    status: LoanStatus
    borrower: Borrower
    book: Book
    remaining_days: int

    model_config = ConfigDict(from_attributes=True)

    @computed_field
    @property
    def status_code(self) -> int:
        return self.status.code
