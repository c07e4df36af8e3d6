# api/routes/loans.py

from typing import List, Optional
from fastapi import APIRouter, Body, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from biblioteca.errors import InvalidOperationError, NotFoundError
from biblioteca.sa.database import get_db
from biblioteca.services.loan_service import LoanService
from api.deps import get_current_user_id
from api.schemas.loan import Loan, LoanCreate, LoanReturn

router = APIRouter(prefix="/loans", tags=["loans"])

@router.get("", response_model=List[Loan])
def get_loans(
    borrower_id: Optional[str] = Query(None, description="Only loans of this borrower"),
    status_filter: Optional[str] = Query(None, alias="status", description="Status name or code (1-4)"),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    """
    List loans with their book, category, authors and borrower.

    Args:
        borrower_id: Optional borrower filter
        status_filter: Optional status filter, e.g. "Active" or 1
        db: Database session
    """
    try:
        return LoanService(db).list_loans(borrower_id=borrower_id, status=status_filter)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

@router.get("/mine", response_model=List[Loan])
def get_my_loans(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    return LoanService(db).list_loans(borrower_id=user_id)

@router.get("/{loan_id}", response_model=Loan)
def get_loan(
    loan_id: int,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    loan = LoanService(db).get_loan(loan_id)
    if loan is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Loan not found")
    return loan

@router.post("", response_model=Loan, status_code=status.HTTP_201_CREATED)
def create_loan(
    loan: LoanCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    """Borrow a book for the authenticated user."""
    try:
        return LoanService(db).create_loan(
            borrower_id=user_id,
            book_id=loan.book_id,
            expected_return_date=loan.expected_return_date,
            notes=loan.notes,
        )
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")
    except InvalidOperationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

@router.put("/{loan_id}/return", status_code=status.HTTP_204_NO_CONTENT)
def return_loan(
    loan_id: int,
    payload: Optional[LoanReturn] = Body(None),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    """Return one of the authenticated user's active loans."""
    notes = payload.notes if payload else None
    if not LoanService(db).return_loan(loan_id, user_id, notes=notes):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Could not process the return")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
