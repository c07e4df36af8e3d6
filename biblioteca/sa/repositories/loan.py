# biblioteca/sa/repositories/loan.py
from datetime import datetime
from typing import List, Optional
from sqlalchemy import update
from sqlalchemy.orm import Session, joinedload, selectinload
from ..models import Book, Loan, LoanStatus


class LoanRepository:
    """Repository for Loan records.

    Write helpers here never commit; the loan service owns the transaction
    so a loan row and its book's availability flag always change together.
    """

    def __init__(self, session: Session):
        self.session = session

    def _hydrated(self):
        return self.session.query(Loan).options(
            joinedload(Loan.borrower),
            joinedload(Loan.book).joinedload(Book.category),
            joinedload(Loan.book).selectinload(Book.authors),
        )

    def get_by_id(self, loan_id: int) -> Optional[Loan]:
        """Get a loan with its book, category, authors and borrower"""
        return self._hydrated().filter(Loan.id == loan_id).first()

    def get_for_borrower(self, loan_id: int, borrower_id: str) -> Optional[Loan]:
        """Get a loan only if it belongs to the given borrower"""
        return (self.session.query(Loan)
                .filter(Loan.id == loan_id, Loan.borrower_id == borrower_id)
                .first())

    def list_loans(self, borrower_id: Optional[str] = None,
                   status: Optional[LoanStatus] = None) -> List[Loan]:
        """List loans, optionally filtered by borrower and/or status.

        Args:
            borrower_id: Only loans of this borrower
            status: Only loans in this status

        Returns:
            Hydrated Loan objects in insertion order
        """
        query = self._hydrated()
        if borrower_id:
            query = query.filter(Loan.borrower_id == borrower_id)
        if status is not None:
            query = query.filter(Loan.status == status)
        return query.order_by(Loan.id).all()

    def count_overdue_for_borrower(self, borrower_id: str, now: datetime) -> int:
        """Count the borrower's active loans whose expected return date has passed"""
        return (self.session.query(Loan)
                .filter(
                    Loan.borrower_id == borrower_id,
                    Loan.status == LoanStatus.ACTIVE,
                    Loan.expected_return_date < now,
                )
                .count())

    def add(self, loan: Loan) -> Loan:
        self.session.add(loan)
        return loan

    def mark_returned(self, loan_id: int, returned_at: datetime, notes: Optional[str]) -> bool:
        """Close an active loan.

        Matches only while the loan is still active, so a second return of
        the same loan changes nothing.

        Returns:
            True if the loan was closed by this call
        """
        result = self.session.execute(
            update(Loan)
            .where(Loan.id == loan_id, Loan.status == LoanStatus.ACTIVE)
            .values(
                status=LoanStatus.RETURNED,
                actual_return_date=returned_at,
                notes=notes,
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1
