# biblioteca/services/loan_service.py
from datetime import datetime
from typing import List, Optional, Union
from sqlalchemy.orm import Session

from biblioteca.errors import InvalidOperationError, NotFoundError
from biblioteca.sa.models import Loan, LoanStatus, as_utc, utcnow
from biblioteca.sa.repositories import BookRepository, LoanRepository
from biblioteca.utils.log import get_logger

RETURN_NOTE_SEPARATOR = " | Return: "


def append_return_note(existing: Optional[str], note: Optional[str]) -> Optional[str]:
    """Append a return note to the loan notes; existing text is never replaced."""
    if not note:
        return existing
    if not existing:
        return f"Return: {note}"
    return f"{existing}{RETURN_NOTE_SEPARATOR}{note}"


class LoanService:
    """Borrowing and returning books.

    Every write keeps ``Book.available`` in step with the book's active
    loan: the flag and the loan row are changed inside one transaction and
    committed together.
    """

    def __init__(self, session: Session):
        self.session = session
        self.books = BookRepository(session)
        self.loans = LoanRepository(session)
        self.logger = get_logger(self.__class__.__name__)

    def create_loan(self, borrower_id: str, book_id: int, expected_return_date: datetime,
                    notes: Optional[str] = None, now: Optional[datetime] = None) -> Loan:
        """Lend a book to a borrower.

        Checks run in order and the first failure wins: the book must exist,
        it must be available, and the borrower must not hold any overdue loan.

        Args:
            borrower_id: Identity of the authenticated borrower
            book_id: ID of the book to borrow
            expected_return_date: When the borrower promises to return it
            notes: Free-text notes stored on the loan
            now: Clock override, defaults to the current UTC time

        Returns:
            The new loan with book, category, authors and borrower loaded

        Raises:
            NotFoundError: The book does not exist
            InvalidOperationError: The book is on loan or the borrower has overdue loans
        """
        now = now or utcnow()

        book = self.books.get_by_id(book_id)
        if book is None:
            raise NotFoundError("book", book_id)

        if not book.available:
            self.logger.info(f"Rejected loan of book {book_id} for {borrower_id}: book unavailable")
            raise InvalidOperationError("book unavailable")

        if self.loans.count_overdue_for_borrower(borrower_id, now) > 0:
            self.logger.info(f"Rejected loan of book {book_id} for {borrower_id}: overdue loans")
            raise InvalidOperationError("borrower has overdue loans")

        try:
            # Another borrower may have taken the book since it was read above
            if not self.books.mark_unavailable(book_id):
                self.session.rollback()
                self.logger.info(f"Rejected loan of book {book_id} for {borrower_id}: lost race")
                raise InvalidOperationError("book unavailable")

            loan = self.loans.add(Loan(
                borrower_id=borrower_id,
                book_id=book_id,
                loan_date=now,
                expected_return_date=as_utc(expected_return_date),
                notes=notes,
                status=LoanStatus.ACTIVE,
            ))
            self.session.commit()
        except InvalidOperationError:
            raise
        except Exception:
            self.session.rollback()
            raise

        self.logger.info(f"Loan {loan.id} created: book {book_id} to {borrower_id}")
        return self.loans.get_by_id(loan.id)

    def return_loan(self, loan_id: int, borrower_id: str, notes: Optional[str] = None,
                    now: Optional[datetime] = None) -> bool:
        """Close one of the borrower's active loans and make the book available again.

        Returns:
            True on success. False if the loan does not exist, belongs to
            someone else or is no longer active; nothing is changed then.
        """
        now = now or utcnow()

        loan = self.loans.get_for_borrower(loan_id, borrower_id)
        if loan is None:
            self.logger.info(f"Return of loan {loan_id} by {borrower_id} rejected: not found for borrower")
            return False
        if loan.status != LoanStatus.ACTIVE:
            self.logger.info(f"Return of loan {loan_id} by {borrower_id} rejected: status is {loan.status.value}")
            return False

        try:
            if not self.loans.mark_returned(loan.id, now, append_return_note(loan.notes, notes)):
                self.session.rollback()
                self.logger.info(f"Return of loan {loan_id} by {borrower_id} rejected: already returned")
                return False
            self.books.mark_available(loan.book_id)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        self.logger.info(f"Loan {loan_id} returned: book {loan.book_id} available again")
        return True

    def get_loan(self, loan_id: int) -> Optional[Loan]:
        return self.loans.get_by_id(loan_id)

    def list_loans(self, borrower_id: Optional[str] = None,
                   status: Union[LoanStatus, str, int, None] = None) -> List[Loan]:
        """List loans, optionally filtered by borrower and/or status.

        ``status`` may be a LoanStatus, its name, its value or its numeric code.
        """
        if status is not None:
            status = LoanStatus.parse(status)
        return self.loans.list_loans(borrower_id=borrower_id, status=status)
