# biblioteca/sa/models/loan.py
from datetime import datetime, timedelta
from enum import Enum
from sqlalchemy import Integer, String, ForeignKey, Index, text
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, UTCDateTime, utcnow, as_utc

class LoanStatus(str, Enum):
    ACTIVE = "Active"
    RETURNED = "Returned"
    # Never assigned by the lending flow; kept so stored rows stay readable
    OVERDUE = "Overdue"
    LOST = "Lost"

    @property
    def code(self) -> int:
        return _STATUS_CODES[self]

    @classmethod
    def parse(cls, value) -> "LoanStatus":
        """Accept a member, its value ("Active"), its name ("ACTIVE") or its code (1)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int) or (isinstance(value, str) and value.isdigit()):
            code = int(value)
            for status, status_code in _STATUS_CODES.items():
                if status_code == code:
                    return status
            raise ValueError(f"Unknown loan status code: {value}")
        for status in cls:
            if value.lower() in (status.value.lower(), status.name.lower()):
                return status
        raise ValueError(f"Unknown loan status: {value}")

_STATUS_CODES = {
    LoanStatus.ACTIVE: 1,
    LoanStatus.RETURNED: 2,
    LoanStatus.OVERDUE: 3,
    LoanStatus.LOST: 4,
}

class Loan(Base):
    __tablename__ = 'loan'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    borrower_id: Mapped[str] = mapped_column(ForeignKey('user.id'), nullable=False)
    book_id: Mapped[int] = mapped_column(ForeignKey('book.id', ondelete='RESTRICT'), nullable=False)
    loan_date: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, default=utcnow)
    expected_return_date: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    actual_return_date: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)
    notes: Mapped[str | None] = mapped_column(String(500), nullable=True)
    status: Mapped[LoanStatus] = mapped_column(
        SAEnum(
            LoanStatus,
            native_enum=False,
            length=20,
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        nullable=False,
        default=LoanStatus.ACTIVE,
    )

    # Relationships
    borrower = relationship('User', back_populates='loans')
    book = relationship('Book', back_populates='loans')

    __table_args__ = (
        Index('idx_loan_borrower_status', 'borrower_id', 'status'),
        Index('idx_loan_expected_return_date', 'expected_return_date'),
        # At most one active loan per book, enforced by the store itself
        Index(
            'uix_loan_active_book',
            'book_id',
            unique=True,
            sqlite_where=text("status = 'Active'"),
            postgresql_where=text("status = 'Active'"),
        ),
    )

    def compute_remaining_days(self, now: datetime | None = None) -> int:
        """Whole days until the expected return date, truncated toward zero.

        Negative once the loan is overdue; 0 for any loan that is not active.
        """
        if self.status != LoanStatus.ACTIVE:
            return 0
        delta = as_utc(self.expected_return_date) - (now or utcnow())
        return int(delta / timedelta(days=1))

    @property
    def remaining_days(self) -> int:
        return self.compute_remaining_days()

    def is_overdue(self, now: datetime | None = None) -> bool:
        return self.status == LoanStatus.ACTIVE and as_utc(self.expected_return_date) < (now or utcnow())
