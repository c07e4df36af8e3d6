# biblioteca/sa/models/__init__.py
from .base import Base, TimestampMixin, UTCDateTime, utcnow, as_utc
from .author import Author
from .category import Category
from .book import Book, book_author
from .user import User, UserToken
from .loan import Loan, LoanStatus

__all__ = [
    'Base',
    'TimestampMixin',
    'UTCDateTime',
    'utcnow',
    'as_utc',
    'Author',
    'Category',
    'Book',
    'book_author',
    'User',
    'UserToken',
    'Loan',
    'LoanStatus',
]
