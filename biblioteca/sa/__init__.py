# biblioteca/sa/__init__.py
from .database import Database
from .models import (
    Base, Author, Category, Book, book_author,
    User, UserToken, Loan, LoanStatus
)

__all__ = [
    'Database',
    'Base',
    'Author',
    'Category',
    'Book',
    'book_author',
    'User',
    'UserToken',
    'Loan',
    'LoanStatus',
]
