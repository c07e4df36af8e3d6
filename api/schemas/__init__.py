# api/schemas/__init__.py
from .author import Author, AuthorCreate
from .category import Category, CategoryCreate, CategorySummary
from .book import Book, BookCreate
from .user import Borrower, UserProfile
from .loan import Loan, LoanCreate, LoanReturn

__all__ = [
    'Author',
    'AuthorCreate',
    'Category',
    'CategoryCreate',
    'CategorySummary',
    'Book',
    'BookCreate',
    'Borrower',
    'UserProfile',
    'Loan',
    'LoanCreate',
    'LoanReturn',
]
