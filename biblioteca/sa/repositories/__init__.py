# biblioteca/sa/repositories/__init__.py
from .author import AuthorRepository
from .book import BookRepository
from .category import CategoryRepository
from .loan import LoanRepository
from .user import UserRepository

__all__ = [
    'AuthorRepository',
    'BookRepository',
    'CategoryRepository',
    'LoanRepository',
    'UserRepository',
]
