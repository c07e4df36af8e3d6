# biblioteca/services/catalog_service.py
from datetime import date
from typing import List, Optional, Sequence
from sqlalchemy.orm import Session

from biblioteca.errors import InvalidOperationError, NotFoundError
from biblioteca.sa.models import Author, Book, Category
from biblioteca.sa.repositories import AuthorRepository, BookRepository, CategoryRepository
from biblioteca.utils.log import get_logger


class CatalogService:
    """Authors, categories and books, with the reference checks books need."""

    def __init__(self, session: Session):
        self.session = session
        self.authors = AuthorRepository(session)
        self.categories = CategoryRepository(session)
        self.books = BookRepository(session)
        self.logger = get_logger(self.__class__.__name__)

    # Categories

    def delete_category(self, category_id: int) -> None:
        category = self.categories.get_by_id(category_id)
        if category is None:
            raise NotFoundError("category", category_id)
        if category.books:
            raise InvalidOperationError("category still has books")
        self.categories.delete_category(category)
        self.logger.info(f"Deleted category {category_id}")

    # Books

    def _resolve_references(self, category_id: int, author_ids: Sequence[int]) -> tuple[Category, List[Author]]:
        category = self.categories.get_by_id(category_id)
        if category is None:
            raise InvalidOperationError("category does not exist")

        authors = self.authors.get_by_ids(author_ids)
        if len(authors) != len(set(author_ids)):
            raise InvalidOperationError("one or more authors do not exist")
        return category, authors

    def _check_isbn(self, isbn: str, book_id: Optional[int] = None) -> None:
        existing = self.books.get_by_isbn(isbn)
        if existing is not None and existing.id != book_id:
            raise InvalidOperationError(f"a book with ISBN {isbn} already exists")

    def create_book(self, title: str, isbn: str, category_id: int, author_ids: Sequence[int],
                    publication_year: Optional[int] = None, pages: Optional[int] = None,
                    description: Optional[str] = None) -> Book:
        """Create a book and its author links in one commit.

        Raises:
            InvalidOperationError: Unknown category or author, or duplicate ISBN
        """
        category, authors = self._resolve_references(category_id, author_ids)
        self._check_isbn(isbn)

        book = Book(
            title=title,
            isbn=isbn,
            publication_year=publication_year,
            pages=pages,
            description=description,
            category=category,
            available=True,
        )
        book.authors = authors
        self.session.add(book)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        self.logger.info(f"Created book {book.id} ({isbn})")
        return self.books.get_by_id(book.id)

    def update_book(self, book_id: int, title: str, isbn: str, category_id: int,
                    author_ids: Sequence[int], publication_year: Optional[int] = None,
                    pages: Optional[int] = None, description: Optional[str] = None) -> Book:
        """Replace a book's details and author links. Availability is left alone."""
        book = self.books.get_by_id(book_id)
        if book is None:
            raise NotFoundError("book", book_id)

        category, authors = self._resolve_references(category_id, author_ids)
        self._check_isbn(isbn, book_id=book_id)

        book.title = title
        book.isbn = isbn
        book.publication_year = publication_year
        book.pages = pages
        book.description = description
        book.category = category
        book.authors = authors
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return self.books.get_by_id(book_id)

    def delete_book(self, book_id: int) -> None:
        book = self.books.get_by_id(book_id)
        if book is None:
            raise NotFoundError("book", book_id)
        if self.books.has_loans(book_id):
            raise InvalidOperationError("book has loan history")
        try:
            self.session.delete(book)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.logger.info(f"Deleted book {book_id}")

    # Authors

    def create_author(self, first_name: str, last_name: str, birth_date: Optional[date] = None,
                      nationality: Optional[str] = None) -> Author:
        return self.authors.create_author(first_name, last_name, birth_date, nationality)
