# biblioteca/sa/repositories/book.py
from typing import Iterable, List, Optional
from sqlalchemy import update
from sqlalchemy.orm import Session, joinedload, selectinload
from ..models import Book, Loan


class BookRepository:
    """Repository for managing Book entities."""

    def __init__(self, session: Session):
        self.session = session

    def _hydrated(self):
        return self.session.query(Book).options(
            joinedload(Book.category),
            selectinload(Book.authors),
        )

    def get_by_id(self, book_id: int) -> Optional[Book]:
        """Get a book with its category and authors"""
        return self._hydrated().filter(Book.id == book_id).first()

    def get_by_ids(self, book_ids: Iterable[int]) -> List[Book]:
        ids = set(book_ids)
        if not ids:
            return []
        return self._hydrated().filter(Book.id.in_(ids)).order_by(Book.id).all()

    def get_by_isbn(self, isbn: str) -> Optional[Book]:
        return self.session.query(Book).filter(Book.isbn == isbn).first()

    def search_books(self, title: Optional[str] = None,
                     category_id: Optional[int] = None,
                     available: Optional[bool] = None) -> List[Book]:
        """List books, optionally narrowed by a title fragment, category or availability.

        Args:
            title: Case-insensitive fragment of the title
            category_id: Only books in this category
            available: Only books whose availability flag matches

        Returns:
            List of Book objects ordered by ID
        """
        query = self._hydrated()
        if title:
            query = query.filter(Book.title.ilike(f"%{title}%"))
        if category_id is not None:
            query = query.filter(Book.category_id == category_id)
        if available is not None:
            query = query.filter(Book.available.is_(available))
        return query.order_by(Book.id).all()

    def has_loans(self, book_id: int) -> bool:
        return self.session.query(Loan.id).filter(Loan.book_id == book_id).first() is not None

    def count_by_category(self, category_id: int) -> int:
        return self.session.query(Book).filter(Book.category_id == category_id).count()

    def mark_unavailable(self, book_id: int) -> bool:
        """Flip a book from available to unavailable.

        The update only matches while the flag is still set, so of several
        concurrent borrowers exactly one sees a changed row. Does not commit.

        Returns:
            True if this call flipped the flag, False if it was already unset
        """
        result = self.session.execute(
            update(Book)
            .where(Book.id == book_id, Book.available.is_(True))
            .values(available=False)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    def mark_available(self, book_id: int) -> None:
        """Set the availability flag. Does not commit."""
        self.session.execute(
            update(Book)
            .where(Book.id == book_id)
            .values(available=True)
            .execution_options(synchronize_session=False)
        )
