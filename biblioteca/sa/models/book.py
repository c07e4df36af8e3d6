# biblioteca/sa/models/book.py
from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, Table, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

# Plain link table, a book may have several authors and vice versa
book_author = Table(
    'book_author',
    Base.metadata,
    Column('book_id', Integer, ForeignKey('book.id', ondelete='CASCADE'), primary_key=True),
    Column('author_id', Integer, ForeignKey('author.id', ondelete='CASCADE'), primary_key=True),
)

class Book(Base, TimestampMixin):
    __tablename__ = 'book'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    isbn: Mapped[str] = mapped_column(String(20), nullable=False, unique=True)
    publication_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    pages: Mapped[int | None] = mapped_column(Integer, nullable=True)
    description: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    available: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    category_id: Mapped[int] = mapped_column(ForeignKey('category.id', ondelete='RESTRICT'), nullable=False)

    # Relationships
    category = relationship('Category', back_populates='books')
    authors = relationship('Author', secondary=book_author, back_populates='books', order_by='Author.id')
    loans = relationship('Loan', back_populates='book')

    __table_args__ = (
        # Search indexes
        Index('idx_book_title', 'title'),
        Index('idx_book_category_id', 'category_id'),
        Index('idx_book_available', 'available'),
    )
