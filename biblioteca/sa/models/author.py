# biblioteca/sa/models/author.py
from datetime import date
from sqlalchemy import Integer, String, Date, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class Author(Base, TimestampMixin):
    __tablename__ = 'author'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    nationality: Mapped[str | None] = mapped_column(String(50), nullable=True)

    # Relationships
    books = relationship('Book', secondary='book_author', back_populates='authors')

    __table_args__ = (
        # Search index
        Index('idx_author_last_name', 'last_name'),
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
