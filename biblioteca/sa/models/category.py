# biblioteca/sa/models/category.py
from sqlalchemy import Integer, String, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class Category(Base, TimestampMixin):
    __tablename__ = 'category'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)

    # Relationships
    books = relationship('Book', back_populates='category')

    __table_args__ = (
        Index('idx_category_name', 'name'),
    )

    @property
    def book_count(self) -> int:
        return len(self.books)
