# biblioteca/sa/repositories/category.py

from typing import List, Optional
from sqlalchemy.orm import Session, selectinload
from ..models import Category

class CategoryRepository:
    """Repository for managing Category entities."""

    def __init__(self, session: Session):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def get_by_id(self, category_id: int) -> Optional[Category]:
        """Get a category by its ID, with its books loaded for counting.

        Args:
            category_id: The ID of the category to retrieve

        Returns:
            The Category object if found, None otherwise
        """
        return (self.session.query(Category)
                .options(selectinload(Category.books))
                .filter(Category.id == category_id)
                .first())

    def list_categories(self) -> List[Category]:
        """Get all categories ordered by ID.

        Returns:
            List of Category objects with their books loaded
        """
        return (self.session.query(Category)
                .options(selectinload(Category.books))
                .order_by(Category.id)
                .all())

    def create_category(self, name: str, description: Optional[str] = None) -> Category:
        category = Category(name=name, description=description)
        self.session.add(category)
        self.session.commit()
        return category

    def update_category(self, category_id: int, name: str, description: Optional[str] = None) -> Optional[Category]:
        category = self.get_by_id(category_id)
        if not category:
            return None
        category.name = name
        category.description = description
        self.session.commit()
        return category

    def delete_category(self, category: Category) -> None:
        """Delete a category. Callers must make sure no book references it."""
        self.session.delete(category)
        self.session.commit()
