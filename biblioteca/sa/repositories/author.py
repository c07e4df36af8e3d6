# biblioteca/sa/repositories/author.py
from typing import Iterable, List, Optional
from datetime import date
from sqlalchemy.orm import Session
from ..models import Author

class AuthorRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, author_id: int) -> Optional[Author]:
        """Get an author by ID"""
        return self.session.get(Author, author_id)

    def get_by_ids(self, author_ids: Iterable[int]) -> List[Author]:
        """Get every author whose ID is in author_ids; missing IDs are simply absent"""
        ids = set(author_ids)
        if not ids:
            return []
        return self.session.query(Author).filter(Author.id.in_(ids)).order_by(Author.id).all()

    def list_authors(self) -> List[Author]:
        return self.session.query(Author).order_by(Author.id).all()

    def search_authors(self, query: str, limit: int = 20) -> List[Author]:
        """Search authors by first or last name"""
        base_query = self.session.query(Author)
        if query:  # Only apply filter if query is not empty
            pattern = f"%{query}%"
            base_query = base_query.filter(
                Author.first_name.ilike(pattern) | Author.last_name.ilike(pattern)
            )
        return base_query.order_by(Author.id).limit(limit).all()

    def create_author(self, first_name: str, last_name: str,
                      birth_date: Optional[date] = None,
                      nationality: Optional[str] = None) -> Author:
        author = Author(
            first_name=first_name,
            last_name=last_name,
            birth_date=birth_date,
            nationality=nationality,
        )
        self.session.add(author)
        self.session.commit()
        return author

    def update_author(self, author_id: int, first_name: str, last_name: str,
                      birth_date: Optional[date] = None,
                      nationality: Optional[str] = None) -> Optional[Author]:
        """Replace an author's details.

        Returns:
            The updated Author, or None if it does not exist
        """
        author = self.get_by_id(author_id)
        if not author:
            return None
        author.first_name = first_name
        author.last_name = last_name
        author.birth_date = birth_date
        author.nationality = nationality
        self.session.commit()
        return author

    def delete_author(self, author_id: int) -> bool:
        author = self.get_by_id(author_id)
        if not author:
            return False
        self.session.delete(author)
        self.session.commit()
        return True
