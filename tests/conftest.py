# tests/conftest.py
import os
import sys
import pytest
from pathlib import Path
from datetime import datetime, UTC, date
from sqlalchemy.sql import text

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from sqlalchemy.orm import Session
from biblioteca.sa.database import Database
from biblioteca.sa.models import Base, Author, Category, Book, User
from biblioteca.services.loan_service import LoanService

@pytest.fixture(scope="session")
def test_db_path(tmp_path_factory):
    """Create a temporary directory for the test database."""
    test_dir = tmp_path_factory.mktemp("test_db")
    return str(test_dir / "test_biblioteca.db")

@pytest.fixture(scope="session")
def database(test_db_path):
    """Create a test database instance"""
    db = Database(f"sqlite:///{test_db_path}")

    # Drop all tables and recreate schema
    Base.metadata.drop_all(db.engine)
    Base.metadata.create_all(db.engine)

    yield db

    db.engine.dispose()
    try:
        os.remove(test_db_path)
    except OSError:
        pass  # Ignore errors if file doesn't exist

@pytest.fixture(scope="function")
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture(autouse=True)
def cleanup_db(db_session):
    """Clean up database tables before each test"""
    # Delete all data from tables in reverse order of dependencies
    db_session.execute(text("DELETE FROM loan"))
    db_session.execute(text("DELETE FROM user_token"))
    db_session.execute(text("DELETE FROM book_author"))
    db_session.execute(text("DELETE FROM book"))
    db_session.execute(text("DELETE FROM author"))
    db_session.execute(text("DELETE FROM category"))
    db_session.execute(text('DELETE FROM "user"'))
    db_session.commit()
    yield
    db_session.rollback()

@pytest.fixture
def now():
    return datetime(2025, 3, 10, 12, 0, tzinfo=UTC)

@pytest.fixture
def sample_category(db_session):
    """Create a sample category for testing."""
    category = Category(name="Novel", description="Long-form fiction")
    db_session.add(category)
    db_session.commit()
    return category

@pytest.fixture
def sample_author(db_session):
    """Create a sample author for testing."""
    author = Author(
        first_name="Gabriel",
        last_name="García Márquez",
        birth_date=date(1927, 3, 6),
        nationality="Colombian"
    )
    db_session.add(author)
    db_session.commit()
    return author

@pytest.fixture
def sample_book(db_session, sample_category, sample_author):
    """Create an available book with one author."""
    book = Book(
        title="Cien años de soledad",
        isbn="9780307474728",
        publication_year=1967,
        pages=417,
        description="The Buendía family over seven generations",
        category=sample_category,
        available=True
    )
    book.authors = [sample_author]
    db_session.add(book)
    db_session.commit()
    return book

@pytest.fixture
def other_book(db_session, sample_category, sample_author):
    """Create a second, unrelated available book."""
    book = Book(
        title="El amor en los tiempos del cólera",
        isbn="9780307389732",
        publication_year=1985,
        pages=348,
        category=sample_category,
        available=True
    )
    book.authors = [sample_author]
    db_session.add(book)
    db_session.commit()
    return book

@pytest.fixture
def borrower(db_session):
    user = User(first_name="Ana", last_name="Pérez", email="ana@example.com")
    db_session.add(user)
    db_session.commit()
    return user

@pytest.fixture
def other_borrower(db_session):
    user = User(first_name="Luis", last_name="Gómez", email="luis@example.com")
    db_session.add(user)
    db_session.commit()
    return user

@pytest.fixture
def loan_service(db_session):
    return LoanService(db_session)
