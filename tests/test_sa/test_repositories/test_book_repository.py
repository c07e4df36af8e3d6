# tests/test_sa/test_repositories/test_book_repository.py

import pytest
from biblioteca.sa.repositories.book import BookRepository
from biblioteca.sa.models import Book

@pytest.fixture
def book_repo(db_session):
    """Fixture to create a BookRepository instance."""
    return BookRepository(db_session)

def test_get_by_id(book_repo, sample_book):
    fetched = book_repo.get_by_id(sample_book.id)
    assert fetched is not None
    assert fetched.title == "Cien años de soledad"
    assert fetched.category.name == "Novel"

def test_get_by_nonexistent_id(book_repo):
    assert book_repo.get_by_id(999) is None

def test_get_by_ids_skips_missing(book_repo, sample_book, other_book):
    results = book_repo.get_by_ids([other_book.id, sample_book.id, 999])
    assert [b.id for b in results] == sorted([sample_book.id, other_book.id])

def test_get_by_ids_empty(book_repo):
    assert book_repo.get_by_ids([]) == []

def test_search_by_title(book_repo, sample_book, other_book):
    results = book_repo.search_books(title="SOLEDAD")
    assert [b.id for b in results] == [sample_book.id]

def test_search_by_availability(book_repo, db_session, sample_book, other_book):
    sample_book.available = False
    db_session.commit()

    assert [b.id for b in book_repo.search_books(available=False)] == [sample_book.id]
    assert [b.id for b in book_repo.search_books(available=True)] == [other_book.id]
    assert len(book_repo.search_books()) == 2

def test_search_by_category(book_repo, db_session, sample_book, sample_author):
    from biblioteca.sa.models import Category
    poetry = Category(name="Poetry")
    db_session.add(poetry)
    db_session.commit()
    poem = Book(title="Veinte poemas de amor", isbn="9780143039969", category=poetry)
    db_session.add(poem)
    db_session.commit()

    assert [b.id for b in book_repo.search_books(category_id=poetry.id)] == [poem.id]

def test_mark_unavailable_only_once(book_repo, db_session, sample_book):
    """Only the first flip succeeds, later ones see the flag already cleared."""
    assert book_repo.mark_unavailable(sample_book.id) is True
    db_session.commit()
    assert book_repo.mark_unavailable(sample_book.id) is False
    db_session.rollback()

    db_session.expire_all()
    assert db_session.get(Book, sample_book.id).available is False

def test_mark_available(book_repo, db_session, sample_book):
    book_repo.mark_unavailable(sample_book.id)
    book_repo.mark_available(sample_book.id)
    db_session.commit()

    db_session.expire_all()
    assert db_session.get(Book, sample_book.id).available is True

def test_mark_unavailable_unknown_book(book_repo):
    assert book_repo.mark_unavailable(999) is False

def test_has_loans(book_repo, db_session, sample_book, borrower, now):
    from biblioteca.sa.models import Loan
    assert book_repo.has_loans(sample_book.id) is False
    db_session.add(Loan(borrower_id=borrower.id, book_id=sample_book.id,
                        loan_date=now, expected_return_date=now))
    db_session.commit()
    assert book_repo.has_loans(sample_book.id) is True
