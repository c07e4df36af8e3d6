import click
from contextlib import contextmanager
from typing import Iterator, Optional
from sqlalchemy.orm import Session

from biblioteca.errors import LibraryError
from biblioteca.sa.database import Database
from biblioteca.sa.models import Loan, LoanStatus, Book

db_url_option = click.option(
    '--db-url', default=None, envvar='DATABASE_URL',
    help="Database URL (defaults to the DATABASE_URL setting)"
)

@contextmanager
def open_session(db_url: Optional[str]) -> Iterator[Session]:
    """Open a session on the given database, creating missing tables first"""
    db = Database(db_url)
    db.init_db()
    session = db.get_session()
    try:
        yield session
    finally:
        session.close()

def fail(error: LibraryError) -> None:
    """Print a business rule failure in red and exit with status 1"""
    click.echo(click.style(f"Error: {error.message}", fg='red'), err=True)
    raise click.Abort()

def format_book(book: Book) -> str:
    authors = ", ".join(a.full_name for a in book.authors) or "unknown"
    state = click.style("available", fg='green') if book.available else click.style("on loan", fg='yellow')
    return f"[{book.id}] {book.title} - {authors} (ISBN {book.isbn}, {book.category.name}) {state}"

def format_loan(loan: Loan) -> str:
    line = (f"[{loan.id}] {loan.book.title} -> {loan.borrower.full_name} "
            f"{loan.status.value}, due {loan.expected_return_date:%Y-%m-%d}")
    remaining = loan.remaining_days
    if loan.status == LoanStatus.ACTIVE:
        color = 'red' if loan.is_overdue() else 'cyan'
        line += click.style(f" ({remaining} days left)", fg=color)
    return line
