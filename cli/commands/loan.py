import click
from biblioteca.errors import LibraryError
from biblioteca.services.loan_service import LoanService
from ..utils import db_url_option, open_session, fail, format_loan

@click.group()
def loan():
    """Lending commands"""
    pass

@loan.command()
@db_url_option
@click.argument('book_id', type=int)
@click.option('--user-id', required=True, help='Borrower ID')
@click.option('--due', type=click.DateTime(), required=True, help='Expected return date (YYYY-MM-DD)')
@click.option('--notes', default=None)
def create(db_url, book_id, user_id, due, notes):
    """Lend BOOK_ID to a borrower."""
    with open_session(db_url) as session:
        try:
            created = LoanService(session).create_loan(user_id, book_id, due, notes=notes)
        except LibraryError as e:
            fail(e)
        click.echo(click.style("Loan created: ", fg='green') + format_loan(created))

@loan.command(name="return")
@db_url_option
@click.argument('loan_id', type=int)
@click.option('--user-id', required=True, help='Borrower ID')
@click.option('--notes', default=None)
def return_loan(db_url, loan_id, user_id, notes):
    """Return LOAN_ID on behalf of its borrower."""
    with open_session(db_url) as session:
        if not LoanService(session).return_loan(loan_id, user_id, notes=notes):
            click.echo(click.style("Could not process the return", fg='red'), err=True)
            raise click.Abort()
        click.echo(click.style(f"Loan {loan_id} returned", fg='green'))

@loan.command(name="list")
@db_url_option
@click.option('--user-id', default=None, help='Only loans of this borrower')
@click.option('--status', default=None, help='Status name or code (1-4)')
def list_loans(db_url, user_id, status):
    """List loans with their remaining days."""
    with open_session(db_url) as session:
        try:
            loans = LoanService(session).list_loans(borrower_id=user_id, status=status)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint='--status')
        if not loans:
            click.echo("No loans found.")
            return
        for found in loans:
            click.echo(format_loan(found))
