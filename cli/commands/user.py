import click
from biblioteca.sa.repositories import UserRepository
from biblioteca.services.auth_service import AuthService
from ..utils import db_url_option, open_session

@click.group()
def user():
    """Borrower accounts and access tokens"""
    pass

@user.command()
@db_url_option
@click.option('--first-name', required=True)
@click.option('--last-name', required=True)
@click.option('--email', required=True)
def create(db_url, first_name, last_name, email):
    """Register a borrower and print a first access token."""
    with open_session(db_url) as session:
        try:
            new_user = UserRepository(session).create_user(first_name, last_name, email)
        except ValueError as e:
            click.echo(click.style(f"Error: {e}", fg='red'), err=True)
            raise click.Abort()
        token = AuthService(session).issue_token(new_user)
        click.echo(f"Created user {new_user.full_name} (ID: {new_user.id})")
        click.echo(f"Token: {token.token}")

@user.command()
@db_url_option
@click.argument('email')
def token(db_url, email):
    """Issue a new access token for the user with EMAIL."""
    with open_session(db_url) as session:
        found = UserRepository(session).get_by_email(email)
        if not found:
            click.echo(click.style(f"No user with email {email}", fg='red'), err=True)
            raise click.Abort()
        issued = AuthService(session).issue_token(found)
        click.echo(f"Token: {issued.token}")
        click.echo(f"Expires: {issued.expires_at:%Y-%m-%d %H:%M} UTC")
