import click
from biblioteca.errors import LibraryError
from biblioteca.sa.repositories import BookRepository, CategoryRepository
from biblioteca.services.catalog_service import CatalogService
from ..utils import db_url_option, open_session, fail, format_book

@click.group()
def category():
    """Category management commands"""
    pass

@category.command(name="add")
@db_url_option
@click.argument('name')
@click.option('--description', default=None)
def add_category(db_url, name, description):
    """Add a category called NAME."""
    with open_session(db_url) as session:
        created = CategoryRepository(session).create_category(name, description)
        click.echo(f"Created category {created.name} (ID: {created.id})")

@click.group()
def author():
    """Author management commands"""
    pass

@author.command(name="add")
@db_url_option
@click.argument('first_name')
@click.argument('last_name')
@click.option('--birth-date', type=click.DateTime(formats=['%Y-%m-%d']), default=None, help='Birth date (YYYY-MM-DD)')
@click.option('--nationality', default=None)
def add_author(db_url, first_name, last_name, birth_date, nationality):
    """Add an author."""
    with open_session(db_url) as session:
        created = CatalogService(session).create_author(
            first_name, last_name,
            birth_date=birth_date.date() if birth_date else None,
            nationality=nationality,
        )
        click.echo(f"Created author {created.full_name} (ID: {created.id})")

@click.group()
def book():
    """Book management commands"""
    pass

@book.command(name="add")
@db_url_option
@click.argument('title')
@click.option('--isbn', required=True)
@click.option('--category-id', type=int, required=True)
@click.option('--author-id', 'author_ids', type=int, multiple=True, help='Repeat for several authors')
@click.option('--year', 'publication_year', type=int, default=None)
@click.option('--pages', type=int, default=None)
@click.option('--description', default=None)
def add_book(db_url, title, isbn, category_id, author_ids, publication_year, pages, description):
    """Add a book called TITLE."""
    with open_session(db_url) as session:
        try:
            created = CatalogService(session).create_book(
                title=title,
                isbn=isbn,
                category_id=category_id,
                author_ids=list(author_ids),
                publication_year=publication_year,
                pages=pages,
                description=description,
            )
        except LibraryError as e:
            fail(e)
        click.echo(f"Created {format_book(created)}")

@book.command(name="list")
@db_url_option
@click.option('--title', default=None, help='Filter by a fragment of the title')
@click.option('--category-id', type=int, default=None)
@click.option('--available/--on-loan', default=None, help='Filter by availability')
def list_books(db_url, title, category_id, available):
    """List books in the catalog."""
    with open_session(db_url) as session:
        books = BookRepository(session).search_books(title=title, category_id=category_id, available=available)
        if not books:
            click.echo("No books found.")
            return
        for found in books:
            click.echo(format_book(found))
