# cli/main.py
import click
from .commands.db import db
from .commands.user import user
from .commands.catalog import category, author, book
from .commands.loan import loan

@click.group()
def cli():
    """Biblioteca CLI"""
    pass

cli.add_command(db)
cli.add_command(user)
cli.add_command(category)
cli.add_command(author)
cli.add_command(book)
cli.add_command(loan)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
