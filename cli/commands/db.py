import click
from biblioteca.sa.database import Database
from ..utils import db_url_option

@click.group()
def db():
    """Database management commands"""
    pass

@db.command()
@db_url_option
@click.option('--reset', is_flag=True, help="Drop all tables before creating them")
def init(db_url, reset):
    """Create the database schema."""
    database = Database(db_url)
    if reset:
        click.confirm("This deletes every record. Continue?", abort=True)
        database.drop_db()
    database.init_db()
    click.echo(click.style(f"Schema ready on {database.connection_string}", fg='green'))
