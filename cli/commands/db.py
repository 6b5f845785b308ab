# cli/commands/db.py
import click

from catalog.sa.database import Database
from catalog.sa.repositories import (
    LibraryRepository, SeriesRepository, BookRepository, BookMetadataRepository
)

@click.command('init-db')
@click.option('--drop', is_flag=True, help='Drop existing catalog tables first')
@click.pass_context
def init_db(ctx, drop: bool):
    """Create the catalog schema"""
    db = Database(ctx.obj['database_url'])
    try:
        if drop:
            db.drop_db()
            click.echo("Dropped existing tables")
        db.init_db()
        click.echo(click.style(f"Schema ready at {db.engine.url.render_as_string(hide_password=True)}", fg='green'))
    finally:
        db.dispose()

@click.command()
@click.pass_context
def stats(ctx):
    """Show row counts for each catalog table"""
    db = Database(ctx.obj['database_url'])
    try:
        with db.get_db() as session:
            counts = {
                'libraries': LibraryRepository(session).count(),
                'series': SeriesRepository(session).count(),
                'books': BookRepository(session).count(),
                'book metadata': BookMetadataRepository(session).count(),
            }
        click.echo("\nCatalog statistics:")
        click.echo("-" * 30)
        for name, count in counts.items():
            click.echo(f"{name:<15} {count:>10}")
    finally:
        db.dispose()
