# cli/commands/benchmark.py
import logging
import time
import click

from catalog.models.book import Book
from catalog.models.library import Library
from catalog.models.series import Series
from catalog.sa.database import Database
from catalog.sa.repositories import BatchStrategy, BookRepository, LibraryRepository, SeriesRepository

logger = logging.getLogger(__name__)

@click.command()
@click.option('--count', default=1000, type=int, show_default=True, help='Number of books per run')
@click.option('--strategy', 'strategies', multiple=True,
              type=click.Choice([s.value for s in BatchStrategy]),
              help='Strategy to run, repeatable (default: all)')
@click.pass_context
def benchmark(ctx, count: int, strategies):
    """Time the batch insert strategies against each other.

    Each run writes its books into a fresh series of a throwaway library.
    The library is deleted afterwards, taking its series and books with it.
    """
    selected = [BatchStrategy(s) for s in strategies] or list(BatchStrategy)
    db = Database(ctx.obj['database_url'])
    db.init_db()
    results = {}
    try:
        with db.get_db() as session:
            libraries = LibraryRepository(session)
            series_repo = SeriesRepository(session)
            books = BookRepository(session)
            library = libraries.insert(Library(name="benchmark", root="file:///benchmark"))
            try:
                for strategy in selected:
                    series = series_repo.insert(Series(
                        name=f"benchmark {strategy.value}",
                        url=f"file:///benchmark/{strategy.value}",
                        library_id=library.id
                    ))
                    batch = [
                        Book(name=f"Book {i}", url=f"{series.url}/{i}.cbz", file_size=i,
                             series_id=series.id, library_id=library.id)
                        for i in range(count)
                    ]
                    started = time.perf_counter()
                    books.insert_many(batch, strategy)
                    elapsed = time.perf_counter() - started

                    stored = len(books.find_all_id_by_series_id(series.id))
                    logger.info(f"{strategy.value}: {count} books in {elapsed:.3f}s ({stored} stored)")
                    if stored != count:
                        raise click.ClickException(
                            f"{strategy.value} stored {stored} books, expected {count}"
                        )
                    results[strategy] = elapsed
                    series_repo.delete(series.id)
            finally:
                libraries.delete(library.id)
    finally:
        db.dispose()

    click.echo(f"\nInserted {count} books per strategy:")
    for strategy, elapsed in results.items():
        click.echo(f"  {strategy.value:<14} {elapsed:8.3f}s")
