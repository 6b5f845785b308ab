# tests/test_sa/test_schema.py
import importlib.util
import pytest
from pathlib import Path
from alembic.migration import MigrationContext
from alembic.operations import Operations
from sqlalchemy import inspect

from catalog.models.book import Book
from catalog.models.library import Library
from catalog.models.metadata import Author, BookMetadata
from catalog.models.series import Series
from catalog.sa.database import Database
from catalog.sa.models import Base
from catalog.sa.repositories import (
    LibraryRepository, SeriesRepository, BookRepository, BookMetadataRepository
)

MIGRATION = Path(__file__).parents[2] / "migrations" / "versions" / "0001_initial_catalog_schema.py"

def load_migration():
    spec = importlib.util.spec_from_file_location("initial_catalog_schema", MIGRATION)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module

def run_migration(engine, step: str) -> None:
    migration = load_migration()
    with engine.begin() as connection:
        context = MigrationContext.configure(connection)
        with Operations.context(context):
            getattr(migration, step)()

@pytest.fixture
def migrated_db(tmp_path):
    """A database whose schema comes from the migration instead of create_all"""
    db = Database(f"sqlite:///{tmp_path / 'migrated.db'}")
    run_migration(db.engine, "upgrade")
    yield db
    db.dispose()

def test_model_tables_exist(db_session):
    """Test that create_all builds every catalog table"""
    tables = set(inspect(db_session.get_bind()).get_table_names())

    assert tables == set(Base.metadata.tables)

def test_migration_matches_models(migrated_db):
    """Test that the migrated schema has the same tables and columns as the models"""
    inspector = inspect(migrated_db.engine)

    assert set(inspector.get_table_names()) == set(Base.metadata.tables)
    for name, table in Base.metadata.tables.items():
        db_columns = {column['name'] for column in inspector.get_columns(name)}
        assert db_columns == {column.name for column in table.columns}, name

        db_fks = {
            (fk['referred_table'], tuple(fk['constrained_columns']))
            for fk in inspector.get_foreign_keys(name)
        }
        model_fks = {
            (fk.column.table.name, (fk.parent.name,))
            for fk in table.foreign_keys
        }
        assert db_fks == model_fks, name

def test_migrated_schema_is_usable(migrated_db):
    """Test a full ingestion round against the migrated schema"""
    with migrated_db.get_db() as session:
        library = LibraryRepository(session).insert(Library(name="Library", root="file:///library"))
        series = SeriesRepository(session).insert(
            Series(name="Series", url="file:///library/series", library_id=library.id)
        )
        book = BookRepository(session).insert(
            Book(name="Book", url="file:///library/series/book.cbz", series_id=series.id, library_id=library.id)
        )
        metadata = BookMetadataRepository(session).insert(BookMetadata(
            title="Book", number="1", number_sort=1.0, book_id=book.id,
            authors=[Author(name="author", role="writer")], tags={"tag"}
        ))

        assert metadata.authors == [Author(name="author", role="writer")]
        assert metadata.tags == {"tag"}

        LibraryRepository(session).delete(library.id)

        assert BookMetadataRepository(session).count() == 0

def test_migration_downgrade(migrated_db):
    run_migration(migrated_db.engine, "downgrade")

    assert inspect(migrated_db.engine).get_table_names() == []
