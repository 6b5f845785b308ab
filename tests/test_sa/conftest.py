# tests/test_sa/conftest.py
import pytest
from sqlalchemy.orm import Session
from sqlalchemy.sql import text

from catalog.models.book import Book
from catalog.models.library import Library
from catalog.models.series import Series
from catalog.sa.database import Database
from catalog.sa.models import Base
from catalog.sa.repositories import (
    LibraryRepository, SeriesRepository, BookRepository, BookMetadataRepository
)

@pytest.fixture(scope="session")
def test_db_path(tmp_path_factory):
    """Create a temporary directory for the test database."""
    test_dir = tmp_path_factory.mktemp("test_db")
    return str(test_dir / "test_catalog.db")

@pytest.fixture(scope="session")
def database(test_db_path):
    """Create a test database instance"""
    db = Database(f"sqlite:///{test_db_path}")

    # Drop all tables and recreate schema
    Base.metadata.drop_all(db.engine)
    Base.metadata.create_all(db.engine)

    yield db

    db.dispose()

@pytest.fixture(scope="function")
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture(autouse=True)
def cleanup_db(db_session):
    """Clean up database tables before each test"""
    # Delete all data from tables in reverse order of dependencies
    db_session.execute(text("DELETE FROM book_metadata_tag"))
    db_session.execute(text("DELETE FROM book_metadata_author"))
    db_session.execute(text("DELETE FROM book_metadata"))
    db_session.execute(text("DELETE FROM book"))
    db_session.execute(text("DELETE FROM series"))
    db_session.execute(text("DELETE FROM library"))
    db_session.commit()
    yield
    # Clean up after test as well
    db_session.rollback()

@pytest.fixture
def library_repo(db_session):
    return LibraryRepository(db_session)

@pytest.fixture
def series_repo(db_session):
    return SeriesRepository(db_session)

@pytest.fixture
def book_repo(db_session):
    return BookRepository(db_session)

@pytest.fixture
def metadata_repo(db_session):
    return BookMetadataRepository(db_session)

@pytest.fixture
def sample_library(library_repo):
    """Create a sample library for testing."""
    return library_repo.insert(Library(name="Test Library", root="file:///library"))

@pytest.fixture
def sample_series(series_repo, sample_library):
    """Create a sample series in the sample library."""
    return series_repo.insert(Series(
        name="Test Series",
        url="file:///library/series",
        library_id=sample_library.id
    ))

@pytest.fixture
def make_book(sample_library, sample_series):
    """Factory for unsaved books, placed in the sample series unless told otherwise."""
    def _make_book(name: str, **kwargs) -> Book:
        kwargs.setdefault("library_id", sample_library.id)
        kwargs.setdefault("series_id", sample_series.id)
        kwargs.setdefault("url", f"file:///library/series/{name}.cbz")
        return Book(name=name, **kwargs)
    return _make_book

@pytest.fixture
def sample_book(book_repo, make_book):
    """Create a sample book for testing."""
    return book_repo.insert(make_book("Book", file_size=3))
