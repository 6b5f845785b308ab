# catalog/sa/repositories/__init__.py
from .base import BatchStrategy, EntityRepository
from .library import LibraryRepository
from .series import SeriesRepository
from .book import BookRepository
from .metadata import BookMetadataRepository

__all__ = [
    'BatchStrategy',
    'EntityRepository',
    'LibraryRepository',
    'SeriesRepository',
    'BookRepository',
    'BookMetadataRepository'
]
