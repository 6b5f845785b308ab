# catalog/sa/models/__init__.py
from .base import Base, TimestampMixin
from .library import Library
from .series import Series
from .book import Book
from .metadata import BookMetadata, BookMetadataAuthor, BookMetadataTag

__all__ = [
    'Base',
    'TimestampMixin',
    'Library',
    'Series',
    'Book',
    'BookMetadata',
    'BookMetadataAuthor',
    'BookMetadataTag'
]
