# catalog/sa/__init__.py
from .database import Database
from .exceptions import (
    RepositoryError, NotFoundError, ConstraintViolationError, TransactionFailureError
)
from .models import (
    Base, Library, Series, Book,
    BookMetadata, BookMetadataAuthor, BookMetadataTag
)

__all__ = [
    'Database',
    'RepositoryError',
    'NotFoundError',
    'ConstraintViolationError',
    'TransactionFailureError',
    'Base',
    'Library',
    'Series',
    'Book',
    'BookMetadata',
    'BookMetadataAuthor',
    'BookMetadataTag'
]
