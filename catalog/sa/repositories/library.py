# catalog/sa/repositories/library.py
from sqlalchemy import func

from catalog.models.library import Library as LibraryModel
from ..models import Library
from .base import EntityRepository

class LibraryRepository(EntityRepository[LibraryModel, Library]):
    """Repository for managing Library entities."""

    model_class = LibraryModel
    row_class = Library
    kind = "Library"
    mutable_fields = ('name', 'root')

    def exists_by_name(self, name: str) -> bool:
        """Check whether a library with this name exists, ignoring case.
        
        Args:
            name: The library name to look for
            
        Returns:
            True if a library with the same name exists
        """
        return (
            self.session.query(Library.id)
            .filter(func.lower(Library.name) == name.lower())
            .first()
        ) is not None
