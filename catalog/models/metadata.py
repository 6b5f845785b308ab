# catalog/models/metadata.py
from datetime import date
from typing import Optional, List, Set
from pydantic import BaseModel, ConfigDict, Field

from .base import AuditedModel

class Author(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    name: str
    role: str

LOCKABLE_FIELDS = (
    'title',
    'summary',
    'number',
    'number_sort',
    'release_date',
    'authors',
    'tags',
)

class BookMetadata(AuditedModel):
    """Descriptive, refreshable data attached to a book.

    Each field has a matching ``<field>_lock`` flag. A locked field was set by a
    user and must be carried over unchanged by automated refreshes. The flags
    are stored and returned as-is, nothing in the persistence layer enforces them.
    """
    book_id: str
    title: str
    number: str
    number_sort: float
    summary: str = ""
    release_date: Optional[date] = None
    authors: List[Author] = Field(default_factory=list)
    tags: Set[str] = Field(default_factory=set)

    title_lock: bool = False
    summary_lock: bool = False
    number_lock: bool = False
    number_sort_lock: bool = False
    release_date_lock: bool = False
    authors_lock: bool = False
    tags_lock: bool = False

    def locked_fields(self) -> List[str]:
        """Names of the fields whose lock flag is set"""
        return [name for name in LOCKABLE_FIELDS if getattr(self, f"{name}_lock")]
