# catalog/models/book.py
from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field, field_validator

from catalog.utils.clock import as_naive_utc, utcnow
from .base import EntityBase

class Book(EntityBase):
    """A catalogued file belonging to one series and, through it, one library"""
    name: str
    url: str
    series_id: str
    library_id: str
    file_size: int = 0
    file_last_modified: datetime = Field(default_factory=utcnow)

    @field_validator('file_last_modified', mode='after')
    @classmethod
    def validate_file_last_modified(cls, value: datetime) -> datetime:
        return as_naive_utc(value)

class BookSearch(BaseModel):
    """Filters for book lookups.

    Every dimension is optional: None or an empty list means the dimension is
    not applied, it never means "match nothing". Dimensions combine with AND.
    New dimensions are added by subclassing and registering the attribute in
    BookRepository.search_filters.
    """
    model_config = ConfigDict(frozen=True)

    library_ids: Optional[List[str]] = None
    series_ids: Optional[List[str]] = None
