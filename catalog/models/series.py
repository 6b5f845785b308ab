# catalog/models/series.py
from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field, field_validator

from catalog.utils.clock import as_naive_utc, utcnow
from .base import EntityBase

class Series(EntityBase):
    name: str
    url: str
    library_id: str
    file_last_modified: datetime = Field(default_factory=utcnow)

    @field_validator('file_last_modified', mode='after')
    @classmethod
    def validate_file_last_modified(cls, value: datetime) -> datetime:
        return as_naive_utc(value)

class SeriesSearch(BaseModel):
    """Optional filters for series lookups. An empty or missing dimension is not applied."""
    model_config = ConfigDict(frozen=True)

    library_ids: Optional[List[str]] = None
