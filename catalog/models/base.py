# catalog/models/base.py
from datetime import datetime
from uuid import uuid4
from pydantic import BaseModel, ConfigDict, Field, field_validator

from catalog.utils.clock import as_naive_utc, utcnow

def new_id() -> str:
    """Generate an opaque entity identifier"""
    return uuid4().hex

class AuditedModel(BaseModel):
    """Base model carrying the audit timestamps shared by every stored record.

    Timestamps are kept as naive UTC. Aware values are converted on validation,
    and instances are validated again when handed back to ``model_validate``,
    so values set through ``model_copy(update=...)`` are converted as well.
    """
    model_config = ConfigDict(from_attributes=True, frozen=True, revalidate_instances='always')

    created_date: datetime = Field(default_factory=utcnow)
    last_modified_date: datetime = Field(default_factory=utcnow)

    @field_validator('created_date', 'last_modified_date', mode='after')
    @classmethod
    def validate_audit_dates(cls, value: datetime) -> datetime:
        return as_naive_utc(value)

class EntityBase(AuditedModel):
    """Top-level stored record with its own identifier"""
    id: str = Field(default_factory=new_id)
