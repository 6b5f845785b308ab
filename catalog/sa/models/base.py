# catalog/sa/models/base.py
from datetime import datetime
from sqlalchemy.orm import DeclarativeBase, mapped_column, Mapped
from sqlalchemy import DateTime

from catalog.utils.clock import utcnow

class Base(DeclarativeBase):
    """Base class for all models"""
    pass

class TimestampMixin:
    """Mixin to add created_date and last_modified_date columns"""
    created_date: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)
    last_modified_date: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)
