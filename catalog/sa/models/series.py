# catalog/sa/models/series.py
from datetime import datetime
from sqlalchemy import String, ForeignKey, DateTime, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class Series(Base, TimestampMixin):
    __tablename__ = 'series'

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(500), nullable=False)
    url: Mapped[str] = mapped_column(String(1024), nullable=False)
    file_last_modified: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    library_id: Mapped[str] = mapped_column(
        String(64), ForeignKey('library.id', ondelete='CASCADE'), nullable=False
    )

    # Relationships
    library = relationship('Library', viewonly=True)
    books = relationship('Book', viewonly=True)

    __table_args__ = (
        Index('idx_series_library_id', 'library_id'),
    )
