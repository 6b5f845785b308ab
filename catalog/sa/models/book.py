# catalog/sa/models/book.py
from datetime import datetime
from sqlalchemy import String, BigInteger, ForeignKey, DateTime, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class Book(Base, TimestampMixin):
    __tablename__ = 'book'

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(500), nullable=False)
    url: Mapped[str] = mapped_column(String(1024), nullable=False)
    file_size: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    file_last_modified: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    series_id: Mapped[str] = mapped_column(
        String(64), ForeignKey('series.id', ondelete='CASCADE'), nullable=False
    )
    library_id: Mapped[str] = mapped_column(
        String(64), ForeignKey('library.id', ondelete='CASCADE'), nullable=False
    )

    # Relationships
    series = relationship('Series', viewonly=True)
    book_metadata = relationship('BookMetadata', uselist=False, viewonly=True)

    __table_args__ = (
        # Search indexes
        Index('idx_book_library_id', 'library_id'),
        Index('idx_book_series_id', 'series_id'),
    )
