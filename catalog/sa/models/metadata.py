# catalog/sa/models/metadata.py
from datetime import date
from sqlalchemy import String, Text, Float, Boolean, Integer, Date, ForeignKey
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class BookMetadataAuthor(Base):
    """Ordered author entries of a book's metadata"""
    __tablename__ = 'book_metadata_author'

    book_id: Mapped[str] = mapped_column(
        String(64), ForeignKey('book_metadata.book_id', ondelete='CASCADE'), primary_key=True
    )
    position: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(100), nullable=False)

class BookMetadataTag(Base):
    __tablename__ = 'book_metadata_tag'

    book_id: Mapped[str] = mapped_column(
        String(64), ForeignKey('book_metadata.book_id', ondelete='CASCADE'), primary_key=True
    )
    tag: Mapped[str] = mapped_column(String(255), primary_key=True)

class BookMetadata(Base, TimestampMixin):
    __tablename__ = 'book_metadata'

    book_id: Mapped[str] = mapped_column(
        String(64), ForeignKey('book.id', ondelete='CASCADE'), primary_key=True
    )
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    summary: Mapped[str] = mapped_column(Text, nullable=False, default='')
    number: Mapped[str] = mapped_column(String(50), nullable=False)
    number_sort: Mapped[float] = mapped_column(Float, nullable=False)
    release_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    title_lock: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    summary_lock: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    number_lock: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    number_sort_lock: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    release_date_lock: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    authors_lock: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    tags_lock: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Relationships, written through BookMetadataRepository only
    book = relationship('Book', viewonly=True)
    authors = relationship(
        'BookMetadataAuthor', order_by=BookMetadataAuthor.position, viewonly=True
    )
    tags = relationship('BookMetadataTag', viewonly=True)
