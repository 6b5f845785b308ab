# catalog/sa/models/library.py
from sqlalchemy import String, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class Library(Base, TimestampMixin):
    __tablename__ = 'library'

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    root: Mapped[str] = mapped_column(String(1024), nullable=False)

    # Relationships
    series = relationship('Series', viewonly=True)

    __table_args__ = (
        Index('idx_library_name', 'name'),
    )
