# catalog/sa/repositories/metadata.py
from typing import Any, Dict, List, Optional, Sequence
import logging

from sqlalchemy.orm import selectinload

from catalog.models.metadata import Author, BookMetadata as BookMetadataModel, LOCKABLE_FIELDS
from catalog.utils.clock import utcnow
from ..exceptions import ConstraintViolationError, NotFoundError
from ..models import Book, BookMetadata, BookMetadataAuthor, BookMetadataTag
from .base import SessionRepository, chunked

logger = logging.getLogger(__name__)

SCALAR_FIELDS = ('title', 'summary', 'number', 'number_sort', 'release_date')
LOCK_FIELDS = tuple(f"{field}_lock" for field in LOCKABLE_FIELDS)

class BookMetadataRepository(SessionRepository):
    """Repository for the metadata attached 1:1 to books.

    Authors and tags live in their own tables. Every write replaces them
    wholesale inside the same transaction as the scalar row, so a reader never
    sees a metadata row without the collections that were saved with it.
    """

    def _query(self):
        return self.session.query(BookMetadata).options(
            selectinload(BookMetadata.authors),
            selectinload(BookMetadata.tags)
        )

    def _get_row(self, book_id: str) -> Optional[BookMetadata]:
        return self._query().filter(BookMetadata.book_id == book_id).first()

    def _to_model(self, row: BookMetadata) -> BookMetadataModel:
        values: Dict[str, Any] = {field: getattr(row, field) for field in SCALAR_FIELDS + LOCK_FIELDS}
        return BookMetadataModel(
            book_id=row.book_id,
            authors=[Author.model_validate(author) for author in row.authors],
            tags={tag.tag for tag in row.tags},
            created_date=row.created_date,
            last_modified_date=row.last_modified_date,
            **values
        )

    def _column_values(self, metadata: BookMetadataModel) -> Dict[str, Any]:
        return {field: getattr(metadata, field) for field in SCALAR_FIELDS + LOCK_FIELDS}

    def _add_collections(self, metadata: BookMetadataModel) -> None:
        self.session.add_all([
            BookMetadataAuthor(book_id=metadata.book_id, position=position, name=author.name, role=author.role)
            for position, author in enumerate(metadata.authors)
        ])
        self.session.add_all([
            BookMetadataTag(book_id=metadata.book_id, tag=tag)
            for tag in sorted(metadata.tags)
        ])

    def _delete_collections(self, book_ids: Sequence[str]) -> None:
        for chunk in chunked(list(book_ids)):
            self.session.query(BookMetadataAuthor).filter(
                BookMetadataAuthor.book_id.in_(chunk)
            ).delete(synchronize_session='fetch')
            self.session.query(BookMetadataTag).filter(
                BookMetadataTag.book_id.in_(chunk)
            ).delete(synchronize_session='fetch')

    def insert(self, metadata: BookMetadataModel) -> BookMetadataModel:
        """Persist the metadata of a book together with its authors and tags.

        Raises:
            ConstraintViolationError: the book does not exist or already has metadata
        """
        with self.transaction("BookMetadata insert"):
            if self.session.query(Book.id).filter(Book.id == metadata.book_id).first() is None:
                raise ConstraintViolationError(f"Cannot add metadata to unknown book: {metadata.book_id}")
            if self._get_row(metadata.book_id) is not None:
                raise ConstraintViolationError(f"Metadata already exists for book: {metadata.book_id}")

            now = utcnow()
            self.session.add(BookMetadata(
                book_id=metadata.book_id,
                created_date=now,
                last_modified_date=now,
                **self._column_values(metadata)
            ))
            # Parent row first, the collection tables reference it
            self.session.flush()
            self._add_collections(metadata)
        logger.debug(f"Inserted metadata for book {metadata.book_id}")
        return self.find_by_id(metadata.book_id)

    def update(self, metadata: BookMetadataModel) -> BookMetadataModel:
        """Replace every field, lock flag and collection of existing metadata.

        Authors and tags are deleted and inserted again from the given snapshot
        rather than merged.

        Raises:
            NotFoundError: the book has no metadata
        """
        with self.transaction("BookMetadata update"):
            row = self._get_row(metadata.book_id)
            if row is None:
                raise NotFoundError("BookMetadata", metadata.book_id)
            for field, value in self._column_values(metadata).items():
                setattr(row, field, value)
            row.last_modified_date = utcnow()

            self._delete_collections([metadata.book_id])
            self._add_collections(metadata)
        logger.debug(f"Updated metadata for book {metadata.book_id}")
        return self.find_by_id(metadata.book_id)

    def find_by_id(self, book_id: str) -> BookMetadataModel:
        """Get the metadata of a book.

        Every ingested book gets metadata, so a miss points at inconsistent data
        and raises instead of returning None.

        Raises:
            NotFoundError: the book has no metadata
        """
        row = self._get_row(book_id)
        if row is None:
            raise NotFoundError("BookMetadata", book_id)
        return self._to_model(row)

    def find_by_id_or_null(self, book_id: str) -> Optional[BookMetadataModel]:
        row = self._get_row(book_id)
        return self._to_model(row) if row is not None else None

    def count(self) -> int:
        return self.session.query(BookMetadata).count()

    def delete(self, book_id: str) -> None:
        """Delete the metadata of a book, doing nothing if there is none"""
        self.delete_by_book_ids([book_id])

    def delete_by_book_ids(self, book_ids: Sequence[str]) -> None:
        book_ids = list(book_ids)
        if not book_ids:
            return
        with self.transaction("BookMetadata delete"):
            self._delete_collections(book_ids)
            for chunk in chunked(book_ids):
                self.session.query(BookMetadata).filter(
                    BookMetadata.book_id.in_(chunk)
                ).delete(synchronize_session='fetch')
        logger.debug(f"Deleted metadata for {len(book_ids)} books")

    def find_all_by_book_ids(self, book_ids: Sequence[str]) -> List[BookMetadataModel]:
        rows = []
        for chunk in chunked(list(book_ids)):
            rows.extend(self._query().filter(BookMetadata.book_id.in_(chunk)).all())
        return [self._to_model(row) for row in rows]
