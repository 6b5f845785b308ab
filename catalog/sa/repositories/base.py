# catalog/sa/repositories/base.py
from contextlib import contextmanager
from enum import Enum
from typing import Any, Dict, Generic, Iterator, List, Optional, Sequence, Tuple, Type, TypeVar
import logging

from pydantic import BaseModel
from sqlalchemy import insert
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from catalog.utils.clock import utcnow
from ..exceptions import ConstraintViolationError, NotFoundError, TransactionFailureError

logger = logging.getLogger(__name__)

ModelT = TypeVar('ModelT', bound=BaseModel)
RowT = TypeVar('RowT')

# Keeps IN (...) lists under SQLite's bound parameter limit
ID_CHUNK_SIZE = 500

class BatchStrategy(str, Enum):
    SEQUENTIAL = "sequential"        # One committed insert per entity
    GROUPED = "grouped"              # One executemany statement, one commit
    TRANSACTIONAL = "transactional"  # ORM inserts inside one transaction, one commit

def chunked(values: Sequence[Any], size: int = ID_CHUNK_SIZE) -> Iterator[Sequence[Any]]:
    for start in range(0, len(values), size):
        yield values[start:start + size]

class SessionRepository:
    """Base for repositories working on a caller supplied session"""

    def __init__(self, session: Session):
        self.session = session

    @contextmanager
    def transaction(self, action: str) -> Iterator[Session]:
        """Run a unit of work that is either fully committed or fully rolled back.

        SQLAlchemy errors are translated into the repository error taxonomy:
        integrity errors become ConstraintViolationError, anything else raised by
        the backing store becomes TransactionFailureError.
        """
        try:
            yield self.session
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            logger.error(f"Constraint violation during {action}: {str(e.orig)}")
            raise ConstraintViolationError(f"{action} rejected: {e.orig}") from e
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Transaction failed during {action}: {str(e)}")
            raise TransactionFailureError(f"{action} failed: {e}") from e
        except Exception:
            self.session.rollback()
            raise

class EntityRepository(SessionRepository, Generic[ModelT, RowT]):
    """Create, read, update and delete for one entity kind.

    Subclasses bind the pydantic model returned to callers, the ORM row class
    it is stored in, and the fields an update is allowed to replace. Rows must
    have an ``id`` primary key and the audit columns from TimestampMixin.
    """

    model_class: Type[ModelT]
    row_class: Type[RowT]
    kind: str = "Entity"
    mutable_fields: Tuple[str, ...] = ()
    # Search attribute name -> column filtered with IN (...)
    search_filters: Dict[str, Any] = {}

    def _to_model(self, row: RowT) -> ModelT:
        return self.model_class.model_validate(row)

    def _row_values(self, entity: ModelT) -> Dict[str, Any]:
        now = utcnow()
        values = entity.model_dump()
        values['created_date'] = now
        values['last_modified_date'] = now
        return values

    def _get_row(self, entity_id: str) -> Optional[RowT]:
        return self.session.query(self.row_class).filter(self.row_class.id == entity_id).first()

    def _check_new_ids(self, ids: Sequence[str]) -> None:
        if len(set(ids)) != len(ids):
            raise ConstraintViolationError(f"Duplicate {self.kind} ids in batch")
        existing = []
        for chunk in chunked(list(ids)):
            existing.extend(
                row_id for (row_id,) in
                self.session.query(self.row_class.id).filter(self.row_class.id.in_(chunk)).all()
            )
        if existing:
            raise ConstraintViolationError(f"{self.kind} already exists: {', '.join(existing)}")

    def _check_parents(self, entities: Sequence[ModelT]) -> None:
        """Reject entities whose parent references disagree with each other. No-op by default."""

    def _search_conditions(self, search: Optional[BaseModel]) -> List[Any]:
        if search is None:
            return []
        conditions = []
        for attribute, column in self.search_filters.items():
            values = getattr(search, attribute, None)
            # Empty or missing dimensions are not applied
            if values:
                conditions.append(column.in_(values))
        return conditions

    def insert(self, entity: ModelT) -> ModelT:
        """Persist a new entity, stamping both audit dates with the current time.

        Raises:
            ConstraintViolationError: the id is taken or a parent record is missing
        """
        entity = self.model_class.model_validate(entity)
        with self.transaction(f"{self.kind} insert"):
            self._check_new_ids([entity.id])
            self._check_parents([entity])
            row = self.row_class(**self._row_values(entity))
            self.session.add(row)
            self.session.flush()
        logger.debug(f"Inserted {self.kind} {entity.id}")
        return self._to_model(row)

    def update(self, entity: ModelT) -> ModelT:
        """Replace the mutable fields of an existing entity.

        created_date is kept from storage whatever the caller passes, and
        last_modified_date is moved to the current time.

        Raises:
            NotFoundError: no entity with this id exists
            ConstraintViolationError: a parent record is missing or inconsistent
        """
        entity = self.model_class.model_validate(entity)
        with self.transaction(f"{self.kind} update"):
            row = self._get_row(entity.id)
            if row is None:
                raise NotFoundError(self.kind, entity.id)
            self._check_parents([entity])
            for field in self.mutable_fields:
                setattr(row, field, getattr(entity, field))
            row.last_modified_date = utcnow()
        logger.debug(f"Updated {self.kind} {entity.id}")
        return self._to_model(row)

    def find_by_id_or_null(self, entity_id: str) -> Optional[ModelT]:
        row = self._get_row(entity_id)
        return self._to_model(row) if row is not None else None

    def find_all(self, search: Optional[BaseModel] = None) -> List[ModelT]:
        """Get all entities matching the optional search, in no particular order"""
        query = self.session.query(self.row_class)
        conditions = self._search_conditions(search)
        if conditions:
            query = query.filter(*conditions)
        return [self._to_model(row) for row in query.all()]

    def find_all_by_ids(self, ids: Sequence[str]) -> List[ModelT]:
        rows = []
        for chunk in chunked(list(ids)):
            rows.extend(self.session.query(self.row_class).filter(self.row_class.id.in_(chunk)).all())
        return [self._to_model(row) for row in rows]

    def count(self) -> int:
        return self.session.query(self.row_class).count()

    def delete(self, entity_id: str) -> bool:
        """Delete one entity. Children go with it through ON DELETE CASCADE.

        Returns:
            True if the entity was deleted, False if not found
        """
        with self.transaction(f"{self.kind} delete"):
            deleted = (
                self.session.query(self.row_class)
                .filter(self.row_class.id == entity_id)
                .delete(synchronize_session='fetch')
            )
        return deleted > 0

    def delete_all(self) -> int:
        """Delete every entity of this kind. Safe on an empty store.

        Returns:
            Number of deleted rows
        """
        with self.transaction(f"{self.kind} delete all"):
            deleted = self.session.query(self.row_class).delete(synchronize_session='fetch')
        logger.debug(f"Deleted {deleted} {self.kind} rows")
        return deleted

    def insert_many(
        self,
        entities: Sequence[ModelT],
        strategy: BatchStrategy = BatchStrategy.TRANSACTIONAL
    ) -> int:
        """Insert many new entities using the given strategy.

        Every strategy leaves the same rows behind; they only differ in how the
        writes reach the database. GROUPED and TRANSACTIONAL are atomic and check
        for taken ids before writing. SEQUENTIAL commits entity by entity, so a
        failure keeps the entities inserted before it.

        Args:
            entities: New entities, ids supplied by the caller
            strategy: How the rows are written

        Returns:
            Number of inserted entities
        """
        entities = [self.model_class.model_validate(entity) for entity in entities]
        strategy = BatchStrategy(strategy)
        if not entities:
            return 0

        if strategy is BatchStrategy.SEQUENTIAL:
            for entity in entities:
                self.insert(entity)
        elif strategy is BatchStrategy.GROUPED:
            with self.transaction(f"{self.kind} grouped insert"):
                self._check_new_ids([entity.id for entity in entities])
                self._check_parents(entities)
                self.session.execute(
                    insert(self.row_class),
                    [self._row_values(entity) for entity in entities]
                )
        else:
            with self.transaction(f"{self.kind} transactional insert"):
                self._check_new_ids([entity.id for entity in entities])
                self._check_parents(entities)
                self.session.add_all([self.row_class(**self._row_values(entity)) for entity in entities])

        logger.info(f"Inserted {len(entities)} {self.kind} rows ({strategy.value})")
        return len(entities)
