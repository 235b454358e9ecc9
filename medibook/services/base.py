from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import Any, List, Optional
import logging

from ..core.exceptions import NotFoundError, StorageError
from ..schemas.validation import build, build_update

logger = logging.getLogger(__name__)

class EntityService:
    """
    Validated create/read/update/delete for one table.

    Subclasses set ``model``, ``create_schema`` and ``label`` and may
    override ``ordering`` and the hooks ``_check_references`` and
    ``_after_delete``.
    """

    model = None
    create_schema = None
    label = "Record"

    def __init__(self, db: Session):
        self.db = db

    def get(self, record_id: int):
        """Return one record or raise NotFoundError."""
        record = self.db.query(self.model).filter(
            self.model.id == record_id
        ).first()

        if not record:
            raise NotFoundError(f"{self.label} not found")

        return record

    def list(self) -> List[Any]:
        """Return every record in listing order."""
        return self.db.query(self.model).order_by(*self.ordering()).all()

    def create(self, payload: Any):
        """Validate ``payload`` and persist it as a new record."""
        data = build(self.create_schema, payload).unwrap()
        self._check_references(data)

        record = self.model(**data.model_dump())
        self.db.add(record)
        self.save()
        self.db.refresh(record)

        logger.info(f"Created {self.label.lower()} {record.id}")
        return record

    def update(self, record_id: int, payload: Any):
        """Merge ``payload`` over the stored record, re-validate and persist."""
        record = self.get(record_id)
        data = build_update(self.create_schema, record, payload).unwrap()
        self._check_references(data, record)

        for field, value in data.model_dump().items():
            setattr(record, field, value)

        self.save()
        self.db.refresh(record)
        return record

    def delete(self, record_id: int) -> Optional[int]:
        """
        Delete one record.

        Returns whatever ``_after_delete`` reports, for parents the number of
        dependent appointments removed by the cascade.
        """
        record = self.get(record_id)
        self.db.delete(record)
        self.save()

        logger.info(f"Deleted {self.label.lower()} {record_id}")
        return self._after_delete(record_id)

    def save(self):
        """Commit the session, turning driver failures into StorageError."""
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error(f"Failed to save {self.label.lower()}: {str(exc)}")
            raise StorageError(str(exc)) from exc

    def ordering(self):
        return (self.model.id.asc(),)

    def _check_references(self, data, record=None):
        pass

    def _after_delete(self, record_id: int) -> Optional[int]:
        return None
