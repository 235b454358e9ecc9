"""
Application-level cascade for appointment references.

The storage layer has no foreign keys, so removing a patient or doctor is a
two-step saga: the parent row is deleted and committed first, then every
appointment pointing at it is bulk-deleted in a second commit. Readers running
between the two steps can see appointments whose parent is already gone, and a
failure in the second step leaves those appointments behind. Nothing here
tries to compensate for that.
"""
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from ..core.exceptions import StorageError
from ..models.appointment import Appointment

logger = logging.getLogger(__name__)

class ReferentialIntegrityManager:
    def __init__(self, db: Session):
        self.db = db

    def remove_patient_appointments(self, patient_id: int) -> int:
        """Delete every appointment booked for ``patient_id``."""
        return self._remove(Appointment.patient_id == patient_id, f"patient {patient_id}")

    def remove_doctor_appointments(self, doctor_id: int) -> int:
        """Delete every appointment booked with ``doctor_id``."""
        return self._remove(Appointment.doctor_id == doctor_id, f"doctor {doctor_id}")

    def _remove(self, criterion, owner: str) -> int:
        try:
            removed = self.db.query(Appointment).filter(criterion).delete(
                synchronize_session=False
            )
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error(
                f"Cascade delete for {owner} failed, its appointments are orphaned: {str(exc)}"
            )
            raise StorageError(str(exc)) from exc

        logger.info(f"Cascade removed {removed} appointment(s) for {owner}")
        return removed
