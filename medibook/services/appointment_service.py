from typing import Any

from ..core.exceptions import ValidationError
from ..models.appointment import Appointment
from ..models.doctor import Doctor
from ..models.patient import Patient
from ..schemas.appointment import AppointmentCreate
from .base import EntityService
from .status_machine import check_transition, parse_target

class AppointmentService(EntityService):
    model = Appointment
    create_schema = AppointmentCreate
    label = "Appointment"

    def ordering(self):
        return (Appointment.date.asc(), Appointment.time.asc(), Appointment.id.asc())

    def set_status(self, appointment_id: int, payload: Any) -> Appointment:
        """Move an appointment to the status named in ``payload``; nothing else changes."""
        target = parse_target(payload)
        appointment = self.get(appointment_id)
        check_transition(appointment.status, target)

        appointment.status = target
        self.save()
        self.db.refresh(appointment)
        return appointment

    def _check_references(self, data, record=None):
        """Patient and doctor must exist when booked or re-assigned."""
        if record is None or data.patient_id != record.patient_id:
            self._require(Patient, data.patient_id)
        if record is None or data.doctor_id != record.doctor_id:
            self._require(Doctor, data.doctor_id)
        if record is not None:
            check_transition(record.status, data.status)

    def _require(self, model, record_id: int):
        exists = self.db.query(model.id).filter(model.id == record_id).first()
        if not exists:
            raise ValidationError(f"{model.__name__} {record_id} does not exist")
