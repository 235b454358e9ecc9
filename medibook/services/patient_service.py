from ..models.patient import Patient
from ..schemas.patient import PatientCreate
from .base import EntityService
from .integrity_service import ReferentialIntegrityManager

class PatientService(EntityService):
    model = Patient
    create_schema = PatientCreate
    label = "Patient"

    def ordering(self):
        # Newest first
        return (Patient.created_at.desc(), Patient.id.desc())

    def _after_delete(self, record_id: int) -> int:
        return ReferentialIntegrityManager(self.db).remove_patient_appointments(record_id)
