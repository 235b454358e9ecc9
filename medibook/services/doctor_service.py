from ..models.doctor import Doctor
from ..schemas.doctor import DoctorCreate
from .base import EntityService
from .integrity_service import ReferentialIntegrityManager

class DoctorService(EntityService):
    model = Doctor
    create_schema = DoctorCreate
    label = "Doctor"

    def ordering(self):
        # Newest first
        return (Doctor.created_at.desc(), Doctor.id.desc())

    def _after_delete(self, record_id: int) -> int:
        return ReferentialIntegrityManager(self.db).remove_doctor_appointments(record_id)
