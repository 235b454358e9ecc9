from fastapi import Depends
from sqlalchemy.orm import Session

from ..core.database import get_db
from ..services.appointment_service import AppointmentService
from ..services.doctor_service import DoctorService
from ..services.patient_service import PatientService
from ..services.query_service import AppointmentQueryService
from ..services.report_service import ReportService

# Service dependencies, one session per request
async def get_patient_service(db: Session = Depends(get_db)) -> PatientService:
    return PatientService(db)

async def get_doctor_service(db: Session = Depends(get_db)) -> DoctorService:
    return DoctorService(db)

async def get_appointment_service(db: Session = Depends(get_db)) -> AppointmentService:
    return AppointmentService(db)

async def get_query_service(db: Session = Depends(get_db)) -> AppointmentQueryService:
    return AppointmentQueryService(db)

async def get_report_service(db: Session = Depends(get_db)) -> ReportService:
    return ReportService(db)
