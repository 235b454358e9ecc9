from fastapi import APIRouter, Body, Depends, status
from typing import Any, Dict, List

from ...api.deps import get_patient_service
from ...schemas.responses import DeleteResponse
from ...schemas.patient import PatientResponse
from ...services.patient_service import PatientService

router = APIRouter(prefix="/patients", tags=["Patients"])

@router.get("", response_model=List[PatientResponse])
async def list_patients(service: PatientService = Depends(get_patient_service)):
    """List all patients, newest first."""
    return service.list()

@router.get("/{patient_id}", response_model=PatientResponse)
async def get_patient(
    patient_id: int,
    service: PatientService = Depends(get_patient_service)
):
    """Get a single patient."""
    return service.get(patient_id)

@router.post("", response_model=PatientResponse, status_code=status.HTTP_201_CREATED)
async def create_patient(
    payload: Dict[str, Any] = Body(...),
    service: PatientService = Depends(get_patient_service)
):
    """Register a new patient."""
    return service.create(payload)

@router.put("/{patient_id}", response_model=PatientResponse)
async def update_patient(
    patient_id: int,
    payload: Dict[str, Any] = Body(...),
    service: PatientService = Depends(get_patient_service)
):
    """Update a patient; omitted fields keep their values."""
    return service.update(patient_id, payload)

@router.delete("/{patient_id}", response_model=DeleteResponse)
async def delete_patient(
    patient_id: int,
    service: PatientService = Depends(get_patient_service)
):
    """Delete a patient together with all of their appointments."""
    removed = service.delete(patient_id)
    return DeleteResponse(
        message="Patient deleted successfully",
        deleted_appointments=removed
    )
