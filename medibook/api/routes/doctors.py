from fastapi import APIRouter, Body, Depends, status
from typing import Any, Dict, List

from ...api.deps import get_doctor_service
from ...schemas.responses import DeleteResponse
from ...schemas.doctor import DoctorResponse
from ...services.doctor_service import DoctorService

router = APIRouter(prefix="/doctors", tags=["Doctors"])

@router.get("", response_model=List[DoctorResponse])
async def list_doctors(service: DoctorService = Depends(get_doctor_service)):
    """List all doctors, newest first."""
    return service.list()

@router.get("/{doctor_id}", response_model=DoctorResponse)
async def get_doctor(
    doctor_id: int,
    service: DoctorService = Depends(get_doctor_service)
):
    return service.get(doctor_id)

@router.post("", response_model=DoctorResponse, status_code=status.HTTP_201_CREATED)
async def create_doctor(
    payload: Dict[str, Any] = Body(...),
    service: DoctorService = Depends(get_doctor_service)
):
    """Add a doctor."""
    return service.create(payload)

@router.put("/{doctor_id}", response_model=DoctorResponse)
async def update_doctor(
    doctor_id: int,
    payload: Dict[str, Any] = Body(...),
    service: DoctorService = Depends(get_doctor_service)
):
    return service.update(doctor_id, payload)

@router.delete("/{doctor_id}", response_model=DeleteResponse)
async def delete_doctor(
    doctor_id: int,
    service: DoctorService = Depends(get_doctor_service)
):
    """Delete a doctor together with every appointment booked with them."""
    removed = service.delete(doctor_id)
    return DeleteResponse(
        message="Doctor deleted successfully",
        deleted_appointments=removed
    )
