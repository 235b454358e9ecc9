from fastapi import APIRouter, Body, Depends, Query, status
from typing import Any, Dict, List, Optional

from ...api.deps import get_appointment_service, get_query_service
from ...schemas.appointment import AppointmentResponse
from ...schemas.responses import DeleteResponse
from ...services.appointment_service import AppointmentService
from ...services.query_service import AppointmentQueryService, AppointmentView

router = APIRouter(prefix="/appointments", tags=["Appointments"])

@router.get("", response_model=List[AppointmentResponse])
async def list_appointments(
    view: AppointmentView = Query(AppointmentView.ALL, alias="filter"),
    service: AppointmentQueryService = Depends(get_query_service)
):
    """List appointments by date then time, optionally only today's, upcoming or past ones."""
    return service.list_appointments(view)

# Declared before /{appointment_id} so "range" is not read as an id
@router.get("/range", response_model=List[AppointmentResponse])
async def appointments_in_range(
    start_date: str = Query(..., alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    service: AppointmentQueryService = Depends(get_query_service)
):
    """Appointments dated from startDate up to, not including, endDate (default: one day)."""
    return service.in_range(start_date, end_date)

@router.get("/{appointment_id}", response_model=AppointmentResponse)
async def get_appointment(
    appointment_id: int,
    service: AppointmentService = Depends(get_appointment_service)
):
    return service.get(appointment_id)

@router.post("", response_model=AppointmentResponse, status_code=status.HTTP_201_CREATED)
async def create_appointment(
    payload: Dict[str, Any] = Body(...),
    service: AppointmentService = Depends(get_appointment_service)
):
    """Book an appointment for an existing patient and doctor."""
    return service.create(payload)

@router.put("/{appointment_id}", response_model=AppointmentResponse)
async def update_appointment(
    appointment_id: int,
    payload: Dict[str, Any] = Body(...),
    service: AppointmentService = Depends(get_appointment_service)
):
    return service.update(appointment_id, payload)

@router.patch("/{appointment_id}/status", response_model=AppointmentResponse)
async def update_appointment_status(
    appointment_id: int,
    payload: Dict[str, Any] = Body(...),
    service: AppointmentService = Depends(get_appointment_service)
):
    """Change only the status of an appointment."""
    return service.set_status(appointment_id, payload)

@router.delete(
    "/{appointment_id}",
    response_model=DeleteResponse,
    response_model_exclude_none=True
)
async def delete_appointment(
    appointment_id: int,
    service: AppointmentService = Depends(get_appointment_service)
):
    service.delete(appointment_id)
    return DeleteResponse(message="Appointment deleted successfully")
