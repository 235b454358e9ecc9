import datetime as dt
from typing import Optional

from pydantic import Field

from ..models.appointment import AppointmentStatus
from .validation import SchemaBase

# 24h clock, seconds optional
TIME_OF_DAY_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d(:[0-5]\d)?$"


class AppointmentCreate(SchemaBase):
    patient_id: int
    doctor_id: int
    date: dt.date
    time: str = Field(pattern=TIME_OF_DAY_PATTERN)
    reason: str = Field(min_length=1)
    status: AppointmentStatus = AppointmentStatus.SCHEDULED


class AppointmentResponse(AppointmentCreate):
    id: int
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None


class StatusUpdate(SchemaBase):
    status: AppointmentStatus
