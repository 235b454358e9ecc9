from typing import Dict

from pydantic import Field

from .validation import SchemaBase


class StatsSummary(SchemaBase):
    total_patients: int
    total_doctors: int
    total_appointments: int


class DetailedStats(StatsSummary):
    today_appointments: int
    appointments_by_status: Dict[str, int]
    # ISO day -> count, ascending by day
    last_7_days_appointments: Dict[str, int] = Field(alias="last7DaysAppointments")
