from sqlalchemy import func
from sqlalchemy.orm import Session
from datetime import date, datetime, timedelta
from typing import Dict, Optional

from ..models.appointment import Appointment
from ..models.doctor import Doctor
from ..models.patient import Patient
from ..schemas.stats import DetailedStats, StatsSummary

# Days before today covered by the daily rollup; today is included too
ROLLUP_DAYS = 7

class ReportService:
    """
    Dashboard statistics.

    Each figure is a separate query with no shared transaction, so under
    concurrent writes the totals and breakdowns of one report may disagree.
    """

    def __init__(self, db: Session):
        self.db = db

    def summary(self) -> StatsSummary:
        """Record counts for patients, doctors and appointments."""
        return StatsSummary(
            total_patients=self.db.query(Patient).count(),
            total_doctors=self.db.query(Doctor).count(),
            total_appointments=self.db.query(Appointment).count(),
        )

    def detailed(self, now: Optional[datetime] = None) -> DetailedStats:
        """Summary plus today's count, the status breakdown and the daily rollup."""
        today = (now or datetime.now()).date()
        summary = self.summary()

        return DetailedStats(
            **summary.model_dump(),
            today_appointments=self.count_on(today),
            appointments_by_status=self.count_by_status(),
            last_7_days_appointments=self.daily_counts(
                today - timedelta(days=ROLLUP_DAYS), today
            ),
        )

    def count_on(self, day: date) -> int:
        return self.db.query(Appointment).filter(
            Appointment.date >= day,
            Appointment.date < day + timedelta(days=1)
        ).count()

    def count_by_status(self) -> Dict[str, int]:
        """Only statuses held by at least one appointment appear."""
        rows = self.db.query(
            Appointment.status, func.count(Appointment.id)
        ).group_by(Appointment.status).order_by(Appointment.status).all()

        return {status.value: count for status, count in rows}

    def daily_counts(self, first_day: date, last_day: date) -> Dict[str, int]:
        """Appointments per calendar day in ``[first_day, last_day]``, ascending; empty days omitted."""
        rows = self.db.query(
            Appointment.date, func.count(Appointment.id)
        ).filter(
            Appointment.date >= first_day,
            Appointment.date <= last_day
        ).group_by(Appointment.date).order_by(Appointment.date).all()

        return {day.isoformat(): count for day, count in rows}
