"""
Date-scoped appointment retrieval.

``today``, ``upcoming`` and ``past`` filter the full appointment list against
the wall clock at the moment the query runs. An appointment's date is compared
as local midnight of its calendar day, so with strict comparisons an
appointment dated exactly "now" is neither upcoming nor past, and one dated
today counts as past for the rest of the day.
"""
from datetime import date, datetime, time, timedelta
from typing import Callable, Dict, List, Optional, Union
import enum

from sqlalchemy.orm import Session

from ..core.exceptions import ValidationError
from ..models.appointment import Appointment
from .appointment_service import AppointmentService


class AppointmentView(str, enum.Enum):
    ALL = "all"
    TODAY = "today"
    UPCOMING = "upcoming"
    PAST = "past"


def appointment_moment(appointment: Appointment) -> datetime:
    return datetime.combine(appointment.date, time.min)


def is_today(appointment: Appointment, now: datetime) -> bool:
    return appointment.date == now.date()


def is_upcoming(appointment: Appointment, now: datetime) -> bool:
    return appointment_moment(appointment) > now


def is_past(appointment: Appointment, now: datetime) -> bool:
    return appointment_moment(appointment) < now


VIEW_FILTERS: Dict[AppointmentView, Callable[[Appointment, datetime], bool]] = {
    AppointmentView.TODAY: is_today,
    AppointmentView.UPCOMING: is_upcoming,
    AppointmentView.PAST: is_past,
}


def parse_calendar_day(value: Union[str, date], name: str = "date") -> date:
    """
    Accept ``YYYY-MM-DD`` or a full ISO timestamp and keep the calendar day.

    Browsers send ``Date.toISOString()`` values such as
    ``2024-06-09T22:00:00.000Z`` for local midnight of the 10th, so
    timestamps carrying an offset are moved to local time first. Naive
    timestamps are already local.
    """
    if isinstance(value, datetime):
        return local_day(value)
    if isinstance(value, date):
        return value

    text = (value or "").strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        if "T" in text or " " in text:
            return local_day(datetime.fromisoformat(text))
        return date.fromisoformat(text)
    except ValueError:
        raise ValidationError(f"{name}: '{value}' is not a valid ISO date")


def local_day(moment: datetime) -> date:
    if moment.tzinfo is not None:
        moment = moment.astimezone()
    return moment.date()


class AppointmentQueryService:
    def __init__(self, db: Session):
        self.db = db
        self.store = AppointmentService(db)

    def list_appointments(
        self,
        view: AppointmentView = AppointmentView.ALL,
        now: Optional[datetime] = None,
    ) -> List[Appointment]:
        """Appointments in listing order, narrowed to ``view`` relative to ``now``."""
        appointments = self.store.list()
        if view == AppointmentView.ALL:
            return appointments

        now = now or datetime.now()
        keep = VIEW_FILTERS[view]
        return [appointment for appointment in appointments if keep(appointment, now)]

    def in_range(
        self,
        start_date: Union[str, date],
        end_date: Optional[Union[str, date]] = None,
    ) -> List[Appointment]:
        """Appointments dated in ``[start_date, end_date)``; one day when no end is given."""
        start = parse_calendar_day(start_date, "startDate")
        end = parse_calendar_day(end_date, "endDate") if end_date else start + timedelta(days=1)

        if end <= start:
            raise ValidationError("endDate must be later than startDate")

        return self.db.query(Appointment).filter(
            Appointment.date >= start,
            Appointment.date < end
        ).order_by(*self.store.ordering()).all()
