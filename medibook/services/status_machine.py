"""
Appointment status transitions.

Every status may currently move to every other status, including back to
``scheduled``. The table is kept explicit so a stricter graph only needs a
change here.
"""
from typing import Any, Dict, FrozenSet

from ..core.exceptions import ValidationError
from ..models.appointment import AppointmentStatus
from ..schemas.appointment import StatusUpdate
from ..schemas.validation import build

INITIAL_STATUS = AppointmentStatus.SCHEDULED

TRANSITIONS: Dict[AppointmentStatus, FrozenSet[AppointmentStatus]] = {
    state: frozenset(AppointmentStatus) for state in AppointmentStatus
}


def parse_target(payload: Any) -> AppointmentStatus:
    """Read the requested status from a ``{"status": ...}`` body."""
    return build(StatusUpdate, payload).unwrap().status


def can_transition(current: AppointmentStatus, target: AppointmentStatus) -> bool:
    return target in TRANSITIONS.get(current, frozenset())


def check_transition(current: AppointmentStatus, target: AppointmentStatus) -> None:
    if not can_transition(current, target):
        raise ValidationError(
            f"Cannot change appointment status from '{current.value}' to '{target.value}'"
        )
