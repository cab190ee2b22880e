"""
Appointment status lifecycle.

PENDING -> CONFIRMED (doctor), COMPLETED (doctor), CANCELLED (anyone)
CONFIRMED -> COMPLETED (doctor), CANCELLED (anyone)
COMPLETED and CANCELLED are terminal.
"""
from appointments.models import AppointmentStatus

TERMINAL_STATUSES = frozenset({AppointmentStatus.COMPLETED, AppointmentStatus.CANCELLED})

ALLOWED_TRANSITIONS = {
    AppointmentStatus.PENDING: frozenset({
        AppointmentStatus.CONFIRMED, AppointmentStatus.COMPLETED, AppointmentStatus.CANCELLED,
    }),
    AppointmentStatus.CONFIRMED: frozenset({AppointmentStatus.COMPLETED, AppointmentStatus.CANCELLED}),
    AppointmentStatus.COMPLETED: frozenset(),
    AppointmentStatus.CANCELLED: frozenset(),
}


class TransitionError(Exception):
    status_code = 400


class TransitionForbidden(TransitionError):
    """The actor's role may not request this target status."""
    status_code = 403


class InvalidTransition(TransitionError):
    """The lifecycle graph has no edge from the current status to the target."""
    status_code = 409


def check_transition(current: str, target: str, is_doctor: bool) -> None:
    if not is_doctor and target != AppointmentStatus.CANCELLED:
        raise TransitionForbidden("Patients can only cancel appointments")

    if current in TERMINAL_STATUSES:
        raise InvalidTransition(f"Appointment is already {current.lower()}")

    if target not in ALLOWED_TRANSITIONS.get(current, frozenset()):
        raise InvalidTransition(f"Cannot change status from {current} to {target}")


def can_transition(current: str, target: str, is_doctor: bool) -> bool:
    try:
        check_transition(current, target, is_doctor)
    except TransitionError:
        return False
    return True
