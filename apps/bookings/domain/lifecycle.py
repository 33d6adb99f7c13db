"""
Booking Status Lifecycle

State transitions:
- QUEUED -> CONFIRMED (front desk or sync confirmation)
- CONFIRMED -> CHECKED_IN (guest arrived)
- CHECKED_IN -> CHECKED_OUT (guest left)
- any non-terminal -> CANCELLED

Terminal states: CHECKED_OUT, CANCELLED.
"""

from enum import Enum

from shared.domain.exceptions import DomainError, ValidationError


class BookingStatus(str, Enum):
    QUEUED = 'queued'              # Accepted, not yet confirmed
    CONFIRMED = 'confirmed'        # Reservation confirmed
    CHECKED_IN = 'checked-in'      # Guest is in the room
    CHECKED_OUT = 'checked-out'    # Stay finished
    CANCELLED = 'cancelled'        # Cancelled by guest or staff

    @property
    def label(self) -> str:
        return self.value.replace('-', ' ').capitalize()

    @classmethod
    def parse(cls, value) -> 'BookingStatus':
        try:
            return cls(value)
        except ValueError:
            allowed = ', '.join(status.value for status in cls)
            raise ValidationError(f"Unknown booking status '{value}'. Expected one of: {allowed}")


class ConfirmationOutcome(Enum):
    CONFIRM = 'confirm'
    ALREADY_CONFIRMED = 'already_confirmed'
    REJECT = 'reject'


TERMINAL_STATUSES = frozenset({BookingStatus.CHECKED_OUT, BookingStatus.CANCELLED})

# Statuses that reserve the room for their date range
BLOCKING_STATUSES = frozenset({
    BookingStatus.QUEUED,
    BookingStatus.CONFIRMED,
    BookingStatus.CHECKED_IN,
})

ALLOWED_TRANSITIONS = {
    BookingStatus.QUEUED: frozenset({BookingStatus.CONFIRMED, BookingStatus.CANCELLED}),
    BookingStatus.CONFIRMED: frozenset({BookingStatus.CHECKED_IN, BookingStatus.CANCELLED}),
    BookingStatus.CHECKED_IN: frozenset({BookingStatus.CHECKED_OUT, BookingStatus.CANCELLED}),
    BookingStatus.CHECKED_OUT: frozenset(),
    BookingStatus.CANCELLED: frozenset(),
}

CONFIRMATION_OUTCOMES = {
    BookingStatus.QUEUED: ConfirmationOutcome.CONFIRM,
    BookingStatus.CONFIRMED: ConfirmationOutcome.ALREADY_CONFIRMED,
    BookingStatus.CHECKED_IN: ConfirmationOutcome.REJECT,
    BookingStatus.CHECKED_OUT: ConfirmationOutcome.REJECT,
    BookingStatus.CANCELLED: ConfirmationOutcome.REJECT,
}


def blocks_dates(status: BookingStatus) -> bool:
    return BookingStatus(status) in BLOCKING_STATUSES


def can_transition(current: BookingStatus, target: BookingStatus) -> bool:
    return BookingStatus(target) in ALLOWED_TRANSITIONS[BookingStatus(current)]


def ensure_transition(current: BookingStatus, target: BookingStatus) -> None:
    """Raise DomainError unless current -> target is a legal edge."""
    current, target = BookingStatus(current), BookingStatus(target)
    if current == target:
        return
    if not can_transition(current, target):
        raise DomainError(
            f"Cannot change booking status from {current.value} to {target.value}"
        )


def confirmation_outcome(status: BookingStatus) -> ConfirmationOutcome:
    return CONFIRMATION_OUTCOMES[BookingStatus(status)]
