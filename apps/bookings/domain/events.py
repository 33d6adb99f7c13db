"""
Booking Domain Events

Published by the unit of work after the transaction commits.
"""

from dataclasses import dataclass
from datetime import date

from shared.domain.base import DomainEvent


@dataclass
class BookingConfirmed(DomainEvent):
    """
    Event: Booking moved QUEUED -> CONFIRMED

    Triggers:
    - Send booking confirmation email and SMS to the guest
    """
    booking_id: str = ''
    room_id: str = ''
    company_id: str = ''
    check_in: date | None = None
    check_out: date | None = None


@dataclass
class BookingCheckedIn(DomainEvent):
    """
    Event: Booking moved CONFIRMED -> CHECKED_IN

    Triggers:
    - Send the room ready SMS to the guest
    """
    booking_id: str = ''
    room_id: str = ''
    company_id: str = ''
