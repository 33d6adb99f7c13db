from datetime import date

import pytest

from apps.bookings.domain.lifecycle import (
    BLOCKING_STATUSES,
    BookingStatus,
    ConfirmationOutcome,
    can_transition,
    confirmation_outcome,
    ensure_transition,
)
from shared.domain.exceptions import DomainError, InvalidRange, ValidationError
from shared.domain.value_objects import DateRange


def test_confirmation_outcome_covers_every_status():
    assert {status: confirmation_outcome(status) for status in BookingStatus} == {
        BookingStatus.QUEUED: ConfirmationOutcome.CONFIRM,
        BookingStatus.CONFIRMED: ConfirmationOutcome.ALREADY_CONFIRMED,
        BookingStatus.CHECKED_IN: ConfirmationOutcome.REJECT,
        BookingStatus.CHECKED_OUT: ConfirmationOutcome.REJECT,
        BookingStatus.CANCELLED: ConfirmationOutcome.REJECT,
    }


def test_blocking_statuses():
    assert BLOCKING_STATUSES == {
        BookingStatus.QUEUED,
        BookingStatus.CONFIRMED,
        BookingStatus.CHECKED_IN,
    }


@pytest.mark.parametrize(
    "current, target",
    [
        ("queued", "confirmed"),
        ("confirmed", "checked-in"),
        ("checked-in", "checked-out"),
        ("queued", "cancelled"),
        ("confirmed", "cancelled"),
        ("checked-in", "cancelled"),
    ],
)
def test_allowed_transitions(current, target):
    assert can_transition(current, target)
    ensure_transition(current, target)


@pytest.mark.parametrize(
    "current, target",
    [
        ("queued", "checked-in"),
        ("queued", "checked-out"),
        ("confirmed", "queued"),
        ("checked-out", "confirmed"),
        ("cancelled", "queued"),
        ("cancelled", "confirmed"),
    ],
)
def test_illegal_transitions_raise(current, target):
    assert not can_transition(current, target)
    with pytest.raises(DomainError):
        ensure_transition(current, target)


def test_staying_in_the_same_status_is_allowed():
    ensure_transition(BookingStatus.CANCELLED, BookingStatus.CANCELLED)


def test_unknown_status_is_a_validation_error():
    with pytest.raises(ValidationError):
        BookingStatus.parse("pending")


def test_date_range_nights_and_overlap():
    stay = DateRange(date(2025, 12, 1), date(2025, 12, 5))

    assert len(stay) == 4
    assert stay.contains(date(2025, 12, 4))
    assert not stay.contains(date(2025, 12, 5))
    assert stay.overlaps_with(DateRange(date(2025, 12, 4), date(2025, 12, 8)))
    assert not stay.overlaps_with(DateRange(date(2025, 12, 5), date(2025, 12, 8)))


def test_date_range_requires_check_out_after_check_in():
    with pytest.raises(InvalidRange):
        DateRange(date(2025, 12, 5), date(2025, 12, 5))
