from datetime import date

import pytest

from apps.bookings.domain.lifecycle import BookingStatus
from apps.bookings.models import Booking
from apps.bookings.services import ensure_room_is_available, has_conflict, lock_room
from apps.rooms.models import Company, Room
from shared.domain.exceptions import ConflictError, InvalidRange, NotFoundError
from shared.domain.value_objects import DateRange


@pytest.fixture
def room():
    company = Company.objects.create(id="hotel-1", name="Seaside Hotel")
    return Room.objects.create(id="1", company=company, number="101")


def _book(room, check_in, check_out, booking_status=BookingStatus.CONFIRMED):
    return Booking.objects.create(
        company_id=room.company_id,
        room=room,
        check_in=check_in,
        check_out=check_out,
        status=booking_status.value,
    )


@pytest.mark.django_db
@pytest.mark.parametrize(
    "check_in, check_out, expected",
    [
        (date(2025, 12, 2), date(2025, 12, 6), True),   # overlaps the tail
        (date(2025, 11, 28), date(2025, 12, 2), True),  # overlaps the head
        (date(2025, 12, 2), date(2025, 12, 3), True),   # inside
        (date(2025, 11, 30), date(2025, 12, 6), True),  # encloses
        (date(2025, 12, 1), date(2025, 12, 5), True),   # identical
        (date(2025, 12, 5), date(2025, 12, 8), False),  # starts on check-out day
        (date(2025, 11, 28), date(2025, 12, 1), False),  # ends on check-in day
        (date(2025, 12, 10), date(2025, 12, 12), False),
    ],
)
def test_half_open_overlap(room, check_in, check_out, expected):
    _book(room, date(2025, 12, 1), date(2025, 12, 5))

    assert has_conflict(room.pk, check_in, check_out) is expected


@pytest.mark.django_db
@pytest.mark.parametrize(
    "booking_status, blocks",
    [
        (BookingStatus.QUEUED, True),
        (BookingStatus.CONFIRMED, True),
        (BookingStatus.CHECKED_IN, True),
        (BookingStatus.CHECKED_OUT, False),
        (BookingStatus.CANCELLED, False),
    ],
)
def test_only_blocking_statuses_conflict(room, booking_status, blocks):
    _book(room, date(2025, 12, 1), date(2025, 12, 5), booking_status)

    assert has_conflict(room.pk, date(2025, 12, 2), date(2025, 12, 3)) is blocks


@pytest.mark.django_db
def test_booking_never_conflicts_with_itself(room):
    booking = _book(room, date(2025, 12, 1), date(2025, 12, 5))

    assert has_conflict(room.pk, booking.check_in, booking.check_out, exclude_booking_id=booking.pk) is False


@pytest.mark.django_db
def test_other_rooms_are_ignored(room):
    other = Room.objects.create(id="2", company=room.company, number="102")
    _book(other, date(2025, 12, 1), date(2025, 12, 5))

    assert has_conflict(room.pk, date(2025, 12, 1), date(2025, 12, 5)) is False


@pytest.mark.django_db
def test_invalid_range_is_rejected_before_lookup(room):
    with pytest.raises(InvalidRange):
        has_conflict(room.pk, date(2025, 12, 5), date(2025, 12, 5))

    with pytest.raises(InvalidRange):
        has_conflict("missing", date(2025, 12, 5), date(2025, 12, 1))


@pytest.mark.django_db
def test_unknown_room_is_not_found():
    with pytest.raises(NotFoundError):
        has_conflict("missing", date(2025, 12, 1), date(2025, 12, 5))


@pytest.mark.django_db
def test_ensure_room_is_available_lists_conflicting_bookings(room):
    first = _book(room, date(2025, 12, 1), date(2025, 12, 5))
    second = _book(room, date(2025, 12, 5), date(2025, 12, 9), BookingStatus.QUEUED)

    with pytest.raises(ConflictError) as excinfo:
        ensure_room_is_available(room, DateRange(date(2025, 12, 4), date(2025, 12, 6)))

    assert sorted(excinfo.value.conflicting_ids) == sorted([first.pk, second.pk])
    assert excinfo.value.to_payload()["conflict"] is True


@pytest.mark.django_db
def test_lock_room_checks_company(room):
    assert lock_room(room.pk) == room
    assert lock_room(room.pk, company_id="hotel-1") == room

    with pytest.raises(NotFoundError):
        lock_room(room.pk, company_id="hotel-2")
