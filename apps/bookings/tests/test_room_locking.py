from datetime import date
from unittest import mock

import pytest
from django.db import connection

from apps.bookings.application import command_handlers
from apps.bookings.application.command_handlers import (
    ConfirmBookingCommand,
    ConfirmBookingHandler,
    QueueBookingCommand,
    QueueBookingHandler,
    UpdateBookingCommand,
    UpdateBookingHandler,
)
from apps.bookings.domain.lifecycle import BookingStatus
from apps.bookings.models import Booking
from apps.rooms.models import Company, Room

# transaction=True keeps tests out of an outer atomic block, so
# in_atomic_block is only true inside the handlers' unit of work.
pytestmark = pytest.mark.django_db(transaction=True)


@pytest.fixture
def room():
    company = Company.objects.create(id="hotel-1", name="Seaside Hotel")
    return Room.objects.create(id="1", company=company, number="101")


@pytest.fixture
def calls():
    """Record the order of lock and overlap calls made by the handlers."""

    recorded = []

    def recorder(name, target):
        def wrapper(*args, **kwargs):
            recorded.append((name, connection.in_atomic_block))
            return target(*args, **kwargs)
        return wrapper

    with mock.patch.object(
        command_handlers, "lock_room",
        side_effect=recorder("lock", command_handlers.lock_room),
    ), mock.patch.object(
        command_handlers, "ensure_room_is_available",
        side_effect=recorder("overlap", command_handlers.ensure_room_is_available),
    ), mock.patch.object(
        command_handlers, "overlapping_bookings",
        side_effect=recorder("overlap", command_handlers.overlapping_bookings),
    ):
        yield recorded


def test_intake_locks_room_before_overlap_check(room, calls):
    QueueBookingHandler().handle(QueueBookingCommand(
        room_id=room.pk,
        check_in=date(2025, 12, 1),
        check_out=date(2025, 12, 5),
    ))

    assert calls == [("lock", True), ("overlap", True)]


def test_confirm_locks_room_before_overlap_check(room, calls):
    booking = Booking.objects.create(
        company_id=room.company_id,
        room=room,
        check_in=date(2025, 12, 1),
        check_out=date(2025, 12, 5),
        status=BookingStatus.QUEUED.value,
    )

    ConfirmBookingHandler().handle(ConfirmBookingCommand(booking_id=booking.pk))

    assert calls == [("lock", True), ("overlap", True)]


def test_update_locks_every_room_before_overlap_check(room, calls):
    other = Room.objects.create(id="2", company=room.company, number="102")
    booking = Booking.objects.create(
        company_id=room.company_id,
        room=room,
        check_in=date(2025, 12, 1),
        check_out=date(2025, 12, 5),
        status=BookingStatus.CONFIRMED.value,
    )

    UpdateBookingHandler().handle(UpdateBookingCommand(
        booking_id=booking.pk,
        changes={"room_id": other.pk},
    ))

    assert calls == [("lock", True), ("lock", True), ("overlap", True)]
    assert Booking.objects.get(pk=booking.pk).room_id == other.pk
