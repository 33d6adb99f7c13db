"""Domain services for booking workflows: room locking and conflict detection."""

from __future__ import annotations

from datetime import date

from django.db import transaction  # type: ignore
from django.db.models import Q, QuerySet  # type: ignore

from apps.rooms.models import Room
from shared.domain.exceptions import ConflictError, NotFoundError
from shared.domain.value_objects import DateRange

from .domain.lifecycle import BLOCKING_STATUSES
from .models import Booking

BLOCKING_STATUS_VALUES = tuple(status.value for status in BLOCKING_STATUSES)


def _lock_queryset_if_possible(queryset: QuerySet) -> QuerySet:
    """Apply select_for_update when inside transaction.atomic().

    Backends without row locks (SQLite) ignore the clause and rely on
    their database-wide write lock.
    """

    if not transaction.get_connection().in_atomic_block:
        return queryset
    return queryset.select_for_update()


def lock_room(room_id: str, *, company_id: str | None = None) -> Room:
    """Load a room and hold its row lock until the transaction ends.

    Every write that can create an overlap takes this lock first, so
    concurrent requests for the same room are serialized.
    """

    queryset = Room.objects.filter(pk=room_id)
    if company_id:
        queryset = queryset.filter(company_id=company_id)

    room = _lock_queryset_if_possible(queryset).first()
    if room is None:
        raise NotFoundError(f"Room {room_id} not found")
    return room


def overlapping_bookings(
    room_id: str,
    dates: DateRange,
    *,
    exclude_booking_id: str | None = None,
) -> QuerySet:
    """Blocking bookings on the room whose stay intersects ``dates``."""

    overlapping_filter = Q(check_in__lt=dates.end_date) & Q(check_out__gt=dates.start_date)

    bookings_qs = Booking.objects.filter(
        room_id=room_id,
        status__in=BLOCKING_STATUS_VALUES,
    ).filter(overlapping_filter)

    if exclude_booking_id is not None:
        bookings_qs = bookings_qs.exclude(pk=exclude_booking_id)

    return bookings_qs


def has_conflict(
    room_id: str,
    check_in: date,
    check_out: date,
    *,
    exclude_booking_id: str | None = None,
) -> bool:
    """Return True if another blocking booking overlaps [check_in, check_out).

    Raises InvalidRange when check_in >= check_out and NotFoundError when
    the room does not exist. A missing room is never reported as a conflict.

    This is an advisory read taken without the room lock; the answer can be
    stale by the time it is acted on. Writes go through ``lock_room`` and
    ``ensure_room_is_available`` inside a transaction instead.
    """

    dates = DateRange(check_in, check_out)

    if not Room.objects.filter(pk=room_id).exists():
        raise NotFoundError(f"Room {room_id} not found")

    return overlapping_bookings(
        room_id,
        dates,
        exclude_booking_id=exclude_booking_id,
    ).exists()


def ensure_room_is_available(
    room: Room,
    dates: DateRange,
    *,
    exclude_booking_id: str | None = None,
) -> None:
    """Raise ConflictError if the room is reserved for any of ``dates``.

    Callers must hold the room lock (see lock_room) for the check to
    stay valid until their write commits.
    """

    conflicting_ids = list(
        overlapping_bookings(
            room.pk,
            dates,
            exclude_booking_id=exclude_booking_id,
        ).values_list("pk", flat=True)
    )

    if conflicting_ids:
        raise ConflictError(
            f"Room {room.number} is already booked between {dates.start_date.isoformat()} "
            f"and {dates.end_date.isoformat()}",
            conflicting_ids=conflicting_ids,
        )
