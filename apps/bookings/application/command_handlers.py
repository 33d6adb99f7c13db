"""
Booking Command Handlers

These are the use cases for the booking domain.
They orchestrate domain operations within transactions.

Commands:
- QueueBookingCommand: Accept a booking request after a conflict check
- ConfirmBookingCommand: Promote a queued booking to confirmed
- UpdateBookingCommand: Apply front desk edits (dates, room, status)
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
import logging

from shared.application.uow import DjangoUnitOfWork
from shared.domain.exceptions import DomainError, NotFoundError, ValidationError
from shared.domain.value_objects import DateRange
from apps.bookings.domain.events import BookingCheckedIn, BookingConfirmed
from apps.bookings.domain.lifecycle import (
    BookingStatus,
    ConfirmationOutcome,
    blocks_dates,
    confirmation_outcome,
    ensure_transition,
)
from apps.bookings.models import Booking
from apps.bookings.services import ensure_room_is_available, lock_room, overlapping_bookings
from apps.guests.models import Guest

logger = logging.getLogger(__name__)


# ===== Commands =====

@dataclass
class QueueBookingCommand:
    """
    Command to accept a booking request

    Dates may be missing here; the handler reports every missing
    required field in one ValidationError.
    """
    room_id: str | None
    check_in: date | None
    check_out: date | None
    company_id: str | None = None
    guest_id: str | None = None
    booking_id: str | None = None
    total_price: Decimal | None = None
    status: str | None = None
    guests_count: int = 1
    source: str = Booking.Source.DIRECT
    special_requests: str = ''
    internal_notes: str = ''


@dataclass
class ConfirmBookingCommand:
    """Command to confirm a queued booking"""
    booking_id: str
    company_id: str | None = None


@dataclass
class UpdateBookingCommand:
    """Command to change an existing booking; ``changes`` uses model field names"""
    booking_id: str
    changes: dict = field(default_factory=dict)
    company_id: str | None = None


@dataclass
class BookingConfirmation:
    """Result of ConfirmBookingHandler"""
    booking: Booking
    already_confirmed: bool = False

    @property
    def message(self) -> str:
        return "Booking already confirmed" if self.already_confirmed else "Booking confirmed"


# ===== Command Handlers =====

class QueueBookingHandler:
    """
    Handler for QueueBooking command

    Strategy:
    1. Validate required fields and the date range (no database access)
    2. Start database transaction (atomic)
    3. Lock the room row with SELECT FOR UPDATE
    4. Check overlap against blocking bookings of that room
    5. Insert the booking
    6. Commit transaction
    """

    REQUIRED_FIELDS = (
        ('room_id', 'roomId'),
        ('check_in', 'checkIn'),
        ('check_out', 'checkOut'),
    )

    def handle(self, command: QueueBookingCommand) -> Booking:
        missing = [wire for attr, wire in self.REQUIRED_FIELDS if not getattr(command, attr)]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        dates = DateRange(command.check_in, command.check_out)
        status = BookingStatus.parse(command.status) if command.status else BookingStatus.QUEUED

        logger.info(
            f"Queueing booking for room {command.room_id}, dates {dates}, status {status.value}"
        )

        with DjangoUnitOfWork():
            room = lock_room(command.room_id, company_id=command.company_id)

            if command.booking_id and Booking.objects.filter(pk=command.booking_id).exists():
                raise ValidationError(f"Booking {command.booking_id} already exists")

            guest = self._get_guest(command.guest_id, room.company_id)

            if blocks_dates(status):
                ensure_room_is_available(room, dates)

            total_price = command.total_price
            if total_price is None:
                total_price = self._default_price(room, dates)

            booking = Booking(
                company_id=room.company_id,
                room=room,
                guest=guest,
                check_in=dates.start_date,
                check_out=dates.end_date,
                total_price=total_price,
                status=status.value,
                guests_count=command.guests_count,
                source=command.source,
                special_requests=command.special_requests,
                internal_notes=command.internal_notes,
            )
            if command.booking_id:
                booking.id = command.booking_id
            booking.save(force_insert=True)

        logger.info(f"Booking {booking.pk} queued for room {room.number} ({dates})")

        return booking

    def _get_guest(self, guest_id: str | None, company_id: str) -> Guest | None:
        if not guest_id:
            return None
        guest = Guest.objects.filter(pk=guest_id, company_id=company_id).first()
        if guest is None:
            raise NotFoundError(f"Guest {guest_id} not found")
        return guest

    def _default_price(self, room, dates: DateRange) -> Decimal:
        """Nightly rate of the room's category times the number of nights"""
        if room.category is None:
            return Decimal('0.00')
        return room.category.base_price * len(dates)


class ConfirmBookingHandler:
    """
    Handler for confirming a queued booking

    Confirmation re-runs the conflict check under the room lock, so a
    booking that slipped in after intake cannot be confirmed on top of
    another reservation.
    """

    def handle(self, command: ConfirmBookingCommand) -> BookingConfirmation:
        logger.info(f"Confirming booking {command.booking_id}")

        with DjangoUnitOfWork() as uow:
            booking = self._get_booking(command)

            # Lock the room, then re-read the booking so the status is current
            lock_room(booking.room_id)
            booking.refresh_from_db()

            outcome = confirmation_outcome(booking.lifecycle_status)

            if outcome is ConfirmationOutcome.ALREADY_CONFIRMED:
                logger.info(f"Booking {booking.pk} already confirmed")
                return BookingConfirmation(booking=booking, already_confirmed=True)

            if outcome is ConfirmationOutcome.REJECT:
                raise DomainError(
                    f"Cannot confirm booking with status: {booking.status}"
                )

            if overlapping_bookings(
                booking.room_id,
                booking.dates,
                exclude_booking_id=booking.pk,
            ).exists():
                logger.warning(f"Double booking detected while confirming {booking.pk}")
                raise DomainError("Double booking detected. Cannot confirm.")

            booking.status = BookingStatus.CONFIRMED.value
            booking.save(update_fields=['status', 'updated_at'])

            uow.add_event(BookingConfirmed(
                aggregate_id=booking.pk,
                booking_id=booking.pk,
                room_id=booking.room_id,
                company_id=booking.company_id,
                check_in=booking.check_in,
                check_out=booking.check_out,
            ))

        logger.info(f"Booking {booking.pk} confirmed successfully")

        return BookingConfirmation(booking=booking)

    def _get_booking(self, command: ConfirmBookingCommand) -> Booking:
        queryset = Booking.objects.filter(pk=command.booking_id)
        if command.company_id:
            queryset = queryset.filter(company_id=command.company_id)
        booking = queryset.first()
        if booking is None:
            raise NotFoundError(f"Booking {command.booking_id} not found")
        return booking


class UpdateBookingHandler:
    """
    Handler for front desk edits to a booking

    Status changes follow the lifecycle table; any change that leaves
    the booking blocking is re-checked against the other bookings of
    the (possibly new) room.
    """

    UPDATABLE_FIELDS = (
        'room_id',
        'guest_id',
        'check_in',
        'check_out',
        'total_price',
        'status',
        'guests_count',
        'source',
        'special_requests',
        'internal_notes',
    )

    def handle(self, command: UpdateBookingCommand) -> Booking:
        unknown = set(command.changes) - set(self.UPDATABLE_FIELDS)
        if unknown:
            raise ValidationError(f"Cannot update fields: {', '.join(sorted(unknown))}")

        with DjangoUnitOfWork() as uow:
            booking = self._get_booking(command)

            room_ids = sorted({booking.room_id, command.changes.get('room_id') or booking.room_id})
            rooms = {
                room_id: lock_room(room_id, company_id=booking.company_id)
                for room_id in room_ids
            }

            # The status and room read before the lock may be stale
            booking.refresh_from_db()
            previous_status = booking.lifecycle_status
            if booking.room_id not in rooms:
                rooms[booking.room_id] = lock_room(booking.room_id, company_id=booking.company_id)

            for name, value in command.changes.items():
                setattr(booking, name, value)

            status = BookingStatus.parse(booking.status)
            ensure_transition(previous_status, status)
            booking.status = status.value

            if booking.guest_id and not Guest.objects.filter(
                pk=booking.guest_id, company_id=booking.company_id
            ).exists():
                raise NotFoundError(f"Guest {booking.guest_id} not found")

            dates = DateRange(booking.check_in, booking.check_out)
            if blocks_dates(status):
                ensure_room_is_available(
                    rooms[booking.room_id],
                    dates,
                    exclude_booking_id=booking.pk,
                )

            booking.save()

            if status is BookingStatus.CONFIRMED and previous_status is not BookingStatus.CONFIRMED:
                uow.add_event(BookingConfirmed(
                    aggregate_id=booking.pk,
                    booking_id=booking.pk,
                    room_id=booking.room_id,
                    company_id=booking.company_id,
                    check_in=booking.check_in,
                    check_out=booking.check_out,
                ))

            if status is BookingStatus.CHECKED_IN and previous_status is not BookingStatus.CHECKED_IN:
                uow.add_event(BookingCheckedIn(
                    aggregate_id=booking.pk,
                    booking_id=booking.pk,
                    room_id=booking.room_id,
                    company_id=booking.company_id,
                ))

        logger.info(
            f"Booking {booking.pk} updated ({previous_status.value} -> {booking.status})"
        )

        return booking

    def _get_booking(self, command: UpdateBookingCommand) -> Booking:
        queryset = Booking.objects.filter(pk=command.booking_id)
        if command.company_id:
            queryset = queryset.filter(company_id=command.company_id)
        booking = queryset.first()
        if booking is None:
            raise NotFoundError(f"Booking {command.booking_id} not found")
        return booking
