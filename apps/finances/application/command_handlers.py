"""
Payment Command Handlers

Commands:
- ProcessQueuedPaymentCommand: Record a payment against an existing booking
"""

from dataclasses import dataclass
import logging

from shared.application.uow import DjangoUnitOfWork
from shared.domain.exceptions import BookingReferenceNotFound, DomainError, ValidationError
from shared.domain.value_objects import Money
from apps.bookings.domain.lifecycle import BookingStatus
from apps.bookings.models import Booking
from apps.finances.models import Payment

logger = logging.getLogger(__name__)


# ===== Commands =====

@dataclass
class ProcessQueuedPaymentCommand:
    """Payment as received from a front desk client"""
    booking_id: str | None
    amount: object
    currency: str | None = None
    status: str = Payment.Status.PENDING
    payment_method: str = ''
    transaction_id: str = ''
    payment_id: str | None = None
    company_id: str | None = None


# ===== Command Handlers =====

class ProcessQueuedPaymentHandler:
    """
    Handler for ProcessQueuedPayment command

    The booking is only read: recording a payment never changes the
    booking's status.
    """

    def __init__(self, default_currency: str = 'USD'):
        self.default_currency = default_currency

    def handle(self, command: ProcessQueuedPaymentCommand) -> Payment:
        missing = []
        if not command.booking_id:
            missing.append('bookingId')
        if command.amount is None or command.amount == '':
            missing.append('amount')
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        money = Money.parse(command.amount, command.currency or self.default_currency)

        logger.info(f"Processing payment of {money} for booking {command.booking_id}")

        with DjangoUnitOfWork():
            booking = self._get_booking(command)

            if booking.lifecycle_status is BookingStatus.CANCELLED:
                raise DomainError(f"Cannot add a payment to cancelled booking {booking.pk}")

            if command.payment_id and Payment.objects.filter(pk=command.payment_id).exists():
                raise ValidationError(f"Payment {command.payment_id} already exists")

            payment = Payment(
                booking=booking,
                amount=money.amount,
                currency=money.currency,
                status=command.status,
                payment_method=command.payment_method,
                transaction_id=command.transaction_id,
            )
            if command.payment_id:
                payment.id = command.payment_id
            payment.save(force_insert=True)

        logger.info(f"Payment {payment.pk} recorded for booking {booking.pk}")

        return payment

    def _get_booking(self, command: ProcessQueuedPaymentCommand) -> Booking:
        queryset = Booking.objects.filter(pk=command.booking_id)
        if command.company_id:
            queryset = queryset.filter(company_id=command.company_id)
        booking = queryset.first()
        if booking is None:
            raise BookingReferenceNotFound()
        return booking
