"""Celery tasks for guest notifications."""

from __future__ import annotations

import logging

from celery import shared_task  # type: ignore

from .conf import NotificationConfig
from .services import (
    booking_confirmation_email,
    booking_confirmation_sms,
    room_ready_sms,
    send_email_notification,
    send_sms_notification,
)

logger = logging.getLogger(__name__)


def _load_booking(booking_id: str):
    from apps.bookings.models import Booking

    return (
        Booking.objects.select_related("guest", "room", "room__category")
        .filter(pk=booking_id)
        .first()
    )


@shared_task(name="notifications.send_booking_confirmation")
def send_booking_confirmation(booking_id: str) -> dict[str, bool]:
    """Email and SMS the guest that their booking is confirmed."""

    booking = _load_booking(booking_id)
    if booking is None:
        logger.warning(f"Booking {booking_id} not found, confirmation not sent")
        return {"email": False, "sms": False}
    if booking.guest is None:
        logger.info(f"Booking {booking_id} has no guest, confirmation not sent")
        return {"email": False, "sms": False}

    config = NotificationConfig.from_settings()
    result = {
        "email": send_email_notification(booking_confirmation_email(booking, config), config),
        "sms": send_sms_notification(booking_confirmation_sms(booking, config), config),
    }
    logger.info(f"Booking confirmation for {booking_id} delivered: {result}")
    return result


@shared_task(name="notifications.send_room_ready")
def send_room_ready(booking_id: str) -> bool:
    """Tell a checked-in guest their room has been prepared."""

    booking = _load_booking(booking_id)
    if booking is None or booking.guest is None:
        return False

    config = NotificationConfig.from_settings()
    return send_sms_notification(room_ready_sms(booking, config), config)
