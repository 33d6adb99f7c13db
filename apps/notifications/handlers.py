"""Domain event handlers that queue guest notifications."""

from __future__ import annotations

import logging

from apps.bookings.domain.events import BookingCheckedIn, BookingConfirmed

from .conf import NotificationConfig
from .tasks import send_booking_confirmation, send_room_ready

logger = logging.getLogger(__name__)


def on_booking_confirmed(event: BookingConfirmed) -> None:
    config = NotificationConfig.from_settings()
    if not config.send_confirmations:
        logger.debug(f"Confirmation notifications disabled, skipping booking {event.booking_id}")
        return
    send_booking_confirmation.delay(event.booking_id)
    logger.info(f"Queued confirmation notification for booking {event.booking_id}")


def on_booking_checked_in(event: BookingCheckedIn) -> None:
    send_room_ready.delay(event.booking_id)
    logger.info(f"Queued room ready notification for booking {event.booking_id}")
