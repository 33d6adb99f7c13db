"""Celery tasks for the booking domain."""

from __future__ import annotations

import logging
from datetime import timedelta

from celery import shared_task  # type: ignore
from django.utils import timezone  # type: ignore

from apps.notifications.conf import NotificationConfig
from apps.notifications.services import checkout_reminder_sms, send_sms_notification

from .domain.lifecycle import BookingStatus
from .models import Booking

logger = logging.getLogger(__name__)


# ============================================================================
# PERIODIC TASKS (run by Celery Beat)
# ============================================================================

@shared_task(name="bookings.send_checkout_reminders")
def send_checkout_reminders() -> dict[str, int]:
    """
    Remind checked-in guests who leave tomorrow about checkout time.

    Runs daily through Celery Beat.

    Returns:
        dict: {"sent": reminders delivered, "failed": delivery failures}
    """
    tomorrow = timezone.localdate() + timedelta(days=1)
    config = NotificationConfig.from_settings()
    sent_count = 0
    failed_count = 0

    bookings = Booking.objects.filter(
        status=BookingStatus.CHECKED_IN.value,
        check_out=tomorrow,
        guest__isnull=False,
    ).select_related("guest", "room")

    for booking in bookings:
        if send_sms_notification(checkout_reminder_sms(booking, config), config):
            sent_count += 1
        else:
            failed_count += 1

    if sent_count or failed_count:
        logger.info(f"Checkout reminders for {tomorrow}: {sent_count} sent, {failed_count} failed")

    return {"sent": sent_count, "failed": failed_count}
