"""Notification services for sending emails and SMS messages."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

from django.core.mail import send_mail  # type: ignore
from django.template.loader import render_to_string  # type: ignore
from django.utils.html import strip_tags  # type: ignore
from twilio.rest import Client  # type: ignore

from .conf import NotificationConfig

if TYPE_CHECKING:  # pragma: no cover
    from apps.bookings.models import Booking

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmailMessageSpec:
    to: str
    subject: str
    text: str
    html: str | None = None


@dataclass(frozen=True)
class SmsMessageSpec:
    to: str
    message: str


def _short_date(value: date) -> str:
    return f"{value:%b} {value.day}"


def _long_date(value: date) -> str:
    return f"{value:%A, %B} {value.day}, {value.year}"


# ============================================================================
# MESSAGE GENERATORS
# ============================================================================

def booking_confirmation_email(booking: "Booking", config: NotificationConfig) -> EmailMessageSpec:
    """Confirmation email for the booking's guest."""

    room = booking.room
    context = {
        "brand_name": config.brand_name,
        "booking_id": booking.pk,
        "guest_name": booking.guest.name if booking.guest else "Guest",
        "room_number": room.number,
        "category_name": room.category.name if room.category else "",
        "guests_count": booking.guests_count,
        "check_in": _long_date(booking.check_in),
        "check_out": _long_date(booking.check_out),
        "nights": booking.nights,
        "total_price": booking.total_price,
        "check_in_time": config.check_in_time,
        "check_out_time": config.check_out_time,
    }
    html_message = render_to_string("notifications/booking_confirmation.html", context)

    return EmailMessageSpec(
        to=booking.guest.email if booking.guest else "",
        subject=f"Booking Confirmation - {booking.pk}",
        text=strip_tags(html_message),
        html=html_message,
    )


def booking_confirmation_sms(booking: "Booking", config: NotificationConfig) -> SmsMessageSpec:
    message = (
        f"{config.brand_name}: Booking confirmed!\n"
        f"Room {booking.room.number}\n"
        f"{_short_date(booking.check_in)} - {_short_date(booking.check_out)}\n"
        f"{booking.guests_count} guests\n"
        f"Total: ${booking.total_price}\n"
        f"Check-in: {config.check_in_time}"
    )
    return SmsMessageSpec(to=booking.guest.phone if booking.guest else "", message=message)


def room_ready_sms(booking: "Booking", config: NotificationConfig) -> SmsMessageSpec:
    message = (
        f"{config.brand_name}: Your room is ready!\n"
        f"Room {booking.room.number} is prepared\n"
        f"Welcome to {config.brand_name}!\n"
        "Enjoy your stay!"
    )
    return SmsMessageSpec(to=booking.guest.phone if booking.guest else "", message=message)


def checkout_reminder_sms(booking: "Booking", config: NotificationConfig) -> SmsMessageSpec:
    message = (
        f"{config.brand_name}: Checkout reminder\n"
        f"Room {booking.room.number}\n"
        f"Checkout by {config.check_out_time} tomorrow\n"
        "Thank you for staying with us!"
    )
    return SmsMessageSpec(to=booking.guest.phone if booking.guest else "", message=message)


# ============================================================================
# DELIVERY
# ============================================================================

def send_email_notification(spec: EmailMessageSpec, config: NotificationConfig) -> bool:
    """
    Send an email through the configured Django mail backend.

    Returns:
        bool: True if the message was handed to the backend
    """
    if not spec.to:
        logger.warning(f"Email '{spec.subject}' skipped: no recipient address")
        return False

    try:
        send_mail(
            subject=spec.subject,
            message=spec.text,
            from_email=config.from_email,
            recipient_list=[spec.to],
            html_message=spec.html,
            fail_silently=False,
        )
        logger.info(f"Email sent successfully to {spec.to}: {spec.subject}")
        return True

    except Exception as e:
        logger.error(f"Failed to send email to {spec.to}: {e}", exc_info=True)
        return False


def send_sms_notification(spec: SmsMessageSpec, config: NotificationConfig) -> bool:
    """
    Send an SMS through Twilio.

    Without Twilio credentials the message is only logged.
    """
    if not spec.to:
        logger.warning("SMS skipped: no recipient phone number")
        return False

    if not config.sms_enabled:
        logger.info(f"[SMS] Would send to {spec.to} ({len(spec.message)} chars): {spec.message[:50]}...")
        return True

    try:
        client = Client(config.twilio_account_sid, config.twilio_auth_token)
        message = client.messages.create(
            body=spec.message,
            from_=config.twilio_from_number,
            to=spec.to,
        )
        logger.info(f"SMS sent successfully to {spec.to} (sid {message.sid})")
        return True

    except Exception as e:
        logger.error(f"Failed to send SMS to {spec.to}: {e}", exc_info=True)
        return False
