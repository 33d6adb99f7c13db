"""Notification settings, read once from Django settings and passed around."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NotificationConfig:
    brand_name: str = "StayOS"
    check_in_time: str = "3PM"
    check_out_time: str = "11AM"
    send_confirmations: bool = True
    from_email: str = "noreply@stayos.local"
    twilio_account_sid: str = ""
    twilio_auth_token: str = ""
    twilio_from_number: str = ""

    @property
    def sms_enabled(self) -> bool:
        return bool(self.twilio_account_sid and self.twilio_auth_token and self.twilio_from_number)

    @classmethod
    def from_settings(cls, settings=None) -> "NotificationConfig":
        if settings is None:
            from django.conf import settings  # type: ignore

        return cls(
            brand_name=getattr(settings, "HOTEL_BRAND_NAME", cls.brand_name),
            check_in_time=getattr(settings, "HOTEL_CHECK_IN_TIME", cls.check_in_time),
            check_out_time=getattr(settings, "HOTEL_CHECK_OUT_TIME", cls.check_out_time),
            send_confirmations=getattr(
                settings,
                "HOTEL_SEND_CONFIRMATION_NOTIFICATIONS",
                cls.send_confirmations,
            ),
            from_email=getattr(settings, "DEFAULT_FROM_EMAIL", cls.from_email),
            twilio_account_sid=getattr(settings, "TWILIO_ACCOUNT_SID", "") or "",
            twilio_auth_token=getattr(settings, "TWILIO_AUTH_TOKEN", "") or "",
            twilio_from_number=getattr(settings, "TWILIO_FROM_NUMBER", "") or "",
        )
