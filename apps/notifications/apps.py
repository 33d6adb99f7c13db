from django.apps import AppConfig


class NotificationsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.notifications"

    def ready(self) -> None:
        from apps.bookings.domain.events import BookingCheckedIn, BookingConfirmed
        from shared.application.message_bus import message_bus

        from .handlers import on_booking_checked_in, on_booking_confirmed

        message_bus.register_event_handler(BookingConfirmed, on_booking_confirmed)
        message_bus.register_event_handler(BookingCheckedIn, on_booking_checked_in)
