"""Booking model for the hotel back office."""

from __future__ import annotations

from decimal import Decimal

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.domain.value_objects import DateRange
from shared.infrastructure.fields import IdentifierField

from .domain.lifecycle import BookingStatus, blocks_dates


class Booking(models.Model):
    """A guest's stay in one room over [check_in, check_out)."""

    Status = BookingStatus

    class Source(models.TextChoices):
        DIRECT = "Direct", _("Direct")
        BOOKING_COM = "Booking.com", _("Booking.com")
        EXPEDIA = "Expedia", _("Expedia")
        AIRBNB = "Airbnb", _("Airbnb")
        CORPORATE = "Corporate", _("Corporate")

    id = IdentifierField()
    company = models.ForeignKey(
        "rooms.Company",
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    room = models.ForeignKey(
        "rooms.Room",
        on_delete=models.PROTECT,
        related_name="bookings",
    )
    guest = models.ForeignKey(
        "guests.Guest",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="bookings",
    )
    check_in = models.DateField()
    check_out = models.DateField()
    total_price = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    status = models.CharField(
        max_length=20,
        choices=[(status.value, status.label) for status in BookingStatus],
        default=BookingStatus.QUEUED.value,
    )
    guests_count = models.PositiveSmallIntegerField(default=1)
    source = models.CharField(
        max_length=20,
        choices=Source.choices,
        default=Source.DIRECT,
    )
    special_requests = models.TextField(blank=True)
    internal_notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(check_out__gt=models.F("check_in")),
                name="booking_valid_dates",
            ),
        ]
        indexes = [
            models.Index(fields=["room", "check_in", "check_out"], name="booking_room_dates_idx"),
            models.Index(fields=["status"], name="booking_status_idx"),
        ]

    def __str__(self) -> str:
        return f"Booking {self.pk} for room {self.room_id} ({self.status})"

    @property
    def dates(self) -> DateRange:
        return DateRange(self.check_in, self.check_out)

    @property
    def nights(self) -> int:
        return len(self.dates)

    @property
    def lifecycle_status(self) -> BookingStatus:
        return BookingStatus(self.status)

    def blocks_dates(self) -> bool:
        return blocks_dates(self.lifecycle_status)
