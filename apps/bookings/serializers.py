"""Serializers for the booking domain.

Incoming booking requests are parsed by ``QueuedBookingSerializer`` into a
``QueueBookingCommand``; the handler owns every business rule, so fields
here are only type-checked.
"""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from shared.api.serializers import ClientIdentifiedModelSerializer

from .application.command_handlers import QueueBookingCommand
from .domain.lifecycle import BookingStatus
from .models import Booking

STATUS_CHOICES = [(status.value, status.label) for status in BookingStatus]


class QueuedBookingSerializer(serializers.Serializer):
    """Booking request as sent by the front desk sync clients."""

    id = serializers.CharField(max_length=64, required=False)
    companyId = serializers.CharField(required=False, allow_blank=True)
    roomId = serializers.CharField(required=False, allow_blank=True)
    guestId = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    checkIn = serializers.DateField(required=False, allow_null=True)
    checkOut = serializers.DateField(required=False, allow_null=True)
    totalPrice = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=0,
        required=False,
        allow_null=True,
    )
    status = serializers.ChoiceField(choices=STATUS_CHOICES, required=False, allow_null=True)
    guestsCount = serializers.IntegerField(min_value=1, default=1)
    source = serializers.ChoiceField(choices=Booking.Source.choices, default=Booking.Source.DIRECT)
    specialRequests = serializers.CharField(required=False, allow_blank=True, default="")
    internalNotes = serializers.CharField(required=False, allow_blank=True, default="")

    def to_command(self, company_id: str | None = None) -> QueueBookingCommand:
        data = self.validated_data
        return QueueBookingCommand(
            room_id=data.get("roomId") or None,
            check_in=data.get("checkIn"),
            check_out=data.get("checkOut"),
            company_id=company_id or data.get("companyId") or None,
            guest_id=data.get("guestId") or None,
            booking_id=data.get("id") or None,
            total_price=data.get("totalPrice"),
            status=data.get("status") or None,
            guests_count=data["guestsCount"],
            source=data["source"],
            special_requests=data["specialRequests"],
            internal_notes=data["internalNotes"],
        )


class BookingSerializer(ClientIdentifiedModelSerializer):
    """Booking representation; also validates partial updates."""

    companyId = serializers.CharField(source="company_id", read_only=True)
    roomId = serializers.CharField(source="room_id", required=False)
    guestId = serializers.CharField(
        source="guest_id",
        required=False,
        allow_null=True,
        allow_blank=True,
    )
    checkIn = serializers.DateField(source="check_in", required=False)
    checkOut = serializers.DateField(source="check_out", required=False)
    totalPrice = serializers.DecimalField(
        source="total_price",
        max_digits=12,
        decimal_places=2,
        min_value=0,
        required=False,
    )
    status = serializers.ChoiceField(choices=STATUS_CHOICES, required=False)
    guestsCount = serializers.IntegerField(source="guests_count", min_value=1, required=False)
    source = serializers.ChoiceField(choices=Booking.Source.choices, required=False)
    specialRequests = serializers.CharField(source="special_requests", required=False, allow_blank=True)
    internalNotes = serializers.CharField(source="internal_notes", required=False, allow_blank=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Booking
        fields = [
            "id",
            "companyId",
            "roomId",
            "guestId",
            "checkIn",
            "checkOut",
            "totalPrice",
            "status",
            "guestsCount",
            "source",
            "specialRequests",
            "internalNotes",
            "createdAt",
        ]

    def validate_guestId(self, value):  # noqa: N802
        return value or None

    def changes(self) -> dict:
        """Validated data keyed by model field name, without the identifier."""

        changes = dict(self.validated_data)
        changes.pop("id", None)
        return changes
