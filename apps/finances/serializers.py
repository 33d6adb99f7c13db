"""Serializers for payments."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from shared.api.serializers import ClientIdentifiedModelSerializer

from .application.command_handlers import ProcessQueuedPaymentCommand
from .models import Payment


class QueuedPaymentSerializer(serializers.Serializer):
    """Payment as sent by the front desk sync clients."""

    id = serializers.CharField(max_length=64, required=False)
    bookingId = serializers.CharField(required=False, allow_blank=True)
    amount = serializers.DecimalField(max_digits=12, decimal_places=2, required=False, allow_null=True)
    currency = serializers.CharField(max_length=3, required=False, allow_blank=True)
    status = serializers.ChoiceField(choices=Payment.Status.choices, default=Payment.Status.PENDING)
    paymentMethod = serializers.CharField(max_length=50, required=False, allow_blank=True, default="")
    transactionId = serializers.CharField(max_length=100, required=False, allow_blank=True, default="")

    def to_command(self, company_id: str | None = None) -> ProcessQueuedPaymentCommand:
        data = self.validated_data
        return ProcessQueuedPaymentCommand(
            booking_id=data.get("bookingId") or None,
            amount=data.get("amount"),
            currency=data.get("currency") or None,
            status=data["status"],
            payment_method=data["paymentMethod"],
            transaction_id=data["transactionId"],
            payment_id=data.get("id") or None,
            company_id=company_id,
        )


class PaymentSerializer(ClientIdentifiedModelSerializer):
    bookingId = serializers.CharField(source="booking_id", read_only=True)
    paymentMethod = serializers.CharField(source="payment_method", required=False, allow_blank=True)
    transactionId = serializers.CharField(source="transaction_id", required=False, allow_blank=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Payment
        fields = [
            "id",
            "bookingId",
            "amount",
            "currency",
            "status",
            "paymentMethod",
            "transactionId",
            "createdAt",
        ]
        read_only_fields = ["amount", "currency"]
