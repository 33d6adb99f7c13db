"""Admin registration for payments."""

from __future__ import annotations

from django.contrib import admin

from .models import Payment


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    list_display = ("id", "booking", "amount", "currency", "status", "payment_method", "created_at")
    list_filter = ("status", "currency", "payment_method")
    search_fields = ("id", "booking__id", "transaction_id")
    readonly_fields = ("created_at",)
