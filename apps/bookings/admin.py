"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "company",
        "room",
        "guest",
        "status",
        "check_in",
        "check_out",
        "total_price",
        "created_at",
    )
    list_filter = ("status", "source", "check_in", "check_out")
    search_fields = ("id", "room__number", "guest__name", "guest__email")
    readonly_fields = ("created_at", "updated_at")
