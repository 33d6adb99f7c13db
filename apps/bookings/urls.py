"""URL routing for the booking sync endpoints."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import SyncBookingConfirmView, SyncBookingCreateView

urlpatterns = [
    path("sync/bookings", SyncBookingCreateView.as_view(), name="sync-booking-create"),
    path(
        "sync/bookings/<str:booking_id>/confirm",
        SyncBookingConfirmView.as_view(),
        name="sync-booking-confirm",
    ),
]
