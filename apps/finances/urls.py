"""URL routing for the payment sync endpoint."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import SyncPaymentCreateView

urlpatterns = [
    path("sync/payments", SyncPaymentCreateView.as_view(), name="sync-payment-create"),
]
