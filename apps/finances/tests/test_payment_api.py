"""Integration tests for payment endpoints."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.domain.lifecycle import BookingStatus
from apps.bookings.models import Booking
from apps.finances.models import Payment
from apps.rooms.models import Company, Room


class SyncPaymentAPITests(APITestCase):
    """Covers validation and storage of queued payments."""

    def setUp(self) -> None:
        self.company = Company.objects.create(id="hotel-1", name="Seaside Hotel")
        self.room = Room.objects.create(id="1", company=self.company, number="101")
        self.booking = Booking.objects.create(
            id="b-1",
            company=self.company,
            room=self.room,
            check_in=date(2025, 12, 1),
            check_out=date(2025, 12, 5),
            status=BookingStatus.QUEUED.value,
        )
        self.url = reverse("v1:sync-payment-create")

    def _payload(self, **overrides) -> dict:
        payload = {
            "bookingId": self.booking.pk,
            "amount": 500,
            "currency": "USD",
            "status": "completed",
            "paymentMethod": "Credit Card",
            "transactionId": "TXN_TEST_1",
        }
        payload.update(overrides)
        return {key: value for key, value in payload.items() if value is not None}

    def test_payment_is_recorded(self) -> None:
        response = self.client.post(self.url, self._payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["bookingId"], "b-1")
        self.assertEqual(response.data["paymentMethod"], "Credit Card")
        payment = Payment.objects.get(pk=response.data["id"])
        self.assertEqual(payment.amount, Decimal("500.00"))
        self.assertEqual(payment.status, Payment.Status.COMPLETED)

    def test_payment_does_not_change_booking_status(self) -> None:
        self.client.post(self.url, self._payload(), format="json")

        self.booking.refresh_from_db()
        self.assertEqual(self.booking.status, BookingStatus.QUEUED.value)

    def test_missing_amount_is_rejected(self) -> None:
        response = self.client.post(self.url, self._payload(amount=None), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertIn("amount", response.data["error"])
        self.assertEqual(Payment.objects.count(), 0)

    def test_missing_booking_reference_is_rejected(self) -> None:
        payload = self._payload()
        del payload["bookingId"]

        response = self.client.post(self.url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertIn("bookingId", response.data["error"])

    def test_amount_must_be_positive(self) -> None:
        for amount in (0, -10, "abc"):
            with self.subTest(amount=amount):
                response = self.client.post(self.url, self._payload(amount=amount), format="json")

                self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(Payment.objects.count(), 0)

    def test_unknown_booking_is_rejected(self) -> None:
        response = self.client.post(self.url, self._payload(bookingId="missing"), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(response.data["error"], "Associated booking not found")
        self.assertEqual(Payment.objects.count(), 0)

    def test_cancelled_booking_cannot_be_paid(self) -> None:
        self.booking.status = BookingStatus.CANCELLED.value
        self.booking.save()

        response = self.client.post(self.url, self._payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(Payment.objects.count(), 0)

    def test_unsupported_currency_is_rejected(self) -> None:
        response = self.client.post(self.url, self._payload(currency="XYZ"), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)

    def test_currency_defaults_from_settings(self) -> None:
        payload = self._payload()
        del payload["currency"]

        with self.settings(HOTEL_DEFAULT_CURRENCY="EUR"):
            response = self.client.post(self.url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["currency"], "EUR")

    def test_unversioned_path(self) -> None:
        response = self.client.post("/api/sync/payments", self._payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)


class PaymentCrudAPITests(APITestCase):
    def setUp(self) -> None:
        company = Company.objects.create(id="hotel-1", name="Seaside Hotel")
        other = Company.objects.create(id="hotel-2", name="Mountain Lodge")
        for owner, booking_id in ((company, "b-1"), (other, "b-2")):
            room = Room.objects.create(company=owner, number="101")
            booking = Booking.objects.create(
                id=booking_id,
                company=owner,
                room=room,
                check_in=date(2025, 12, 1),
                check_out=date(2025, 12, 5),
            )
            Payment.objects.create(booking=booking, amount=Decimal("100.00"))
        self.list_url = reverse("v1:payment-list")

    def test_list_is_scoped_through_booking_company(self) -> None:
        response = self.client.get(self.list_url, {"companyId": "hotel-2"})

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual([item["bookingId"] for item in response.data], ["b-2"])

    def test_create_validates_amount(self) -> None:
        response = self.client.post(self.list_url, {"bookingId": "b-1", "amount": 0}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)

    def test_payments_cannot_be_deleted(self) -> None:
        payment = Payment.objects.first()

        response = self.client.delete(reverse("v1:payment-detail", args=[payment.pk]))

        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)
