"""Integration tests for guest profiles."""

from __future__ import annotations

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.guests.models import Guest
from apps.rooms.models import Company


class GuestAPITests(APITestCase):
    def setUp(self) -> None:
        self.company = Company.objects.create(id="hotel-1", name="Seaside Hotel")
        self.url = reverse("v1:guest-list")

    def test_guest_is_created_with_camel_case_fields(self) -> None:
        response = self.client.post(
            self.url,
            {
                "companyId": "hotel-1",
                "name": "Ada Lovelace",
                "email": "ada@example.com",
                "documentId": "P1234567",
                "ageGroup": "26-35",
            },
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        guest = Guest.objects.get(pk=response.data["id"])
        self.assertEqual(guest.company, self.company)
        self.assertEqual(guest.document_id, "P1234567")
        self.assertEqual(response.data["ageGroup"], "26-35")

    def test_invalid_email_is_rejected(self) -> None:
        response = self.client.post(
            self.url,
            {"companyId": "hotel-1", "name": "Ada", "email": "not-an-email"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertIn("email", response.data["error"])

    def test_guests_can_be_deleted(self) -> None:
        guest = Guest.objects.create(company=self.company, name="Ada")

        response = self.client.delete(reverse("v1:guest-detail", args=[guest.pk]))

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Guest.objects.exists())
