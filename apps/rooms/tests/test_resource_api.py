"""Integration tests for the company-scoped CRUD resources."""

from __future__ import annotations

from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.rooms.models import Company, Room, RoomCategory
from apps.rooms.views import CompanyViewSet
from shared.api.resources import ResourceKind, build_resource_router


class ResourceRouterTests(APITestCase):
    def test_every_resource_kind_is_routed(self) -> None:
        for kind in ResourceKind:
            with self.subTest(kind=kind.value):
                url = reverse(f"v1:{kind.basename}-list")
                self.assertEqual(url, f"/api/v1/{kind.value}")
                self.assertEqual(reverse(f"api:{kind.basename}-list"), f"/api/{kind.value}")

    def test_router_requires_every_kind(self) -> None:
        with self.assertRaisesMessage(ValueError, "rooms"):
            build_resource_router({
                ResourceKind.COMPANIES: CompanyViewSet,
                ResourceKind.CATEGORIES: CompanyViewSet,
                ResourceKind.GUESTS: CompanyViewSet,
                ResourceKind.BOOKINGS: CompanyViewSet,
                ResourceKind.PAYMENTS: CompanyViewSet,
            })

    def test_unknown_resource_path_is_not_routed(self) -> None:
        response = self.client.get("/api/v1/widgets")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)


class RoomResourceAPITests(APITestCase):
    """Covers tenancy scoping and the error envelope on the CRUD surface."""

    def setUp(self) -> None:
        self.company = Company.objects.create(id="hotel-1", name="Seaside Hotel")
        self.other_company = Company.objects.create(id="hotel-2", name="Mountain Lodge")
        self.category = RoomCategory.objects.create(
            company=self.company,
            name="Deluxe",
            base_price=Decimal("120.00"),
        )
        self.rooms_url = reverse("v1:room-list")

    def test_create_stamps_company_from_query(self) -> None:
        response = self.client.post(
            f"{self.rooms_url}?companyId=hotel-1",
            {"id": "1", "number": "101", "categoryId": self.category.pk, "floor": 1},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["companyId"], "hotel-1")
        self.assertEqual(Room.objects.get(pk="1").company, self.company)

    def test_create_without_company_is_rejected(self) -> None:
        response = self.client.post(self.rooms_url, {"number": "101"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(response.data, {"error": "companyId is required"})

    def test_unknown_company_is_not_found(self) -> None:
        response = self.client.get(self.rooms_url, {"companyId": "nope"})

        # Listing filters silently; creating needs the company to exist
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        response = self.client.post(f"{self.rooms_url}?companyId=nope", {"number": "101"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND, response.data)

    def test_list_is_scoped_and_filterable(self) -> None:
        Room.objects.create(company=self.company, number="101")
        Room.objects.create(company=self.company, number="102", status=Room.Status.CLEANING)
        Room.objects.create(company=self.other_company, number="201")

        response = self.client.get(self.rooms_url, {"companyId": "hotel-1"})
        self.assertEqual(sorted(room["number"] for room in response.data), ["101", "102"])

        response = self.client.get(self.rooms_url, {"companyId": "hotel-1", "status": "cleaning"})
        self.assertEqual([room["number"] for room in response.data], ["102"])

    def test_room_of_another_company_is_hidden(self) -> None:
        room = Room.objects.create(company=self.other_company, number="201")

        response = self.client.get(reverse("v1:room-detail", args=[room.pk]), {"companyId": "hotel-1"})

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertIn("error", response.data)

    def test_maintenance_history_must_be_a_list(self) -> None:
        response = self.client.post(
            f"{self.rooms_url}?companyId=hotel-1",
            {"number": "101", "maintenanceHistory": {"date": "2025-01-01"}},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertIn("maintenanceHistory", response.data["error"])

    def test_duplicate_client_id_is_rejected(self) -> None:
        Room.objects.create(id="1", company=self.company, number="101")

        response = self.client.post(
            f"{self.rooms_url}?companyId=hotel-1",
            {"id": "1", "number": "999"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)

    def test_category_update_keeps_identifier(self) -> None:
        url = reverse("v1:category-detail", args=[self.category.pk])

        response = self.client.patch(url, {"id": "renamed", "basePrice": "150.00"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.category.refresh_from_db()
        self.assertEqual(self.category.base_price, Decimal("150.00"))
        self.assertTrue(RoomCategory.objects.filter(pk=self.category.pk).exists())
