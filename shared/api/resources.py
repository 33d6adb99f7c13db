"""Closed set of resource kinds exposed by the generic CRUD surface."""

from __future__ import annotations

from enum import Enum
from typing import Mapping

from rest_framework.routers import DefaultRouter  # type: ignore
from rest_framework.viewsets import GenericViewSet  # type: ignore


class ResourceKind(str, Enum):
    COMPANIES = "companies"
    CATEGORIES = "categories"
    ROOMS = "rooms"
    GUESTS = "guests"
    BOOKINGS = "bookings"
    PAYMENTS = "payments"

    @property
    def basename(self) -> str:
        return _BASENAMES[self]


_BASENAMES = {
    ResourceKind.COMPANIES: "company",
    ResourceKind.CATEGORIES: "category",
    ResourceKind.ROOMS: "room",
    ResourceKind.GUESTS: "guest",
    ResourceKind.BOOKINGS: "booking",
    ResourceKind.PAYMENTS: "payment",
}


def build_resource_router(viewsets: Mapping[ResourceKind, type[GenericViewSet]]) -> DefaultRouter:
    """Register one viewset per resource kind; every kind must be mapped."""

    missing = [kind.value for kind in ResourceKind if kind not in viewsets]
    if missing:
        raise ValueError(f"No viewset registered for resource kinds: {', '.join(missing)}")

    router = DefaultRouter(trailing_slash=False)
    for kind in ResourceKind:
        router.register(kind.value, viewsets[kind], basename=kind.basename)
    return router
