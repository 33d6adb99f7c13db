"""Room inventory models."""

from __future__ import annotations

from decimal import Decimal

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.infrastructure.fields import IdentifierField


class Company(models.Model):
    """A hotel operator; every scoped row belongs to exactly one company."""

    id = IdentifierField()
    name = models.CharField(max_length=255)
    email = models.EmailField(blank=True)
    phone = models.CharField(max_length=32, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Company")
        verbose_name_plural = _("Companies")
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class RoomCategory(models.Model):
    """Room type with a base nightly price (Standard, Deluxe, Suite...)."""

    id = IdentifierField()
    company = models.ForeignKey(
        Company,
        on_delete=models.CASCADE,
        related_name="room_categories",
    )
    name = models.CharField(max_length=100)
    description = models.TextField(blank=True)
    base_price = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal("0.00"))
    capacity = models.PositiveSmallIntegerField(default=2)

    class Meta:
        verbose_name = _("Room category")
        verbose_name_plural = _("Room categories")
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class Room(models.Model):
    """A physical room that guests can be booked into."""

    class Status(models.TextChoices):
        AVAILABLE = "available", _("Available")
        OCCUPIED = "occupied", _("Occupied")
        CLEANING = "cleaning", _("Cleaning")
        MAINTENANCE = "maintenance", _("Maintenance")

    id = IdentifierField()
    company = models.ForeignKey(
        Company,
        on_delete=models.CASCADE,
        related_name="rooms",
    )
    number = models.CharField(max_length=20)
    category = models.ForeignKey(
        RoomCategory,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="rooms",
    )
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.AVAILABLE)
    floor = models.SmallIntegerField(default=1)
    maintenance_history = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Room")
        verbose_name_plural = _("Rooms")
        ordering = ["floor", "number"]

    def __str__(self) -> str:
        return f"Room {self.number}"
