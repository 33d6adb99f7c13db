"""Guest profile model."""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.infrastructure.fields import IdentifierField


class Guest(models.Model):
    class AgeGroup(models.TextChoices):
        YOUNG_ADULT = "18-25", "18-25"
        ADULT = "26-35", "26-35"
        MIDDLE_AGED = "36-50", "36-50"
        SENIOR = "50+", "50+"

    id = IdentifierField()
    company = models.ForeignKey(
        "rooms.Company",
        on_delete=models.CASCADE,
        related_name="guests",
    )
    name = models.CharField(max_length=255)
    email = models.EmailField(blank=True)
    phone = models.CharField(max_length=32, blank=True)
    location = models.CharField(max_length=255, blank=True)
    document_id = models.CharField(max_length=64, blank=True)
    nationality = models.CharField(max_length=64, blank=True)
    age_group = models.CharField(max_length=8, choices=AgeGroup.choices, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Guest")
        verbose_name_plural = _("Guests")
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name
