"""Serializers for guest profiles."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.rooms.models import Company
from shared.api.serializers import ClientIdentifiedModelSerializer

from .models import Guest


class GuestSerializer(ClientIdentifiedModelSerializer):
    companyId = serializers.PrimaryKeyRelatedField(
        source="company",
        queryset=Company.objects.all(),
        required=False,
    )
    documentId = serializers.CharField(source="document_id", required=False, allow_blank=True)
    ageGroup = serializers.ChoiceField(
        source="age_group",
        choices=Guest.AgeGroup.choices,
        required=False,
        allow_blank=True,
    )

    class Meta:
        model = Guest
        fields = [
            "id",
            "companyId",
            "name",
            "email",
            "phone",
            "location",
            "documentId",
            "nationality",
            "ageGroup",
        ]
