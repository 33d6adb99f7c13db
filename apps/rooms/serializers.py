"""Serializers for room inventory.

Field names follow the camelCase wire format used by the front desk
clients; ``source`` maps them onto the snake_case model fields.
"""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from shared.api.serializers import ClientIdentifiedModelSerializer

from .models import Company, Room, RoomCategory


class CompanySerializer(ClientIdentifiedModelSerializer):
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Company
        fields = ["id", "name", "email", "phone", "createdAt"]


class RoomCategorySerializer(ClientIdentifiedModelSerializer):
    companyId = serializers.PrimaryKeyRelatedField(
        source="company",
        queryset=Company.objects.all(),
        required=False,
    )
    basePrice = serializers.DecimalField(
        source="base_price",
        max_digits=10,
        decimal_places=2,
        required=False,
    )

    class Meta:
        model = RoomCategory
        fields = ["id", "companyId", "name", "description", "basePrice", "capacity"]


class RoomSerializer(ClientIdentifiedModelSerializer):
    companyId = serializers.PrimaryKeyRelatedField(
        source="company",
        queryset=Company.objects.all(),
        required=False,
    )
    categoryId = serializers.PrimaryKeyRelatedField(
        source="category",
        queryset=RoomCategory.objects.all(),
        required=False,
        allow_null=True,
    )
    maintenanceHistory = serializers.JSONField(source="maintenance_history", required=False)

    class Meta:
        model = Room
        fields = ["id", "companyId", "number", "categoryId", "status", "floor", "maintenanceHistory"]

    def validate_maintenanceHistory(self, value):  # noqa: N802
        if not isinstance(value, list):
            raise serializers.ValidationError("Maintenance history must be a list.")
        return value
