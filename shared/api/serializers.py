"""Serializer base classes shared by the app APIs."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore


class ClientIdentifiedModelSerializer(serializers.ModelSerializer):
    """Accepts a client-generated ``id`` on create and keeps it immutable after.

    Offline front desks create records before syncing, so the identifier
    can come from the client; the server generates one otherwise.
    """

    id = serializers.CharField(max_length=64, required=False)

    def validate_id(self, value: str) -> str:
        if self.instance is None and self.Meta.model.objects.filter(pk=value).exists():
            raise serializers.ValidationError("An item with this id already exists.")
        return value

    def update(self, instance, validated_data):  # type: ignore
        validated_data.pop("id", None)
        return super().update(instance, validated_data)
