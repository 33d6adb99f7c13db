"""
Custom Django model fields.

Provides IdentifierField: a string primary key. Clients may supply
their own identifiers (offline front desks generate them before
syncing); otherwise a UUID4 hex string is generated.
"""

from uuid import uuid4

from django.db import models


def generate_id() -> str:
    return uuid4().hex


class IdentifierField(models.CharField):
    """String primary key with a generated default."""

    description = "String identifier"

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('max_length', 64)
        kwargs.setdefault('primary_key', True)
        kwargs.setdefault('default', generate_id)
        kwargs.setdefault('editable', True)
        super().__init__(*args, **kwargs)

    def deconstruct(self):
        name, path, args, kwargs = super().deconstruct()
        if kwargs.get('max_length') == 64:
            del kwargs['max_length']
        if kwargs.get('default') is generate_id:
            del kwargs['default']
        return name, path, args, kwargs
