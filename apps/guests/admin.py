"""Admin registration for guests."""

from __future__ import annotations

from django.contrib import admin

from .models import Guest


@admin.register(Guest)
class GuestAdmin(admin.ModelAdmin):
    list_display = ("name", "email", "phone", "company", "nationality")
    list_filter = ("company", "age_group")
    search_fields = ("name", "email", "phone", "document_id")
