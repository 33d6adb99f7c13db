"""Admin registrations for room inventory."""

from __future__ import annotations

from django.contrib import admin

from .models import Company, Room, RoomCategory


@admin.register(Company)
class CompanyAdmin(admin.ModelAdmin):
    list_display = ("name", "email", "phone", "created_at")
    search_fields = ("name", "email")


@admin.register(RoomCategory)
class RoomCategoryAdmin(admin.ModelAdmin):
    list_display = ("name", "company", "base_price", "capacity")
    list_filter = ("company",)
    search_fields = ("name",)


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    list_display = ("number", "company", "category", "floor", "status")
    list_filter = ("status", "company", "floor")
    search_fields = ("number",)
    readonly_fields = ("created_at", "updated_at")
