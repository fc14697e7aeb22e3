"""Admin registration for parking slots."""

from __future__ import annotations

from django.contrib import admin  # type: ignore

from .models import ParkingSlot


@admin.register(ParkingSlot)
class ParkingSlotAdmin(admin.ModelAdmin):
    list_display = (
        "slot_number",
        "community",
        "owner",
        "slot_type",
        "pricing_mode",
        "price_per_hour",
        "status",
    )
    list_filter = ("community", "status", "slot_type", "pricing_mode")
    search_fields = ("slot_number", "owner__email", "description")
    readonly_fields = ("id", "created_at", "updated_at")
