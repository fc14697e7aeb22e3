"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "slot",
        "renter",
        "status",
        "payment_status",
        "start_time",
        "end_time",
        "total_price",
        "created_at",
    )
    list_filter = ("status", "payment_status", "slot__community")
    search_fields = ("slot__slot_number", "renter__email", "payment_reference")
    readonly_fields = (
        "id",
        "slot",
        "renter",
        "slot_owner",
        "total_price",
        "created_at",
        "updated_at",
    )
