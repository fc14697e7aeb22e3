"""Serializers for the booking domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Booking


class BookingCreateSerializer(serializers.Serializer):
    """Booking request from a renter.

    Only the slot and the window are read; price, owner, renter and status
    are always decided by the server. ``slot_id`` is kept as a string so a
    malformed identifier surfaces as ``invalid_identifier``.
    """

    slot_id = serializers.CharField()
    start_time = serializers.DateTimeField()
    end_time = serializers.DateTimeField()


class BookingSerializer(serializers.ModelSerializer):
    """Detailed booking representation."""

    slot_id = serializers.ReadOnlyField()
    slot_number = serializers.ReadOnlyField(source="slot.slot_number")
    community_code = serializers.ReadOnlyField(source="slot.community_id")
    renter_id = serializers.ReadOnlyField()
    slot_owner_id = serializers.ReadOnlyField()

    class Meta:
        model = Booking
        fields = [
            "id",
            "slot_id",
            "slot_number",
            "community_code",
            "renter_id",
            "slot_owner_id",
            "start_time",
            "end_time",
            "total_price",
            "status",
            "payment_status",
            "payment_reference",
            "cancelled_at",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
