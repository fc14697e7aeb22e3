"""Serializers for the slot registry."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import ParkingSlot


class ParkingSlotSerializer(serializers.ModelSerializer):
    """Read representation of a parking slot."""

    community_code = serializers.ReadOnlyField(source="community_id")
    owner_id = serializers.ReadOnlyField()
    is_shared = serializers.ReadOnlyField()

    class Meta:
        model = ParkingSlot
        fields = [
            "id",
            "community_code",
            "owner_id",
            "is_shared",
            "slot_number",
            "slot_type",
            "description",
            "pricing_mode",
            "price_per_hour",
            "status",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ParkingSlotWriteSerializer(serializers.Serializer):
    """Shape validation for slot create/update payloads.

    Business rules (pricing consistency, uniqueness, ownership) live in
    ``apps.slots.services``; tenant and owner fields are not declared and
    therefore never reach the services from here.
    """

    slot_number = serializers.CharField(max_length=32, allow_blank=True)
    slot_type = serializers.ChoiceField(choices=ParkingSlot.SlotType.choices, required=False)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    pricing_mode = serializers.ChoiceField(choices=ParkingSlot.PricingMode.choices, required=False)
    price_per_hour = serializers.DecimalField(
        max_digits=10, decimal_places=2, required=False, allow_null=True
    )
    status = serializers.ChoiceField(
        choices=[ParkingSlot.Status.ACTIVE, ParkingSlot.Status.MAINTENANCE], required=False
    )
    shared = serializers.BooleanField(required=False, default=False)


class AvailabilityQuerySerializer(serializers.Serializer):
    start_time = serializers.DateTimeField()
    end_time = serializers.DateTimeField()
