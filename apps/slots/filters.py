"""FilterSet definitions for slot listing."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import ParkingSlot


class ParkingSlotFilterSet(django_filters.FilterSet):
    slot_type = django_filters.ChoiceFilter(choices=ParkingSlot.SlotType.choices)
    pricing_mode = django_filters.ChoiceFilter(choices=ParkingSlot.PricingMode.choices)
    price_max = django_filters.NumberFilter(field_name="price_per_hour", lookup_expr="lte")

    class Meta:
        model = ParkingSlot
        fields = ["slot_type", "pricing_mode"]
