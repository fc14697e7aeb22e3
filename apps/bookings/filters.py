"""FilterSet definitions for booking listing."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Booking


class BookingFilterSet(django_filters.FilterSet):
    """Filter by status, time window and the caller's side of the booking."""

    ROLE_CHOICES = (("renter", "renter"), ("owner", "owner"))

    status = django_filters.ChoiceFilter(choices=Booking.Status.choices)
    role = django_filters.ChoiceFilter(choices=ROLE_CHOICES, method="filter_role")
    starts_after = django_filters.IsoDateTimeFilter(field_name="start_time", lookup_expr="gte")
    ends_before = django_filters.IsoDateTimeFilter(field_name="end_time", lookup_expr="lte")

    class Meta:
        model = Booking
        fields = ["status"]

    def filter_role(self, queryset, name, value):  # type: ignore
        user_id = self.request.tenant.user_id
        if value == "renter":
            return queryset.filter(renter_id=user_id)
        return queryset.filter(slot_owner_id=user_id)
