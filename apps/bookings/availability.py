"""Availability and pricing engine.

Decides whether a slot can be booked for a window and what it costs.
Windows are half-open: ``[start, end)``, so back-to-back bookings never
conflict. Price is only ever computed here.
"""

from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

from django.db.models import Q  # type: ignore
from django.utils import timezone  # type: ignore

from apps.slots.models import ParkingSlot
from shared.domain.value_objects import TimeRange

from .models import Booking

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from apps.communities.tenancy import TenantContext

CENT = Decimal("0.01")


def overlapping_filter(start: datetime, end: datetime) -> Q:
    return Q(start_time__lt=end) & Q(end_time__gt=start)


def find_conflicts(slot: ParkingSlot, start: datetime, end: datetime, *, exclude=None):
    """Non-cancelled bookings on the slot intersecting ``[start, end)``."""

    bookings_qs = (
        Booking.objects.filter(slot_id=slot.pk)
        .exclude(status=Booking.Status.CANCELLED)
        .filter(overlapping_filter(start, end))
    )
    if exclude is not None:
        bookings_qs = bookings_qs.exclude(pk=exclude)
    return bookings_qs


def active_bookings_for_slot(slot: ParkingSlot, now: datetime | None = None):
    """Pending or confirmed bookings on the slot that have not ended yet."""

    now = now or timezone.now()
    return Booking.objects.filter(
        slot_id=slot.pk,
        status__in=Booking.ACTIVE_STATUSES,
        end_time__gt=now,
    )


def unavailability_reason(
    slot: ParkingSlot, start: datetime, end: datetime, ctx: "TenantContext"
) -> str | None:
    """Why the slot cannot be booked for the window, or None if it can."""

    if slot.community_id != ctx.community_code:
        return "Slot not found"
    if slot.status != ParkingSlot.Status.ACTIVE:
        return f"Slot is currently {slot.status}."
    if slot.pricing_mode != ParkingSlot.PricingMode.EXPLICIT or slot.price_per_hour is None:
        return "Slot is priced on request; contact the owner."
    if find_conflicts(slot, start, end).exists():
        return "Slot is already booked for this time period."
    return None


def is_bookable(slot: ParkingSlot, start: datetime, end: datetime, ctx: "TenantContext") -> bool:
    """True if the slot is in the caller's tenant, active, priced and free."""

    return unavailability_reason(slot, start, end, ctx) is None


def compute_price(slot: ParkingSlot, start: datetime, end: datetime) -> Decimal:
    """``price_per_hour * hours``, rounded half-up to cents."""

    if slot.price_per_hour is None:
        raise ValueError(f"Slot {slot.pk} has no hourly rate")
    hours = TimeRange(start, end).hours
    return (Decimal(slot.price_per_hour) * hours).quantize(CENT, rounding=ROUND_HALF_UP)
