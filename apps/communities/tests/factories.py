"""Object builders shared by the API test suites."""

from __future__ import annotations

from datetime import datetime, timedelta
from decimal import Decimal
from itertools import count

from django.utils import timezone

from apps.bookings.models import Booking
from apps.communities.models import Community
from apps.slots.models import ParkingSlot
from apps.users.models import User

_sequence = count(1)


def make_community(code: str, **extra) -> Community:
    extra.setdefault("name", code.title())
    return Community.objects.create(code=code, **extra)


def make_user(community: Community | None, role: str = User.Role.RESIDENT, **extra) -> User:
    number = next(_sequence)
    extra.setdefault("email", f"user{number}@example.com")
    extra.setdefault("name", f"Resident {number}")
    extra.setdefault("unit_number", f"{number}A")
    return User.objects.create_user(password="StrongPass123", community=community, role=role, **extra)


def make_slot(owner: User | None, community: Community | None = None, **extra) -> ParkingSlot:
    extra.setdefault("slot_number", f"P-{next(_sequence)}")
    extra.setdefault("pricing_mode", ParkingSlot.PricingMode.EXPLICIT)
    if extra["pricing_mode"] == ParkingSlot.PricingMode.EXPLICIT:
        extra.setdefault("price_per_hour", Decimal("50.00"))
    return ParkingSlot.objects.create(
        owner=owner,
        community=community or owner.community,
        **extra,
    )


def make_booking(slot: ParkingSlot, renter: User, start: datetime, end: datetime, **extra) -> Booking:
    extra.setdefault("status", Booking.Status.CONFIRMED)
    extra.setdefault("total_price", Decimal("0.00"))
    return Booking.objects.create(
        slot=slot,
        renter=renter,
        slot_owner=slot.owner,
        start_time=start,
        end_time=end,
        **extra,
    )


def tomorrow_at(hour: int, minute: int = 0) -> datetime:
    base = timezone.localtime() + timedelta(days=1)
    return base.replace(hour=hour, minute=minute, second=0, microsecond=0)
