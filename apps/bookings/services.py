"""Domain services for booking workflows.

Create, cancel, list and housekeeping for bookings. Every lookup is scoped
to the caller's community through the booking's slot; a booking outside
the tenant is reported as missing.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from django.db import IntegrityError, transaction  # type: ignore
from django.db.models import Q  # type: ignore
from django.utils import timezone  # type: ignore

from apps.communities.models import Community
from apps.communities.tenancy import TenantContext
from apps.slots.models import ParkingSlot
from apps.slots.services import get_slot
from shared.domain.errors import (
    Forbidden,
    ImmutableBookingState,
    InvalidStatusTransition,
    NotFound,
    SlotUnavailable,
    ValidationFailed,
)
from shared.domain.policies import can_cancel_booking, can_view_booking
from shared.infrastructure.db import lock_queryset_if_possible
from shared.infrastructure.identifiers import parse_identifier

from . import conf
from .availability import compute_price, find_conflicts, unavailability_reason
from .models import Booking

logger = logging.getLogger(__name__)

OVERLAP_CONSTRAINT = "booking_no_overlap"

IMMUTABLE_BOOKING_FIELDS = (
    "renter",
    "renter_id",
    "slot",
    "slot_id",
    "slot_owner",
    "slot_owner_id",
    "total_price",
    "start_time",
    "end_time",
    "community_code",
)


def validate_booking_window(start: datetime, end: datetime, now: datetime | None = None) -> None:
    """Check the booking rules that do not depend on the slot."""

    now = now or timezone.now()
    if end <= start:
        raise ValidationFailed({"end_time": "end_time must be after start_time."})
    if start < now - conf.start_grace():
        raise ValidationFailed({"start_time": "start_time cannot be in the past."})

    duration = end - start
    if duration < conf.min_duration():
        raise ValidationFailed(
            {"end_time": f"Minimum booking duration is {conf.get_setting('BOOKING_MIN_DURATION_HOURS')} hour(s)."}
        )
    if duration > conf.max_duration():
        raise ValidationFailed(
            {"end_time": f"Maximum booking duration is {conf.get_setting('BOOKING_MAX_DURATION_HOURS')} hours."}
        )
    if start - now > conf.max_advance():
        raise ValidationFailed(
            {"start_time": f"Cannot book more than {conf.get_setting('BOOKING_MAX_ADVANCE_DAYS')} days in advance."}
        )


def quote_booking(slot: ParkingSlot, start: datetime, end: datetime, ctx: TenantContext) -> dict[str, Any]:
    """Read-only availability check with the price the booking would have."""

    validate_booking_window(start, end)
    reason = unavailability_reason(slot, start, end, ctx)
    return {
        "slot_id": str(slot.pk),
        "start_time": start,
        "end_time": end,
        "bookable": reason is None,
        "reason": reason,
        "total_price": str(compute_price(slot, start, end)) if reason is None else None,
    }


def _insert_booking(booking: Booking) -> None:
    try:
        with transaction.atomic():
            booking.save(force_insert=True)
    except IntegrityError as exc:
        if OVERLAP_CONSTRAINT in str(exc):
            raise SlotUnavailable() from exc
        raise


def create_booking(slot_id: Any, start: datetime, end: datetime, ctx: TenantContext) -> Booking:
    """Book a slot for ``[start, end)`` on behalf of the caller.

    Locking the slot row serializes creates on one slot. The overlap is
    checked again after the insert; on PostgreSQL the exclusion constraint
    rejects whatever slips through, and both outcomes roll back as
    SlotUnavailable.
    """

    parse_identifier(slot_id, "slot")
    validate_booking_window(start, end)

    with transaction.atomic():
        slot = get_slot(slot_id, ctx, lock=True)
        if not ctx.community_active:
            raise Forbidden("This community is read-only.")

        reason = unavailability_reason(slot, start, end, ctx)
        if reason is not None:
            raise SlotUnavailable(reason)

        booking = Booking(
            slot=slot,
            renter_id=ctx.user_id,
            slot_owner_id=slot.owner_id,
            start_time=start,
            end_time=end,
            total_price=compute_price(slot, start, end),
            status=conf.initial_status(),
        )
        _insert_booking(booking)

        if find_conflicts(slot, start, end, exclude=booking.pk).exists():
            logger.warning("Overlap detected after insert on slot %s, rolling back", slot.pk)
            raise SlotUnavailable()

    logger.info(
        "Booking %s created on slot %s by %s for %s",
        booking.pk,
        slot.pk,
        ctx.user_id,
        booking.time_range,
    )
    return booking


def bookings_in_community(ctx: TenantContext):
    return Booking.objects.filter(slot__community_id=ctx.community_code)


def _scoped_booking(booking_id: Any, ctx: TenantContext, *, lock: bool = False) -> Booking:
    pk = parse_identifier(booking_id, "booking")
    bookings_qs = bookings_in_community(ctx).filter(pk=pk)
    if lock:
        bookings_qs = lock_queryset_if_possible(bookings_qs)
    booking = bookings_qs.first()
    if booking is None:
        raise NotFound("Booking not found")
    return booking


def get_booking(booking_id: Any, ctx: TenantContext) -> Booking:
    booking = _scoped_booking(booking_id, ctx)
    if not can_view_booking(booking, ctx):
        raise Forbidden("Only the renter or the slot owner can view this booking.")
    return booking


def cancel_booking(booking_id: Any, new_status: Any, ctx: TenantContext) -> Booking:
    """Cancel a booking; cancelling an already cancelled one is a no-op."""

    parse_identifier(booking_id, "booking")
    if new_status != Booking.Status.CANCELLED:
        raise InvalidStatusTransition()

    with transaction.atomic():
        booking = _scoped_booking(booking_id, ctx, lock=True)
        if not can_cancel_booking(booking, ctx):
            raise Forbidden("Only the renter or the slot owner can cancel this booking.")
        if booking.status in Booking.IRREVERSIBLE_STATUSES:
            raise ImmutableBookingState()
        if booking.status == Booking.Status.CANCELLED:
            return booking

        booking.mark_cancelled()

    logger.info("Booking %s cancelled by %s", booking.pk, ctx.user_id)
    return booking


def list_bookings(ctx: TenantContext):
    """Bookings the caller rents or whose slot the caller owns."""

    return (
        bookings_in_community(ctx)
        .filter(Q(renter_id=ctx.user_id) | Q(slot_owner_id=ctx.user_id))
        .select_related("slot")
    )


def admin_bookings(ctx: TenantContext):
    """All bookings of the community, admins only."""

    if not ctx.is_admin:
        raise Forbidden("Only community admins can view all bookings.")
    return bookings_in_community(ctx).select_related("slot", "renter")


def close_finished_bookings(
    now: datetime | None = None,
    community_code: str | None = None,
    dry_run: bool = False,
) -> dict[str, int]:
    """Mark active bookings that have ended as completed.

    Runs one community at a time and returns the number of bookings
    affected per community code.
    """

    now = now or timezone.now()
    communities = Community.objects.all()
    if community_code is not None:
        communities = communities.filter(code=community_code)
        if not communities.exists():
            raise NotFound(f"Community {community_code} not found")

    closed: dict[str, int] = {}
    for code in communities.values_list("code", flat=True):
        finished = Booking.objects.filter(
            slot__community_id=code,
            status__in=Booking.ACTIVE_STATUSES,
            end_time__lte=now,
        )
        if dry_run:
            closed[code] = finished.count()
            continue
        with transaction.atomic():
            closed[code] = finished.update(status=Booking.Status.COMPLETED, updated_at=now)
        if closed[code]:
            logger.info("Closed %s finished bookings in %s", closed[code], code)
    return closed
