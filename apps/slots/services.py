"""Domain services for the slot registry.

Every lookup is filtered by the caller's community; a slot in another
community is reported as missing, never as forbidden.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Mapping

from django.db import IntegrityError, transaction  # type: ignore

from apps.bookings.availability import active_bookings_for_slot
from apps.communities.tenancy import TenantContext
from shared.domain.errors import (
    ActiveBookingsExist,
    DuplicateSlotNumber,
    Forbidden,
    NotFound,
    ValidationFailed,
    reject_immutable_fields,
)
from shared.domain.policies import can_manage_slot
from shared.infrastructure.db import lock_queryset_if_possible
from shared.infrastructure.identifiers import parse_identifier

from .models import ParkingSlot

logger = logging.getLogger(__name__)

IMMUTABLE_SLOT_FIELDS = ("community", "community_code", "community_id", "owner", "owner_id")
EDITABLE_STATUSES = (ParkingSlot.Status.ACTIVE, ParkingSlot.Status.MAINTENANCE)


def slots_in_community(ctx: TenantContext):
    return ParkingSlot.objects.filter(community_id=ctx.community_code)


def get_slot(slot_id: Any, ctx: TenantContext, *, lock: bool = False) -> ParkingSlot:
    """Load a non-deleted slot of the caller's community or raise NotFound."""

    pk = parse_identifier(slot_id, "slot")
    slots_qs = slots_in_community(ctx).exclude(status=ParkingSlot.Status.DELETED).filter(pk=pk)
    if lock:
        slots_qs = lock_queryset_if_possible(slots_qs)
    slot = slots_qs.first()
    if slot is None:
        raise NotFound("Slot not found")
    return slot


def validate_pricing(pricing_mode: str, price_per_hour: Decimal | None) -> Decimal | None:
    """Return the price to store for the pricing mode."""

    if pricing_mode == ParkingSlot.PricingMode.REQUEST_QUOTE:
        return None
    if pricing_mode != ParkingSlot.PricingMode.EXPLICIT:
        raise ValidationFailed({"pricing_mode": f"Unknown pricing mode {pricing_mode!r}."})
    if price_per_hour is None or Decimal(price_per_hour) <= 0:
        raise ValidationFailed(
            {"price_per_hour": "A positive hourly price is required for explicit pricing."}
        )
    return Decimal(price_per_hour)


def _clean_slot_number(value: Any) -> str:
    slot_number = str(value or "").strip()
    if not slot_number:
        raise ValidationFailed({"slot_number": "Slot number cannot be empty."})
    return slot_number


def _ensure_slot_number_free(ctx: TenantContext, slot_number: str, *, exclude=None) -> None:
    taken = slots_in_community(ctx).filter(slot_number=slot_number)
    if exclude is not None:
        taken = taken.exclude(pk=exclude)
    if taken.exists():
        raise DuplicateSlotNumber(f"Slot number {slot_number} already exists in this community.")


def _ensure_writable(ctx: TenantContext) -> None:
    if not ctx.community_active:
        raise Forbidden("This community is read-only.")


def _save_slot(slot: ParkingSlot, **kwargs) -> None:
    try:
        with transaction.atomic():
            slot.save(**kwargs)
    except IntegrityError as exc:
        if "slot_number" in str(exc) or "slot_number_unique_per_community" in str(exc):
            raise DuplicateSlotNumber(
                f"Slot number {slot.slot_number} already exists in this community."
            ) from exc
        raise


def create_slot(data: Mapping[str, Any], ctx: TenantContext) -> ParkingSlot:
    """Create a slot owned by the caller in the caller's community.

    Admins may pass ``shared=True`` to create a slot without an owner.
    Tenant and owner fields in ``data`` are never read.
    """

    _ensure_writable(ctx)
    shared = bool(data.get("shared", False))
    if shared and not ctx.is_admin:
        raise Forbidden("Only community admins can create shared slots.")

    slot_number = _clean_slot_number(data.get("slot_number"))
    pricing_mode = data.get("pricing_mode", ParkingSlot.PricingMode.EXPLICIT)
    price = validate_pricing(pricing_mode, data.get("price_per_hour"))
    _ensure_slot_number_free(ctx, slot_number)

    slot = ParkingSlot(
        community_id=ctx.community_code,
        owner_id=None if shared else ctx.user_id,
        slot_number=slot_number,
        slot_type=data.get("slot_type", ParkingSlot.SlotType.UNCOVERED),
        description=data.get("description", "") or "",
        pricing_mode=pricing_mode,
        price_per_hour=price,
        status=ParkingSlot.Status.ACTIVE,
    )
    _save_slot(slot, force_insert=True)
    logger.info("Slot %s (%s) created in %s by %s", slot.pk, slot_number, ctx.community_code, ctx.user_id)
    return slot


@transaction.atomic
def update_slot(slot_id: Any, changes: Mapping[str, Any], ctx: TenantContext) -> ParkingSlot:
    """Apply a partial update from the owner or a community admin."""

    reject_immutable_fields(changes, IMMUTABLE_SLOT_FIELDS)
    slot = get_slot(slot_id, ctx, lock=True)
    if not can_manage_slot(slot, ctx):
        raise Forbidden("Only the slot owner or a community admin can edit this slot.")
    _ensure_writable(ctx)

    if "slot_number" in changes:
        slot_number = _clean_slot_number(changes["slot_number"])
        if slot_number != slot.slot_number:
            _ensure_slot_number_free(ctx, slot_number, exclude=slot.pk)
        slot.slot_number = slot_number

    if "status" in changes:
        if changes["status"] not in EDITABLE_STATUSES:
            raise ValidationFailed({"status": "Status can only be set to active or maintenance."})
        slot.status = changes["status"]

    for field in ("slot_type", "description"):
        if field in changes:
            setattr(slot, field, changes[field] if changes[field] is not None else "")

    pricing_mode = changes.get("pricing_mode", slot.pricing_mode)
    price = changes["price_per_hour"] if "price_per_hour" in changes else slot.price_per_hour
    slot.pricing_mode = pricing_mode
    slot.price_per_hour = validate_pricing(pricing_mode, price)

    _save_slot(slot)
    logger.info("Slot %s updated by %s", slot.pk, ctx.user_id)
    return slot


@transaction.atomic
def soft_delete_slot(slot_id: Any, ctx: TenantContext) -> ParkingSlot:
    """Flip the slot to ``deleted`` unless it still has active bookings."""

    slot = get_slot(slot_id, ctx, lock=True)
    if not can_manage_slot(slot, ctx):
        raise Forbidden("Only the slot owner or a community admin can delete this slot.")
    _ensure_writable(ctx)

    if active_bookings_for_slot(slot).exists():
        raise ActiveBookingsExist()

    slot.status = ParkingSlot.Status.DELETED
    slot.save(update_fields=["status", "updated_at"])
    logger.info("Slot %s soft-deleted by %s", slot.pk, ctx.user_id)
    return slot
