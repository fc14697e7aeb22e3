"""
Authorization Policies

Pure predicates shared by the slot and booking services. They never touch
the database and never raise; callers decide which error to surface.

Objects are duck-typed:
- bookings expose ``renter_id`` and ``slot_owner_id``
- slots expose ``owner_id``
- users and tenant contexts expose ``role``
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

ADMIN_ROLE = "admin"


def _same_id(left: Any, right: Any) -> bool:
    if left is None or right is None:
        return False
    return str(left) == str(right)


def is_renter(booking: Any, user_id: UUID | str | None) -> bool:
    return _same_id(getattr(booking, "renter_id", None), user_id)


def is_slot_owner(booking_or_slot: Any, user_id: UUID | str | None) -> bool:
    """True if the user owns the slot, or owned it when the booking was made."""

    if hasattr(booking_or_slot, "slot_owner_id"):
        owner_id = booking_or_slot.slot_owner_id
    else:
        owner_id = getattr(booking_or_slot, "owner_id", None)
    return _same_id(owner_id, user_id)


def is_admin(user_or_context: Any) -> bool:
    return getattr(user_or_context, "role", None) == ADMIN_ROLE


def can_manage_slot(slot: Any, context: Any) -> bool:
    """Owners and community admins may edit or delete a slot."""

    return is_slot_owner(slot, context.user_id) or is_admin(context)


def can_view_booking(booking: Any, context: Any) -> bool:
    return (
        is_renter(booking, context.user_id)
        or is_slot_owner(booking, context.user_id)
        or is_admin(context)
    )


def can_cancel_booking(booking: Any, context: Any) -> bool:
    """Renter or slot owner; community admins as an override."""

    return can_view_booking(booking, context)
