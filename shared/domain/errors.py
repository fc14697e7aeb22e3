"""
Domain Errors

Every failure a ParkBoard service can report is one of the exceptions below.
Each carries the HTTP status it maps to and a stable machine-readable code;
`shared.infrastructure.exception_handler` renders them as
``{"error": code, "detail": message}``.

Groups:
- Session: Unauthorized, NoCommunityAssigned
- Caller input: ValidationFailed, ImmutableFieldViolation, InvalidIdentifier,
  InvalidStatusTransition, DuplicateSlotNumber
- Visibility and ownership: NotFound, Forbidden
- Business-rule conflicts: SlotUnavailable, ActiveBookingsExist,
  ImmutableBookingState
- Store failures: InternalError
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


class ParkBoardError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = 400
    code = "error"
    default_detail = "Request failed."

    def __init__(self, detail: Any = None):
        self.detail = detail if detail is not None else self.default_detail
        super().__init__(self.detail)


class Unauthorized(ParkBoardError):
    status_code = 401
    code = "unauthorized"
    default_detail = "Unauthorized"


class NoCommunityAssigned(ParkBoardError):
    status_code = 403
    code = "no_community_assigned"
    default_detail = "No community assigned"


class ValidationFailed(ParkBoardError):
    code = "validation_error"
    default_detail = "Invalid request."


class ImmutableFieldViolation(ParkBoardError):
    code = "immutable_field_violation"
    default_detail = "Attempted to change an immutable field."


class InvalidIdentifier(ParkBoardError):
    code = "invalid_identifier"
    default_detail = "Invalid identifier format."


class InvalidStatusTransition(ParkBoardError):
    code = "invalid_status_transition"
    default_detail = 'Only status="cancelled" is allowed.'


class DuplicateSlotNumber(ParkBoardError):
    code = "duplicate_slot_number"
    default_detail = "Slot number already exists."


class NotFound(ParkBoardError):
    status_code = 404
    code = "not_found"
    default_detail = "Not found."


class Forbidden(ParkBoardError):
    status_code = 403
    code = "forbidden"
    default_detail = "You do not have permission to perform this action."


class SlotUnavailable(ParkBoardError):
    status_code = 409
    code = "slot_unavailable"
    default_detail = "Slot is already booked for this time period."


class ActiveBookingsExist(ParkBoardError):
    status_code = 409
    code = "active_bookings_exist"
    default_detail = "Cannot delete slot with active bookings."


class ImmutableBookingState(ParkBoardError):
    code = "immutable_booking_state"
    default_detail = "Cannot cancel completed or no_show bookings."


class InternalError(ParkBoardError):
    status_code = 500
    code = "internal_error"
    default_detail = "Internal server error."


def reject_immutable_fields(payload: Mapping[str, Any] | None, immutable: Iterable[str]) -> None:
    """Raise ImmutableFieldViolation if the payload names any immutable field."""

    if payload is None:
        return
    if not isinstance(payload, Mapping):
        raise ValidationFailed("Request body must be a JSON object.")
    offending = sorted(name for name in immutable if name in payload)
    if offending:
        raise ImmutableFieldViolation(
            f"Cannot change {', '.join(offending)} - these fields are immutable."
        )
