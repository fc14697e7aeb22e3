"""DRF exception handler rendering every failure as ``{"error", "detail"}``."""

from __future__ import annotations

import structlog
from django.db import DatabaseError  # type: ignore
from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler as drf_exception_handler, set_rollback  # type: ignore

from shared.domain.errors import InternalError, ParkBoardError

logger = structlog.get_logger(__name__)

STATUS_CODES = {
    status.HTTP_400_BAD_REQUEST: "validation_error",
    status.HTTP_401_UNAUTHORIZED: "unauthorized",
    status.HTTP_403_FORBIDDEN: "forbidden",
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "method_not_allowed",
    status.HTTP_415_UNSUPPORTED_MEDIA_TYPE: "unsupported_media_type",
    status.HTTP_429_TOO_MANY_REQUESTS: "throttled",
}


def _view_name(context) -> str:
    view = context.get("view") if context else None
    return view.__class__.__name__ if view is not None else "unknown"


def error_response(code: str, detail, status_code: int, headers=None) -> Response:
    return Response({"error": code, "detail": detail}, status=status_code, headers=headers)


def parkboard_exception_handler(exc, context):
    if isinstance(exc, (ParkBoardError, DatabaseError)):
        set_rollback()

    if isinstance(exc, ParkBoardError):
        return error_response(exc.code, exc.detail, exc.status_code)

    if isinstance(exc, DatabaseError):
        # Store failures are never turned into success; the caller sees a 500.
        logger.error("request.store_failure", view=_view_name(context), exc_info=exc)
        return error_response(InternalError.code, InternalError.default_detail, InternalError.status_code)

    response = drf_exception_handler(exc, context)
    if response is None:
        return None

    data = response.data
    if isinstance(data, dict) and set(data) == {"detail"}:
        detail = data["detail"]
    else:
        detail = data
    code = STATUS_CODES.get(response.status_code, "error")
    response.data = {"error": code, "detail": detail}
    return response
