"""Booking rule settings with defaults.

Values come from ``settings.PARKBOARD`` so each environment can tune them.
"""

from __future__ import annotations

from datetime import timedelta

from django.conf import settings  # type: ignore

DEFAULTS = {
    "BOOKING_MIN_DURATION_HOURS": 1,
    "BOOKING_MAX_DURATION_HOURS": 24,
    "BOOKING_MAX_ADVANCE_DAYS": 30,
    "BOOKING_START_GRACE_MINUTES": 5,
    "BOOKING_INITIAL_STATUS": "confirmed",
}


def get_setting(name: str):
    return getattr(settings, "PARKBOARD", {}).get(name, DEFAULTS[name])


def min_duration() -> timedelta:
    return timedelta(hours=get_setting("BOOKING_MIN_DURATION_HOURS"))


def max_duration() -> timedelta:
    return timedelta(hours=get_setting("BOOKING_MAX_DURATION_HOURS"))


def max_advance() -> timedelta:
    return timedelta(days=get_setting("BOOKING_MAX_ADVANCE_DAYS"))


def start_grace() -> timedelta:
    return timedelta(minutes=get_setting("BOOKING_START_GRACE_MINUTES"))


def initial_status() -> str:
    return get_setting("BOOKING_INITIAL_STATUS")
