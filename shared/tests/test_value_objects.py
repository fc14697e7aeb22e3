"""Unit tests for shared value objects."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal

from django.test import SimpleTestCase

from shared.domain.value_objects import TimeRange

T0 = datetime(2025, 3, 1, 10, 0, tzinfo=timezone.utc)


def hours(start: float, end: float) -> TimeRange:
    return TimeRange(T0 + timedelta(hours=start), T0 + timedelta(hours=end))


class TimeRangeTests(SimpleTestCase):
    def test_rejects_empty_or_inverted_range(self) -> None:
        with self.assertRaises(ValueError):
            TimeRange(T0, T0)
        with self.assertRaises(ValueError):
            hours(2, 1)

    def test_overlap_is_half_open(self) -> None:
        self.assertTrue(hours(0, 2).overlaps_with(hours(1, 3)))
        self.assertTrue(hours(1, 3).overlaps_with(hours(0, 2)))
        self.assertTrue(hours(0, 4).overlaps_with(hours(1, 2)))
        self.assertFalse(hours(0, 2).overlaps_with(hours(2, 4)))
        self.assertFalse(hours(2, 4).overlaps_with(hours(0, 2)))

    def test_hours_include_fractions(self) -> None:
        self.assertEqual(hours(0, 1.5).hours, Decimal("1.5"))
        self.assertEqual(hours(0, 24).duration, timedelta(hours=24))
