"""
Common Value Objects

Value objects used across multiple domains:
- TimeRange: a half-open booking window [start, end)
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal

SECONDS_PER_HOUR = Decimal(3600)


@dataclass(frozen=True)
class TimeRange:
    """
    Time range value object

    Represents a range from start (inclusive) to end (exclusive).
    Used for booking windows and availability checks.
    """
    start: datetime
    end: datetime

    def __post_init__(self):
        if self.start >= self.end:
            raise ValueError(f"Start ({self.start}) must be before end ({self.end})")

    def overlaps_with(self, other: 'TimeRange') -> bool:
        """
        Check if this range overlaps with another

        End is exclusive, so back-to-back ranges don't overlap.

        Examples:
            - [10:00, 12:00) overlaps with [11:00, 13:00) -> True
            - [10:00, 12:00) overlaps with [12:00, 14:00) -> False (adjacent)
        """
        if not isinstance(other, TimeRange):
            raise TypeError("Can only check overlap with another TimeRange")

        # Overlap formula: start1 < end2 AND start2 < end1
        return self.start < other.end and other.start < self.end

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @property
    def hours(self) -> Decimal:
        """Exact duration in hours, fractional hours included."""
        return Decimal(int(self.duration.total_seconds())) / SECONDS_PER_HOUR

    def __str__(self):
        return f"[{self.start.isoformat()}, {self.end.isoformat()})"
