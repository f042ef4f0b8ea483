"""
Common Value Objects

Value objects used across the domain:
- StayPeriod: A check-in to check-out range, half-open for overlap checks
"""

from dataclasses import dataclass
from datetime import date, datetime, time

from shared.domain.base import ValueObject
from shared.domain.exceptions import InvalidArgumentError


def calendar_day(value: date) -> date:
    """Return the calendar day of a date or datetime (time of day dropped)."""
    if isinstance(value, datetime):
        return value.date()
    return value


def align_instant(value: date, reference: date) -> date:
    """
    Make ``value`` comparable with ``reference``

    A plain date compared against a datetime is promoted to midnight of
    that day, carrying the reference's tzinfo.
    """
    if isinstance(reference, datetime) and not isinstance(value, datetime):
        return datetime.combine(value, time.min, tzinfo=reference.tzinfo)
    if isinstance(value, datetime) and not isinstance(reference, datetime):
        return value.date()
    return value


def instant_sort_key(value: date) -> datetime:
    """
    Sort key ordering dates and datetimes together

    Dates sort as midnight of that day. Datetimes sort by wall-clock time,
    so aware and naive values can share one list.
    """
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    return datetime.combine(value, time.min)


@dataclass(frozen=True)
class StayPeriod(ValueObject):
    """
    Stay period value object

    Represents a range from check_in (inclusive) to check_out (exclusive)
    for availability purposes. Active-on-a-day checks are inclusive on
    both ends and compare calendar days only.
    """
    check_in: date
    check_out: date

    def __post_init__(self):
        if align_instant(self.check_in, self.check_out) >= self.check_out:
            raise InvalidArgumentError(
                f"Check-in ({self.check_in}) must be before check-out ({self.check_out})"
            )

    def overlaps_with(self, other: 'StayPeriod') -> bool:
        """
        Check if this period overlaps with another

        Adjacent periods (one checks out the day the other checks in)
        do not overlap.

        Examples:
            - (10, 12) overlaps with (11, 14) -> True
            - (10, 12) overlaps with (12, 14) -> False (adjacent)
        """
        if not isinstance(other, StayPeriod):
            raise TypeError("Can only check overlap with another StayPeriod")

        # start1 < end2 AND end1 > start2
        return (align_instant(self.check_in, other.check_out) < other.check_out and
                align_instant(self.check_out, other.check_in) > other.check_in)

    def is_active_on(self, day: date) -> bool:
        """Inclusive on both ends, calendar days only."""
        day = calendar_day(day)
        return calendar_day(self.check_in) <= day <= calendar_day(self.check_out)

    @property
    def nights(self) -> int:
        """Whole days between check-in and check-out, partial days dropped."""
        check_in = align_instant(self.check_in, self.check_out)
        return (self.check_out - check_in).days

    def __str__(self):
        return f"{self.check_in.isoformat()} - {self.check_out.isoformat()}"
