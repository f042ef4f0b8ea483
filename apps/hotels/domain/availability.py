"""
Room Availability

The first line of defense against double bookings. A room is free for a
requested stay when none of its bookings overlaps it, with the half-open
rule: a guest may check in on the day the previous guest checks out.

This check reserves nothing. Creating a booking must re-run it inside the
room's exclusive scope (see ``EntityStore.lock_room``).
"""

from datetime import date
from typing import Iterable, List

from shared.domain.value_objects import StayPeriod
from apps.hotels.domain.entities import Booking


def find_conflicts(
    existing: Iterable[Booking],
    check_in: date,
    check_out: date,
) -> List[Booking]:
    """
    Return the bookings overlapping ``[check_in, check_out)``

    Args:
        existing: Bookings of one room
        check_in: Requested check-in
        check_out: Requested check-out

    Raises:
        InvalidArgumentError: If check_in is not before check_out
    """
    requested = StayPeriod(check_in, check_out)
    return [b for b in existing if b.period.overlaps_with(requested)]


def is_available(existing: Iterable[Booking], check_in: date, check_out: date) -> bool:
    """True when no booking in ``existing`` overlaps the requested stay."""
    return not find_conflicts(existing, check_in, check_out)
