"""Recent activity feed: latest check-ins first."""

from typing import Iterable, List

from shared.domain.exceptions import InvalidArgumentError
from shared.domain.value_objects import instant_sort_key
from apps.hotels.domain.read_models import BookingSummary, BookingView

DEFAULT_RECENT_BOOKINGS_COUNT = 5


def recent_bookings(
    bookings: Iterable[BookingView],
    count: int = DEFAULT_RECENT_BOOKINGS_COUNT,
) -> List[BookingSummary]:
    """
    The ``count`` bookings with the latest check-in, latest first

    Bookings sharing a check-in keep their input order.

    Raises:
        InvalidArgumentError: If count is negative
    """
    if count < 0:
        raise InvalidArgumentError(f"Count must not be negative, got {count}")

    # sorted() is stable, reverse=True included
    ranked = sorted(bookings, key=lambda view: instant_sort_key(view.check_in), reverse=True)
    return [BookingSummary.from_view(view) for view in ranked[:count]]
