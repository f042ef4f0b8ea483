"""
Monthly Revenue

Revenue is booked at check-in: a stay counts toward the month its
check-in falls in, for its full length.

Only the calendar month is compared, not the year, so a May booking from
any year counts toward the revenue of any May. Kept as is until the
owners of the dashboard decide otherwise.
"""

from datetime import date
from decimal import Decimal
from typing import Iterable

from apps.hotels.domain.read_models import BookingView


def booking_revenue(view: BookingView) -> Decimal:
    """Nightly price times whole nights."""
    return view.room.price_per_night * view.booking.nights


def monthly_revenue(bookings: Iterable[BookingView], as_of: date) -> Decimal:
    return sum(
        (booking_revenue(view) for view in bookings if view.check_in.month == as_of.month),
        Decimal('0'),
    )
