"""
Occupancy

Which bookings are in progress on a given day, how many guests that
represents under the capacity policy, and which rooms are left.
"""

from datetime import date
from typing import Iterable, List

from apps.hotels.domain.entities import Room
from apps.hotels.domain.policies import DEFAULT_ROOM_TYPE_CAPACITY, RoomTypeCapacity
from apps.hotels.domain.read_models import BookingView


def active_bookings(bookings: Iterable[BookingView], as_of: date) -> List[BookingView]:
    """Bookings with check_in <= as_of <= check_out, compared by calendar day."""
    return [view for view in bookings if view.booking.is_active_on(as_of)]


def current_guest_count(
    active: Iterable[BookingView],
    capacity: RoomTypeCapacity = DEFAULT_ROOM_TYPE_CAPACITY,
) -> int:
    """
    Sum of the capacity proxy of each active booking's room type

    Two bookings of the same room both count.
    """
    return sum(capacity.for_type(view.room.type) for view in active)


def available_rooms(rooms: Iterable[Room], active: Iterable[BookingView]) -> List[Room]:
    """
    Rooms free right now

    A room qualifies when no active booking holds it and its stored status
    is Available. Rooms under maintenance or marked Booked are excluded
    even without an active booking.
    """
    occupied_room_ids = {view.room.id for view in active}
    return [
        room for room in rooms
        if room.id not in occupied_room_ids and room.is_available
    ]
