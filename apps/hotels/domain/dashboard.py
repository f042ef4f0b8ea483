"""
Hotel Dashboard

Composes occupancy, revenue and recent activity into one read model.
No logic of its own beyond wiring the aggregators together.
"""

from datetime import date
from typing import Iterable

from apps.hotels.domain import occupancy, recent_activity, revenue
from apps.hotels.domain.entities import Hotel, Room
from apps.hotels.domain.policies import DEFAULT_ROOM_TYPE_CAPACITY, RoomTypeCapacity
from apps.hotels.domain.read_models import BookingView, DashboardData


def build_dashboard(
    hotel: Hotel,
    rooms: Iterable[Room],
    bookings: Iterable[BookingView],
    as_of: date,
    *,
    capacity: RoomTypeCapacity = DEFAULT_ROOM_TYPE_CAPACITY,
    recent_count: int = recent_activity.DEFAULT_RECENT_BOOKINGS_COUNT,
) -> DashboardData:
    """
    Build the dashboard of ``hotel`` as of ``as_of``

    Args:
        hotel: The hotel
        rooms: All rooms of the hotel
        bookings: All bookings of the hotel's rooms
        as_of: Day the occupancy and revenue month are evaluated for
        capacity: Capacity proxy policy for the guest count
        recent_count: Length of the recent activity feed
    """
    bookings = list(bookings)
    active = occupancy.active_bookings(bookings, as_of)

    return DashboardData(
        hotel_name=hotel.name,
        total_guests=occupancy.current_guest_count(active, capacity),
        available_rooms=tuple(occupancy.available_rooms(rooms, active)),
        active_bookings=tuple(active),
        monthly_revenue=revenue.monthly_revenue(bookings, as_of),
        recent_bookings=tuple(recent_activity.recent_bookings(bookings, recent_count)),
    )
