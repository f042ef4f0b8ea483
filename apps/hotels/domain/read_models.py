"""
Hotel Read Models

Immutable shapes handed to callers of the query side:
- BookingView: A booking joined with its room and guest
- BookingSummary: A line of the recent activity feed
- GuestStays: A guest with their bookings in one hotel
- DashboardData: The per-hotel dashboard
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Tuple
from uuid import UUID

from shared.domain.base import ValueObject
from apps.hotels.domain.entities import Booking, Guest, Room


@dataclass(frozen=True)
class BookingView(ValueObject):
    booking: Booking
    room: Room
    guest: Guest

    @property
    def id(self) -> UUID:
        return self.booking.id

    @property
    def check_in(self) -> date:
        return self.booking.check_in

    @property
    def check_out(self) -> date:
        return self.booking.check_out

    @property
    def hotel_id(self) -> UUID:
        return self.room.hotel_id


@dataclass(frozen=True)
class BookingSummary(ValueObject):
    id: UUID
    check_in: date
    check_out: date
    guest_name: str
    room_number: int

    @classmethod
    def from_view(cls, view: BookingView) -> 'BookingSummary':
        return cls(
            id=view.id,
            check_in=view.check_in,
            check_out=view.check_out,
            guest_name=view.guest.name,
            room_number=view.room.number,
        )


@dataclass(frozen=True)
class GuestStays(ValueObject):
    """A guest and their bookings in one hotel, latest check-in first."""
    guest: Guest
    bookings: Tuple[Booking, ...]


@dataclass(frozen=True)
class DashboardData(ValueObject):
    """
    Per-hotel dashboard

    ``total_guests`` is the capacity proxy sum over active bookings,
    not a head count.
    """
    hotel_name: str
    total_guests: int
    available_rooms: Tuple[Room, ...]
    active_bookings: Tuple[BookingView, ...]
    monthly_revenue: Decimal
    recent_bookings: Tuple[BookingSummary, ...]
