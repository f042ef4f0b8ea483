"""
Hotel Domain Entities

Core records of the hotel management domain:
- Hotel: Owns rooms and the floor plan used for room numbering
- Room: A bookable unit with a type, nightly price and status
- Guest: A person who books rooms
- Booking: A guest's stay in one room
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from uuid import UUID

from shared.domain.base import Entity
from shared.domain.exceptions import InvalidArgumentError
from shared.domain.value_objects import StayPeriod


class RoomStatus(str, Enum):
    """Stored room status, as set by administrators and status sync."""
    AVAILABLE = 'Available'
    BOOKED = 'Booked'
    MAINTENANCE = 'Maintenance'


class RoomType(str, Enum):
    """Room types the capacity policy knows about. Rooms may use others."""
    SINGLE = 'Single'
    DOUBLE = 'Double'
    SUITE = 'Suite'


DEFAULT_BOOKING_STATUS = 'Confirmed'


@dataclass(eq=False)
class Hotel(Entity):
    """
    Hotel

    ``rooms_per_floor`` is the floor capacity the room number allocator
    groups numbers by; it must be positive.
    """
    name: str
    rooms_per_floor: int
    address: str = ''
    city: str = ''
    email: str = ''

    def __post_init__(self):
        if self.rooms_per_floor is None or self.rooms_per_floor <= 0:
            raise InvalidArgumentError(
                f"Rooms per floor must be positive, got {self.rooms_per_floor}"
            )

    def __str__(self):
        return self.name


@dataclass(eq=False)
class Room(Entity):
    """Room owned by exactly one hotel. ``number`` is unique within it."""
    hotel_id: UUID
    number: int
    type: str
    price_per_night: Decimal
    status: str = RoomStatus.AVAILABLE.value

    def __post_init__(self):
        if isinstance(self.price_per_night, float):
            # Decimal(0.1) would keep the binary error
            self.price_per_night = Decimal(str(self.price_per_night))
        else:
            self.price_per_night = Decimal(self.price_per_night)
        if self.price_per_night < 0:
            raise InvalidArgumentError("Price per night cannot be negative")
        if isinstance(self.status, RoomStatus):
            self.status = self.status.value
        if isinstance(self.type, RoomType):
            self.type = self.type.value

    @property
    def is_available(self) -> bool:
        """Stored status only; bookings are not consulted."""
        return self.status == RoomStatus.AVAILABLE.value

    def __str__(self):
        return f"Room {self.number} ({self.type})"


@dataclass(eq=False)
class Guest(Entity):
    name: str
    email: str = ''
    phone: str = ''

    def __str__(self):
        return self.name


@dataclass(eq=False)
class Booking(Entity):
    """
    Booking

    References one room and one guest. ``status`` is a free text
    lifecycle label; nothing in the domain branches on it.

    Key invariants:
    - check_in < check_out
    - "active" is computed against a day on every query, never stored
    """
    room_id: UUID
    guest_id: UUID
    check_in: date
    check_out: date
    status: str = DEFAULT_BOOKING_STATUS

    def __post_init__(self):
        StayPeriod(self.check_in, self.check_out)

    @property
    def period(self) -> StayPeriod:
        return StayPeriod(self.check_in, self.check_out)

    @property
    def nights(self) -> int:
        return self.period.nights

    def is_active_on(self, day: date) -> bool:
        return self.period.is_active_on(day)

    def __repr__(self):
        return (
            f"Booking(id={self.id}, room_id={self.room_id}, "
            f"check_in={self.check_in}, check_out={self.check_out})"
        )
