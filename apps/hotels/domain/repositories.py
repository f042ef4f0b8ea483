"""
Entity Store Interface

The store holds hotels, rooms, guests and bookings. The domain only reads
and writes through this interface, so it runs the same against memory
and against the database.

Double booking prevention needs one guarantee from every store:
``lock_room(room_id)`` must give the caller an exclusive scope for that
room. The booking workflow re-reads the room's bookings, checks for an
overlap and inserts inside that scope, so two callers can never both
pass the check for overlapping stays. ``lock_hotel`` does the same for
room numbering.
"""

from abc import ABC, abstractmethod
from typing import ContextManager, List
from uuid import UUID

from apps.hotels.domain.entities import Booking, Guest, Hotel, Room


class EntityStore(ABC):
    """Abstract entity store"""

    # ===== Point lookups (None when the id does not resolve) =====

    @abstractmethod
    def get_hotel(self, hotel_id: UUID) -> Hotel | None:
        pass

    @abstractmethod
    def get_room(self, room_id: UUID) -> Room | None:
        pass

    @abstractmethod
    def get_guest(self, guest_id: UUID) -> Guest | None:
        pass

    @abstractmethod
    def get_booking(self, booking_id: UUID) -> Booking | None:
        pass

    # ===== Scans =====

    @abstractmethod
    def list_hotels(self) -> List[Hotel]:
        """All hotels ordered by name."""

    @abstractmethod
    def rooms_for_hotel(self, hotel_id: UUID) -> List[Room]:
        """Rooms of a hotel ordered by number."""

    @abstractmethod
    def bookings_for_room(self, room_id: UUID) -> List[Booking]:
        """Bookings of a room ordered by check-in, then insertion."""

    @abstractmethod
    def bookings_for_hotel(self, hotel_id: UUID) -> List[Booking]:
        """Bookings of all rooms of a hotel ordered by check-in, then insertion."""

    @abstractmethod
    def guests_by_ids(self, guest_ids: List[UUID]) -> List[Guest]:
        """Guests for the given ids ordered by name; unknown ids are skipped."""

    # ===== Writes =====

    @abstractmethod
    def add_hotel(self, hotel: Hotel) -> None:
        pass

    @abstractmethod
    def add_room(self, room: Room) -> None:
        """Raises ConflictError if the hotel already has a room with that number."""

    @abstractmethod
    def add_guest(self, guest: Guest) -> None:
        pass

    @abstractmethod
    def add_booking(self, booking: Booking) -> None:
        """Raises NotFoundError if the booking's room does not exist."""

    @abstractmethod
    def set_room_status(self, room_id: UUID, status: str) -> None:
        pass

    @abstractmethod
    def delete_booking(self, booking_id: UUID) -> bool:
        """Returns False if there was nothing to delete."""

    @abstractmethod
    def delete_room(self, room_id: UUID) -> bool:
        """Deletes the room and its bookings. Returns False if absent."""

    # ===== Exclusive scopes =====

    @abstractmethod
    def lock_room(self, room_id: UUID) -> ContextManager[None]:
        """Exclusive scope for check-then-insert on one room's bookings."""

    @abstractmethod
    def lock_hotel(self, hotel_id: UUID) -> ContextManager[None]:
        """Exclusive scope for allocating a room number in one hotel."""
