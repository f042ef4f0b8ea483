"""
In-memory Entity Store

Keeps records in dicts, for tests and for embedding the domain without
a database. Records are copied in and out so callers cannot change
stored state behind the store's back.

Exclusive scopes are per-id ``threading.Lock`` objects: two threads
booking the same room serialize on that room's lock, bookings of
different rooms do not wait for each other.
"""

from contextlib import contextmanager
from copy import copy
from typing import Dict, Iterator, List, Tuple
from uuid import UUID
import logging
import threading

from shared.domain.exceptions import ConflictError, NotFoundError
from shared.domain.value_objects import instant_sort_key
from apps.hotels.domain.entities import Booking, Guest, Hotel, Room
from apps.hotels.domain.repositories import EntityStore

logger = logging.getLogger(__name__)


class InMemoryEntityStore(EntityStore):

    def __init__(self):
        self._hotels: Dict[UUID, Hotel] = {}
        self._rooms: Dict[UUID, Room] = {}
        self._guests: Dict[UUID, Guest] = {}
        self._bookings: Dict[UUID, Booking] = {}

        # Guards the dicts above
        self._data_lock = threading.RLock()
        # Guards _scope_locks
        self._registry_lock = threading.Lock()
        self._scope_locks: Dict[Tuple[str, UUID], threading.Lock] = {}

    # ===== Point lookups =====

    def get_hotel(self, hotel_id: UUID) -> Hotel | None:
        return self._copy_of(self._hotels, hotel_id)

    def get_room(self, room_id: UUID) -> Room | None:
        return self._copy_of(self._rooms, room_id)

    def get_guest(self, guest_id: UUID) -> Guest | None:
        return self._copy_of(self._guests, guest_id)

    def get_booking(self, booking_id: UUID) -> Booking | None:
        return self._copy_of(self._bookings, booking_id)

    # ===== Scans =====

    def list_hotels(self) -> List[Hotel]:
        with self._data_lock:
            hotels = [copy(h) for h in self._hotels.values()]
        return sorted(hotels, key=lambda h: h.name)

    def rooms_for_hotel(self, hotel_id: UUID) -> List[Room]:
        with self._data_lock:
            rooms = [copy(r) for r in self._rooms.values() if r.hotel_id == hotel_id]
        return sorted(rooms, key=lambda r: r.number)

    def bookings_for_room(self, room_id: UUID) -> List[Booking]:
        with self._data_lock:
            bookings = [copy(b) for b in self._bookings.values() if b.room_id == room_id]
        return sorted(bookings, key=lambda b: instant_sort_key(b.check_in))

    def bookings_for_hotel(self, hotel_id: UUID) -> List[Booking]:
        with self._data_lock:
            room_ids = {r.id for r in self._rooms.values() if r.hotel_id == hotel_id}
            bookings = [copy(b) for b in self._bookings.values() if b.room_id in room_ids]
        return sorted(bookings, key=lambda b: instant_sort_key(b.check_in))

    def guests_by_ids(self, guest_ids: List[UUID]) -> List[Guest]:
        with self._data_lock:
            guests = [copy(self._guests[g]) for g in set(guest_ids) if g in self._guests]
        return sorted(guests, key=lambda g: g.name)

    # ===== Writes =====

    def add_hotel(self, hotel: Hotel) -> None:
        with self._data_lock:
            self._hotels[hotel.id] = copy(hotel)

    def add_room(self, room: Room) -> None:
        with self._data_lock:
            taken = any(
                r.hotel_id == room.hotel_id and r.number == room.number and r.id != room.id
                for r in self._rooms.values()
            )
            if taken:
                raise ConflictError(
                    f"Room number {room.number} is already taken in hotel {room.hotel_id}"
                )
            self._rooms[room.id] = copy(room)

    def add_guest(self, guest: Guest) -> None:
        with self._data_lock:
            self._guests[guest.id] = copy(guest)

    def add_booking(self, booking: Booking) -> None:
        with self._data_lock:
            if booking.room_id not in self._rooms:
                raise NotFoundError("Room", booking.room_id)
            self._bookings[booking.id] = copy(booking)

    def set_room_status(self, room_id: UUID, status: str) -> None:
        with self._data_lock:
            room = self._rooms.get(room_id)
            if room is not None:
                room.status = status

    def delete_booking(self, booking_id: UUID) -> bool:
        with self._data_lock:
            return self._bookings.pop(booking_id, None) is not None

    def delete_room(self, room_id: UUID) -> bool:
        with self._data_lock:
            if self._rooms.pop(room_id, None) is None:
                return False
            for booking_id in [b.id for b in self._bookings.values() if b.room_id == room_id]:
                del self._bookings[booking_id]
            return True

    # ===== Exclusive scopes =====

    def lock_room(self, room_id: UUID):
        return self._exclusive('room', room_id)

    def lock_hotel(self, hotel_id: UUID):
        return self._exclusive('hotel', hotel_id)

    @contextmanager
    def _exclusive(self, kind: str, entity_id: UUID) -> Iterator[None]:
        with self._registry_lock:
            lock = self._scope_locks.setdefault((kind, entity_id), threading.Lock())

        logger.debug(f"Acquiring {kind} lock {entity_id}")
        with lock:
            yield

    def _copy_of(self, records: Dict, entity_id: UUID):
        with self._data_lock:
            record = records.get(entity_id)
            return copy(record) if record is not None else None
