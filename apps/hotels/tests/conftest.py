from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from apps.hotels.domain.entities import Booking, Guest, Hotel, Room, RoomStatus
from apps.hotels.domain.read_models import BookingView
from apps.hotels.infrastructure.memory_store import InMemoryEntityStore


@pytest.fixture
def store() -> InMemoryEntityStore:
    return InMemoryEntityStore()


@pytest.fixture
def hotel(store) -> Hotel:
    hotel = Hotel(name="Grand Budapest", rooms_per_floor=10, city="Zubrowka")
    store.add_hotel(hotel)
    return hotel


@pytest.fixture
def guest(store) -> Guest:
    guest = Guest(name="Alice", email="alice@example.com", phone="+10000000001")
    store.add_guest(guest)
    return guest


@pytest.fixture
def add_room(store):
    def _add_room(hotel, number, type="Single", price="100.00", status=RoomStatus.AVAILABLE.value):
        room = Room(
            hotel_id=hotel.id,
            number=number,
            type=type,
            price_per_night=Decimal(price),
            status=status,
        )
        store.add_room(room)
        return room

    return _add_room


@pytest.fixture
def add_booking(store):
    def _add_booking(room, guest, check_in: date, check_out: date):
        booking = Booking(room_id=room.id, guest_id=guest.id, check_in=check_in, check_out=check_out)
        store.add_booking(booking)
        return booking

    return _add_booking


@pytest.fixture
def make_view():
    """BookingViews built without a store, for the pure domain functions."""
    def _make_view(check_in: date, check_out: date, *, type="Single", price="100.00",
                   number=101, hotel_id=None, guest_name="Alice", status=RoomStatus.AVAILABLE.value):
        hotel_id = hotel_id or Hotel(name="H", rooms_per_floor=10).id
        room = Room(hotel_id=hotel_id, number=number, type=type, price_per_night=Decimal(price), status=status)
        guest = Guest(name=guest_name)
        booking = Booking(room_id=room.id, guest_id=guest.id, check_in=check_in, check_out=check_out)
        return BookingView(booking=booking, room=room, guest=guest)

    return _make_view
