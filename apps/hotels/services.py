"""Read-side services for the hotel dashboard and booking screens."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import List
from uuid import UUID
import logging

from shared.domain.exceptions import NotFoundError
from shared.domain.value_objects import StayPeriod, instant_sort_key
from apps.hotels import conf
from apps.hotels.domain import availability, dashboard, occupancy, recent_activity, revenue
from apps.hotels.domain.entities import Hotel, Room
from apps.hotels.domain.policies import RoomTypeCapacity
from apps.hotels.domain.read_models import BookingSummary, BookingView, DashboardData, GuestStays
from apps.hotels.domain.repositories import EntityStore
from apps.hotels.domain.room_numbers import next_room_number

logger = logging.getLogger(__name__)


class HotelQueryService:
    """
    Resolves identifiers against the entity store and runs the domain
    aggregators over what it reads.

    Hotel-scoped queries raise NotFoundError for an unknown hotel.
    ``as_of`` defaults to today.
    """

    def __init__(
        self,
        store: EntityStore,
        *,
        capacity: RoomTypeCapacity | None = None,
        recent_count: int | None = None,
    ):
        self.store = store
        self._capacity = capacity
        self._recent_count = recent_count

    @property
    def capacity(self) -> RoomTypeCapacity:
        if self._capacity is not None:
            return self._capacity
        return conf.room_type_capacity()

    @property
    def recent_count(self) -> int:
        if self._recent_count is not None:
            return self._recent_count
        return conf.recent_bookings_count()

    # ===== Hotels and rooms =====

    def list_hotels(self) -> List[Hotel]:
        return self.store.list_hotels()

    def get_hotel(self, hotel_id: UUID) -> Hotel:
        hotel = self.store.get_hotel(hotel_id)
        if hotel is None:
            raise NotFoundError("Hotel", hotel_id)
        return hotel

    def get_room(self, room_id: UUID) -> Room:
        room = self.store.get_room(room_id)
        if room is None:
            raise NotFoundError("Room", room_id)
        return room

    def rooms_per_floor(self, hotel_id: UUID) -> int:
        return self.get_hotel(hotel_id).rooms_per_floor

    def hotel_rooms(self, hotel_id: UUID) -> List[Room]:
        self.get_hotel(hotel_id)
        return self.store.rooms_for_hotel(hotel_id)

    def next_room_number(self, hotel_id: UUID) -> int:
        hotel = self.get_hotel(hotel_id)
        return next_room_number(hotel.rooms_per_floor, len(self.store.rooms_for_hotel(hotel_id)))

    # ===== Availability =====

    def is_room_available(self, room_id: UUID, check_in: date, check_out: date) -> bool:
        """
        Read-only overlap check against the room's current bookings

        A True answer reserves nothing; use CreateBookingHandler to book.
        """
        StayPeriod(check_in, check_out)
        self.get_room(room_id)
        return availability.is_available(self.store.bookings_for_room(room_id), check_in, check_out)

    def is_room_currently_booked(self, room_id: UUID, as_of: date | None = None) -> bool:
        self.get_room(room_id)
        as_of = as_of or date.today()
        return any(b.is_active_on(as_of) for b in self.store.bookings_for_room(room_id))

    # ===== Bookings and guests =====

    def hotel_bookings(self, hotel_id: UUID) -> List[BookingView]:
        """All bookings of the hotel, latest check-in first."""
        views = self._booking_views(hotel_id)
        return sorted(views, key=lambda view: instant_sort_key(view.check_in), reverse=True)

    def hotel_guests(self, hotel_id: UUID) -> List[GuestStays]:
        """Guests with at least one booking in the hotel, by name."""
        views = self._booking_views(hotel_id)
        guests = self.store.guests_by_ids([view.guest.id for view in views])
        stays = []
        for guest in guests:
            bookings = [view.booking for view in views if view.guest.id == guest.id]
            bookings.sort(key=lambda b: instant_sort_key(b.check_in), reverse=True)
            stays.append(GuestStays(guest=guest, bookings=tuple(bookings)))
        return stays

    # ===== Dashboard aggregates =====

    def active_bookings(self, hotel_id: UUID, as_of: date | None = None) -> List[BookingView]:
        return occupancy.active_bookings(self._booking_views(hotel_id), as_of or date.today())

    def current_guest_count(self, hotel_id: UUID, as_of: date | None = None) -> int:
        return occupancy.current_guest_count(self.active_bookings(hotel_id, as_of), self.capacity)

    def available_rooms(self, hotel_id: UUID, as_of: date | None = None) -> List[Room]:
        active = self.active_bookings(hotel_id, as_of)
        return occupancy.available_rooms(self.store.rooms_for_hotel(hotel_id), active)

    def monthly_revenue(self, hotel_id: UUID, as_of: date | None = None) -> Decimal:
        return revenue.monthly_revenue(self._booking_views(hotel_id), as_of or date.today())

    def recent_bookings(self, hotel_id: UUID, count: int | None = None) -> List[BookingSummary]:
        if count is None:
            count = self.recent_count
        return recent_activity.recent_bookings(self._booking_views(hotel_id), count)

    def build_dashboard(self, hotel_id: UUID, as_of: date | None = None) -> DashboardData:
        hotel = self.get_hotel(hotel_id)
        as_of = as_of or date.today()
        logger.debug(f"Building dashboard for hotel {hotel_id} as of {as_of}")

        rooms = self.store.rooms_for_hotel(hotel_id)
        return dashboard.build_dashboard(
            hotel,
            rooms,
            self._views_for(rooms, self.store.bookings_for_hotel(hotel_id)),
            as_of,
            capacity=self.capacity,
            recent_count=self.recent_count,
        )

    # ===== Internals =====

    def _booking_views(self, hotel_id: UUID) -> List[BookingView]:
        self.get_hotel(hotel_id)
        rooms = self.store.rooms_for_hotel(hotel_id)
        return self._views_for(rooms, self.store.bookings_for_hotel(hotel_id))

    def _views_for(self, rooms, bookings) -> List[BookingView]:
        """Join bookings with their room and guest, keeping booking order."""
        rooms_by_id = {room.id: room for room in rooms}
        guests_by_id = {
            guest.id: guest
            for guest in self.store.guests_by_ids([b.guest_id for b in bookings])
        }

        views = []
        for booking in bookings:
            room = rooms_by_id.get(booking.room_id)
            if room is None:
                # Deleted between the two reads
                continue
            guest = guests_by_id.get(booking.guest_id)
            if guest is None:
                raise NotFoundError("Guest", booking.guest_id)
            views.append(BookingView(booking=booking, room=room, guest=guest))
        return views
