"""
Hotel Command Handlers

These are the write use cases of the hotel domain.
They validate input, resolve references and run the domain checks
inside the store's exclusive scopes.

Commands:
- CreateHotelCommand: Register a hotel and its floor plan
- CreateGuestCommand: Register a guest
- CreateRoomCommand: Add a room, numbering it from the floor plan if needed
- CreateBookingCommand: Book a room for a stay
- DeleteBookingCommand: Remove a booking
- DeleteRoomCommand: Remove a room and its bookings
- SyncRoomStatusCommand: Align a room's stored status with its bookings
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from uuid import UUID, uuid4
import logging

from shared.domain.exceptions import ConflictError, InvalidArgumentError, NotFoundError
from shared.domain.value_objects import StayPeriod
from apps.hotels.domain.availability import find_conflicts
from apps.hotels.domain.entities import (
    DEFAULT_BOOKING_STATUS,
    Booking,
    Guest,
    Hotel,
    Room,
    RoomStatus,
)
from apps.hotels.domain.repositories import EntityStore
from apps.hotels.domain.room_numbers import next_room_number

logger = logging.getLogger(__name__)


# ===== Commands =====

@dataclass
class CreateHotelCommand:
    name: str
    rooms_per_floor: int
    address: str = ''
    city: str = ''
    email: str = ''


@dataclass
class CreateGuestCommand:
    name: str
    email: str = ''
    phone: str = ''


@dataclass
class CreateRoomCommand:
    """
    Command to add a room to a hotel

    Leave ``number`` as None to take the next number of the floor plan.
    """
    hotel_id: UUID
    type: str
    price_per_night: Decimal
    number: int | None = None
    status: str = RoomStatus.AVAILABLE.value


@dataclass
class CreateBookingCommand:
    """
    Command to book a room

    This is the only way bookings should be created.
    """
    room_id: UUID
    guest_id: UUID
    check_in: date
    check_out: date
    status: str = DEFAULT_BOOKING_STATUS


@dataclass
class DeleteBookingCommand:
    booking_id: UUID


@dataclass
class DeleteRoomCommand:
    room_id: UUID


@dataclass
class SyncRoomStatusCommand:
    """Command to set a room Booked or Available from its bookings"""
    room_id: UUID
    as_of: date = field(default_factory=date.today)


# ===== Command Handlers =====

class CreateHotelHandler:

    def __init__(self, store: EntityStore):
        self.store = store

    def handle(self, command: CreateHotelCommand) -> Hotel:
        hotel = Hotel(
            id=uuid4(),
            name=command.name,
            rooms_per_floor=command.rooms_per_floor,
            address=command.address,
            city=command.city,
            email=command.email,
        )
        self.store.add_hotel(hotel)
        logger.info(f"Hotel created: {hotel.name} (ID: {hotel.id})")
        return hotel


class CreateGuestHandler:

    def __init__(self, store: EntityStore):
        self.store = store

    def handle(self, command: CreateGuestCommand) -> Guest:
        guest = Guest(id=uuid4(), name=command.name, email=command.email, phone=command.phone)
        self.store.add_guest(guest)
        logger.info(f"Guest created: {guest.id}")
        return guest


class CreateRoomHandler:
    """
    Handler for CreateRoom command

    Numbering and the uniqueness check run inside the hotel's exclusive
    scope, so two rooms created at once cannot get the same number.
    """

    def __init__(self, store: EntityStore):
        self.store = store

    def handle(self, command: CreateRoomCommand) -> Room:
        """
        Returns: Created Room

        Raises:
            NotFoundError: If the hotel does not exist
            InvalidArgumentError: If the price is negative
            ConflictError: If the number is already taken in the hotel
        """
        if Decimal(command.price_per_night) < 0:
            raise InvalidArgumentError("Price per night cannot be negative")

        with self.store.lock_hotel(command.hotel_id):
            hotel = self.store.get_hotel(command.hotel_id)
            if hotel is None:
                raise NotFoundError("Hotel", command.hotel_id)

            existing = self.store.rooms_for_hotel(hotel.id)
            number = command.number
            if number is None:
                number = next_room_number(hotel.rooms_per_floor, len(existing))

            if any(room.number == number for room in existing):
                logger.warning(f"Room number {number} already taken in hotel {hotel.id}")
                raise ConflictError(f"Room number {number} is already taken in hotel {hotel.name}")

            room = Room(
                id=uuid4(),
                hotel_id=hotel.id,
                number=number,
                type=command.type,
                price_per_night=command.price_per_night,
                status=command.status,
            )
            self.store.add_room(room)

        logger.info(f"Room {room.number} created in hotel {hotel.id} (ID: {room.id})")
        return room


class CreateBookingHandler:
    """
    Handler for CreateBooking command

    Double booking prevention:
    1. Validate dates and resolve room and guest
    2. Enter the room's exclusive scope (row lock / per-room mutex)
    3. Re-read the room's bookings and check for overlaps
    4. Insert the booking
    5. Leave the scope, then sync the room status

    Two callers booking overlapping stays on one room serialize on step 2,
    so the second one sees the first one's booking in step 3.
    """

    def __init__(self, store: EntityStore):
        self.store = store

    def handle(self, command: CreateBookingCommand) -> Booking:
        """
        Returns: Created Booking

        Raises:
            InvalidArgumentError: If check_in is not before check_out
            NotFoundError: If the room or the guest does not exist
            ConflictError: If the room is booked for overlapping dates
        """
        period = StayPeriod(command.check_in, command.check_out)

        logger.info(
            f"Creating booking for room {command.room_id}, "
            f"guest {command.guest_id}, dates {period}"
        )

        if self.store.get_room(command.room_id) is None:
            raise NotFoundError("Room", command.room_id)
        if self.store.get_guest(command.guest_id) is None:
            raise NotFoundError("Guest", command.guest_id)

        with self.store.lock_room(command.room_id):
            # The room may have been deleted while we waited for its scope
            if self.store.get_room(command.room_id) is None:
                raise NotFoundError("Room", command.room_id)

            conflicts = find_conflicts(
                self.store.bookings_for_room(command.room_id),
                command.check_in,
                command.check_out,
            )
            if conflicts:
                logger.warning(
                    f"Room {command.room_id} not available for {period}: "
                    f"{len(conflicts)} overlapping booking(s)"
                )
                raise ConflictError(
                    f"Room {command.room_id} is not available for dates {period}. "
                    f"Overlaps with booking {conflicts[0].id} ({conflicts[0].period})"
                )

            booking = Booking(
                id=uuid4(),
                room_id=command.room_id,
                guest_id=command.guest_id,
                check_in=command.check_in,
                check_out=command.check_out,
                status=command.status,
            )
            self.store.add_booking(booking)

        SyncRoomStatusHandler(self.store).handle(SyncRoomStatusCommand(room_id=command.room_id))

        logger.info(f"Booking created successfully: {booking.id}")
        return booking


class DeleteBookingHandler:

    def __init__(self, store: EntityStore):
        self.store = store

    def handle(self, command: DeleteBookingCommand) -> None:
        booking = self.store.get_booking(command.booking_id)
        if booking is None:
            raise NotFoundError("Booking", command.booking_id)

        with self.store.lock_room(booking.room_id):
            self.store.delete_booking(booking.id)

        SyncRoomStatusHandler(self.store).handle(SyncRoomStatusCommand(room_id=booking.room_id))
        logger.info(f"Booking {booking.id} deleted")


class DeleteRoomHandler:

    def __init__(self, store: EntityStore):
        self.store = store

    def handle(self, command: DeleteRoomCommand) -> None:
        with self.store.lock_room(command.room_id):
            if not self.store.delete_room(command.room_id):
                raise NotFoundError("Room", command.room_id)
        logger.info(f"Room {command.room_id} deleted with its bookings")


class SyncRoomStatusHandler:
    """
    Handler for SyncRoomStatus command

    Booked while some booking is active on ``as_of``, Available otherwise.
    Rooms under maintenance keep their status.
    """

    def __init__(self, store: EntityStore):
        self.store = store

    def handle(self, command: SyncRoomStatusCommand) -> str:
        with self.store.lock_room(command.room_id):
            room = self.store.get_room(command.room_id)
            if room is None:
                raise NotFoundError("Room", command.room_id)

            if room.status == RoomStatus.MAINTENANCE.value:
                return room.status

            is_booked = any(
                b.is_active_on(command.as_of)
                for b in self.store.bookings_for_room(room.id)
            )
            new_status = RoomStatus.BOOKED.value if is_booked else RoomStatus.AVAILABLE.value
            if room.status != new_status:
                self.store.set_room_status(room.id, new_status)
                logger.info(f"Room {room.number} status: {room.status} -> {new_status}")
            return new_status
