"""
Django Entity Store

Maps the ORM rows of ``apps.hotels.models`` to domain entities.

Exclusive scopes open a ``DjangoUnitOfWork`` and lock the room (or
hotel) row with SELECT FOR UPDATE, so a concurrent booking of the same
room blocks until the first transaction commits and then sees its
booking. Backends without row locks (SQLite) serialize writers anyway.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List
from uuid import UUID
import logging

from django.db import IntegrityError, transaction  # type: ignore
from django.db.utils import NotSupportedError  # type: ignore

from shared.application.uow import DjangoUnitOfWork
from shared.domain.exceptions import ConflictError, InvalidArgumentError, NotFoundError
from shared.domain.value_objects import calendar_day
from apps.hotels import models
from apps.hotels.domain.entities import Booking, Guest, Hotel, Room
from apps.hotels.domain.repositories import EntityStore

logger = logging.getLogger(__name__)


def _lock_queryset_if_possible(queryset):
    """Apply select_for_update when inside transaction.atomic()."""

    if not transaction.get_connection(queryset.db).in_atomic_block:
        return queryset

    try:
        return queryset.select_for_update()
    except NotSupportedError:
        return queryset


# ===== Row <-> entity mapping =====

def hotel_from_row(row: models.Hotel) -> Hotel:
    return Hotel(
        id=row.id,
        name=row.name,
        rooms_per_floor=row.rooms_per_floor,
        address=row.address,
        city=row.city,
        email=row.email,
    )


def room_from_row(row: models.Room) -> Room:
    return Room(
        id=row.id,
        hotel_id=row.hotel_id,
        number=row.number,
        type=row.type,
        price_per_night=row.price_per_night,
        status=row.status,
    )


def guest_from_row(row: models.Guest) -> Guest:
    return Guest(id=row.id, name=row.name, email=row.email, phone=row.phone)


def booking_from_row(row: models.Booking) -> Booking:
    return Booking(
        id=row.id,
        room_id=row.room_id,
        guest_id=row.guest_id,
        check_in=row.check_in,
        check_out=row.check_out,
        status=row.status,
    )


class DjangoEntityStore(EntityStore):

    def __init__(self, using: str | None = None):
        self._using = using

    def _objects(self, model):
        manager = model.objects
        return manager.using(self._using) if self._using else manager.all()

    # ===== Point lookups =====

    def get_hotel(self, hotel_id: UUID) -> Hotel | None:
        row = self._objects(models.Hotel).filter(pk=hotel_id).first()
        return hotel_from_row(row) if row else None

    def get_room(self, room_id: UUID) -> Room | None:
        row = self._objects(models.Room).filter(pk=room_id).first()
        return room_from_row(row) if row else None

    def get_guest(self, guest_id: UUID) -> Guest | None:
        row = self._objects(models.Guest).filter(pk=guest_id).first()
        return guest_from_row(row) if row else None

    def get_booking(self, booking_id: UUID) -> Booking | None:
        row = self._objects(models.Booking).filter(pk=booking_id).first()
        return booking_from_row(row) if row else None

    # ===== Scans =====

    def list_hotels(self) -> List[Hotel]:
        return [hotel_from_row(row) for row in self._objects(models.Hotel).order_by("name")]

    def rooms_for_hotel(self, hotel_id: UUID) -> List[Room]:
        rows = self._objects(models.Room).filter(hotel_id=hotel_id).order_by("number")
        return [room_from_row(row) for row in rows]

    def bookings_for_room(self, room_id: UUID) -> List[Booking]:
        rows = self._objects(models.Booking).filter(room_id=room_id).order_by("check_in", "created_at")
        return [booking_from_row(row) for row in rows]

    def bookings_for_hotel(self, hotel_id: UUID) -> List[Booking]:
        rows = (
            self._objects(models.Booking)
            .filter(room__hotel_id=hotel_id)
            .order_by("check_in", "created_at")
        )
        return [booking_from_row(row) for row in rows]

    def guests_by_ids(self, guest_ids: List[UUID]) -> List[Guest]:
        rows = self._objects(models.Guest).filter(pk__in=set(guest_ids)).order_by("name")
        return [guest_from_row(row) for row in rows]

    # ===== Writes =====

    def add_hotel(self, hotel: Hotel) -> None:
        self._objects(models.Hotel).create(
            id=hotel.id,
            name=hotel.name,
            rooms_per_floor=hotel.rooms_per_floor,
            address=hotel.address,
            city=hotel.city,
            email=hotel.email,
        )

    def add_room(self, room: Room) -> None:
        try:
            # Savepoint, so a duplicate number does not poison an outer transaction
            with transaction.atomic(using=self._using):
                self._objects(models.Room).create(
                    id=room.id,
                    hotel_id=room.hotel_id,
                    number=room.number,
                    type=room.type,
                    price_per_night=room.price_per_night,
                    status=room.status,
                )
        except IntegrityError as e:
            logger.warning(f"Rejected room {room.number} for hotel {room.hotel_id}: {e}")
            raise ConflictError(
                f"Room number {room.number} is already taken in hotel {room.hotel_id}"
            ) from e

    def add_guest(self, guest: Guest) -> None:
        self._objects(models.Guest).create(
            id=guest.id,
            name=guest.name,
            email=guest.email,
            phone=guest.phone,
        )

    def add_booking(self, booking: Booking) -> None:
        """
        Stays are stored as calendar days, so a stay must span at least one
        day boundary to be representable here.

        Raises:
            InvalidArgumentError: If check-in and check-out fall on the same day
            NotFoundError: If the room does not exist
        """
        check_in, check_out = calendar_day(booking.check_in), calendar_day(booking.check_out)
        if check_out <= check_in:
            raise InvalidArgumentError(
                f"Stay {booking.period} must span at least one night to be stored"
            )
        if not self._objects(models.Room).filter(pk=booking.room_id).exists():
            raise NotFoundError("Room", booking.room_id)

        self._objects(models.Booking).create(
            id=booking.id,
            room_id=booking.room_id,
            guest_id=booking.guest_id,
            check_in=check_in,
            check_out=check_out,
            status=booking.status,
        )

    def set_room_status(self, room_id: UUID, status: str) -> None:
        self._objects(models.Room).filter(pk=room_id).update(status=status)

    def delete_booking(self, booking_id: UUID) -> bool:
        deleted, _ = self._objects(models.Booking).filter(pk=booking_id).delete()
        return deleted > 0

    def delete_room(self, room_id: UUID) -> bool:
        # Bookings go with the room (on_delete=CASCADE)
        deleted, _ = self._objects(models.Room).filter(pk=room_id).delete()
        return deleted > 0

    # ===== Exclusive scopes =====

    def lock_room(self, room_id: UUID):
        return self._locked_row(models.Room, room_id)

    def lock_hotel(self, hotel_id: UUID):
        return self._locked_row(models.Hotel, hotel_id)

    @contextmanager
    def _locked_row(self, model, pk: UUID) -> Iterator[None]:
        label = f"{model._meta.model_name} {pk}"
        with DjangoUnitOfWork(scope=label, using=self._using):
            # Evaluate the queryset so the row lock is taken now
            list(_lock_queryset_if_possible(self._objects(model).filter(pk=pk)))
            logger.debug(f"Locked {label}")
            yield
