"""Hotel domain tables.

The ORM rows behind ``DjangoEntityStore``. Constraints here back the
domain rules at the database level: positive floor capacity, room
numbers unique per hotel and check-out after check-in.
"""

from __future__ import annotations

import uuid
from decimal import Decimal

from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Hotel(models.Model):
    """Hotel with the floor plan used for room numbering."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    address = models.CharField(max_length=255, blank=True)
    city = models.CharField(max_length=100, blank=True)
    email = models.EmailField(blank=True)
    rooms_per_floor = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Hotel")
        verbose_name_plural = _("Hotels")
        ordering = ["name"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(rooms_per_floor__gt=0),
                name="hotel_rooms_per_floor_positive",
            ),
        ]

    def __str__(self) -> str:
        return self.name


class Room(models.Model):
    """Bookable room of a hotel."""

    class Status(models.TextChoices):
        AVAILABLE = "Available", _("Available")
        BOOKED = "Booked", _("Booked")
        MAINTENANCE = "Maintenance", _("Maintenance")

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    hotel = models.ForeignKey(
        Hotel,
        on_delete=models.CASCADE,
        related_name="rooms",
    )
    number = models.PositiveIntegerField()
    type = models.CharField(max_length=50)
    price_per_night = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.AVAILABLE,
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Room")
        verbose_name_plural = _("Rooms")
        ordering = ["number"]
        constraints = [
            models.UniqueConstraint(
                fields=["hotel", "number"],
                name="room_number_unique_per_hotel",
            ),
            models.CheckConstraint(
                condition=models.Q(price_per_night__gte=0),
                name="room_price_non_negative",
            ),
        ]

    def __str__(self) -> str:
        return f"Room {self.number} ({self.type})"


class Guest(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    email = models.EmailField(blank=True)
    phone = models.CharField(max_length=30, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Guest")
        verbose_name_plural = _("Guests")
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class Booking(models.Model):
    """A guest's stay in one room."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    room = models.ForeignKey(
        Room,
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    guest = models.ForeignKey(
        Guest,
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    check_in = models.DateField()
    check_out = models.DateField()
    status = models.CharField(max_length=32, default="Confirmed")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["check_in", "created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(check_out__gt=models.F("check_in")),
                name="booking_valid_dates",
            ),
        ]
        indexes = [
            models.Index(fields=["room", "check_in", "check_out"], name="booking_room_dates_idx"),
        ]

    def __str__(self) -> str:
        return f"Booking {self.id} for room {self.room_id}"
