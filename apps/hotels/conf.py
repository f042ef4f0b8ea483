"""Settings of the hotels app, read from ``settings.HOTELS``.

Example::

    HOTELS = {
        "RECENT_BOOKINGS_COUNT": 10,
        "ROOM_TYPE_CAPACITY": {"Family": 5},
    }
"""

from __future__ import annotations

from django.conf import settings  # type: ignore

from apps.hotels.domain.policies import DEFAULT_ROOM_TYPE_CAPACITY, RoomTypeCapacity
from apps.hotels.domain.recent_activity import DEFAULT_RECENT_BOOKINGS_COUNT


def _options() -> dict:
    return getattr(settings, "HOTELS", None) or {}


def recent_bookings_count() -> int:
    return int(_options().get("RECENT_BOOKINGS_COUNT", DEFAULT_RECENT_BOOKINGS_COUNT))


def room_type_capacity() -> RoomTypeCapacity:
    """Default capacity table with ``ROOM_TYPE_CAPACITY`` merged over it."""
    overrides = _options().get("ROOM_TYPE_CAPACITY") or {}
    if not overrides:
        return DEFAULT_ROOM_TYPE_CAPACITY
    return DEFAULT_ROOM_TYPE_CAPACITY.extended(overrides)
