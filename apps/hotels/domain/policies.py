"""
Room Type Capacity Policy

Occupancy is approximated from bookings, not counted from actual
occupants: every active booking contributes the capacity of its room
type. This table is the single place those numbers live.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from apps.hotels.domain.entities import RoomType
from shared.domain.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class RoomTypeCapacity:
    """
    Capacity proxy per room type

    Lookup is exact and case-sensitive. Types not in the table count as 0.

    Usage:
        capacity = DEFAULT_ROOM_TYPE_CAPACITY.extended({'Family': 5})
        capacity.for_type('Suite')   # 4
        capacity.for_type('Family')  # 5
        capacity.for_type('Studio')  # 0
    """
    table: Mapping[str, int] = field(default_factory=dict)
    default: int = 0

    def __post_init__(self):
        for room_type, capacity in self.table.items():
            if capacity < 0:
                raise InvalidArgumentError(f"Capacity for {room_type!r} cannot be negative")
        object.__setattr__(self, 'table', MappingProxyType(dict(self.table)))

    def for_type(self, room_type: str) -> int:
        return self.table.get(room_type, self.default)

    def extended(self, overrides: Mapping[str, int]) -> 'RoomTypeCapacity':
        """Return a new policy with ``overrides`` merged over this table."""
        return RoomTypeCapacity({**self.table, **overrides}, self.default)


DEFAULT_ROOM_TYPE_CAPACITY = RoomTypeCapacity({
    RoomType.SINGLE.value: 1,
    RoomType.DOUBLE.value: 2,
    RoomType.SUITE.value: 4,
})
