"""
Room Number Allocation

Rooms are numbered in blocks of ``rooms_per_floor``: with 10 rooms per
floor the first floor is 101-110, the second 201-210, and so on.
"""

from shared.domain.exceptions import InvalidArgumentError


def next_room_number(rooms_per_floor: int, existing_room_count: int) -> int:
    """
    Number for the next room of a hotel that already has
    ``existing_room_count`` rooms

    Collisions with manually numbered rooms are not checked here; the
    room creation workflow and the store's unique (hotel, number)
    constraint take care of that.

    Raises:
        InvalidArgumentError: If rooms_per_floor <= 0 or the count is negative
    """
    if rooms_per_floor <= 0:
        raise InvalidArgumentError(
            f"Rooms per floor must be positive, got {rooms_per_floor}"
        )
    if existing_room_count < 0:
        raise InvalidArgumentError(
            f"Existing room count must not be negative, got {existing_room_count}"
        )

    floor, position = divmod(existing_room_count, rooms_per_floor)
    return 100 + floor * 100 + position + 1
