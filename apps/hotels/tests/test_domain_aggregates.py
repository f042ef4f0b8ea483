"""Tests for the pure hotel domain functions."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import uuid4

import pytest

from shared.domain.exceptions import InvalidArgumentError
from apps.hotels.domain.availability import find_conflicts, is_available
from apps.hotels.domain.dashboard import build_dashboard
from apps.hotels.domain.entities import Booking, Hotel, Room, RoomStatus, RoomType
from apps.hotels.domain.occupancy import active_bookings, available_rooms, current_guest_count
from apps.hotels.domain.policies import DEFAULT_ROOM_TYPE_CAPACITY, RoomTypeCapacity
from apps.hotels.domain.recent_activity import recent_bookings
from apps.hotels.domain.revenue import booking_revenue, monthly_revenue
from apps.hotels.domain.room_numbers import next_room_number


def _booking(check_in: date, check_out: date, room_id=None) -> Booking:
    return Booking(room_id=room_id or uuid4(), guest_id=uuid4(), check_in=check_in, check_out=check_out)


# ===== Entities =====

def test_hotel_requires_positive_rooms_per_floor():
    with pytest.raises(InvalidArgumentError):
        Hotel(name="H", rooms_per_floor=0)


def test_room_rejects_negative_price():
    with pytest.raises(InvalidArgumentError):
        Room(hotel_id=uuid4(), number=101, type="Single", price_per_night=Decimal("-1"))


def test_room_normalizes_enum_values():
    room = Room(
        hotel_id=uuid4(),
        number=101,
        type=RoomType.SUITE,
        price_per_night=150,
        status=RoomStatus.MAINTENANCE,
    )

    assert room.type == "Suite"
    assert room.status == "Maintenance"
    assert room.price_per_night == Decimal("150")
    assert not room.is_available


def test_booking_rejects_empty_stay():
    with pytest.raises(InvalidArgumentError):
        _booking(date(2024, 5, 3), date(2024, 5, 3))


def test_entities_compare_by_id():
    booking = _booking(date(2024, 5, 1), date(2024, 5, 3))
    same = Booking(
        id=booking.id,
        room_id=uuid4(),
        guest_id=uuid4(),
        check_in=date(2024, 6, 1),
        check_out=date(2024, 6, 3),
    )

    assert booking == same
    assert len({booking, same}) == 1


# ===== Availability =====

def test_back_to_back_stays_do_not_conflict():
    room_id = uuid4()
    existing = [
        _booking(date(2024, 5, 10), date(2024, 5, 12), room_id),
        _booking(date(2024, 5, 15), date(2024, 5, 18), room_id),
    ]

    assert is_available(existing, date(2024, 5, 12), date(2024, 5, 15))
    assert is_available(existing, date(2024, 5, 1), date(2024, 5, 10))
    assert is_available(existing, date(2024, 5, 18), date(2024, 5, 20))


@pytest.mark.parametrize(
    "check_in, check_out",
    [
        (date(2024, 5, 11), date(2024, 5, 13)),
        (date(2024, 5, 9), date(2024, 5, 11)),
        (date(2024, 5, 10), date(2024, 5, 12)),
        (date(2024, 5, 1), date(2024, 5, 30)),
        (date(2024, 5, 11), date(2024, 5, 12)),
    ],
)
def test_overlapping_stays_conflict(check_in, check_out):
    existing = _booking(date(2024, 5, 10), date(2024, 5, 12))

    assert not is_available([existing], check_in, check_out)
    assert find_conflicts([existing], check_in, check_out) == [existing]


def test_availability_of_a_room_without_bookings():
    assert is_available([], date(2024, 5, 1), date(2024, 5, 2))


def test_availability_rejects_inverted_range():
    with pytest.raises(InvalidArgumentError):
        is_available([], date(2024, 5, 3), date(2024, 5, 1))


def test_availability_accepts_datetimes_against_date_bookings():
    existing = _booking(date(2024, 5, 10), date(2024, 5, 12))

    assert not is_available([existing], datetime(2024, 5, 11, 14, 0), datetime(2024, 5, 13, 11, 0))
    assert is_available([existing], datetime(2024, 5, 12, 14, 0), datetime(2024, 5, 13, 11, 0))


# ===== Occupancy =====

@pytest.mark.parametrize(
    "room_type, expected",
    [("Single", 1), ("Double", 2), ("Suite", 4), ("Penthouse", 0), ("single", 0)],
)
def test_guest_count_uses_room_type_capacity(make_view, room_type, expected):
    view = make_view(date(2024, 5, 10), date(2024, 5, 12), type=room_type)

    assert current_guest_count([view]) == expected


def test_guest_count_sums_active_bookings(make_view):
    views = [
        make_view(date(2024, 5, 10), date(2024, 5, 12), type="Single"),
        make_view(date(2024, 5, 10), date(2024, 5, 12), type="Double"),
        make_view(date(2024, 5, 10), date(2024, 5, 12), type="Suite"),
        make_view(date(2024, 5, 10), date(2024, 5, 12), type="Studio"),
    ]

    assert current_guest_count(views) == 7
    assert current_guest_count([]) == 0


def test_guest_count_with_extended_capacity(make_view):
    capacity = DEFAULT_ROOM_TYPE_CAPACITY.extended({"Family": 5})
    views = [
        make_view(date(2024, 5, 10), date(2024, 5, 12), type="Family"),
        make_view(date(2024, 5, 10), date(2024, 5, 12), type="Suite"),
    ]

    assert current_guest_count(views, capacity) == 9
    assert DEFAULT_ROOM_TYPE_CAPACITY.for_type("Family") == 0


def test_capacity_rejects_negative_values():
    with pytest.raises(InvalidArgumentError):
        RoomTypeCapacity({"Single": -1})


def test_active_bookings_are_inclusive_on_both_ends(make_view):
    starting = make_view(date(2024, 5, 10), date(2024, 5, 12))
    ending = make_view(date(2024, 5, 8), date(2024, 5, 10))
    future = make_view(date(2024, 5, 11), date(2024, 5, 13))
    past = make_view(date(2024, 5, 1), date(2024, 5, 9))

    active = active_bookings([starting, ending, future, past], date(2024, 5, 10))

    assert active == [starting, ending]


def test_available_rooms_exclude_active_and_non_available_rooms(make_view):
    hotel_id = uuid4()
    booked = make_view(date(2024, 5, 10), date(2024, 5, 12), hotel_id=hotel_id)
    free = Room(hotel_id=hotel_id, number=102, type="Double", price_per_night=80)
    maintenance = Room(
        hotel_id=hotel_id, number=103, type="Double", price_per_night=80, status="Maintenance"
    )
    marked_booked = Room(
        hotel_id=hotel_id, number=104, type="Double", price_per_night=80, status="Booked"
    )

    rooms = [booked.room, free, maintenance, marked_booked]

    assert available_rooms(rooms, [booked]) == [free]


# ===== Revenue =====

def test_revenue_is_price_times_nights(make_view):
    view = make_view(date(2024, 5, 1), date(2024, 5, 3), price="100.00")

    assert booking_revenue(view) == Decimal("200.00")


def test_monthly_revenue_ignores_the_year(make_view):
    views = [make_view(date(2024, 5, 1), date(2024, 5, 3), price="100.00")]

    assert monthly_revenue(views, date(2024, 5, 20)) == Decimal("200.00")
    assert monthly_revenue(views, date(2027, 5, 1)) == Decimal("200.00")
    assert monthly_revenue(views, date(2024, 6, 1)) == Decimal("0")


def test_monthly_revenue_counts_full_stay_in_check_in_month(make_view):
    views = [
        make_view(date(2024, 5, 30), date(2024, 6, 2), price="50.00"),
        make_view(date(2024, 5, 1), date(2024, 5, 2), price="99.99"),
        make_view(date(2024, 6, 1), date(2024, 6, 5), price="100.00"),
    ]

    assert monthly_revenue(views, date(2024, 5, 1)) == Decimal("249.99")
    assert monthly_revenue([], date(2024, 5, 1)) == Decimal("0")


def test_monthly_revenue_truncates_partial_nights(make_view):
    view = make_view(datetime(2024, 5, 1, 15, 0), datetime(2024, 5, 3, 11, 0), price="100.00")

    assert monthly_revenue([view], date(2024, 5, 1)) == Decimal("100.00")


# ===== Recent activity =====

def test_recent_bookings_latest_first(make_view):
    views = [
        make_view(date(2024, 5, 10), date(2024, 5, 11), number=101),
        make_view(date(2024, 5, 12), date(2024, 5, 13), number=102),
        make_view(date(2024, 5, 11), date(2024, 5, 12), number=103),
    ]

    summaries = recent_bookings(views, 2)

    assert [s.check_in for s in summaries] == [date(2024, 5, 12), date(2024, 5, 11)]
    assert [s.room_number for s in summaries] == [102, 103]
    assert summaries[0].guest_name == "Alice"


def test_recent_bookings_keep_input_order_on_ties(make_view):
    first = make_view(date(2024, 5, 10), date(2024, 5, 11), guest_name="first")
    second = make_view(date(2024, 5, 10), date(2024, 5, 12), guest_name="second")

    summaries = recent_bookings([first, second], 2)

    assert [s.guest_name for s in summaries] == ["first", "second"]


def test_recent_bookings_count(make_view):
    views = [make_view(date(2024, 5, day), date(2024, 5, day + 1)) for day in range(1, 9)]

    assert len(recent_bookings(views)) == 5
    assert recent_bookings(views, 0) == []
    assert len(recent_bookings(views, 20)) == 8
    with pytest.raises(InvalidArgumentError):
        recent_bookings(views, -1)


# ===== Room numbers =====

def test_room_numbers_fill_the_first_floor():
    assert [next_room_number(10, count) for count in range(10)] == list(range(101, 111))


def test_room_numbers_move_to_next_floor():
    assert next_room_number(10, 10) == 201
    assert next_room_number(10, 25) == 306
    assert next_room_number(1, 2) == 301


@pytest.mark.parametrize("rooms_per_floor, count", [(0, 0), (-1, 3), (10, -1)])
def test_room_numbers_reject_invalid_input(rooms_per_floor, count):
    with pytest.raises(InvalidArgumentError):
        next_room_number(rooms_per_floor, count)


# ===== Dashboard =====

def test_dashboard_composes_aggregates(make_view):
    hotel = Hotel(name="Seaside", rooms_per_floor=10)
    today = date(2024, 5, 11)
    single = make_view(date(2024, 5, 10), date(2024, 5, 12), hotel_id=hotel.id, type="Single", number=101)
    suite = make_view(
        date(2024, 5, 11), date(2024, 5, 13), hotel_id=hotel.id, type="Suite", price="150.00", number=102
    )
    spare = Room(hotel_id=hotel.id, number=103, type="Double", price_per_night=80)

    dashboard = build_dashboard(hotel, [single.room, suite.room, spare], [single, suite], today)

    assert dashboard.hotel_name == "Seaside"
    assert dashboard.total_guests == 5
    assert dashboard.available_rooms == (spare,)
    assert dashboard.active_bookings == (single, suite)
    assert dashboard.monthly_revenue == Decimal("500.00")
    assert [s.room_number for s in dashboard.recent_bookings] == [102, 101]


def test_room_price_from_float_keeps_its_decimal_digits():
    room = Room(hotel_id=uuid4(), number=101, type="Single", price_per_night=0.1)

    assert room.price_per_night == Decimal("0.1")
