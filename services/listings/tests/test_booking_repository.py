import datetime
import uuid

import pytest

from app.models import Booking
from app.repository import fetch_booking_stats, list_bookings_for_item
from app.schemas import BookingStat

SAFARI_ID = "11111111-0000-4000-8000-000000000001"
HIKE_ID = "22222222-0000-4000-8000-000000000002"
BOAT_ID = "33333333-0000-4000-8000-000000000003"


def make_booking(item_id, **fields):
    fields.setdefault("payment_status", "paid")
    fields.setdefault("created_at", datetime.datetime(2024, 6, 1, 12, 0))
    return Booking(id=str(uuid.uuid4()), item_id=item_id, **fields)


@pytest.fixture
def bookings(sqlite_session):
    rows = [
        make_booking(SAFARI_ID, slots_booked=2, status="confirmed"),
        make_booking(SAFARI_ID, slots_booked=None, payment_status="completed"),
        make_booking(SAFARI_ID, slots_booked=4, payment_status="pending"),
        make_booking(SAFARI_ID, slots_booked=3, status="cancelled"),
        make_booking(SAFARI_ID, slots_booked=1, status=None),
        make_booking(HIKE_ID, slots_booked=6, status="rejected"),
        make_booking(HIKE_ID, slots_booked=2, payment_status=None),
        make_booking(BOAT_ID, slots_booked=5),
    ]
    sqlite_session.add_all(rows)
    sqlite_session.commit()
    return rows


def test_fetch_booking_stats_counts_confirmed_slots(sqlite_session, bookings):
    stats = fetch_booking_stats(sqlite_session, [SAFARI_ID, HIKE_ID])

    assert stats == {SAFARI_ID: BookingStat(booked_slots=4)}


def test_fetch_booking_stats_groups_per_item(sqlite_session, bookings):
    stats = fetch_booking_stats(sqlite_session, [SAFARI_ID, BOAT_ID])

    assert stats[SAFARI_ID].booked_slots == 4
    assert stats[BOAT_ID].booked_slots == 5


def test_fetch_booking_stats_without_ids_skips_the_query(sqlite_session):
    assert fetch_booking_stats(sqlite_session, []) == {}


def test_list_bookings_for_item_newest_first(sqlite_session):
    older = make_booking(BOAT_ID, guest_name="Amina", created_at=datetime.datetime(2024, 1, 1))
    newer = make_booking(BOAT_ID, guest_name="Otieno", created_at=datetime.datetime(2024, 2, 1))
    other = make_booking(HIKE_ID, guest_name="Wanjiru")
    sqlite_session.add_all([older, newer, other])
    sqlite_session.commit()

    rows = list_bookings_for_item(sqlite_session, BOAT_ID)

    assert [row.guest_name for row in rows] == ["Otieno", "Amina"]
