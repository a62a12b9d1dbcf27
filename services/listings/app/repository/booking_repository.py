from __future__ import annotations

from collections.abc import Sequence
from typing import Dict, List

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models import Booking
from app.schemas import BookingStat

CONFIRMED_PAYMENT_STATUSES = ("paid", "completed")
RELEASED_BOOKING_STATUSES = ("cancelled", "rejected")


class BookingRepositoryError(RuntimeError):
    """Raised when booking data cannot be read from the database."""


def fetch_booking_stats(db: Session, item_ids: Sequence[str]) -> Dict[str, BookingStat]:
    """Sum the slots held by confirmed bookings for each listing."""
    if not item_ids:
        return {}
    booked_slots = func.sum(func.coalesce(Booking.slots_booked, 1))
    try:
        rows = (
            db.query(Booking.item_id, booked_slots.label("booked_slots"))
            .filter(
                Booking.item_id.in_(list(item_ids)),
                Booking.payment_status.in_(CONFIRMED_PAYMENT_STATUSES),
                func.coalesce(Booking.status, "").not_in(RELEASED_BOOKING_STATUSES),
            )
            .group_by(Booking.item_id)
            .all()
        )
    except SQLAlchemyError as exc:
        raise BookingRepositoryError("Failed to fetch booking stats") from exc
    return {
        str(row.item_id): BookingStat(booked_slots=int(row.booked_slots or 0))
        for row in rows
    }


def list_bookings_for_item(db: Session, item_id: str) -> List[Booking]:
    try:
        return (
            db.query(Booking)
            .filter(Booking.item_id == item_id)
            .order_by(Booking.created_at.desc())
            .all()
        )
    except SQLAlchemyError as exc:
        raise BookingRepositoryError(f"Failed to list bookings for {item_id}") from exc


__all__ = [
    "BookingRepositoryError",
    "CONFIRMED_PAYMENT_STATUSES",
    "RELEASED_BOOKING_STATUSES",
    "fetch_booking_stats",
    "list_bookings_for_item",
]
