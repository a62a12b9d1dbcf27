from __future__ import annotations

import csv
import io
import re
from collections.abc import Iterable
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from app.schemas import BookingExportRow

EXPORT_HEADERS = (
    "Booking ID",
    "Guest Name",
    "Guest Email",
    "Guest Phone",
    "Visit Date",
    "People",
    "Total Amount (KES)",
    "Payment Status",
    "Booking Status",
    "Checked In",
    "Checked In At",
    "Booked On",
)

_UNSAFE_FILENAME_CHARACTERS = re.compile(r"[^a-zA-Z0-9]")


def _format_date(value: Optional[date]) -> str:
    return value.strftime("%Y-%m-%d") if value else ""


def _format_timestamp(value: Optional[datetime]) -> str:
    return value.strftime("%Y-%m-%d %H:%M") if value else ""


def _format_amount(value: Optional[Decimal]) -> str:
    if not value:
        return "0"
    return format(value.normalize(), "f")


def booking_to_row(booking: BookingExportRow) -> list[str]:
    return [
        booking.id,
        booking.guest_name or "",
        booking.guest_email or "",
        booking.guest_phone or "",
        _format_date(booking.visit_date),
        str(booking.slots_booked or 1),
        _format_amount(booking.total_amount),
        booking.payment_status or "",
        booking.status or "",
        "Yes" if booking.checked_in else "No",
        _format_timestamp(booking.checked_in_at),
        _format_timestamp(booking.created_at),
    ]


def export_filename(item_name: str, today: date) -> str:
    safe_item_name = _UNSAFE_FILENAME_CHARACTERS.sub("_", item_name)
    return f"bookings_{safe_item_name}_{today.strftime('%Y-%m-%d')}.csv"


def export_bookings_csv(
    bookings: Iterable[BookingExportRow], item_name: str, today: date
) -> tuple[str, str]:
    """Render bookings as CSV and return ``(filename, content)``.

    The header line is written bare; every data cell is quoted.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    buffer.write(",".join(EXPORT_HEADERS) + "\n")
    for booking in bookings:
        writer.writerow(booking_to_row(booking))
    return export_filename(item_name, today), buffer.getvalue().rstrip("\n")


__all__ = ["EXPORT_HEADERS", "booking_to_row", "export_bookings_csv", "export_filename"]
