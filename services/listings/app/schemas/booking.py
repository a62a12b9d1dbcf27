from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict


class BookingExportRow(BaseModel):
    """Booking columns written to the host CSV export."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    guest_name: Optional[str] = None
    guest_email: Optional[str] = None
    guest_phone: Optional[str] = None
    visit_date: Optional[date] = None
    total_amount: Optional[Decimal] = None
    slots_booked: Optional[int] = None
    booking_type: Optional[str] = None
    payment_status: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None
    checked_in: Optional[bool] = None
    checked_in_at: Optional[datetime] = None


__all__ = ["BookingExportRow"]
