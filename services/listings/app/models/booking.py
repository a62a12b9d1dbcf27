from __future__ import annotations

from sqlalchemy import JSON, Boolean, Column, Date, DateTime, Integer, Numeric, String, Text
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.sql import func

from app.core.database import Base


class Booking(Base):
    """Guest booking against a hotel, adventure place, trip or event."""

    __tablename__ = "bookings"
    __table_args__ = {"schema": "public"}

    id = Column(UUID(as_uuid=False), primary_key=True)
    item_id = Column(UUID(as_uuid=False), nullable=False, index=True)
    booking_type = Column(String(30), nullable=True)
    user_id = Column(UUID(as_uuid=False), nullable=True)
    is_guest_booking = Column(Boolean, nullable=False, default=False)
    guest_name = Column(Text, nullable=True)
    guest_email = Column(Text, nullable=True)
    guest_phone = Column(String(30), nullable=True)
    visit_date = Column(Date, nullable=True)
    slots_booked = Column(Integer, nullable=True)
    total_amount = Column(Numeric(12, 2), nullable=True)
    payment_method = Column(String(30), nullable=True)
    payment_status = Column(String(30), nullable=True)
    status = Column(String(30), nullable=True)
    booking_details = Column(JSON().with_variant(JSONB(), "postgresql"), nullable=True)
    checked_in = Column(Boolean, nullable=True, default=False)
    checked_in_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


__all__ = ["Booking"]
