from __future__ import annotations

import datetime

from sqlalchemy import Boolean, Date, DateTime, Integer, Numeric, String, Text, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class ListingBase(Base):
    """Columns shared by every bookable listing table."""

    __abstract__ = True

    id: Mapped[str] = mapped_column(UUID(as_uuid=False), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    location: Mapped[str | None] = mapped_column(Text, nullable=True)
    place: Mapped[str | None] = mapped_column(Text, nullable=True)
    country: Mapped[str | None] = mapped_column(String(100), nullable=True)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    latitude: Mapped[float | None] = mapped_column(Numeric(9, 6), nullable=True)
    longitude: Mapped[float | None] = mapped_column(Numeric(9, 6), nullable=True)
    approval_status: Mapped[str] = mapped_column(String(30), nullable=False, default="pending")
    created_by: Mapped[str | None] = mapped_column(UUID(as_uuid=False), nullable=True)
    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )


class Hotel(ListingBase):
    __tablename__ = "hotels"
    __table_args__ = {"schema": "public"}

    category = "hotel"


class AdventurePlace(ListingBase):
    __tablename__ = "adventure_places"
    __table_args__ = {"schema": "public"}

    category = "adventure"


class TicketedListingBase(ListingBase):
    """Trips and events sell a fixed number of tickets for a date."""

    __abstract__ = True

    date: Mapped[datetime.date | None] = mapped_column(Date, nullable=True)
    is_flexible_date: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_custom_date: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    available_tickets: Mapped[int | None] = mapped_column(Integer, nullable=True)


class Trip(TicketedListingBase):
    __tablename__ = "trips"
    __table_args__ = {"schema": "public"}

    category = "trip"


class Event(TicketedListingBase):
    __tablename__ = "events"
    __table_args__ = {"schema": "public"}

    category = "event"


LISTING_MODELS: dict[str, type[ListingBase]] = {
    model.category: model for model in (Hotel, AdventurePlace, Trip, Event)
}


__all__ = [
    "AdventurePlace",
    "Event",
    "Hotel",
    "LISTING_MODELS",
    "ListingBase",
    "TicketedListingBase",
    "Trip",
]
