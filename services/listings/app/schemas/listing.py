from __future__ import annotations

import datetime
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field as PydanticField

ListingCategory = Literal["hotel", "adventure", "trip", "event"]


class Position(BaseModel):
    latitude: float = PydanticField(..., ge=-90, le=90)
    longitude: float = PydanticField(..., ge=-180, le=180)


class RatingSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    avg_rating: float = PydanticField(0.0, ge=0, le=5)
    review_count: int = PydanticField(0, ge=0)


class BookingStat(BaseModel):
    model_config = ConfigDict(frozen=True)

    booked_slots: int = PydanticField(0, ge=0)


class RatedItem(BaseModel):
    """Listing-like payload accepted by the ranking endpoint."""

    model_config = ConfigDict(extra="allow")

    id: str = PydanticField(..., min_length=1)
    is_flexible_date: Optional[bool] = None
    is_custom_date: Optional[bool] = None
    available_tickets: Optional[int] = PydanticField(None, ge=0)
    latitude: Optional[float] = PydanticField(None, ge=-90, le=90)
    longitude: Optional[float] = PydanticField(None, ge=-180, le=180)


class RankRequest(BaseModel):
    items: List[RatedItem]
    ratings: Dict[str, RatingSummary] = PydanticField(default_factory=dict)
    position: Optional[Position] = None
    booking_stats: Optional[Dict[str, BookingStat]] = None


class DetailPathRequest(BaseModel):
    type: str = PydanticField(..., min_length=1)
    id: str = PydanticField(..., min_length=1)
    name: str
    location: Optional[str] = None


class DetailPathResponse(BaseModel):
    path: str
    slug: str


class ListingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    category: ListingCategory
    name: str
    location: Optional[str] = None
    country: Optional[str] = None
    image_url: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    is_flexible_date: Optional[bool] = None
    is_custom_date: Optional[bool] = None
    date: Optional[datetime.date] = None
    available_tickets: Optional[int] = None
    remaining_tickets: Optional[int] = None
    avg_rating: float = 0.0
    review_count: int = 0
    distance_km: Optional[float] = None
    detail_path: str


__all__ = [
    "BookingStat",
    "DetailPathRequest",
    "DetailPathResponse",
    "ListingCategory",
    "ListingResponse",
    "Position",
    "RankRequest",
    "RatedItem",
    "RatingSummary",
]
