from __future__ import annotations

import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.core.config import settings
from app.models import LISTING_MODELS, ListingBase, TicketedListingBase
from app.repository import (
    BookingRepositoryError,
    ListingRepositoryError,
    fetch_booking_stats,
    fetch_rating_summaries,
    find_listing_by_id_prefix,
    get_listing,
    list_approved_listings,
    search_listing_by_terms,
)
from app.schemas import BookingStat, ListingResponse, Position, RatingSummary
from app.services.location_utils import has_coordinates, haversine_distance
from app.services.ranking import sort_by_rating
from app.services.slug_utils import (
    create_detail_path,
    extract_id_from_slug,
    is_uuid,
    parse_slug,
    strip_id_fragment,
)

logger = logging.getLogger(__name__)


def get_listing_model(category: str) -> type[ListingBase]:
    model = LISTING_MODELS.get(category)
    if model is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown listing category '{category}'",
        )
    return model


def _as_float(value: object) -> Optional[float]:
    return float(value) if value is not None else None


def build_listing_response(
    listing: ListingBase,
    ratings: dict[str, RatingSummary],
    booking_stats: Optional[dict[str, BookingStat]] = None,
    position: Optional[Position] = None,
) -> ListingResponse:
    rating = ratings.get(listing.id, RatingSummary())
    available_tickets = getattr(listing, "available_tickets", None)
    latitude = _as_float(listing.latitude)
    longitude = _as_float(listing.longitude)

    remaining_tickets = None
    if available_tickets is not None:
        booked = (booking_stats or {}).get(listing.id, BookingStat()).booked_slots
        remaining_tickets = available_tickets - booked

    distance_km = None
    if position is not None and has_coordinates(latitude, longitude):
        distance_km = round(
            haversine_distance(position.latitude, position.longitude, latitude, longitude), 2
        )

    return ListingResponse(
        id=listing.id,
        category=listing.category,
        name=listing.name,
        location=listing.location,
        country=listing.country,
        image_url=listing.image_url,
        latitude=latitude,
        longitude=longitude,
        is_flexible_date=getattr(listing, "is_flexible_date", None),
        is_custom_date=getattr(listing, "is_custom_date", None),
        date=getattr(listing, "date", None),
        available_tickets=available_tickets,
        remaining_tickets=remaining_tickets,
        avg_rating=rating.avg_rating,
        review_count=rating.review_count,
        distance_km=distance_km,
        detail_path=create_detail_path(listing.category, listing.id, listing.name, listing.location),
    )


class ListingService:
    def __init__(self, db: Session):
        self.db = db

    def list_ranked_listings(
        self,
        category: str,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
    ) -> list[ListingResponse]:
        model = get_listing_model(category)
        position = (
            Position(latitude=latitude, longitude=longitude)
            if latitude is not None and longitude is not None
            else None
        )

        try:
            listings = list_approved_listings(self.db, model)
            item_ids = [listing.id for listing in listings]
            ratings = fetch_rating_summaries(self.db, item_ids)
            booking_stats = (
                fetch_booking_stats(self.db, item_ids)
                if issubclass(model, TicketedListingBase)
                else None
            )
        except (ListingRepositoryError, BookingRepositoryError) as exc:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=str(exc),
            ) from exc

        ordered = sort_by_rating(
            listings,
            ratings,
            position=position,
            distance_fn=haversine_distance if position else None,
            booking_stats=booking_stats,
            band_size=settings.DISTANCE_BAND_KM,
        )
        return [
            build_listing_response(listing, ratings, booking_stats, position)
            for listing in ordered
        ]

    def get_listing_by_slug(self, category: str, slug: str) -> ListingResponse:
        model = get_listing_model(category)
        id_fragment = extract_id_from_slug(slug)

        try:
            listing = self._resolve_listing(model, slug, id_fragment)
            if listing is None:
                raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND,
                    detail=f"Listing '{slug}' not found",
                )
            ratings = fetch_rating_summaries(self.db, [listing.id])
            booking_stats = (
                fetch_booking_stats(self.db, [listing.id])
                if getattr(listing, "available_tickets", None) is not None
                else None
            )
        except (ListingRepositoryError, BookingRepositoryError) as exc:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=str(exc),
            ) from exc

        return build_listing_response(listing, ratings, booking_stats)

    def _resolve_listing(
        self, model: type[ListingBase], slug: str, id_fragment: str
    ) -> Optional[ListingBase]:
        if id_fragment:
            if is_uuid(id_fragment):
                listing = get_listing(self.db, model, id_fragment)
            else:
                listing = find_listing_by_id_prefix(self.db, model, id_fragment)
            if listing is not None:
                return listing

        terms = parse_slug(strip_id_fragment(slug, id_fragment))
        if not terms:
            return None
        logger.info(
            "No %s matched id fragment '%s'; searching by name '%s'",
            model.category,
            id_fragment,
            terms,
        )
        return search_listing_by_terms(self.db, model, terms)


__all__ = ["ListingService", "build_listing_response", "get_listing_model"]
