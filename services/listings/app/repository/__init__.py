from .booking_repository import (
    BookingRepositoryError,
    fetch_booking_stats,
    list_bookings_for_item,
)
from .listing_repository import (
    ListingRepositoryError,
    find_listing_by_id_prefix,
    get_listing,
    list_approved_listings,
    search_listing_by_terms,
)
from .review_repository import fetch_rating_summaries, summarize_ratings

__all__ = [
    "BookingRepositoryError",
    "ListingRepositoryError",
    "fetch_booking_stats",
    "fetch_rating_summaries",
    "find_listing_by_id_prefix",
    "get_listing",
    "list_approved_listings",
    "list_bookings_for_item",
    "search_listing_by_terms",
    "summarize_ratings",
]
