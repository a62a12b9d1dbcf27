from .booking import Booking
from .listing import (
    LISTING_MODELS,
    AdventurePlace,
    Event,
    Hotel,
    ListingBase,
    TicketedListingBase,
    Trip,
)
from .review import Review

__all__ = [
    "AdventurePlace",
    "Booking",
    "Event",
    "Hotel",
    "LISTING_MODELS",
    "ListingBase",
    "Review",
    "TicketedListingBase",
    "Trip",
]
