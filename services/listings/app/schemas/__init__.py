from .booking import BookingExportRow
from .listing import (
    BookingStat,
    DetailPathRequest,
    DetailPathResponse,
    ListingCategory,
    ListingResponse,
    Position,
    RankRequest,
    RatedItem,
    RatingSummary,
)

__all__ = [
    "BookingExportRow",
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
