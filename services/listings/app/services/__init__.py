from .booking_export_service import BookingExportService
from .listing_service import ListingService

__all__ = [
    "BookingExportService",
    "ListingService",
]
