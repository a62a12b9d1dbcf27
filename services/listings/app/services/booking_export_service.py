from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.repository import (
    BookingRepositoryError,
    ListingRepositoryError,
    get_listing,
    list_bookings_for_item,
)
from app.schemas import BookingExportRow
from app.services.booking_export import export_bookings_csv
from app.services.listing_service import get_listing_model
from app.services.slug_utils import is_uuid


class BookingExportService:
    def __init__(self, db: Session):
        self.db = db

    def export_item_bookings(
        self, category: str, item_id: str, today: Optional[date] = None
    ) -> tuple[str, str]:
        model = get_listing_model(category)
        try:
            listing = get_listing(self.db, model, item_id) if is_uuid(item_id) else None
            if listing is None:
                raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND,
                    detail=f"Listing {item_id} not found",
                )
            bookings = list_bookings_for_item(self.db, item_id)
        except (ListingRepositoryError, BookingRepositoryError) as exc:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=str(exc),
            ) from exc

        rows = [BookingExportRow.model_validate(booking) for booking in bookings]
        return export_bookings_csv(rows, listing.name, today or date.today())


__all__ = ["BookingExportService"]
