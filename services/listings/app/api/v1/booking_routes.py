from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from app.dependencies import get_db
from app.services import BookingExportService

router = APIRouter(prefix="/listings", tags=["bookings"])


@router.get("/{category}/{item_id}/bookings/export")
def export_bookings(category: str, item_id: str, db: Session = Depends(get_db)):
    service = BookingExportService(db)
    filename, content = service.export_item_bookings(category, item_id)
    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
