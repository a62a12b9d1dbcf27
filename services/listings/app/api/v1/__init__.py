from fastapi import APIRouter

from .booking_routes import router as booking_router
from .listing_routes import router as listing_router

router = APIRouter()
router.include_router(listing_router)
router.include_router(booking_router)

__all__ = [
    "router",
    "booking_router",
    "listing_router",
]
