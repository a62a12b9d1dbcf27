from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.config import settings
from app.dependencies import get_db
from app.schemas import (
    DetailPathRequest,
    DetailPathResponse,
    ListingResponse,
    RankRequest,
    RatedItem,
)
from app.services import ListingService
from app.services.location_utils import haversine_distance
from app.services.ranking import sort_by_rating
from app.services.slug_utils import create_detail_path, generate_slug

router = APIRouter(prefix="/listings", tags=["listings"])


@router.post("/rank", response_model=list[RatedItem])
def rank_listings(payload: RankRequest):
    return sort_by_rating(
        payload.items,
        payload.ratings,
        position=payload.position,
        distance_fn=haversine_distance if payload.position else None,
        booking_stats=payload.booking_stats,
        band_size=settings.DISTANCE_BAND_KM,
    )


@router.post("/detail-path", response_model=DetailPathResponse)
def build_detail_path(payload: DetailPathRequest):
    return DetailPathResponse(
        path=create_detail_path(payload.type, payload.id, payload.name, payload.location),
        slug=generate_slug(payload.name, payload.location),
    )


@router.get("/{category}", response_model=list[ListingResponse])
def list_listings(
    category: str,
    latitude: Optional[float] = Query(None, ge=-90, le=90),
    longitude: Optional[float] = Query(None, ge=-180, le=180),
    db: Session = Depends(get_db),
):
    service = ListingService(db)
    return service.list_ranked_listings(category, latitude, longitude)


@router.get("/{category}/{slug}", response_model=ListingResponse)
def get_listing_by_slug(category: str, slug: str, db: Session = Depends(get_db)):
    service = ListingService(db)
    return service.get_listing_by_slug(category, slug)
