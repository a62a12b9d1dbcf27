from __future__ import annotations

from typing import List, Optional

from sqlalchemy import String, and_, cast, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models import ListingBase

APPROVED_STATUS = "approved"


class ListingRepositoryError(RuntimeError):
    """Raised when listings cannot be read from the database."""


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def list_approved_listings(db: Session, model: type[ListingBase]) -> List[ListingBase]:
    try:
        return (
            db.query(model)
            .filter(model.approval_status == APPROVED_STATUS)
            .order_by(model.created_at.desc())
            .all()
        )
    except SQLAlchemyError as exc:
        raise ListingRepositoryError(f"Failed to list {model.__tablename__}") from exc


def get_listing(db: Session, model: type[ListingBase], listing_id: str) -> Optional[ListingBase]:
    try:
        return db.query(model).filter(model.id == listing_id).first()
    except SQLAlchemyError as exc:
        raise ListingRepositoryError(f"Failed to load listing {listing_id}") from exc


def find_listing_by_id_prefix(
    db: Session, model: type[ListingBase], id_prefix: str
) -> Optional[ListingBase]:
    pattern = f"{_escape_like(id_prefix.lower())}%"
    try:
        return (
            db.query(model)
            .filter(cast(model.id, String).like(pattern, escape="\\"))
            .order_by(model.created_at.desc())
            .first()
        )
    except SQLAlchemyError as exc:
        raise ListingRepositoryError(f"Failed to look up listing {id_prefix}") from exc


def search_listing_by_terms(db: Session, model: type[ListingBase], terms: str) -> Optional[ListingBase]:
    """First approved listing where every term appears in the name, location, country or place."""
    words = terms.lower().split()
    if not words:
        return None
    columns = (model.name, model.location, model.country, model.place)
    conditions = [
        or_(*(column.ilike(f"%{_escape_like(word)}%", escape="\\") for column in columns))
        for word in words
    ]
    try:
        return (
            db.query(model)
            .filter(model.approval_status == APPROVED_STATUS, and_(*conditions))
            .order_by(model.created_at.desc())
            .first()
        )
    except SQLAlchemyError as exc:
        raise ListingRepositoryError(f"Failed to search listings for '{terms}'") from exc


__all__ = [
    "APPROVED_STATUS",
    "ListingRepositoryError",
    "find_listing_by_id_prefix",
    "get_listing",
    "list_approved_listings",
    "search_listing_by_terms",
]
