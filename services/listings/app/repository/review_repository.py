from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Optional, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models import Review
from app.repository.listing_repository import ListingRepositoryError
from app.schemas import RatingSummary

RatingValue = Union[int, float, Decimal]


def round_rating(value: RatingValue) -> float:
    """Round an average rating half-up to one decimal place."""
    average = value if isinstance(value, Decimal) else Decimal(str(value))
    return float(average.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def summarize_ratings(
    rows: Iterable[tuple[str, Optional[RatingValue]]],
) -> Dict[str, RatingSummary]:
    """Fold ``(item_id, rating)`` review rows into one summary per item."""
    grouped: Dict[str, list[Decimal]] = defaultdict(list)
    for item_id, rating in rows:
        if rating is None:
            continue
        grouped[str(item_id)].append(Decimal(str(rating)))

    return {
        item_id: RatingSummary(
            avg_rating=round_rating(sum(values) / len(values)),
            review_count=len(values),
        )
        for item_id, values in grouped.items()
    }


def fetch_rating_summaries(db: Session, item_ids: Sequence[str]) -> Dict[str, RatingSummary]:
    if not item_ids:
        return {}
    try:
        rows = (
            db.query(Review.item_id, Review.rating)
            .filter(Review.item_id.in_(list(item_ids)))
            .all()
        )
    except SQLAlchemyError as exc:
        raise ListingRepositoryError("Failed to fetch listing ratings") from exc
    return summarize_ratings((row.item_id, row.rating) for row in rows)


__all__ = ["fetch_rating_summaries", "round_rating", "summarize_ratings"]
