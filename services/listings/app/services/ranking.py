"""Display ordering for listings.

``sort_by_rating`` chains partial comparators. Each comparator returns a
negative or positive number when it can order a pair and ``0`` when it has
no opinion, in which case the next comparator decides.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Any, Optional, TypeVar

from app.services.location_utils import distance_band, has_coordinates

T = TypeVar("T")

DistanceFn = Callable[[float, float, float, float], float]
Comparator = Callable[[Any, Any, "RankingContext"], int]


def _read(source: Any, name: str, default: Any = None) -> Any:
    if source is None:
        return default
    if isinstance(source, Mapping):
        return source.get(name, default)
    return getattr(source, name, default)


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


@dataclass
class RankingContext:
    ratings: Mapping[str, Any]
    position: Optional[Any] = None
    distance_fn: Optional[DistanceFn] = None
    booking_stats: Optional[Mapping[str, Any]] = None
    band_size: float = 10.0
    _distances: dict[int, Optional[float]] = field(default_factory=dict, repr=False)

    @staticmethod
    def item_id(item: Any) -> str:
        return str(_read(item, "id"))

    def avg_rating(self, item: Any) -> float:
        return _read(self.ratings.get(self.item_id(item)), "avg_rating") or 0

    def review_count(self, item: Any) -> int:
        return _read(self.ratings.get(self.item_id(item)), "review_count") or 0

    def remaining_tickets(self, item: Any) -> int:
        stat = (self.booking_stats or {}).get(self.item_id(item))
        booked = _read(stat, "booked_slots") or 0
        return (_read(item, "available_tickets") or 0) - booked

    @property
    def ranks_by_distance(self) -> bool:
        return self.position is not None and self.distance_fn is not None

    def distance(self, item: Any) -> Optional[float]:
        """Distance from the viewer, or ``None`` when the item has no coordinates."""
        key = id(item)
        if key not in self._distances:
            latitude = _read(item, "latitude")
            longitude = _read(item, "longitude")
            if not has_coordinates(latitude, longitude):
                self._distances[key] = None
            else:
                self._distances[key] = self.distance_fn(
                    float(_read(self.position, "latitude")),
                    float(_read(self.position, "longitude")),
                    float(latitude),
                    float(longitude),
                )
        return self._distances[key]


def _is_flexible(item: Any) -> bool:
    return bool(_read(item, "is_flexible_date") or _read(item, "is_custom_date"))


def compare_flexible_date(a: Any, b: Any, context: RankingContext) -> int:
    return int(_is_flexible(b)) - int(_is_flexible(a))


def compare_availability(a: Any, b: Any, context: RankingContext) -> int:
    if context.booking_stats is None:
        return 0
    if _read(a, "available_tickets") is None or _read(b, "available_tickets") is None:
        return 0

    a_open = context.remaining_tickets(a) > 0
    b_open = context.remaining_tickets(b) > 0
    return int(b_open) - int(a_open)


def compare_rating(a: Any, b: Any, context: RankingContext) -> int:
    return _sign(context.avg_rating(b) - context.avg_rating(a))


def compare_review_count(a: Any, b: Any, context: RankingContext) -> int:
    return _sign(context.review_count(b) - context.review_count(a))


def compare_proximity(a: Any, b: Any, context: RankingContext) -> int:
    if not context.ranks_by_distance:
        return 0

    distance_a = context.distance(a)
    distance_b = context.distance(b)
    if distance_a is None or distance_b is None:
        return int(distance_a is None) - int(distance_b is None)

    if distance_band(distance_a, context.band_size) == distance_band(distance_b, context.band_size):
        result = compare_rating(a, b, context) or compare_review_count(a, b, context)
        if result:
            return result
    return _sign(distance_a - distance_b)


DEFAULT_COMPARATORS: tuple[Comparator, ...] = (
    compare_flexible_date,
    compare_availability,
    compare_proximity,
    compare_rating,
    compare_review_count,
)


def chain_comparators(
    comparators: Iterable[Comparator], context: RankingContext
) -> Callable[[Any, Any], int]:
    ordered = tuple(comparators)

    def compare(a: Any, b: Any) -> int:
        for comparator in ordered:
            result = comparator(a, b, context)
            if result:
                return result
        return 0

    return compare


def sort_by_rating(
    items: Sequence[T],
    ratings: Mapping[str, Any],
    position: Optional[Any] = None,
    distance_fn: Optional[DistanceFn] = None,
    booking_stats: Optional[Mapping[str, Any]] = None,
    *,
    band_size: float = 10.0,
) -> list[T]:
    """Return ``items`` in display order without mutating the input.

    Flexible-date listings come first, then listings with tickets left ahead
    of sold-out ones, then nearby listings (by rating inside each
    ``band_size`` ring) and finally rating and review count. Missing ratings
    and booking stats count as zero. Ties keep their input order.
    """
    context = RankingContext(
        ratings=ratings or {},
        position=position,
        distance_fn=distance_fn,
        booking_stats=booking_stats,
        band_size=band_size,
    )
    return sorted(items, key=cmp_to_key(chain_comparators(DEFAULT_COMPARATORS, context)))


__all__ = [
    "Comparator",
    "DEFAULT_COMPARATORS",
    "DistanceFn",
    "RankingContext",
    "chain_comparators",
    "compare_availability",
    "compare_flexible_date",
    "compare_proximity",
    "compare_rating",
    "compare_review_count",
    "sort_by_rating",
]
