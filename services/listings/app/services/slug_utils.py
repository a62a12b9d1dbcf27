"""Readable URL fragments for listing detail pages.

Detail paths look like ``/hotel/ocean-view-mombasa-abcdef12``: a slug built
from the listing name and location followed by the first eight characters
of the listing id. ``extract_id_from_slug`` recovers that fragment on a
best-effort basis; callers still have to check that it resolves to a row.
"""
from __future__ import annotations

import re
from typing import Optional

MAX_SLUG_LENGTH = 100
ID_FRAGMENT_LENGTH = 8

_UUID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", re.IGNORECASE
)
_SPECIAL_CHARACTERS = re.compile(r"[^0-9A-Za-z_\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHEN_RUNS = re.compile(r"-+")
_EDGE_HYPHENS = re.compile(r"\A-+|-+\Z")
_HEX_SEGMENT = re.compile(r"[0-9a-f]+", re.IGNORECASE)
_HEX_RUN = re.compile(r"[0-9a-f]{8}", re.IGNORECASE)


def generate_slug(name: str, location: Optional[str] = None) -> str:
    combined = f"{name}-{location}" if location else name
    slug = combined.lower().strip()
    slug = _SPECIAL_CHARACTERS.sub("", slug)
    slug = _WHITESPACE.sub("-", slug)
    slug = _HYPHEN_RUNS.sub("-", slug)
    return slug[:MAX_SLUG_LENGTH]


def parse_slug(slug: str) -> str:
    """Turn a slug back into space separated search terms."""
    return slug.replace("-", " ").strip()


def create_detail_path(item_type: str, item_id: str, name: str, location: Optional[str] = None) -> str:
    slug = generate_slug(name, location)
    return f"/{item_type}/{slug}-{item_id[:ID_FRAGMENT_LENGTH]}"


def is_uuid(value: str) -> bool:
    return bool(_UUID_PATTERN.fullmatch(value))


def extract_id_from_slug(slug_with_id: str) -> str:
    if not slug_with_id:
        return ""
    if is_uuid(slug_with_id):
        return slug_with_id

    cleaned = _HYPHEN_RUNS.sub("-", _EDGE_HYPHENS.sub("", slug_with_id))
    if not cleaned:
        return ""

    for segment in reversed(cleaned.split("-")):
        if len(segment) >= 6 and _HEX_SEGMENT.fullmatch(segment):
            return segment

    match = _HEX_RUN.search(cleaned)
    if match:
        return match.group(0)

    _, hyphen, tail = cleaned.rpartition("-")
    if hyphen and tail:
        return tail
    return cleaned


def strip_id_fragment(slug_with_id: str, id_fragment: str) -> str:
    """Remove the segment ``extract_id_from_slug`` picked, wherever it sits.

    Only whole hyphen-separated segments are removed; a fragment recovered
    from inside a longer segment leaves the slug unchanged.
    """
    if not id_fragment:
        return slug_with_id
    segments = slug_with_id.split("-")
    for index in range(len(segments) - 1, -1, -1):
        if segments[index] == id_fragment:
            del segments[index]
            return "-".join(segments)
    return slug_with_id


__all__ = [
    "ID_FRAGMENT_LENGTH",
    "MAX_SLUG_LENGTH",
    "create_detail_path",
    "extract_id_from_slug",
    "generate_slug",
    "is_uuid",
    "parse_slug",
    "strip_id_fragment",
]
