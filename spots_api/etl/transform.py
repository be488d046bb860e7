"""Utilities for transforming database rows into response objects."""

from typing import Any, Dict, Iterable, List, Optional

from spots_api.models import Spot, SpotCollection


def _optional_float(value: Any) -> Optional[float]:
    return float(value) if value is not None else None


def to_spot(row: Dict[str, Any]) -> Spot:
    """Build a Spot from a result row; a NULL rating reads as 0.0."""
    domain_count = row.get("domain_count")
    return Spot(
        id=str(row["id"]),
        name=row.get("name") or "",
        website=row.get("website"),
        coordinates=row.get("coordinates") or "",
        description=row.get("description"),
        rating=float(row.get("rating") or 0.0),
        distance=_optional_float(row.get("distance")),
        domain_count=int(domain_count) if domain_count is not None else None,
    )


def to_spots(rows: Iterable[Dict[str, Any]]) -> List[Spot]:
    return [to_spot(row) for row in rows]


def build_collection(spots: List[Spot]) -> SpotCollection:
    """Wrap spots into a collection, recomputing the total from the list."""
    return SpotCollection(spots=list(spots), total=len(spots))
