"""Core data models shared by the spot query paths."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(slots=True)
class Spot:
    """A geo-tagged record as returned by one of the spot query paths.

    ``distance`` is only set on proximity results and ``domain_count`` only on
    duplicate-domain results; the other one stays ``None``.
    """

    id: str
    name: str
    website: Optional[str] = None
    coordinates: str = ""
    description: Optional[str] = None
    rating: float = 0.0
    distance: Optional[float] = None
    domain_count: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "website": self.website,
            "coordinates": self.coordinates,
            "description": self.description,
            "rating": self.rating,
        }
        if self.distance is not None:
            payload["distance"] = self.distance
        if self.domain_count is not None:
            payload["domain_count"] = self.domain_count
        return payload


@dataclass(slots=True)
class SpotCollection:
    """Ordered spots plus their count, as sent to clients."""

    spots: List[Spot] = field(default_factory=list)
    total: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "spots": [spot.to_dict() for spot in self.spots],
            "total": self.total,
        }


@dataclass(frozen=True)
class AreaQuery:
    """Centre point (degrees) and radius (metres) of a proximity search."""

    latitude: float
    longitude: float
    radius: float
