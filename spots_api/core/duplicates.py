"""Duplicate-domain discovery over website-grouped spots."""

import logging
from dataclasses import replace
from typing import Dict, Iterable, List, Optional

from spots_api.models import Spot

logger = logging.getLogger(__name__)


def is_duplicate_group(spot: Spot) -> bool:
    return bool(spot.website) and (spot.domain_count or 0) > 1


def filter_duplicates(spots: Iterable[Spot]) -> List[Spot]:
    """Keep group representatives whose website is shared by more than one spot."""
    result = [spot for spot in spots if is_duplicate_group(spot)]
    logger.debug("Kept %d duplicate-domain groups", len(result))
    return result


def group_by_website(spots: Iterable[Spot]) -> List[Spot]:
    """Collapse spots to one representative per website value.

    In-memory grouping source for spots loaded outside the SQL path; the
    HTTP and CLI paths group in the database instead.

    Mirrors the database grouping query for spots already in memory: the
    representative is the spot with the lowest id, ``domain_count`` is the
    group size, and groups are ordered by website with ``None`` last.
    Empty and missing websites form their own groups.
    """
    groups: Dict[Optional[str], List[Spot]] = {}
    for spot in spots:
        groups.setdefault(spot.website, []).append(spot)

    ordered_keys = sorted(groups, key=lambda website: (website is None, website or ""))
    representatives = []
    for website in ordered_keys:
        members = groups[website]
        first = min(members, key=lambda spot: spot.id)
        representatives.append(replace(first, distance=None, domain_count=len(members)))
    return representatives
