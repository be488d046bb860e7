"""The two spot query paths: fetch candidates, shape them, wrap the result."""

from __future__ import annotations

import logging

from spots_api.core import db
from spots_api.core.duplicates import filter_duplicates
from spots_api.core.ranking import rank_by_proximity
from spots_api.etl.transform import build_collection
from spots_api.models import AreaQuery, SpotCollection

logger = logging.getLogger(__name__)


def spots_in_area(query: AreaQuery) -> SpotCollection:
    candidates = db.fetch_spots_in_area(query)
    return build_collection(rank_by_proximity(candidates))


def duplicate_spots() -> SpotCollection:
    groups = db.fetch_spots_grouped_by_website()
    duplicates = filter_duplicates(groups)
    logger.info("Found %d duplicate domains out of %d website groups", len(duplicates), len(groups))
    return build_collection(duplicates)
