"""Database helpers: connection pool and the spot retrieval queries."""

import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from psycopg2 import extras, pool

from spots_api.core.config import get_settings
from spots_api.etl.transform import to_spots
from spots_api.models import AreaQuery, Spot

logger = logging.getLogger(__name__)

_connection_pool: Optional[pool.ThreadedConnectionPool] = None


def init_pool(minconn: int = 1, maxconn: Optional[int] = None) -> pool.ThreadedConnectionPool:
    """Initialise and return the shared connection pool."""
    global _connection_pool
    if _connection_pool is None:
        settings = get_settings()
        _connection_pool = pool.ThreadedConnectionPool(
            minconn,
            maxconn or settings.pool_max_connections,
            dsn=settings.database_url,
            connect_timeout=10,
        )
        logger.info("Database connection pool initialised")
    return _connection_pool


@contextmanager
def get_connection():
    """Context manager yielding a pooled connection."""
    pg_pool = init_pool()
    conn = pg_pool.getconn()
    try:
        yield conn
    finally:
        pg_pool.putconn(conn)


def _fetch_all(sql: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
    with get_connection() as conn:
        with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
            cur.execute(sql, params)
            rows = cur.fetchall()
        # Read-only queries; end the transaction before handing the connection back.
        conn.rollback()
    return rows


# ST_DWithin on geography uses the spatial index for the radius test.
_SPOTS_IN_AREA = """
SELECT
    id,
    name,
    website,
    ST_AsText(coordinates) AS coordinates,
    description,
    rating,
    ST_Distance(ST_MakePoint(%(lng)s, %(lat)s)::geography, coordinates) AS distance
FROM spots
WHERE ST_DWithin(ST_MakePoint(%(lng)s, %(lat)s)::geography, coordinates, %(radius)s)
ORDER BY distance;
"""

# One row per website (lowest id first), annotated with the group size.
_SPOTS_BY_WEBSITE = """
WITH grouped AS (
    SELECT DISTINCT ON (website)
        *,
        COUNT(*) OVER (PARTITION BY website) AS domain_count
    FROM spots s
    ORDER BY website, id
)
SELECT
    id,
    name,
    website,
    ST_AsText(coordinates) AS coordinates,
    description,
    rating,
    domain_count
FROM grouped
ORDER BY website, id;
"""


def fetch_spots_in_area(query: AreaQuery) -> List[Spot]:
    """Return spots within ``query.radius`` metres, nearest first."""
    params = {"lng": query.longitude, "lat": query.latitude, "radius": query.radius}
    rows = _fetch_all(_SPOTS_IN_AREA, params)
    logger.info(
        "Fetched %d spots within %.1fm of (%s, %s)",
        len(rows),
        query.radius,
        query.latitude,
        query.longitude,
    )
    return to_spots(rows)


def fetch_spots_grouped_by_website() -> List[Spot]:
    """Return one representative spot per website with its ``domain_count``."""
    rows = _fetch_all(_SPOTS_BY_WEBSITE)
    logger.info("Fetched %d website groups", len(rows))
    return to_spots(rows)
