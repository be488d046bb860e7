"""CLI job to run the spot queries against the database and print JSON."""

import argparse
import json
import logging
import sys
from typing import List, Optional

from spots_api.core import service
from spots_api.core.config import ConfigError
from spots_api.core.db import init_pool
from spots_api.models import AreaQuery, SpotCollection

logger = logging.getLogger(__name__)


def run_query(args: argparse.Namespace) -> SpotCollection:
    init_pool()
    if args.command == "duplicates":
        return service.duplicate_spots()
    query = AreaQuery(latitude=args.latitude, longitude=args.longitude, radius=args.radius)
    logger.info("Running area query %s", query)
    return service.spots_in_area(query)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Query spots from the database")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("duplicates", help="Spots sharing a website with other spots")

    in_area = subparsers.add_parser("in-area", help="Spots within a radius of a point")
    in_area.add_argument("--lat", dest="latitude", type=float, required=True, help="Latitude in degrees")
    in_area.add_argument("--lng", dest="longitude", type=float, required=True, help="Longitude in degrees")
    in_area.add_argument("--radius", dest="radius", type=float, required=True, help="Radius in metres")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s - %(message)s")
    args = build_parser().parse_args(argv)

    try:
        result = run_query(args)
    except ConfigError as exc:
        logger.error("Configuration error: %s", exc)
        return 2
    except Exception as exc:  # noqa: BLE001
        logger.error("Spot query failed: %s", exc, exc_info=True)
        return 1

    json.dump(result.to_dict(), sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
