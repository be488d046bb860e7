"""HTTP entrypoint exposing the spot search endpoints."""

from __future__ import annotations

import logging
import math
import os
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request

from spots_api.core import service
from spots_api.core.config import get_settings
from spots_api.models import AreaQuery

# ---------- Logging ----------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

# ---------- App ----------
app = Flask(__name__)

AREA_QUERY_FIELDS = ("latitude", "longitude", "radius")


class AreaQueryError(ValueError):
    """Raised when an area query is missing fields or has non-numeric ones."""

    def __init__(self, fields: List[Dict[str, Any]]) -> None:
        super().__init__("invalid area query")
        self.fields = fields


def _to_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def parse_area_query(payload: Dict[str, Any]) -> AreaQuery:
    """Validate latitude, longitude and radius, reporting every failing field."""
    failures: List[Dict[str, Any]] = []
    values: Dict[str, float] = {}
    for name in AREA_QUERY_FIELDS:
        raw = payload.get(name)
        if raw is None or raw == "":
            failures.append({"field": name, "tag": "required", "value": raw})
            continue
        number = _to_number(raw)
        if number is None:
            failures.append({"field": name, "tag": "number", "value": raw})
            continue
        # 0 is a real latitude/longitude but never a usable radius.
        if name == "radius" and number == 0:
            failures.append({"field": name, "tag": "required", "value": raw})
            continue
        values[name] = number

    if failures:
        raise AreaQueryError(failures)
    return AreaQuery(**values)


# ---------- Routes ----------


@app.get("/")
def root() -> Any:
    return "ok", 200


@app.get("/healthz")
def healthcheck() -> Any:
    """Lightweight health endpoint; reads settings only, never the database."""
    settings = get_settings()
    return (
        jsonify(
            {
                "status": "ok",
                "server_port_config": settings.server_port,
                "revision": os.getenv("K_REVISION", "unknown"),
            }
        ),
        200,
    )


@app.get("/spots/duplicates")
def duplicate_spots() -> Any:
    """Spots whose website is shared with at least one other spot."""
    try:
        result = service.duplicate_spots()
    except Exception as exc:  # noqa: BLE001
        logger.exception("Duplicate spot lookup failed: %s", exc)
        return jsonify({"error": str(exc)}), 500
    return jsonify(result.to_dict()), 200


@app.route("/spots/inArea", methods=["GET", "POST"])
def spots_in_area() -> Any:
    """
    Spots within a radius of a point, nearest first with the rating tie-break.
    Fields: latitude, longitude (degrees), radius (metres), read from the JSON
    body or, when there is no body, from the query string.
    """
    if request.get_data(cache=True):
        payload = request.get_json(silent=True, force=True)
        if not isinstance(payload, dict):
            return jsonify({"error": "unable to parse body"}), 400
    else:
        payload = request.args.to_dict()

    try:
        query = parse_area_query(payload)
    except AreaQueryError as exc:
        return jsonify({"error": str(exc), "fields": exc.fields}), 400

    try:
        result = service.spots_in_area(query)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Area lookup failed for %s: %s", query, exc)
        return jsonify({"error": str(exc)}), 500
    return jsonify(result.to_dict()), 200


def main() -> None:
    port = get_settings().server_port
    logger.info("[BOOT] Binding on 0.0.0.0:%d", port)
    app.run(host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
