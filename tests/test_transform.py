import uuid

from spots_api.etl import transform
from spots_api.models import Spot


def test_to_spot_from_area_row():
    spot_id = uuid.uuid4()
    row = {
        "id": spot_id,
        "name": "Cafe",
        "website": "cafe.com",
        "coordinates": "POINT(-2.91 53.38)",
        "description": "Coffee",
        "rating": 4.5,
        "distance": 12.25,
    }

    spot = transform.to_spot(row)

    assert spot.id == str(spot_id)
    assert spot.coordinates == "POINT(-2.91 53.38)"
    assert spot.rating == 4.5
    assert spot.distance == 12.25
    assert spot.domain_count is None


def test_to_spot_from_grouped_row_defaults_null_rating():
    row = {
        "id": "abc",
        "name": "Shop",
        "website": None,
        "coordinates": None,
        "description": None,
        "rating": None,
        "domain_count": 2,
    }

    spot = transform.to_spot(row)

    assert spot.rating == 0.0
    assert spot.coordinates == ""
    assert spot.domain_count == 2
    assert spot.distance is None


def test_build_collection_recomputes_total():
    spots = [Spot(id="1", name="A"), Spot(id="2", name="B")]

    collection = transform.build_collection(spots)
    spots.pop()

    assert collection.total == 2
    assert len(collection.spots) == 2


def test_build_collection_empty():
    collection = transform.build_collection([])

    assert collection.total == 0
    assert collection.spots == []
