from spots_api.models import Spot, SpotCollection


def test_spot_to_dict_omits_unset_annotations():
    spot = Spot(id="1", name="Cafe", website=None, coordinates="POINT(1 2)", description=None, rating=4.0)

    payload = spot.to_dict()

    assert payload == {
        "id": "1",
        "name": "Cafe",
        "website": None,
        "coordinates": "POINT(1 2)",
        "description": None,
        "rating": 4.0,
    }
    assert "distance" not in payload
    assert "domain_count" not in payload


def test_spot_to_dict_keeps_zero_distance():
    payload = Spot(id="1", name="Here", distance=0.0).to_dict()

    assert payload["distance"] == 0.0
    assert "domain_count" not in payload


def test_spot_to_dict_includes_domain_count():
    payload = Spot(id="1", name="Shop", website="a.com", domain_count=3).to_dict()

    assert payload["domain_count"] == 3
    assert "distance" not in payload


def test_collection_to_dict():
    collection = SpotCollection(spots=[Spot(id="1", name="A"), Spot(id="2", name="B")], total=2)

    payload = collection.to_dict()

    assert payload["total"] == 2
    assert [spot["id"] for spot in payload["spots"]] == ["1", "2"]


def test_empty_collection_to_dict():
    assert SpotCollection().to_dict() == {"spots": [], "total": 0}
