# File: backend/tests/test_records_api.py
# Version: v0.1.0
"""
API tests for the seeded miRNA / lncRNA / interaction records and search.
"""
import pytest
from sqlalchemy import func, select

from backend.app.db.models import Mirna
from backend.app.db.seed import seed_example_data
from backend.app.db.session import session_scope


def test_list_mirnas(client):
    r = client.get("/api/mirnas")
    assert r.status_code == 200
    names = [m["name"] for m in r.json()]
    assert names == ["ath-miR167a", "ath-miR156a", "ath-miR319a"]
    assert r.json()[0]["sequence"] == "UGAAGCUGCCAGCAUGAUCUA"


def test_list_lncrnas(client):
    r = client.get("/api/lncrnas")
    assert r.status_code == 200
    assert {l["name"] for l in r.json()} == {"BLIL1", "ELENA1", "COLDAIR"}


def test_list_interactions_nests_records(client):
    r = client.get("/api/interactions")
    assert r.status_code == 200
    items = r.json()
    assert len(items) == 3
    first = items[0]
    assert first["mirna"]["name"] == "ath-miR167a"
    assert first["lncrna"]["name"] == "BLIL1"
    assert first["score"] == 92
    assert first["pairCounts"] == {"complementaryPairs": 12, "guWobblePairs": 0, "mismatches": 4, "bulges": 4}


def test_get_interaction(client):
    first_id = client.get("/api/interactions").json()[0]["id"]
    r = client.get(f"/api/interactions/{first_id}")
    assert r.status_code == 200
    assert r.json()["method"] == "Experimental (CLASH)"
    assert r.json()["pairCounts"]["complementaryPairs"] == 12


def test_unknown_interaction_is_404(client):
    assert client.get("/api/interactions/9999").status_code == 404


def test_seeding_is_idempotent(client):
    with session_scope() as db:
        assert seed_example_data(db) is False
        assert db.scalar(select(func.count()).select_from(Mirna)) == 3


@pytest.mark.parametrize(
    "params,expected_total",
    [
        ({}, 3),
        ({"searchTerm": "miR167"}, 1),
        ({"searchTerm": "MIR1"}, 2),
        ({"searchTerm": "elena", "searchType": "lncrna"}, 1),
        ({"searchTerm": "elena", "searchType": "mirna"}, 0),
        ({"searchTerm": "coldair", "searchType": "gene"}, 1),
        ({"scoreFilter": 80}, 2),
        ({"scoreFilter": 90}, 1),
        ({"methodFilter": "experimental"}, 2),
        ({"methodFilter": "computational"}, 1),
        ({"methodFilter": "experimental", "scoreFilter": 90}, 1),
    ],
)
def test_search_filters(client, params, expected_total):
    r = client.get("/api/interactions/search", params=params)
    assert r.status_code == 200
    body = r.json()
    assert body["total"] == expected_total
    assert len(body["results"]) == expected_total


def test_search_pagination(client):
    r = client.get("/api/interactions/search", params={"limit": 2, "page": 2})
    assert r.status_code == 200
    body = r.json()
    assert body["total"] == 3
    assert body["page"] == 2
    assert body["totalPages"] == 2
    assert len(body["results"]) == 1
    assert body["results"][0]["lncrna"]["name"] == "COLDAIR"
    assert body["results"][0]["pairCounts"]["bulges"] == 2


def test_search_empty_result_has_zero_pages(client):
    body = client.get("/api/interactions/search", params={"searchTerm": "nothing-matches"}).json()
    assert body["total"] == 0
    assert body["totalPages"] == 0
    assert body["results"] == []


def test_search_validation(client):
    assert client.get("/api/interactions/search", params={"limit": 0}).status_code == 422
    assert client.get("/api/interactions/search", params={"page": 0}).status_code == 422
    assert client.get("/api/interactions/search", params={"scoreFilter": 101}).status_code == 422
    assert client.get("/api/interactions/search", params={"searchType": "protein"}).status_code == 422
