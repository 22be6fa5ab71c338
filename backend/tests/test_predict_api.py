# File: backend/tests/test_predict_api.py
# Version: v0.1.0
"""
API tests for POST /api/predict and the stored prediction endpoints.
"""
import pytest
from httpx import ASGITransport, AsyncClient

from backend.app.main import app

MIRNA = "UGAAGCUGCCAGCAUGAUCUA"
# exact reverse complement of MIRNA, flanked by GG
LNCRNA = "GGUAGAUCAUGCUGGCAGCUUCAGG"


def _payload(**overrides):
    body = {"mirnaSequence": MIRNA, "lncrnaSequence": LNCRNA}
    body.update(overrides)
    return body


def test_predict_perfect_site(client):
    r = client.post("/api/predict", json=_payload(mirnaName="ath-miR167a", lncrnaName="test-lnc"))
    assert r.status_code == 200
    data = r.json()
    assert data["score"] == 100
    assert data["bindingStart"] == 2
    assert data["bindingEnd"] == 23
    assert data["mirnaName"] == "ath-miR167a"
    assert data["bindingDetails"]["complementaryPairs"] == 21
    assert data["bindingDetails"]["mismatches"] == 0
    assert data["thermodynamics"]["stabilityScore"] == "High"
    lines = data["alignment"].split("\n")
    assert lines[0] == "miRNA  3' " + MIRNA[::-1] + " 5'"
    assert lines[1].strip() == "|" * 21
    assert lines[2] == "lncRNA 5' " + LNCRNA[2:23] + " 3'"


def test_predict_accepts_lowercase(client):
    r = client.post("/api/predict", json=_payload(mirnaSequence=MIRNA.lower()))
    assert r.status_code == 200
    assert r.json()["mirnaSequence"] == MIRNA


def test_predict_with_parameters(client):
    params = {"seedRegion": "2-8", "mismatchPenalty": 5, "guWobble": "penalty", "scoreThreshold": 80}
    r = client.post("/api/predict", json=_payload(**params))
    assert r.status_code == 200
    assert r.json()["bindingDetails"]["seedMatch"] == "Extended (positions 2-8)"


def test_predict_external_algorithm_always_answers(client):
    r = client.post("/api/predict", json=_payload(algorithm="rnafold"))
    assert r.status_code == 200
    data = r.json()
    assert 0 <= data["score"] <= 100
    assert data["bindingEnd"] - data["bindingStart"] == len(MIRNA)


def test_predict_invalid_nucleotide_is_400(client):
    r = client.post("/api/predict", json=_payload(mirnaSequence="AXGU"))
    assert r.status_code == 400
    assert "'X'" in r.json()["detail"]


def test_predict_short_target_is_400(client):
    r = client.post("/api/predict", json=_payload(lncrnaSequence="UUUUU"))
    assert r.status_code == 400


def test_predict_oversized_scan_is_400(client):
    # 1000 nt x 3001 offsets is over the default comparison cap
    r = client.post("/api/predict", json=_payload(mirnaSequence="AUGC" * 250, lncrnaSequence="GCAU" * 1000))
    assert r.status_code == 400
    assert "comparisons" in r.json()["detail"]


def test_predict_schema_errors_are_422(client):
    assert client.post("/api/predict", json={"lncrnaSequence": LNCRNA}).status_code == 422
    assert client.post("/api/predict", json=_payload(mirnaSequence="")).status_code == 422
    assert client.post("/api/predict", json=_payload(seedRegion="3-9")).status_code == 422
    assert client.post("/api/predict", json=_payload(mismatchPenalty=0)).status_code == 422
    assert client.post("/api/predict", json=_payload(guWobble="sometimes")).status_code == 422
    assert client.post("/api/predict", json=_payload(algorithm="blast")).status_code == 422


def test_predictions_are_stored(client):
    r = client.post("/api/predict", json=_payload(), headers={"User-Agent": "pytest-agent"})
    assert r.status_code == 200

    listing = client.get("/api/predictions", params={"limit": 5})
    assert listing.status_code == 200
    assert listing.headers["cache-control"] == "no-store"
    body = listing.json()
    assert body["total"] >= 1
    stamps = [item["timestamp"] for item in body["items"]]
    assert stamps == sorted(stamps, reverse=True)
    newest = body["items"][0]
    assert newest["score"] == 100
    assert newest["metadata"]["userAgent"] == "pytest-agent"

    one = client.get(f"/api/predictions/{newest['id']}")
    assert one.status_code == 200
    assert one.json()["alignment"] == r.json()["alignment"]


def test_failed_predictions_are_not_stored(client):
    before = client.get("/api/predictions").json()["total"]
    client.post("/api/predict", json=_payload(mirnaSequence="AXGU"))
    assert client.get("/api/predictions").json()["total"] == before


def test_unknown_prediction_is_404(client):
    assert client.get("/api/predictions/does-not-exist").status_code == 404


@pytest.mark.asyncio
async def test_predict_async_client(client):
    # `client` fixture has already created the tables
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.post("/api/predict", json=_payload(guWobble="disallowed"))
        assert resp.status_code == 200
        assert resp.json()["score"] == 100
