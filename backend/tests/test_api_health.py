# File: backend/tests/test_api_health.py
# Version: v0.1.0
"""
Smoke tests for health and parameter endpoints.
"""


def test_health(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_healthz(client):
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_health_tools_reports_availability(client):
    r = client.get("/api/health/tools")
    assert r.status_code == 200
    data = r.json()
    assert isinstance(data["viennarna"], bool)


def test_prediction_params(client):
    r = client.get("/api/params/prediction")
    assert r.status_code == 200
    data = r.json()
    assert data["defaults"]["seedRegion"] == "2-7"
    assert data["defaults"]["mismatchPenalty"] == 3
    assert set(data["choices"]["algorithm"]) == {"standard", "rnafold", "rnahybrid"}
    assert data["maxTargetLength"] > 0
    assert data["maxScanCells"] > 0
