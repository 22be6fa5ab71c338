# File: backend/tests/conftest.py
# Version: v0.1.0
"""
Test bootstrap: ensure project root is on sys.path so 'backend.*' imports work.

Also points the app at a throwaway SQLite file (DB_URL) before any backend
module reads settings, so tests never touch backend/app/data/lncmir.db.
"""
import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]  # repo root (../.. from this file)
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

_TMP_DIR = tempfile.mkdtemp(prefix="lncmir_tests_")
os.environ["DB_URL"] = f"sqlite:///{Path(_TMP_DIR) / 'test.db'}"
os.environ["SEED_EXAMPLE_DATA"] = "true"
os.environ.setdefault("RNAHYBRID_API_URL", "")


@pytest.fixture(scope="session")
def client():
    """TestClient with startup hooks run (schema + example records)."""
    from fastapi.testclient import TestClient
    from backend.app.main import app

    with TestClient(app) as c:
        yield c
