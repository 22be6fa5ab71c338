# File: backend/tests/test_migrations.py
# Version: v0.1.0
"""Alembic migrations build the same tables as the ORM models."""
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from backend.app.db.maintenance import ensure_schema
from backend.app.db.models import Base

ALEMBIC_DIR = Path(__file__).resolve().parents[1] / "alembic"


def _columns(url):
    engine = create_engine(url)
    try:
        insp = inspect(engine)
        return {t: {c["name"] for c in insp.get_columns(t)} for t in insp.get_table_names() if t != "alembic_version"}
    finally:
        engine.dispose()


def test_upgrade_head_matches_models(tmp_path):
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    cfg = Config()
    cfg.set_main_option("script_location", str(ALEMBIC_DIR))
    cfg.set_main_option("sqlalchemy.url", url)
    command.upgrade(cfg, "head")

    migrated = _columns(url)
    expected = {name: {c.name for c in table.columns} for name, table in Base.metadata.tables.items()}
    assert migrated == expected

    command.downgrade(cfg, "base")
    assert _columns(url) == {}


def test_ensure_schema_is_idempotent(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'fresh.db'}")
    try:
        first = ensure_schema(engine)
        assert "created table predictions" in first
        assert ensure_schema(engine) == ["all tables present"]
    finally:
        engine.dispose()
