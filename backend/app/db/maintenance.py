# File: backend/app/db/maintenance.py
# Version: v0.1.0
"""
Schema maintenance helpers (non-destructive).

- ensure_schema(engine): creates only tables that are missing.
- Imports `backend.app.db.models` (not just Base) so every ORM model is
  registered in Base.metadata before inspection.

Safe to run multiple times; it never drops or alters existing tables.
"""
from __future__ import annotations

from typing import List

from sqlalchemy import inspect
from sqlalchemy.engine import Engine

import backend.app.db.models as models


def ensure_schema(engine: Engine) -> List[str]:
    """
    Create any missing tables declared on models.Base.metadata.

    Returns a list of human-readable action strings (e.g., "created table mirnas").
    """
    Base = models.Base

    inspector = inspect(engine)
    existing = set(inspector.get_table_names())
    defined = set(Base.metadata.tables.keys())

    missing = sorted(defined - existing)
    # create_all orders tables by foreign keys
    Base.metadata.create_all(bind=engine, tables=[Base.metadata.tables[n] for n in missing], checkfirst=True)
    actions: List[str] = [f"created table {name}" for name in missing]

    if not actions:
        actions.append("all tables present")
    return actions
