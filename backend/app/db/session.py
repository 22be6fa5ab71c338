# File: backend/app/db/session.py
# Version: v0.1.0
"""
SQLAlchemy engine and session factory.

- Engine URL comes from settings.DB_URL (SQLite file by default).
- SQLite file URLs get their parent directory created on import.
- `get_db()` is the FastAPI dependency; `session_scope()` is for startup
  hooks and scripts (commit on success, rollback on error).
"""
from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Generator, Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from backend.app.core.config import settings


def _sqlite_connect_args(url: str) -> Dict[str, object]:
    if not url.startswith("sqlite:///"):
        return {}
    db_path = url.replace("sqlite:///", "", 1)
    if db_path and db_path != ":memory:":
        Path(db_path).resolve().parent.mkdir(parents=True, exist_ok=True)
    # sync endpoints run in FastAPI's threadpool
    return {"check_same_thread": False}


engine = create_engine(settings.DB_URL, future=True, connect_args=_sqlite_connect_args(settings.DB_URL))
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


def get_db() -> Generator[Session, None, None]:
    """Yield a database session and guarantee closing it after use."""
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def session_scope() -> Iterator[Session]:
    db: Session = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
