# File: backend/app/main.py
# Version: v0.1.0
"""
FastAPI app entry.

- Keeps all route assembly in backend/app/api/v1/api.py.
- Mounts /api/* via `api_router`.
- On startup: creates missing tables and, if enabled, seeds the example records.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.app.api.v1.api import api_router
from backend.app.core.config import settings
from backend.app.db.maintenance import ensure_schema
from backend.app.db.seed import seed_example_data
from backend.app.db.session import engine, session_scope

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger("lncmir")

app = FastAPI(
    title=f"{settings.APP_NAME} API",
    version=settings.APP_VERSION,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    docs_url=f"{settings.API_PREFIX}/docs",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/healthz")
def healthz():
    return {"status": "ok"}


# APIs under /api
app.include_router(api_router, prefix=settings.API_PREFIX)


@app.on_event("startup")
def _startup_schema() -> None:
    actions = ensure_schema(engine)
    log.info("[schema] %s", ", ".join(actions))
    if settings.SEED_EXAMPLE_DATA:
        with session_scope() as db:
            if seed_example_data(db):
                log.info("[seed] inserted example miRNA/lncRNA/interaction records")
