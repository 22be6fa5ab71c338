# File: backend/app/api/v1/api.py
# Version: v0.1.0
"""
v1 API aggregator.

Routers included under /api:
- health
- predict (POST /predict, stored predictions)
- records (miRNAs, lncRNAs, curated interactions + search)
- params (prediction defaults)
"""
from __future__ import annotations

from fastapi import APIRouter

from . import health as health_router
from . import params as params_router
from . import predict as predict_router
from . import records as records_router

api_router = APIRouter()
api_router.include_router(health_router.router)
api_router.include_router(predict_router.router)
api_router.include_router(records_router.router)
api_router.include_router(params_router.router)
