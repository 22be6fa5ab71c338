# File: backend/app/services/prediction_store.py
# Version: v0.1.0
"""Persistence of prediction results (one row per POST /predict)."""
from __future__ import annotations

import json
from typing import Optional

from sqlalchemy import desc, func, select
from sqlalchemy.orm import Session

from backend.app.core.interaction.parameters import PredictionParameters
from backend.app.core.interaction.schemas import PredictionResult
from backend.app.db.models import StoredPrediction
from backend.app.db.schemas.records import PredictionMetadata, StoredPredictionOut


def save_prediction(
    db: Session,
    *,
    result: PredictionResult,
    params: PredictionParameters,
    client_ip: Optional[str] = None,
    user_agent: Optional[str] = None,
) -> StoredPrediction:
    row = StoredPrediction(
        mirna_sequence=result.mirnaSequence,
        lncrna_sequence=result.lncrnaSequence,
        score=result.score,
        params_json=params.model_dump_json(),
        result_json=result.model_dump_json(),
        client_ip=client_ip,
        user_agent=(user_agent or "")[:255] or None,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def to_out(row: StoredPrediction) -> StoredPredictionOut:
    payload = json.loads(row.result_json)
    return StoredPredictionOut(
        **payload,
        id=row.id,
        timestamp=row.created_at,
        metadata=PredictionMetadata(ip=row.client_ip, userAgent=row.user_agent),
    )


def list_predictions(db: Session, *, limit: int = 50, offset: int = 0) -> tuple[int, list[StoredPrediction]]:
    """Return (total, items) newest first."""
    total = int(db.scalar(select(func.count()).select_from(StoredPrediction)) or 0)
    stmt = (
        select(StoredPrediction)
        .order_by(desc(StoredPrediction.created_at), desc(StoredPrediction.id))
        .limit(limit)
        .offset(offset)
    )
    return total, list(db.execute(stmt).scalars())


def get_prediction(db: Session, prediction_id: str) -> Optional[StoredPrediction]:
    return db.get(StoredPrediction, prediction_id)
