# File: backend/app/api/v1/predict.py
# Version: v0.1.0
"""
Prediction API.

POST /predict                 Predict a miRNA–lncRNA interaction (persisted)
GET  /predictions             List stored predictions (newest first)
GET  /predictions/{id}        One stored prediction

Errors:
- 422: request shape / enum / range problems (Pydantic)
- 400: invalid nucleotides, lncRNA shorter than miRNA, lncRNA over the length cap
- 500: unexpected failure of the standard scan
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from sqlalchemy.orm import Session

from backend.app.core.interaction.errors import InteractionInputError
from backend.app.core.interaction.predictor import predict_interaction
from backend.app.core.interaction.schemas import PredictionRequest, PredictionResult
from backend.app.db.schemas.records import StoredPredictionList, StoredPredictionOut
from backend.app.db.session import get_db
from backend.app.services.prediction_store import get_prediction, list_predictions, save_prediction, to_out

router = APIRouter(tags=["predict"])
log = logging.getLogger(__name__)


@router.post("/predict", response_model=PredictionResult)
def predict(payload: PredictionRequest, request: Request, db: Session = Depends(get_db)) -> PredictionResult:
    """
    Slide the miRNA (3'->5') along the lncRNA and return the best-scoring site.

    `algorithm` = rnafold/rnahybrid tries the external tool first and silently
    falls back to the standard computation when it is unavailable.
    """
    params = payload.parameters()
    try:
        result = predict_interaction(
            payload.mirnaSequence,
            payload.lncrnaSequence,
            params,
            mirna_name=payload.mirnaName,
            lncrna_name=payload.lncrnaName,
        )
    except InteractionInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception as exc:
        log.exception("Prediction failed")
        raise HTTPException(status_code=500, detail="Internal error during prediction") from exc

    save_prediction(
        db,
        result=result,
        params=params,
        client_ip=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
    )
    return result


@router.get("/predictions", response_model=StoredPredictionList)
def read_predictions(
    response: Response,
    db: Session = Depends(get_db),
    limit: int = Query(50, ge=1, le=500),
    offset: int = Query(0, ge=0),
):
    total, rows = list_predictions(db, limit=limit, offset=offset)
    response.headers["Cache-Control"] = "no-store"
    return StoredPredictionList(items=[to_out(r) for r in rows], total=total)


@router.get("/predictions/{prediction_id}", response_model=StoredPredictionOut)
def read_prediction(prediction_id: str, db: Session = Depends(get_db)):
    row = get_prediction(db, prediction_id)
    if not row:
        raise HTTPException(status_code=404, detail="Prediction not found")
    return to_out(row)
