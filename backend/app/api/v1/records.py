# File: backend/app/api/v1/records.py
# Version: v0.1.0
"""
Reference records API.

Endpoints:
- GET /mirnas                   -> all miRNAs
- GET /lncrnas                  -> all lncRNAs
- GET /interactions             -> all curated interactions (with miRNA/lncRNA)
- GET /interactions/search      -> filtered, paginated interactions
- GET /interactions/{id}        -> one interaction
"""
from __future__ import annotations

from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from backend.app.db.schemas.records import BrowseResponse, InteractionOut, LncrnaOut, MirnaOut, SearchQuery
from backend.app.db.session import get_db
from backend.app.services import record_store

router = APIRouter(tags=["records"])


@router.get("/mirnas", response_model=List[MirnaOut])
def read_mirnas(db: Session = Depends(get_db)):
    return record_store.list_mirnas(db)


@router.get("/lncrnas", response_model=List[LncrnaOut])
def read_lncrnas(db: Session = Depends(get_db)):
    return record_store.list_lncrnas(db)


@router.get("/interactions", response_model=List[InteractionOut])
def read_interactions(db: Session = Depends(get_db)):
    return record_store.list_interactions(db)


# declared before /interactions/{interaction_id} so "search" is not parsed as an id
@router.get("/interactions/search", response_model=BrowseResponse)
def search_interactions(
    db: Session = Depends(get_db),
    searchTerm: Optional[str] = Query(None),
    searchType: Literal["all", "mirna", "lncrna", "gene"] = Query("all"),
    scoreFilter: int = Query(0, ge=0, le=100),
    methodFilter: Literal["all", "experimental", "computational"] = Query("all"),
    limit: int = Query(10, ge=1, le=100),
    page: int = Query(1, ge=1),
):
    query = SearchQuery(
        searchTerm=searchTerm,
        searchType=searchType,
        scoreFilter=scoreFilter,
        methodFilter=methodFilter,
        limit=limit,
        page=page,
    )
    return record_store.search_interactions(db, query)


@router.get("/interactions/{interaction_id}", response_model=InteractionOut)
def read_interaction(interaction_id: int, db: Session = Depends(get_db)):
    interaction = record_store.get_interaction(db, interaction_id)
    if not interaction:
        raise HTTPException(status_code=404, detail="Interaction not found")
    return interaction
