# File: backend/app/db/schemas/records.py
# Version: v0.1.0
"""Pydantic schemas for miRNA, lncRNA, curated interaction and stored prediction resources."""
from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from backend.app.core.interaction.schemas import PredictionResult


class MirnaOut(BaseModel):
    id: int
    name: str
    sequence: str = Field(..., description="Mature miRNA 5'->3'")
    species: str
    source: Optional[str] = None

    class Config:
        from_attributes = True


class LncrnaOut(BaseModel):
    id: int
    name: str
    sequence: str
    species: str
    location: Optional[str] = None
    function: Optional[str] = None

    class Config:
        from_attributes = True


class AlignmentCounts(BaseModel):
    """Pair counts read back from a stored alignment text."""
    complementaryPairs: int
    guWobblePairs: int
    mismatches: int
    bulges: int


class InteractionOut(BaseModel):
    id: int
    mirna_id: int
    lncrna_id: int
    alignment: Optional[str] = None
    binding_site: Optional[str] = None
    score: float
    method: Optional[str] = None
    source: Optional[str] = None
    first_reported: Optional[datetime] = None
    mirna: MirnaOut
    lncrna: LncrnaOut
    pairCounts: Optional[AlignmentCounts] = None

    class Config:
        from_attributes = True


class SearchQuery(BaseModel):
    searchTerm: Optional[str] = None
    searchType: Literal["all", "mirna", "lncrna", "gene"] = "all"
    scoreFilter: int = Field(0, ge=0, le=100)
    methodFilter: Literal["all", "experimental", "computational"] = "all"
    limit: int = Field(10, ge=1, le=100)
    page: int = Field(1, ge=1)


class BrowseResponse(BaseModel):
    results: List[InteractionOut]
    total: int
    page: int
    totalPages: int


class PredictionMetadata(BaseModel):
    ip: Optional[str] = None
    userAgent: Optional[str] = None


class StoredPredictionOut(PredictionResult):
    id: str
    timestamp: datetime
    metadata: PredictionMetadata = Field(default_factory=PredictionMetadata)


class StoredPredictionList(BaseModel):
    items: List[StoredPredictionOut]
    total: int
