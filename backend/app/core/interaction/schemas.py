# File: backend/app/core/interaction/schemas.py
# Version: v0.1.0
"""
DTOs for the predict request/response pair.

The request is flat: sequences plus the `PredictionParameters` keys.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, constr

from .parameters import PredictionParameters


class PredictionRequest(PredictionParameters):
    """Request to predict binding of a miRNA on a lncRNA fragment."""
    mirnaSequence: constr(strip_whitespace=True, min_length=1) = Field(
        ...,
        description="miRNA sequence 5'->3' (A/U/G/C, case-insensitive; surrounding whitespace is trimmed)",
        examples=["UGAAGCUGCCAGCAUGAUCUA"],
    )
    lncrnaSequence: constr(strip_whitespace=True, min_length=1) = Field(
        ..., description="lncRNA fragment 5'->3' (A/U/G/C, case-insensitive; surrounding whitespace is trimmed)"
    )
    mirnaName: Optional[str] = None
    lncrnaName: Optional[str] = None

    def parameters(self) -> PredictionParameters:
        return PredictionParameters.model_validate(
            self.model_dump(include=set(PredictionParameters.model_fields))
        )


class BindingDetails(BaseModel):
    seedMatch: str
    complementaryPairs: int = Field(..., ge=0)
    mismatches: int = Field(..., ge=0)
    guWobblePairs: int = Field(..., ge=0)
    bulges: int = Field(..., ge=0)


class Thermodynamics(BaseModel):
    freeEnergy: float = Field(..., description="kcal/mol; heuristic unless an external tool supplied it")
    stabilityScore: str
    accessibility: float = Field(..., ge=0.0, le=1.0)
    localStructure: str


class PredictionResult(BaseModel):
    score: int = Field(..., ge=0, le=100)
    mirnaName: Optional[str] = None
    mirnaSequence: str
    lncrnaName: Optional[str] = None
    lncrnaSequence: str
    alignment: str
    bindingStart: int = Field(..., ge=0, description="0-based inclusive")
    bindingEnd: int = Field(..., ge=0, description="0-based exclusive")
    bindingDetails: BindingDetails
    thermodynamics: Thermodynamics
