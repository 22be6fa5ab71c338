# File: backend/app/db/models.py
# Version: v0.1.0
"""
ORM models for LncMir.

Tables:
- Mirna / Lncrna: reference sequences (name, sequence, species, annotations).
- Interaction: curated miRNA–lncRNA interaction with alignment, binding site,
  score, detection method and literature source.
- StoredPrediction: result of one POST /predict call plus request metadata.
"""
from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, declarative_base, mapped_column, relationship

Base = declarative_base()

DEFAULT_SPECIES = "Arabidopsis thaliana"


class Mirna(Base):
    __tablename__ = "mirnas"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False, index=True)
    sequence: Mapped[str] = mapped_column(Text, nullable=False)
    species: Mapped[str] = mapped_column(String(120), nullable=False, default=DEFAULT_SPECIES)
    source: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)


class Lncrna(Base):
    __tablename__ = "lncrnas"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False, index=True)
    sequence: Mapped[str] = mapped_column(Text, nullable=False)
    species: Mapped[str] = mapped_column(String(120), nullable=False, default=DEFAULT_SPECIES)
    location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    function: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)


class Interaction(Base):
    """Curated interaction; `mirna`/`lncrna` are eagerly joined for listings."""
    __tablename__ = "interactions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    mirna_id: Mapped[int] = mapped_column(ForeignKey("mirnas.id", ondelete="CASCADE"), nullable=False)
    lncrna_id: Mapped[int] = mapped_column(ForeignKey("lncrnas.id", ondelete="CASCADE"), nullable=False)
    alignment: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    binding_site: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    score: Mapped[float] = mapped_column(Float, nullable=False)
    method: Mapped[Optional[str]] = mapped_column(String(120), nullable=True)
    source: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    first_reported: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    mirna: Mapped[Mirna] = relationship(lazy="joined")
    lncrna: Mapped[Lncrna] = relationship(lazy="joined")


class StoredPrediction(Base):
    __tablename__ = "predictions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    mirna_sequence: Mapped[str] = mapped_column(Text, nullable=False)
    lncrna_sequence: Mapped[str] = mapped_column(Text, nullable=False)
    score: Mapped[int] = mapped_column(Integer, nullable=False)
    params_json: Mapped[str] = mapped_column(Text, nullable=False)  # PredictionParameters
    result_json: Mapped[str] = mapped_column(Text, nullable=False)  # PredictionResult
    client_ip: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    user_agent: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
