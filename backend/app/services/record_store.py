# File: backend/app/services/record_store.py
# Version: v0.1.0
"""
Read/search helpers for miRNA, lncRNA and curated interaction records.

These functions encapsulate the DB logic so routers don't need SQLAlchemy
query details.
"""
from __future__ import annotations

import math
from typing import List, Optional

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from backend.app.core.interaction.alignments import summarize_alignment
from backend.app.db.models import Interaction, Lncrna, Mirna
from backend.app.db.schemas.records import AlignmentCounts, BrowseResponse, InteractionOut, SearchQuery


def list_mirnas(db: Session) -> List[Mirna]:
    return list(db.execute(select(Mirna).order_by(Mirna.id)).scalars())


def list_lncrnas(db: Session) -> List[Lncrna]:
    return list(db.execute(select(Lncrna).order_by(Lncrna.id)).scalars())


def interaction_out(row: Interaction) -> InteractionOut:
    """ORM row -> InteractionOut, with pair counts parsed from the stored alignment."""
    out = InteractionOut.model_validate(row)
    if row.alignment:
        s = summarize_alignment(row.alignment)
        out.pairCounts = AlignmentCounts(
            complementaryPairs=s.complementary_pairs,
            guWobblePairs=s.wobble_pairs,
            mismatches=s.mismatches,
            bulges=s.bulges,
        )
    return out


def list_interactions(db: Session) -> List[InteractionOut]:
    rows = db.execute(select(Interaction).order_by(Interaction.id)).unique().scalars()
    return [interaction_out(r) for r in rows]


def get_interaction(db: Session, interaction_id: int) -> Optional[InteractionOut]:
    row = db.get(Interaction, interaction_id)
    return interaction_out(row) if row else None


def search_interactions(db: Session, query: SearchQuery) -> BrowseResponse:
    """
    Filter curated interactions and return one page.

    - searchTerm: case-insensitive substring on miRNA and/or lncRNA name
      ("gene" searches both names, like "all")
    - scoreFilter: keep score >= filter when > 0
    - methodFilter: "experimental"/"computational" substring on the method
    """
    conditions = []
    if query.searchTerm:
        like = f"%{query.searchTerm.lower()}%"
        on_mirna = func.lower(Mirna.name).like(like)
        on_lncrna = func.lower(Lncrna.name).like(like)
        if query.searchType == "mirna":
            conditions.append(on_mirna)
        elif query.searchType == "lncrna":
            conditions.append(on_lncrna)
        else:
            conditions.append(or_(on_mirna, on_lncrna))

    if query.scoreFilter > 0:
        conditions.append(Interaction.score >= query.scoreFilter)

    if query.methodFilter != "all":
        conditions.append(func.lower(func.coalesce(Interaction.method, "")).like(f"%{query.methodFilter}%"))

    def _joined(stmt):
        stmt = stmt.join(Mirna, Interaction.mirna_id == Mirna.id).join(Lncrna, Interaction.lncrna_id == Lncrna.id)
        return stmt.where(*conditions)

    total = int(db.scalar(_joined(select(func.count(Interaction.id)).select_from(Interaction))) or 0)
    stmt = _joined(select(Interaction))
    offset = (query.page - 1) * query.limit
    rows = (
        db.execute(stmt.order_by(Interaction.id).limit(query.limit).offset(offset))
        .unique()
        .scalars()
        .all()
    )
    return BrowseResponse(
        results=[interaction_out(r) for r in rows],
        total=total,
        page=query.page,
        totalPages=math.ceil(total / query.limit),
    )
