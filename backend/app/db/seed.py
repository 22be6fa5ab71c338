# File: backend/app/db/seed.py
# Version: v0.1.0
"""
Example records inserted on first start (empty database only).

Three Arabidopsis miRNAs, three lncRNAs and one curated interaction per pair.
"""
from __future__ import annotations

from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from backend.app.db.models import Interaction, Lncrna, Mirna

MIRNAS = [
    {"name": "ath-miR167a", "sequence": "UGAAGCUGCCAGCAUGAUCUA", "source": "miRBase (MIMAT0000195)"},
    {"name": "ath-miR156a", "sequence": "UGACAGAAGAGAGUGAGCAC", "source": "miRBase"},
    {"name": "ath-miR319a", "sequence": "UUGGACUGAAGGGAGCUCCU", "source": "miRBase"},
]

LNCRNAS = [
    {
        "name": "BLIL1",
        "sequence": "UGAUCGAUGAGUAUGGCGUUGAUGAUCUCAGGCAUAGCGGGAGCGC",
        "location": "Chr 1: 4567890-4572345",
        "function": "Leaf development regulation",
    },
    {
        "name": "ELENA1",
        "sequence": "ACGUGCUAGCUAGCUAGUAGCUAGAUGAGGGAUGCUACGAUGCAUGG",
        "location": "Chr 3: 12345678-12350000",
        "function": "Stress response",
    },
    {
        "name": "COLDAIR",
        "sequence": "GUAGCUAGCUAGCUAGUCAUGCUAGUCAGUCAGUCGAUCGAUUCGAU",
        "location": "Chr 5: 23456789-23460000",
        "function": "Flowering time regulation",
    },
]

# (mirna index, lncrna index, fields)
INTERACTIONS = [
    (0, 0, {
        "alignment": "miRNA 3' AUCUAGUAG--GUCGUA 5'\n       | | ||| | |||||| \nlncRNA 5' UGAUGUUC--CAGGAU 3'",
        "binding_site": "16-38",
        "score": 92,
        "method": "Experimental (CLASH)",
        "source": "Zhang et al., 2022",
        "first_reported": datetime(2019, 6, 15),
    }),
    (1, 1, {
        "alignment": "miRNA 3' CACGAGUG--AGAGAAGACAGU 5'\n       || ||  | |||| |||\nlncRNA 5' GUGCUUUGCUUCUCAUUCUCA 3'",
        "binding_site": "23-45",
        "score": 78,
        "method": "Computational",
        "source": "Liu et al., 2021",
        "first_reported": datetime(2021, 3, 10),
    }),
    (2, 2, {
        "alignment": "miRNA 3' UCCUCGAG--GGGAAGUCAGGU 5'\n       |||||  | || |||||\nlncRNA 5' AGGAGUUUCACCCAUCAGUCA 3'",
        "binding_site": "12-34",
        "score": 85,
        "method": "Experimental (RIP-seq)",
        "source": "Wang et al., 2020",
        "first_reported": datetime(2020, 9, 22),
    }),
]


def seed_example_data(db: Session) -> bool:
    """Insert the example records if there are no miRNAs yet. Returns True if seeded."""
    if int(db.scalar(select(func.count()).select_from(Mirna)) or 0) > 0:
        return False

    mirnas = [Mirna(**m) for m in MIRNAS]
    lncrnas = [Lncrna(**l) for l in LNCRNAS]
    db.add_all(mirnas + lncrnas)
    db.flush()
    for mi, li, fields in INTERACTIONS:
        db.add(Interaction(mirna_id=mirnas[mi].id, lncrna_id=lncrnas[li].id, **fields))
    db.commit()
    return True
