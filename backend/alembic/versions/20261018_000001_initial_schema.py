# File: backend/alembic/versions/20261018_000001_initial_schema.py
# Version: v0.1.0
"""
Create tables: mirnas, lncrnas, interactions, predictions
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "20261018_000001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "mirnas",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(120), nullable=False),
        sa.Column("sequence", sa.Text(), nullable=False),
        sa.Column("species", sa.String(120), nullable=False),
        sa.Column("source", sa.String(255), nullable=True),
    )
    op.create_index("ix_mirnas_name", "mirnas", ["name"])

    op.create_table(
        "lncrnas",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(120), nullable=False),
        sa.Column("sequence", sa.Text(), nullable=False),
        sa.Column("species", sa.String(120), nullable=False),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column("function", sa.String(255), nullable=True),
    )
    op.create_index("ix_lncrnas_name", "lncrnas", ["name"])

    op.create_table(
        "interactions",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("mirna_id", sa.Integer(), sa.ForeignKey("mirnas.id", ondelete="CASCADE"), nullable=False),
        sa.Column("lncrna_id", sa.Integer(), sa.ForeignKey("lncrnas.id", ondelete="CASCADE"), nullable=False),
        sa.Column("alignment", sa.Text(), nullable=True),
        sa.Column("binding_site", sa.String(64), nullable=True),
        sa.Column("score", sa.Float(), nullable=False),
        sa.Column("method", sa.String(120), nullable=True),
        sa.Column("source", sa.String(255), nullable=True),
        sa.Column("first_reported", sa.DateTime(), nullable=True),
    )

    op.create_table(
        "predictions",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("mirna_sequence", sa.Text(), nullable=False),
        sa.Column("lncrna_sequence", sa.Text(), nullable=False),
        sa.Column("score", sa.Integer(), nullable=False),
        sa.Column("params_json", sa.Text(), nullable=False),
        sa.Column("result_json", sa.Text(), nullable=False),
        sa.Column("client_ip", sa.String(64), nullable=True),
        sa.Column("user_agent", sa.String(255), nullable=True),
    )
    op.create_index("ix_predictions_created_at", "predictions", ["created_at"])


def downgrade():
    op.drop_index("ix_predictions_created_at", table_name="predictions")
    op.drop_table("predictions")
    op.drop_table("interactions")
    op.drop_index("ix_lncrnas_name", table_name="lncrnas")
    op.drop_table("lncrnas")
    op.drop_index("ix_mirnas_name", table_name="mirnas")
    op.drop_table("mirnas")
