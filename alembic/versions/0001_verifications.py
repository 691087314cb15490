"""verifications table

Revision ID: 0001_verifications
Revises:
Create Date: 2026-10-19 00:00:00
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB

revision = "0001_verifications"
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        "verifications",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("tenant_name", sa.String(256), nullable=False),
        sa.Column("tenant_email", sa.String(256), nullable=False),
        sa.Column("income", sa.BigInteger, nullable=False),
        sa.Column("risk_score", sa.Integer, nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("verified_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("details", sa.JSON().with_variant(JSONB, "postgresql"), nullable=False),
    )
    op.create_index("ix_verifications_status", "verifications", ["status"])
    op.create_index("ix_verifications_verified_at", "verifications", ["verified_at"])

def downgrade():
    op.drop_index("ix_verifications_verified_at", table_name="verifications")
    op.drop_index("ix_verifications_status", table_name="verifications")
    op.drop_table("verifications")
