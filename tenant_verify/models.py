from __future__ import annotations
from datetime import datetime
from typing import List

from sqlalchemy import JSON, BigInteger, DateTime, Integer, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from .database import Base


# ----------------------------
# Verification outcomes (one row per outcome)
# ----------------------------
class Verification(Base):
    __tablename__ = "verifications"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    tenant_name: Mapped[str] = mapped_column(String(256), nullable=False)
    tenant_email: Mapped[str] = mapped_column(String(256), nullable=False)
    income: Mapped[int] = mapped_column(BigInteger, nullable=False)
    risk_score: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, index=True)  # approved|requires_review|rejected
    verified_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    details: Mapped[List[str]] = mapped_column(JSON().with_variant(JSONB, "postgresql"), nullable=False)  # list of strings
