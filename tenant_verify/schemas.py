from __future__ import annotations
from datetime import datetime
from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

# largest value a BIGINT column holds
MAX_BIGINT = 2**63 - 1


class EmploymentStatus(str, Enum):
    FULL_TIME = "full_time"
    PART_TIME = "part_time"
    UNEMPLOYED = "unemployed"
    OTHER = "other"


class VerificationStatus(str, Enum):
    APPROVED = "approved"
    REQUIRES_REVIEW = "requires_review"
    REJECTED = "rejected"


class ApplicantProfile(BaseModel):
    """
    Incoming POST /verify body. Missing fields fall back to empty values
    so the validator, not the decoder, reports them. Types are strict: a
    string or float income is a decode error, not a coercion.
    """
    model_config = ConfigDict(frozen=True, strict=True)

    name: str = ""
    email: str = ""
    income: int = Field(0, le=MAX_BIGINT)
    employment_status: str = ""
    rental_history_months: int = Field(0, le=MAX_BIGINT)


class VerificationOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    status: VerificationStatus
    risk_score: int                      # 0..100, lower is better
    verified_at: datetime                # always UTC
    details: Tuple[str, ...] = Field(default_factory=tuple)


class VerificationList(BaseModel):
    items: list[VerificationOutcome]
