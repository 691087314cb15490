# scoring.py
from __future__ import annotations
import uuid
from datetime import datetime, timezone
from typing import List, Tuple

from ..schemas import ApplicantProfile, EmploymentStatus, VerificationOutcome, VerificationStatus

# -----------------------------
# Tunables
# -----------------------------
BASELINE_SCORE = 50
MIN_SCORE = 0
MAX_SCORE = 100
THRESHOLDS = {
    "approved": 30,          # < 30 → approved
    "requires_review": 60,   # < 60 → requires_review, else rejected
}

LOW_INCOME = 20000
MODERATE_INCOME = 30000
STRONG_INCOME = 50000

SHORT_HISTORY_MONTHS = 6
LONG_HISTORY_MONTHS = 24

# (weight, reason) per employment status; anything else is "unknown"
EMPLOYMENT_WEIGHTS = {
    EmploymentStatus.FULL_TIME.value: (-10, "Stable employment"),
    EmploymentStatus.PART_TIME.value: (5, "Part-time employment"),
    EmploymentStatus.UNEMPLOYED.value: (25, "Currently unemployed"),
}
UNKNOWN_EMPLOYMENT = (10, "Employment status unknown")


# -----------------------------
# Helpers
# -----------------------------
def clamp(v: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, v))


def status_for(score: int) -> VerificationStatus:
    if score < THRESHOLDS["approved"]:
        return VerificationStatus.APPROVED
    if score < THRESHOLDS["requires_review"]:
        return VerificationStatus.REQUIRES_REVIEW
    return VerificationStatus.REJECTED


def generate_id() -> str:
    return f"ver_{uuid.uuid4().hex}"


# -----------------------------
# Rules
# -----------------------------
def income_rule(income: int) -> Tuple[int, str | None]:
    if income < LOW_INCOME:
        return 30, "Low income warning"
    if income < MODERATE_INCOME:
        return 10, "Moderate income"
    if income > STRONG_INCOME:
        return -20, "Strong income"
    return 0, None


def employment_rule(employment_status: str) -> Tuple[int, str | None]:
    return EMPLOYMENT_WEIGHTS.get(employment_status, UNKNOWN_EMPLOYMENT)


def rental_history_rule(months: int) -> Tuple[int, str | None]:
    if months < SHORT_HISTORY_MONTHS:
        return 15, "Limited rental history"
    if months > LONG_HISTORY_MONTHS:
        return -15, "Excellent rental history"
    return 0, None


def rules_engine(profile: ApplicantProfile) -> Tuple[int, List[str]]:
    """
    Returns (raw_score, details). Rules run in a fixed order and each one
    that fires appends exactly one rationale string.
    """
    total = BASELINE_SCORE
    details: List[str] = []

    for delta, reason in (
        income_rule(profile.income),
        employment_rule(profile.employment_status),
        rental_history_rule(profile.rental_history_months),
    ):
        if reason:
            total += delta
            details.append(reason)

    return total, details


# -----------------------------
# Main entry
# -----------------------------
def score(profile: ApplicantProfile) -> VerificationOutcome:
    """
    Score an already validated profile.

    The status is decided on the accumulated score; the reported
    risk_score is then clamped to 0..100. Both thresholds sit inside that
    range, so clamping never changes the status.
    """
    raw_score, details = rules_engine(profile)
    return VerificationOutcome(
        id=generate_id(),
        status=status_for(raw_score),
        risk_score=clamp(raw_score, MIN_SCORE, MAX_SCORE),
        verified_at=datetime.now(timezone.utc),
        details=tuple(details),
    )
