# tenant_verify/services/verification.py
from __future__ import annotations

from ..config import Settings
from ..errors import StoreError, ValidationError
from ..repository import RecordStore
from ..schemas import ApplicantProfile, VerificationOutcome
from ..utils.logging import logger
from .scoring import score
from .validation import validate_profile


class VerificationService:
    """
    validate → score → persist → return.

    Validation errors short-circuit before scoring. A store failure fails
    the call with StoreError; the computed outcome rides along on the
    error rather than being returned.
    """

    def __init__(self, store: RecordStore, settings: Settings):
        self.store = store
        self.settings = settings

    def verify(self, profile: ApplicantProfile) -> VerificationOutcome:
        try:
            validate_profile(profile)
        except ValidationError as exc:
            logger.warning("Rejected profile: field=%s (%s)", exc.field, exc.message)
            raise

        outcome = score(profile)

        try:
            self.store.save(profile, outcome)
        except StoreError as exc:
            if exc.outcome is None:
                exc.outcome = outcome
            logger.exception("Store failure for verification %s", outcome.id)
            raise

        logger.info("Verified: %s, Status: %s, Score: %s [%s]",
                    outcome.id, outcome.status.value, outcome.risk_score, self.settings.ENVIRONMENT)
        return outcome
