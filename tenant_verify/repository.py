# tenant_verify/repository.py
from __future__ import annotations
from datetime import timezone
from typing import List, Optional, Protocol

from sqlalchemy import desc, select, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .config import Settings
from .database import Base, build_engine, build_sessionmaker
from .errors import StoreError
from .models import Verification
from .schemas import ApplicantProfile, VerificationOutcome, VerificationStatus
from .utils.logging import logger


class RecordStore(Protocol):
    def save(self, profile: ApplicantProfile, outcome: VerificationOutcome) -> None: ...

    def get(self, verification_id: str) -> Optional[VerificationOutcome]: ...

    def list(self, status: str | None = None, limit: int = 50) -> List[VerificationOutcome]: ...


def record_from_outcome(profile: ApplicantProfile, outcome: VerificationOutcome) -> Verification:
    return Verification(
        id=outcome.id,
        tenant_name=profile.name,
        tenant_email=profile.email,
        income=profile.income,
        risk_score=outcome.risk_score,
        status=outcome.status.value,
        verified_at=outcome.verified_at,
        details=list(outcome.details),
    )


def outcome_from_record(row: Verification) -> VerificationOutcome:
    verified_at = row.verified_at
    # SQLite hands back naive datetimes; everything stored is UTC
    if verified_at.tzinfo is None:
        verified_at = verified_at.replace(tzinfo=timezone.utc)
    return VerificationOutcome(
        id=row.id,
        status=VerificationStatus(row.status),
        risk_score=row.risk_score,
        verified_at=verified_at,
        details=tuple(row.details or ()),
    )


class SqlRecordStore:
    """Append-only store of verification outcomes backed by SQLAlchemy."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self._sessionmaker = build_sessionmaker(engine)

    @classmethod
    def from_settings(cls, settings: Settings) -> "SqlRecordStore":
        return cls(build_engine(settings))

    def connect(self, create_schema: bool = False) -> None:
        try:
            if create_schema:
                Base.metadata.create_all(bind=self.engine)
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            raise StoreError(f"error connecting to database: {exc}") from exc
        logger.info("Database connected")

    def close(self) -> None:
        self.engine.dispose()

    def save(self, profile: ApplicantProfile, outcome: VerificationOutcome) -> None:
        db = self._sessionmaker()
        try:
            db.add(record_from_outcome(profile, outcome))
            db.commit()
        except (SQLAlchemyError, OverflowError) as exc:
            # drivers raise OverflowError for ints past the column range
            db.rollback()
            raise StoreError(f"error saving verification: {exc}", outcome=outcome) from exc
        finally:
            db.close()
        logger.info("Saved verification %s", outcome.id)

    def get(self, verification_id: str) -> Optional[VerificationOutcome]:
        db = self._sessionmaker()
        try:
            row = db.execute(
                select(Verification).where(Verification.id == verification_id)
            ).scalar_one_or_none()
            return outcome_from_record(row) if row else None
        except SQLAlchemyError as exc:
            raise StoreError(f"error loading verification: {exc}") from exc
        finally:
            db.close()

    def list(self, status: str | None = None, limit: int = 50) -> List[VerificationOutcome]:
        stmt = select(Verification).order_by(desc(Verification.verified_at), desc(Verification.id)).limit(limit)
        if status:
            stmt = stmt.where(Verification.status == status)
        db = self._sessionmaker()
        try:
            rows = db.execute(stmt).scalars().all()
            return [outcome_from_record(r) for r in rows]
        except SQLAlchemyError as exc:
            raise StoreError(f"error listing verifications: {exc}") from exc
        finally:
            db.close()
