# tenant_verify/routes/verify.py
import json

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from pydantic import ValidationError as BodyParseError

from ..errors import DecodeError
from ..schemas import ApplicantProfile, VerificationList, VerificationOutcome, VerificationStatus
from ..services.verification import VerificationService

router = APIRouter(tags=["verify"])


def get_service(request: Request) -> VerificationService:
    return request.app.state.verification_service


def decode_profile(raw: bytes) -> ApplicantProfile:
    try:
        body = json.loads(raw or b"")
    except ValueError as exc:
        raise DecodeError("Bad JSON") from exc
    if not isinstance(body, dict):
        raise DecodeError("Bad JSON")
    try:
        return ApplicantProfile.model_validate(body)
    except BodyParseError as exc:
        raise DecodeError("Bad JSON") from exc


async def read_profile(request: Request) -> ApplicantProfile:
    return decode_profile(await request.body())


@router.post("/verify", response_model=VerificationOutcome)
def verify(profile: ApplicantProfile = Depends(read_profile),
           service: VerificationService = Depends(get_service)):
    # DecodeError / ValidationError / StoreError are mapped by the app's exception handlers
    return service.verify(profile)


@router.get("/verifications", response_model=VerificationList)
def list_verifications(service: VerificationService = Depends(get_service),
                       status: VerificationStatus | None = Query(None),
                       limit: int = Query(50, ge=1, le=500)):
    items = service.store.list(status=status.value if status else None, limit=limit)
    return VerificationList(items=items)


@router.get("/verifications/{verification_id}", response_model=VerificationOutcome)
def get_verification(verification_id: str, service: VerificationService = Depends(get_service)):
    outcome = service.store.get(verification_id)
    if outcome is None:
        raise HTTPException(status_code=404, detail="Verification not found")
    return outcome
