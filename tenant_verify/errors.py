# tenant_verify/errors.py
from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .schemas import VerificationOutcome


class TenantVerifyError(Exception):
    pass


# ----------------------------
# Client-caused (400)
# ----------------------------
class ValidationError(TenantVerifyError):
    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


class MissingField(ValidationError):
    pass


class InvalidFormat(ValidationError):
    pass


class InvalidValue(ValidationError):
    pass


class DecodeError(TenantVerifyError):
    pass


# ----------------------------
# Infrastructure (5xx)
# ----------------------------
class StoreError(TenantVerifyError):
    def __init__(self, message: str, outcome: "VerificationOutcome | None" = None):
        super().__init__(message)
        self.outcome = outcome


# ----------------------------
# Startup only
# ----------------------------
class ConfigError(TenantVerifyError):
    pass
