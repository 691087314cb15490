# tenant_verify/services/validation.py
from ..errors import InvalidFormat, InvalidValue, MissingField
from ..schemas import ApplicantProfile


def validate_profile(profile: ApplicantProfile) -> None:
    """
    Fail fast on the first problem, in this order:
    name, email, income, rental history.
    """
    if not profile.name.strip():
        raise MissingField("name", "tenant name is required")

    # minimal syntactic check, no regex
    if "@" not in profile.email:
        raise InvalidFormat("email", "invalid email format")

    if profile.income < 0:
        raise InvalidValue("income", "income cannot be negative")

    if profile.rental_history_months < 0:
        raise InvalidValue("rental_history_months", "rental history cannot be negative")
