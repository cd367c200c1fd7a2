"""
Field validation for the two submission kinds.

Every check appends to an error list instead of raising on the first
problem, so a rejected submission reports all of its bad fields at once.
The ``validate_*`` functions take the camelCase payload received by the
API and return the snake_case column values to persist.
"""
import re
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional, Type

from app.domain.entities.CellTherapyInterestEntity import CellTherapyStatus
from app.domain.entities.RegistrationEntity import RegistrationStatus, ResearchArea
from app.domain.exceptions import ValidationError

EMAIL_PATTERN = re.compile(r"^[^@\s]+@(?:[^@\s.]+\.)+[A-Za-z]{2,}$")
ZIP_CODE_PATTERN = re.compile(r"^\d{5}$")
NON_DIGIT_PATTERN = re.compile(r"\D")

MIN_AGE = 18
MAX_AGE = 120
MOBILE_NUMBER_DIGITS = 10

# Column widths of the submission tables
MAX_LENGTHS = {
    "fullName": 150,
    "email": 254,
    "phone": 50,
    "zipCode": 20,
    "trialNctId": 20,
    "trialTitle": 500,
}

Errors = List[Dict[str, str]]


def _add(errors: Errors, field: str, message: str) -> None:
    errors.append({"field": field, "message": message})


def _clean_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _within_limit(errors: Errors, field: str, value: Optional[str]) -> Optional[str]:
    limit = MAX_LENGTHS.get(field)
    if value is not None and limit is not None and len(value) > limit:
        _add(errors, field, f"{field} must be at most {limit} characters")
        return None
    return value


def _optional_text(errors: Errors, data: Dict[str, Any], field: str) -> Optional[str]:
    return _within_limit(errors, field, _clean_text(data.get(field)))


def _required_text(errors: Errors, data: Dict[str, Any], field: str, message: str) -> Optional[str]:
    value = _clean_text(data.get(field))
    if value is None:
        _add(errors, field, message)
        return None
    return _within_limit(errors, field, value)


def _email(errors: Errors, data: Dict[str, Any], field: str = "email") -> Optional[str]:
    value = _clean_text(data.get(field))
    if value is None:
        _add(errors, field, "Email is required")
        return None
    if _within_limit(errors, field, value) is None:
        return None
    value = value.lower()
    if not EMAIL_PATTERN.match(value):
        _add(errors, field, "Please enter a valid email")
        return None
    return value


def _age(errors: Errors, data: Dict[str, Any], required: bool, upper_bound: bool) -> Optional[int]:
    value = data.get("age")
    if value is None or value == "":
        if required:
            _add(errors, "age", "Age is required")
        return None
    # whole years only: 45.7 is rejected, never truncated
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        _add(errors, "age", "Please enter a valid age")
        return None
    try:
        age = int(value)
    except (TypeError, ValueError):
        _add(errors, "age", "Please enter a valid age")
        return None
    if age < MIN_AGE:
        _add(errors, "age", "Must be 18 years or older to participate")
        return None
    if upper_bound and age > MAX_AGE:
        _add(errors, "age", "Please enter a valid age")
        return None
    return age


def _enum_value(errors: Errors, value: Any, enum_cls: Type[Enum], field: str, message: str) -> Optional[str]:
    if value is None:
        return None
    raw = value.value if isinstance(value, Enum) else value
    allowed = {member.value for member in enum_cls}
    if raw not in allowed:
        _add(errors, field, message)
        return None
    return raw


def normalize_mobile_number(value: Any) -> str:
    """Drop every non-digit character: ``"555-123-4567"`` becomes ``"5551234567"``."""
    return NON_DIGIT_PATTERN.sub("", str(value or ""))


def check_registration_status(errors: Errors, value: Any) -> Optional[str]:
    allowed = ", ".join(s.value for s in RegistrationStatus)
    return _enum_value(errors, value, RegistrationStatus, "status", f"Status must be one of: {allowed}")


def check_cell_therapy_status(errors: Errors, value: Any) -> Optional[str]:
    allowed = ", ".join(s.value for s in CellTherapyStatus)
    return _enum_value(errors, value, CellTherapyStatus, "status", f"Status must be one of: {allowed}")


def _raise_if_any(errors: Errors) -> None:
    if errors:
        raise ValidationError(errors)


def validate_registration(data: Dict[str, Any]) -> Dict[str, Any]:
    """Validate a general registration payload and return the columns to store."""
    errors: Errors = []

    full_name = _required_text(errors, data, "fullName", "Full name is required")
    email = _email(errors, data)
    phone = _required_text(errors, data, "phone", "Phone number is required")
    age = _age(errors, data, required=False, upper_bound=False)
    zip_code = _optional_text(errors, data, "zipCode")

    research_area = _enum_value(
        errors,
        _clean_text(data.get("researchArea")),
        ResearchArea,
        "researchArea",
        "Please select a valid research area",
    )

    date_of_birth = data.get("dateOfBirth")
    if date_of_birth is not None and not isinstance(date_of_birth, date):
        _add(errors, "dateOfBirth", "Please enter a valid date of birth")
        date_of_birth = None

    consent = data.get("consent")
    if consent is None:
        _add(errors, "consent", "Consent is required")
    elif consent is not True:
        # strictly the boolean literal, never "true" or 1
        _add(errors, "consent", "You must consent to participate")

    _raise_if_any(errors)

    return {
        "full_name": full_name,
        "email": email,
        "phone": phone,
        "age": age,
        "zip_code": zip_code,
        "health_info": _clean_text(data.get("healthInfo")),
        "date_of_birth": date_of_birth,
        "research_area": research_area,
        "medical_conditions": _clean_text(data.get("medicalConditions")),
        "consent": True,
    }


def validate_cell_therapy_interest(data: Dict[str, Any]) -> Dict[str, Any]:
    """Validate a cell therapy interest payload and return the columns to store."""
    errors: Errors = []

    full_name = _required_text(errors, data, "fullName", "Full name is required")
    email = _email(errors, data)

    mobile_number = None
    if _clean_text(data.get("mobileNumber")) is None:
        _add(errors, "mobileNumber", "Mobile number is required")
    else:
        mobile_number = normalize_mobile_number(data.get("mobileNumber"))
        if len(mobile_number) != MOBILE_NUMBER_DIGITS:
            _add(errors, "mobileNumber", "Please enter a valid 10-digit phone number")
            mobile_number = None

    zip_code = _required_text(errors, data, "zipCode", "ZIP code is required")
    if zip_code is not None and not ZIP_CODE_PATTERN.match(zip_code):
        _add(errors, "zipCode", "Please enter a valid 5-digit ZIP code")
        zip_code = None

    age = _age(errors, data, required=True, upper_bound=True)
    current_diagnosis = _required_text(errors, data, "currentDiagnosis", "Current diagnosis is required")
    current_health_status = _required_text(
        errors, data, "currentHealthStatus", "Current health status is required"
    )
    trial_nct_id = _optional_text(errors, data, "trialNctId")
    trial_title = _optional_text(errors, data, "trialTitle")

    _raise_if_any(errors)

    return {
        "full_name": full_name,
        "email": email,
        "mobile_number": mobile_number,
        "zip_code": zip_code,
        "age": age,
        "current_diagnosis": current_diagnosis,
        "current_health_status": current_health_status,
        "trial_nct_id": trial_nct_id,
        "trial_title": trial_title,
    }


def validate_registration_update(data: Dict[str, Any]) -> Dict[str, Any]:
    """Validate the fields an admin may change on a registration.

    Only keys present in ``data`` are returned, so the update stays sparse.
    """
    errors: Errors = []
    fields: Dict[str, Any] = {}

    if "status" in data:
        status = check_registration_status(errors, data["status"])
        if status is not None:
            fields["status"] = status
    if "emailSent" in data:
        if not isinstance(data["emailSent"], bool):
            _add(errors, "emailSent", "emailSent must be true or false")
        else:
            fields["email_sent"] = data["emailSent"]

    _raise_if_any(errors)
    return fields


def validate_cell_therapy_update(data: Dict[str, Any]) -> Dict[str, Any]:
    """Validate a partial update of status, notes and the e-mail flag."""
    errors: Errors = []
    fields: Dict[str, Any] = {}

    if "status" in data:
        status = check_cell_therapy_status(errors, data["status"])
        if status is not None:
            fields["status"] = status
    if "notes" in data:
        fields["notes"] = _clean_text(data["notes"])
    if "emailSent" in data:
        if not isinstance(data["emailSent"], bool):
            _add(errors, "emailSent", "emailSent must be true or false")
        else:
            fields["email_sent"] = data["emailSent"]

    _raise_if_any(errors)
    return fields
