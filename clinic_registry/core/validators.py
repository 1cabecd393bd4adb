"""
Field validators shared by professionals, appointments and the registry.

Each validator returns None when the value is acceptable, otherwise a
ClinicError describing the first violated rule.
"""

import re
from typing import Any, Optional

from .errors import ClinicError, ErrorKind

# 11 digits: leading 1, second digit 3-9
MOBILE_PATTERN = re.compile(r"^1[3-9]\d{9}$")

# 24-hour HH:mm
TIME_SLOT_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")

MIN_PEDIATRIC_AGE = 1
MAX_PEDIATRIC_AGE = 18


def _is_int(value: Any) -> bool:
    """Integers only; bool is rejected even though it subclasses int."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_blank(value: Any) -> bool:
    """True for None or a string that is empty after trimming."""
    return value is None or not str(value).strip()


def validate_not_blank(value: Optional[str], field: str, message: str) -> Optional[ClinicError]:
    if is_blank(value):
        return ClinicError(ErrorKind.EMPTY_FIELD, message, field)
    return None


def validate_professional_id(value: int) -> Optional[ClinicError]:
    """Identifiers must be positive integers."""
    if not _is_int(value) or value <= 0:
        return ClinicError(
            ErrorKind.OUT_OF_RANGE,
            f"Doctor ID must be a positive integer (current value: {value})",
            "id"
        )
    return None


def validate_work_experience(value: int) -> Optional[ClinicError]:
    if not _is_int(value) or value < 0:
        return ClinicError(
            ErrorKind.OUT_OF_RANGE,
            f"Work experience cannot be a negative number (current value: {value})",
            "work_experience"
        )
    return None


def validate_max_age(value: int) -> Optional[ClinicError]:
    if not _is_int(value) or not MIN_PEDIATRIC_AGE <= value <= MAX_PEDIATRIC_AGE:
        return ClinicError(
            ErrorKind.OUT_OF_RANGE,
            f"Pediatric patient age limit must be between "
            f"{MIN_PEDIATRIC_AGE}-{MAX_PEDIATRIC_AGE} years (current value: {value})",
            "max_age"
        )
    return None


def validate_mobile(value: Optional[str], message: Optional[str] = None) -> Optional[ClinicError]:
    """
    Validate a patient mobile number.

    Args:
        value: Mobile number string
        message: Override for the default error message

    Returns:
        None if valid, else an INVALID_FORMAT error
    """
    if not isinstance(value, str) or not MOBILE_PATTERN.fullmatch(value):
        return ClinicError(
            ErrorKind.INVALID_FORMAT,
            message or f"Invalid mobile phone number format "
                       f"(requires 11-digit valid number, current: {value})",
            "patient_mobile"
        )
    return None


def validate_time_slot(value: Optional[str]) -> Optional[ClinicError]:
    """
    Validate an appointment time slot.

    A blank slot is reported as EMPTY_FIELD before the format is checked.
    """
    if is_blank(value):
        return ClinicError(ErrorKind.EMPTY_FIELD, "The appointment time cannot be empty", "time_slot")
    if not isinstance(value, str) or not TIME_SLOT_PATTERN.fullmatch(value):
        return ClinicError(
            ErrorKind.INVALID_FORMAT,
            f"Invalid time format (required: HH:mm, e.g., 09:30, current: {value})",
            "time_slot"
        )
    return None
