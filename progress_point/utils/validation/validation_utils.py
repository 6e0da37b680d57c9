"""Consolidated Validation Utilities - Single Source of Truth"""
import math
from typing import Dict, Any, Iterable, List
from progress_point.config.settings import (
    ALLOWED_RESTRICTION_TYPES, WEEKDAYS, ATTENDANCE_STATUSES, ATTENDANCE_SESSIONS
)
from progress_point.exceptions.exceptions import ValidationError
from progress_point.utils.time.timeutils import is_valid_hhmm, hhmm_to_minutes

class ValidationUtils:
    """Unified validation utilities"""

    @staticmethod
    def validate_payload(data: Any) -> Dict:
        """Request bodies must be JSON objects"""
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        return data

    @staticmethod
    def validate_required_fields(data: Dict, *fields: str) -> None:
        """Validate required fields exist and are not empty"""
        ValidationUtils.validate_payload(data)
        missing = [f for f in fields if data.get(f) in (None, "")]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    @staticmethod
    def validate_non_empty_string(value: Any, field_name: str) -> str:
        """Validate non-empty string"""
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(f"{field_name} must be a non-empty string")
        return value.strip()

    @staticmethod
    def safe_number(value: Any, default=0):
        """Lenient numeric coercion: anything that is not a finite number becomes the default"""
        if isinstance(value, bool) or value is None:
            return default
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            return value if math.isfinite(value) else default
        if isinstance(value, str):
            try:
                number = float(value.strip())
            except ValueError:
                return default
            if not math.isfinite(number):
                return default
            return int(number) if number.is_integer() else number
        return default

    @staticmethod
    def validate_restriction_type(restriction_type: str) -> str:
        if not isinstance(restriction_type, str) or not restriction_type.strip():
            raise ValidationError("Restriction type is required")
        restriction_type = restriction_type.strip()
        if restriction_type not in ALLOWED_RESTRICTION_TYPES:
            raise ValidationError(
                f"Type must be one of: {', '.join(sorted(ALLOWED_RESTRICTION_TYPES))}"
            )
        return restriction_type

    @staticmethod
    def validate_time_range(start_time: str, end_time: str) -> None:
        """Both times in HH:MM and end strictly after start"""
        if not is_valid_hhmm(start_time) or not is_valid_hhmm(end_time):
            raise ValidationError("Time must be in HH:MM format")
        if hhmm_to_minutes(end_time) <= hhmm_to_minutes(start_time):
            raise ValidationError("End time must be after start time")

    @staticmethod
    def validate_weekdays(days: Any) -> List[str]:
        if days is None:
            return list(WEEKDAYS)
        if isinstance(days, str) or not isinstance(days, Iterable):
            raise ValidationError("allowedDays must be a list of weekday names")
        invalid = [d for d in days if d not in WEEKDAYS]
        if invalid:
            raise ValidationError(f"Invalid weekday(s): {', '.join(map(str, invalid))}")
        # Empty list means every day
        return [d for d in WEEKDAYS if d in set(days)] or list(WEEKDAYS)

    @staticmethod
    def validate_session(session: str) -> str:
        if not isinstance(session, str) or session not in ATTENDANCE_SESSIONS:
            raise ValidationError(f"Session must be one of: {', '.join(sorted(ATTENDANCE_SESSIONS))}")
        return session

    @staticmethod
    def validate_attendance_map(attendance: Any) -> Dict[str, str]:
        """Validate a {regNo: status} mapping"""
        if not isinstance(attendance, dict) or not attendance:
            raise ValidationError("attendance must be a non-empty mapping of regNo to status")
        invalid = {
            reg_no: status for reg_no, status in attendance.items()
            if not isinstance(status, str) or status not in ATTENDANCE_STATUSES
        }
        if invalid:
            raise ValidationError(
                f"Invalid attendance status for: {', '.join(sorted(invalid))}. "
                f"Allowed: {', '.join(sorted(ATTENDANCE_STATUSES))}"
            )
        return attendance
