"""Student record normalization - defaults applied once at the data boundary"""
from typing import Any, Dict, List, Mapping
from progress_point.config.settings import MARK_COMPONENTS
from progress_point.utils.validation.validation_utils import ValidationUtils

DISPLAY_FIELDS = ("regNo", "name", "department", "personalEmail", "collegeEmail")

class StudentRecordNormalizer:
    """Turns raw batch sub-documents into records with every field present"""

    @staticmethod
    def normalize_marks(marks: Any) -> Dict[str, Any]:
        if not isinstance(marks, Mapping):
            marks = {}
        return {
            component: ValidationUtils.safe_number(marks.get(component))
            for component in MARK_COMPONENTS
        }

    @staticmethod
    def normalize_attendance(attendance: Any) -> List[Dict[str, Any]]:
        if not isinstance(attendance, (list, tuple)):
            return []
        return [
            {
                "date": entry.get("date"),
                "session": entry.get("session"),
                "status": entry.get("status") if isinstance(entry.get("status"), str) else None,
            }
            for entry in attendance
            if isinstance(entry, Mapping)
        ]

    @staticmethod
    def normalize_student(student: Mapping, extra: Mapping = None) -> Dict[str, Any]:
        """
        Build a StudentRecord dict from a raw document.

        Args:
            student: Raw student sub-document (may have any field missing)
            extra: Caller-supplied context such as batchName and year

        Returns:
            Dict with display fields as strings, marks with four numeric
            components, a list attendance log and marksLastUpdated
        """
        if not isinstance(student, Mapping):
            student = {}

        record = {}
        for field in DISPLAY_FIELDS:
            value = student.get(field)
            record[field] = "" if value is None else str(value)

        record["marks"] = StudentRecordNormalizer.normalize_marks(student.get("marks"))
        record["attendance"] = StudentRecordNormalizer.normalize_attendance(student.get("attendance"))
        record["marksLastUpdated"] = student.get("marksLastUpdated")

        if extra:
            record.update(extra)
        return record
