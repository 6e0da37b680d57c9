"""Marks Service - Business Logic Layer (SoC)"""
import logging
from typing import Dict
from progress_point.exceptions.exceptions import NotFoundError, ValidationError
from progress_point.repositories.core.repository_factory import RepositoryFactory
from progress_point.utils.cache.cache_utils import leaderboard_cache
from progress_point.utils.time.timeutils import now_local
from progress_point.utils.validation.record_normalizer import StudentRecordNormalizer
from progress_point.utils.validation.validation_utils import ValidationUtils

logger = logging.getLogger(__name__)

class MarksService:
    def __init__(self):
        self.repo_factory = RepositoryFactory()

    def update_student_marks(self, batch_name: str, reg_no: str, data: Dict) -> Dict:
        data = ValidationUtils.validate_payload(data)
        if not isinstance(data.get("marks"), dict):
            raise ValidationError("marks must be an object with efforts, presentation, assessment and assignment")

        batch = self._get_batch(batch_name)
        if not any(s.get("regNo") == reg_no for s in batch.get("students") or []):
            raise NotFoundError("Student not found")

        marks = StudentRecordNormalizer.normalize_marks(data["marks"])
        self.repo_factory.get_batch_repo().update_student_marks(batch_name, reg_no, marks, now_local())
        leaderboard_cache.clear()

        logger.info(f"Updated marks for {reg_no} in {batch_name}")
        return {"regNo": reg_no, "marks": marks}

    def get_marks_for_date(self, batch_name: str, date: str) -> Dict:
        batch = self._get_batch(batch_name)

        marks_by_reg_no = {}
        for student in batch.get("students") or []:
            record = next(
                (mh for mh in student.get("marksHistory") or [] if isinstance(mh, dict) and mh.get("date") == date),
                None
            )
            if record:
                marks_by_reg_no[student.get("regNo")] = StudentRecordNormalizer.normalize_marks(record.get("marks"))

        return {"marks": marks_by_reg_no}

    def save_marks_for_date(self, batch_name: str, data: Dict) -> Dict:
        """Replace each listed student's marks for the date and make them the current marks"""
        ValidationUtils.validate_required_fields(data, "date", "marks")
        date = ValidationUtils.validate_non_empty_string(data["date"], "date")
        if not isinstance(data["marks"], dict):
            raise ValidationError("marks must be a mapping of regNo to marks")

        batch = self._get_batch(batch_name)
        students = batch.get("students") or []
        updated_at = now_local()

        changes = {}
        for student in students:
            reg_no = student.get("regNo")
            raw_marks = data["marks"].get(reg_no) if isinstance(reg_no, str) else None
            if not raw_marks:
                continue
            marks = StudentRecordNormalizer.normalize_marks(raw_marks)
            history = [
                mh for mh in student.get("marksHistory") or []
                if isinstance(mh, dict) and mh.get("date") != date
            ]
            history.append({"date": date, "marks": marks})
            changes[reg_no] = {"marksHistory": history, "marks": marks, "marksLastUpdated": updated_at}
        updated = len(changes)

        self.repo_factory.get_batch_repo().update_students(batch_name, changes)
        leaderboard_cache.clear()

        logger.info(f"Saved marks for {updated} students in {batch_name} on {date}")
        return {"updated": updated}

    def _get_batch(self, batch_name: str) -> Dict:
        batch = self.repo_factory.get_batch_repo().find_by_name(batch_name)
        if not batch:
            raise NotFoundError("Batch not found")
        return batch
