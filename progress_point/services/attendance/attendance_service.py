"""Attendance Service - Business Logic Layer (SoC)"""
import logging
from typing import Dict
from progress_point.exceptions.exceptions import NotFoundError
from progress_point.repositories.core.repository_factory import RepositoryFactory
from progress_point.services.leaderboard.ranking_engine import attendance_percent
from progress_point.utils.cache.cache_utils import leaderboard_cache
from progress_point.utils.validation.record_normalizer import StudentRecordNormalizer
from progress_point.utils.validation.validation_utils import ValidationUtils

logger = logging.getLogger(__name__)

class AttendanceService:
    def __init__(self):
        self.repo_factory = RepositoryFactory()

    def get_attendance(self, batch_name: str, date: str, session: str) -> Dict:
        """Statuses recorded for one date and session, keyed by regNo"""
        batch = self._get_batch(batch_name)

        existing = {}
        for student in batch.get("students") or []:
            for record in StudentRecordNormalizer.normalize_attendance(student.get("attendance")):
                if record["date"] == date and record["session"] == session:
                    existing[student.get("regNo")] = record["status"]
                    break

        return {"attendance": existing}

    def mark_attendance(self, batch_name: str, data: Dict) -> Dict:
        """
        Record one date/session of attendance for a batch.

        An existing entry for the same date and session is replaced, and each
        touched student's stored attendancePercent is recomputed.
        """
        ValidationUtils.validate_required_fields(data, "date", "session", "attendance")
        date = ValidationUtils.validate_non_empty_string(data["date"], "date")
        session = ValidationUtils.validate_session(data["session"])
        statuses = ValidationUtils.validate_attendance_map(data["attendance"])

        batch = self._get_batch(batch_name)
        students = batch.get("students") or []

        changes = {}
        for student in students:
            reg_no = student.get("regNo")
            status = statuses.get(reg_no) if isinstance(reg_no, str) else None
            if not status:
                continue
            attendance = [
                record for record in StudentRecordNormalizer.normalize_attendance(student.get("attendance"))
                if not (record["date"] == date and record["session"] == session)
            ]
            attendance.append({"date": date, "session": session, "status": status})
            changes[reg_no] = {
                "attendance": attendance,
                "attendancePercent": attendance_percent(attendance)
            }
        updated = len(changes)

        self.repo_factory.get_batch_repo().update_students(batch_name, changes)
        leaderboard_cache.clear()

        unknown = sorted(set(statuses) - {s.get("regNo") for s in students if isinstance(s.get("regNo"), str)})
        if unknown:
            logger.warning(f"Attendance for {batch_name} skipped unknown regNos: {', '.join(unknown)}")
        logger.info(f"Marked {session} attendance for {updated} students in {batch_name} on {date}")

        return {"updated": updated, "skipped": unknown}

    def _get_batch(self, batch_name: str) -> Dict:
        batch = self.repo_factory.get_batch_repo().find_by_name(batch_name)
        if not batch:
            raise NotFoundError("Batch not found")
        return batch
