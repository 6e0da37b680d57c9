"""Ranking Engine - turns student records into a ranked leaderboard"""
from typing import Any, Dict, Iterable, List, Mapping
from progress_point.config.settings import MARK_COMPONENTS, PRESENT_STATUSES
from progress_point.utils.validation.record_normalizer import StudentRecordNormalizer

# Context fields copied onto the entry when the caller attached them
CONTEXT_FIELDS = ("batchName", "year")

def total_marks(marks: Mapping) -> Any:
    """Sum of the four mark components; expects normalized marks"""
    return sum(marks[component] for component in MARK_COMPONENTS)

def attendance_percent(attendance: List[Mapping]) -> float:
    """Share of sessions counted present (Present or On-Duty), rounded to 2 places"""
    total_days = len(attendance)
    if total_days == 0:
        return 0.0
    present_days = sum(1 for entry in attendance if entry.get("status") in PRESENT_STATUSES)
    return round(present_days / total_days * 100, 2)

class RankingEngine:
    """Computes totals and attendance, then orders and ranks students"""

    @staticmethod
    def build_entry(student: Mapping) -> Dict[str, Any]:
        record = StudentRecordNormalizer.normalize_student(student)
        marks = record["marks"]

        entry = {
            "name": record["name"],
            "regNo": record["regNo"],
            "department": record["department"],
            "personalEmail": record["personalEmail"],
            "collegeEmail": record["collegeEmail"],
            **marks,
            "total": total_marks(marks),
            "attendancePercent": attendance_percent(record["attendance"]),
            "marksLastUpdated": record["marksLastUpdated"],
        }
        if isinstance(student, Mapping):
            for field in CONTEXT_FIELDS:
                if field in student:
                    entry[field] = student[field]
        return entry

    @staticmethod
    def compute_leaderboard(students: Iterable[Mapping]) -> List[Dict[str, Any]]:
        """
        Rank students by total marks, then attendance percentage.

        Ties on both keys fall back to regNo ascending and then to input
        order (the sort is stable), so repeated calls give the same ranks.
        Ranks are 1-based and never shared.

        Args:
            students: Raw or normalized student records; never mutated

        Returns:
            List of leaderboard entries with total, attendancePercent and rank
        """
        entries = [RankingEngine.build_entry(student) for student in students or []]

        entries.sort(key=lambda e: (
            -e["total"],              # Higher totals first
            -e["attendancePercent"],  # Better attendance breaks ties
            e["regNo"]                # Deterministic tertiary key
        ))

        for rank, entry in enumerate(entries, 1):
            entry["rank"] = rank

        return entries


def compute_leaderboard(students: Iterable[Mapping]) -> List[Dict[str, Any]]:
    return RankingEngine.compute_leaderboard(students)
