"""Report Service - Business Logic Layer (SoC)"""
from typing import Dict, List
from progress_point.config.settings import MARK_COMPONENTS
from progress_point.exceptions.exceptions import NotFoundError
from progress_point.repositories.core.repository_factory import RepositoryFactory
from progress_point.services.leaderboard.ranking_engine import RankingEngine
from progress_point.utils.formatting.json_utils import sanitize_mongo_document
from progress_point.utils.validation.validation_utils import ValidationUtils

UNASSIGNED_DEPARTMENT = "Unassigned"

class ReportService:
    def __init__(self):
        self.repo_factory = RepositoryFactory()

    def get_departments(self) -> Dict:
        return {"departments": self.repo_factory.get_batch_repo().find_departments()}

    def find_student(self, reg_no: str) -> Dict:
        """Look a student up by regNo across every participating batch"""
        reg_no = ValidationUtils.validate_non_empty_string(reg_no, "regNo")
        batch = self.repo_factory.get_batch_repo().find_student(reg_no)
        students = (batch or {}).get("students") or []
        if not students:
            raise NotFoundError("Student not found")

        student = students[0]
        return sanitize_mongo_document({
            "student": student,
            "batchName": batch.get("batchName"),
            "year": batch.get("year"),
            "department": str(student.get("department") or "").strip() or "Not assigned"
        })

    def get_department_stats(self) -> Dict:
        """Student count, average total marks, average attendance and batch count per department"""
        batches = self.repo_factory.get_batch_repo().find_all(include_excluded=False)

        departments: Dict[str, Dict] = {}
        for batch in batches:
            for student in batch.get("students") or []:
                entry = RankingEngine.build_entry(student)
                name = entry["department"].strip() or UNASSIGNED_DEPARTMENT
                stats = departments.setdefault(name, {
                    "totalStudents": 0, "totalMarks": 0, "totalAttendance": 0.0, "batches": set()
                })
                stats["totalStudents"] += 1
                stats["totalMarks"] += entry["total"]
                stats["totalAttendance"] += entry["attendancePercent"]
                stats["batches"].add(batch.get("batchName"))

        return {"stats": [
            {
                "department": name,
                "totalStudents": stats["totalStudents"],
                "averageMarks": round(stats["totalMarks"] / stats["totalStudents"], 2),
                "averageAttendance": round(stats["totalAttendance"] / stats["totalStudents"], 2),
                "batchCount": len(stats["batches"])
            }
            for name, stats in sorted(departments.items())
        ]}

    def get_batch_averages(self) -> List[Dict]:
        """Average of each mark component and of attendance, per batch"""
        result = []
        for batch in self.repo_factory.get_batch_repo().find_all():
            entries = [RankingEngine.build_entry(s) for s in batch.get("students") or []]
            count = len(entries) or 1
            result.append({
                "batchName": batch.get("batchName"),
                "averages": {
                    component: round(sum(e[component] for e in entries) / count, 2)
                    for component in MARK_COMPONENTS
                },
                "attendancePercent": round(sum(e["attendancePercent"] for e in entries) / count, 2)
            })
        return result
