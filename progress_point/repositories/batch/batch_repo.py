"""Batch Repository - Data Access Layer (SoC)"""
from datetime import datetime
from typing import Dict, List, Optional
from pymongo import UpdateOne
from progress_point.db.central_db import batches_collection
from progress_point.repositories.batch.batch_pipelines import (
    excluded_batches_filter, build_department_students_pipeline, build_departments_pipeline
)

class BatchRepo:
    def __init__(self, collection=None):
        self.collection = collection if collection is not None else batches_collection

    def find_by_name(self, batch_name: str) -> Optional[Dict]:
        return self.collection.find_one({"batchName": batch_name})

    def find_all(self, include_excluded: bool = True) -> List[Dict]:
        """All batches; optionally leave out batches excluded from department views"""
        query = {} if include_excluded else excluded_batches_filter()
        return list(self.collection.find(query))

    def find_department_students(self, department: str) -> List[Dict]:
        pipeline = build_department_students_pipeline(department)
        return list(self.collection.aggregate(pipeline))

    def find_departments(self) -> List[str]:
        return [row["_id"] for row in self.collection.aggregate(build_departments_pipeline())]

    def find_student(self, reg_no: str) -> Optional[Dict]:
        """First participating batch holding the student, with only that student projected"""
        return self.collection.find_one(
            {**excluded_batches_filter(), "students.regNo": reg_no},
            {"_id": 0, "batchName": 1, "year": 1, "students.$": 1}
        )

    def update_students(self, batch_name: str, changes: Dict[str, Dict]) -> int:
        """
        Set fields on individual students of a batch.

        Args:
            batch_name: Batch holding the students
            changes: {regNo: {field: value}} for each touched student

        Returns:
            Number of students matched
        """
        operations = [
            UpdateOne(
                {"batchName": batch_name, "students.regNo": reg_no},
                {"$set": {f"students.$.{field}": value for field, value in fields.items()}}
            )
            for reg_no, fields in changes.items() if fields
        ]
        if not operations:
            return 0
        result = self.collection.bulk_write(operations, ordered=False)
        return result.matched_count

    def update_student_marks(self, batch_name: str, reg_no: str, marks: Dict, updated_at: datetime) -> bool:
        result = self.collection.update_one(
            {"batchName": batch_name, "students.regNo": reg_no},
            {"$set": {
                "students.$.marks": marks,
                "students.$.marksLastUpdated": updated_at
            }}
        )
        return result.matched_count > 0
