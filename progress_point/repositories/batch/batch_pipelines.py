"""Batch Domain Pipelines - Batch DB Queries (SoC)"""
import re
from typing import List, Dict
from progress_point.config.settings import EXCLUDED_BATCH_NAMES

def excluded_batches_filter() -> Dict:
    """Match batches that take part in department views (case-insensitive exclusion)"""
    names = "|".join(re.escape(name) for name in sorted(EXCLUDED_BATCH_NAMES))
    return {"batchName": {"$not": re.compile(f"^({names})$", re.IGNORECASE)}}

def build_department_students_pipeline(department: str) -> List[Dict]:
    """Students of one department across all batches, tagged with batchName and year"""
    return [
        {"$match": excluded_batches_filter()},
        {"$unwind": "$students"},
        {"$match": {"$expr": {
            "$eq": [
                {"$toLower": {"$trim": {"input": {"$ifNull": ["$students.department", ""]}}}},
                department.strip().lower()
            ]
        }}},
        {"$replaceRoot": {"newRoot": {
            "$mergeObjects": ["$students", {"batchName": "$batchName", "year": "$year"}]
        }}}
    ]

def build_departments_pipeline() -> List[Dict]:
    """Distinct non-empty department names, sorted"""
    return [
        {"$match": excluded_batches_filter()},
        {"$unwind": "$students"},
        {"$project": {"department": {"$trim": {"input": {"$ifNull": ["$students.department", ""]}}}}},
        {"$match": {"department": {"$ne": ""}}},
        {"$group": {"_id": "$department"}},
        {"$sort": {"_id": 1}}
    ]
