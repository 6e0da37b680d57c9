"""Leaderboard Service - Business Logic Layer (SoC)"""
import logging
from typing import Dict, List
from progress_point.exceptions.exceptions import NotFoundError
from progress_point.repositories.core.repository_factory import RepositoryFactory
from progress_point.services.leaderboard.ranking_engine import RankingEngine
from progress_point.utils.cache.cache_utils import leaderboard_cache, make_cache_key
from progress_point.utils.formatting.json_utils import sanitize_mongo_document
from progress_point.utils.pagination.pagination_utils import build_paginated_response
from progress_point.utils.validation.validation_utils import ValidationUtils

logger = logging.getLogger(__name__)

class LeaderboardService:
    def __init__(self):
        self.repo_factory = RepositoryFactory()
        self.cache = leaderboard_cache

    def get_batch_leaderboard(self, batch_name: str, page: int = 1, limit: int = 10, reg_no: str = None) -> Dict:
        """Leaderboard of one batch"""
        batch_name = ValidationUtils.validate_non_empty_string(batch_name, "batchName")

        cache_key = make_cache_key("batch", batch_name, page, limit, reg_no)
        cached_result = self.cache.get(cache_key)
        if cached_result:
            return {**cached_result, "cached": True}

        batch = self.repo_factory.get_batch_repo().find_by_name(batch_name)
        if not batch:
            raise NotFoundError(f"Batch {batch_name} not found")

        context = {"batchName": batch.get("batchName", batch_name), "year": batch.get("year")}
        students = [{**student, **context} for student in batch.get("students") or [] if isinstance(student, dict)]

        return self._build_response(
            cache_key, students, page, limit, reg_no,
            {"batchName": batch_name, "year": batch.get("year")}
        )

    def get_department_leaderboard(self, department: str, page: int = 1, limit: int = 10, reg_no: str = None) -> Dict:
        """Leaderboard of one department across every participating batch"""
        department = ValidationUtils.validate_non_empty_string(department, "department")

        cache_key = make_cache_key("department", department.lower(), page, limit, reg_no)
        cached_result = self.cache.get(cache_key)
        if cached_result:
            return {**cached_result, "cached": True}

        students = self.repo_factory.get_batch_repo().find_department_students(department)

        return self._build_response(
            cache_key, students, page, limit, reg_no,
            {"department": department}
        )

    def _build_response(self, cache_key: str, students: List[Dict], page: int, limit: int,
                        reg_no: str, additional_fields: Dict) -> Dict:
        leaderboard = RankingEngine.compute_leaderboard(students)
        logger.debug(f"Ranked {len(leaderboard)} students for {additional_fields}")

        response_data = build_paginated_response(
            success=True,
            data=leaderboard,
            page=page,
            limit=limit,
            additional_fields=additional_fields
        )

        if reg_no:
            pagination = response_data["pagination"]
            response_data = self._add_student_position(
                response_data, reg_no, leaderboard, pagination["page"], pagination["limit"]
            )

        final_result = sanitize_mongo_document(response_data)
        final_result["cached"] = False

        self.cache.put(cache_key, final_result)
        return final_result

    def _add_student_position(self, response_data: Dict, reg_no: str, full_leaderboard: List[Dict], current_page: int, limit: int) -> Dict:
        """Add student position tracking from the full (unpaginated) leaderboard"""
        student_data = next((s for s in full_leaderboard if s.get("regNo") == reg_no), None)
        if not student_data:
            return response_data

        student_rank = student_data["rank"]
        student_page = ((student_rank - 1) // limit) + 1
        is_on_current_page = student_page == current_page

        response_data["student_data"] = {
            **student_data,
            "page": student_page,
            "is_on_current_page": is_on_current_page
        }

        if is_on_current_page:
            for item in response_data["data"]:
                if item.get("regNo") == reg_no:
                    item["is_current_user"] = True
                    break

        return response_data
