"""Leaderboard API - Presentation Layer (SoC)"""
from flask_restful import Resource
from progress_point.jwt.auth_middleware import viewer_required
from progress_point.services.leaderboard.leaderboard_service import LeaderboardService
from progress_point.utils.validation.input_validator import get_optional_query_params
from progress_point.utils.pagination.pagination_utils import get_pagination_params
from progress_point.exceptions.error_handler import handle_service_error

def _leaderboard_params():
    params = get_optional_query_params(page="1", limit="10", regNo=None)
    page, limit = get_pagination_params(params["page"], params["limit"])
    return page, limit, params["regNo"]

class BatchLeaderboard(Resource):
    def __init__(self):
        self.leaderboard_service = LeaderboardService()

    @viewer_required
    def get(self, batch_name):
        try:
            page, limit, reg_no = _leaderboard_params()
            return self.leaderboard_service.get_batch_leaderboard(batch_name, page, limit, reg_no), 200
        except Exception as e:
            return handle_service_error(e)

class DepartmentLeaderboard(Resource):
    def __init__(self):
        self.leaderboard_service = LeaderboardService()

    @viewer_required
    def get(self, department):
        try:
            page, limit, reg_no = _leaderboard_params()
            return self.leaderboard_service.get_department_leaderboard(department, page, limit, reg_no), 200
        except Exception as e:
            return handle_service_error(e)
