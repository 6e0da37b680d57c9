"""Admin Time Restriction API - Presentation Layer (SoC)"""
from flask_restful import Resource
from progress_point.jwt.auth_middleware import admin_required, viewer_required, current_admin_name
from progress_point.services.admin.time_restriction_service import TimeRestrictionService
from progress_point.utils.validation.input_validator import get_json_data
from progress_point.exceptions.error_handler import handle_service_error

class TimeRestrictionResource(Resource):
    def __init__(self):
        self.restriction_service = TimeRestrictionService()

    @admin_required
    def get(self):
        try:
            result = self.restriction_service.get_all_restrictions()
            return {"success": True, **result}, 200
        except Exception as e:
            return handle_service_error(e)

    @admin_required
    def post(self):
        try:
            result = self.restriction_service.set_restriction(get_json_data(), current_admin_name())
            return {"success": True, **result}, 200
        except Exception as e:
            return handle_service_error(e)

class TimeRestrictionDetailResource(Resource):
    def __init__(self):
        self.restriction_service = TimeRestrictionService()

    @admin_required
    def get(self, restriction_type):
        try:
            result = self.restriction_service.get_restriction(restriction_type)
            return {"success": True, **result}, 200
        except Exception as e:
            return handle_service_error(e)

    @admin_required
    def put(self, restriction_type):
        try:
            result = self.restriction_service.set_restriction(
                get_json_data(), current_admin_name(), restriction_type
            )
            return {"success": True, **result}, 200
        except Exception as e:
            return handle_service_error(e)

    @admin_required
    def delete(self, restriction_type):
        try:
            result = self.restriction_service.delete_restriction(restriction_type)
            return {"success": True, **result}, 200
        except Exception as e:
            return handle_service_error(e)

class TimeRestrictionCheckResource(Resource):
    def __init__(self):
        self.restriction_service = TimeRestrictionService()

    @viewer_required
    def get(self, restriction_type):
        try:
            result = self.restriction_service.check_access(restriction_type)
            return {"success": True, **result}, 200
        except Exception as e:
            return handle_service_error(e)
