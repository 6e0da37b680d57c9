"""Marks API - Presentation Layer (SoC)"""
from flask_restful import Resource
from progress_point.jwt.auth_middleware import admin_required
from progress_point.middleware.time_restriction import marks_time_required
from progress_point.services.marks.marks_service import MarksService
from progress_point.utils.validation.input_validator import get_json_data
from progress_point.exceptions.error_handler import handle_service_error

class StudentMarks(Resource):
    def __init__(self):
        self.marks_service = MarksService()

    @admin_required
    @marks_time_required
    def post(self, batch_name, reg_no):
        try:
            result = self.marks_service.update_student_marks(batch_name, reg_no, get_json_data())
            return {"success": True, **result}, 200
        except Exception as e:
            return handle_service_error(e)

class BatchMarks(Resource):
    def __init__(self):
        self.marks_service = MarksService()

    @admin_required
    @marks_time_required
    def post(self, batch_name):
        try:
            result = self.marks_service.save_marks_for_date(batch_name, get_json_data())
            return {"success": True, **result}, 200
        except Exception as e:
            return handle_service_error(e)

class BatchMarksForDate(Resource):
    def __init__(self):
        self.marks_service = MarksService()

    @admin_required
    def get(self, batch_name, date):
        try:
            result = self.marks_service.get_marks_for_date(batch_name, date)
            return {"success": True, **result}, 200
        except Exception as e:
            return handle_service_error(e)
