"""Attendance API - Presentation Layer (SoC)"""
from flask_restful import Resource
from progress_point.jwt.auth_middleware import admin_required
from progress_point.middleware.time_restriction import attendance_time_required
from progress_point.services.attendance.attendance_service import AttendanceService
from progress_point.utils.validation.input_validator import get_json_data
from progress_point.exceptions.error_handler import handle_service_error

class BatchAttendance(Resource):
    def __init__(self):
        self.attendance_service = AttendanceService()

    @admin_required
    @attendance_time_required
    def post(self, batch_name):
        try:
            result = self.attendance_service.mark_attendance(batch_name, get_json_data())
            return {"success": True, **result}, 200
        except Exception as e:
            return handle_service_error(e)

class BatchAttendanceForSession(Resource):
    def __init__(self):
        self.attendance_service = AttendanceService()

    @admin_required
    def get(self, batch_name, date, session):
        try:
            result = self.attendance_service.get_attendance(batch_name, date, session)
            return {"success": True, **result}, 200
        except Exception as e:
            return handle_service_error(e)
