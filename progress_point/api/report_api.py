"""Department and batch report API - Presentation Layer (SoC)"""
from flask_restful import Resource
from progress_point.jwt.auth_middleware import viewer_required
from progress_point.services.reports.report_service import ReportService
from progress_point.exceptions.error_handler import handle_service_error

class Departments(Resource):
    def __init__(self):
        self.report_service = ReportService()

    @viewer_required
    def get(self):
        try:
            return {"success": True, **self.report_service.get_departments()}, 200
        except Exception as e:
            return handle_service_error(e)

class DepartmentStats(Resource):
    def __init__(self):
        self.report_service = ReportService()

    @viewer_required
    def get(self):
        try:
            return {"success": True, **self.report_service.get_department_stats()}, 200
        except Exception as e:
            return handle_service_error(e)

class BatchAverages(Resource):
    def __init__(self):
        self.report_service = ReportService()

    @viewer_required
    def get(self):
        try:
            return {"success": True, "data": self.report_service.get_batch_averages()}, 200
        except Exception as e:
            return handle_service_error(e)

class StudentLookup(Resource):
    def __init__(self):
        self.report_service = ReportService()

    @viewer_required
    def get(self, reg_no):
        try:
            return {"success": True, **self.report_service.find_student(reg_no)}, 200
        except Exception as e:
            return handle_service_error(e)
