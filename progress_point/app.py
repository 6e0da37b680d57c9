from datetime import timedelta
from flask import Flask
from flask_cors import CORS
from flask_jwt_extended import JWTManager
from flask_restful import Api, Resource
from progress_point.config.settings import AuthConfig
from progress_point.logging_logs.log_config import setup_logging

# Leaderboards
from progress_point.api.leaderboard_api import BatchLeaderboard, DepartmentLeaderboard

# Time restrictions
from progress_point.api.admin_time_restriction_api import (
    TimeRestrictionResource, TimeRestrictionDetailResource, TimeRestrictionCheckResource
)

# Attendance and marks entry
from progress_point.api.attendance_api import BatchAttendance, BatchAttendanceForSession
from progress_point.api.marks_api import StudentMarks, BatchMarks, BatchMarksForDate

# Reports
from progress_point.api.report_api import Departments, DepartmentStats, BatchAverages, StudentLookup

class HealthCheck(Resource):
    def get(self):
        return {"success": True, "message": "Progress Point API is running"}, 200

class MyFlask(Flask):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.config["JWT_SECRET_KEY"] = AuthConfig.JWT_SECRET_KEY
        self.config["JWT_ACCESS_TOKEN_EXPIRES"] = timedelta(minutes=AuthConfig.JWT_ACCESS_TOKEN_MINUTES)

    def add_api(self):
        api = Api(self, catch_all_404s=True)
        api.add_resource(HealthCheck, "/")
        # Leaderboard apis
        api.add_resource(BatchLeaderboard, "/api/v1/leaderboard/batch/<string:batch_name>")
        api.add_resource(DepartmentLeaderboard, "/api/v1/leaderboard/department/<string:department>")
        # Time restriction apis
        api.add_resource(TimeRestrictionResource, "/api/v1/time-restrictions")
        api.add_resource(TimeRestrictionDetailResource, "/api/v1/time-restrictions/<string:restriction_type>")
        api.add_resource(TimeRestrictionCheckResource, "/api/v1/time-restrictions/<string:restriction_type>/check")
        # Attendance apis
        api.add_resource(BatchAttendance, "/api/v1/batches/<string:batch_name>/attendance")
        api.add_resource(BatchAttendanceForSession, "/api/v1/batches/<string:batch_name>/attendance/<string:date>/<string:session>")
        # Marks apis
        api.add_resource(StudentMarks, "/api/v1/batches/<string:batch_name>/student/<string:reg_no>/marks")
        api.add_resource(BatchMarks, "/api/v1/batches/<string:batch_name>/marks")
        api.add_resource(BatchMarksForDate, "/api/v1/batches/<string:batch_name>/marks/<string:date>")
        # Report apis
        api.add_resource(Departments, "/api/v1/departments")
        api.add_resource(DepartmentStats, "/api/v1/departments/stats")
        api.add_resource(BatchAverages, "/api/v1/batch-averages")
        api.add_resource(StudentLookup, "/api/v1/students/<string:reg_no>")
        return api

def create_app(**config_overrides):
    """Application factory used by the server entrypoint and the tests"""
    setup_logging()
    app = MyFlask(__name__)
    app.config.update(config_overrides)
    CORS(app, supports_credentials=True)
    JWTManager(app)
    app.add_api()
    return app
