"""Time restriction middleware - blocks writes outside the configured window"""
from functools import wraps
from progress_point.exceptions.error_handler import handle_service_error
from progress_point.exceptions.exceptions import TimeRestrictedError
from progress_point.services.admin.time_restriction_service import TimeRestrictionService

def time_restricted(restriction_type: str):
    """Decorator: answer 403 when the restriction for this type is closed right now"""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            try:
                TimeRestrictionService().ensure_allowed(restriction_type)
            except TimeRestrictedError as e:
                return handle_service_error(e)
            return f(*args, **kwargs)
        return decorated_function
    return decorator

# Specific decorators for attendance and marks writes
attendance_time_required = time_restricted("attendance")
marks_time_required = time_restricted("marks")
