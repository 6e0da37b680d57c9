from functools import wraps
from flask_jwt_extended import get_jwt, verify_jwt_in_request
from flask_jwt_extended.exceptions import NoAuthorizationError
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from progress_point.config.settings import AuthConfig

def role_required(*allowed_roles):
    """Decorator to require specific roles for API endpoints"""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            try:
                verify_jwt_in_request()
            except NoAuthorizationError:
                return {"success": False, "message": "Missing Authorization Header", "error": "NO_AUTH_HEADER"}, 401
            except ExpiredSignatureError:
                return {"success": False, "message": "Token has expired", "error": "TOKEN_EXPIRED"}, 401
            except InvalidTokenError:
                return {"success": False, "message": "Invalid token", "error": "INVALID_TOKEN"}, 401

            user_type = get_jwt().get("userType")
            if user_type not in allowed_roles:
                return {
                    "success": False,
                    "message": f"Access denied. Required roles: {', '.join(allowed_roles)}",
                    "error": "INSUFFICIENT_PERMISSIONS"
                }, 403

            return f(*args, **kwargs)
        return decorated_function
    return decorator

def current_admin_name() -> str:
    """Display name of the admin behind the current request"""
    claims = get_jwt()
    return claims.get("adminName") or claims.get("sub") or "System"

def admin_required(f):
    """Decorator for admin-only endpoints"""
    return role_required(*AuthConfig.ADMIN_ROLES)(f)

def viewer_required(f):
    """Decorator for read-only dashboards (admins, students and guests)"""
    return role_required(*AuthConfig.VIEWER_ROLES)(f)
