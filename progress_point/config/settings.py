"""Configuration settings - Configuration Layer (Environment Separated)"""
import os
from typing import Dict, List, Set
from dotenv import load_dotenv

load_dotenv()

def safe_int_env(key: str, default: str) -> int:
    """Safely convert environment variable to int"""
    try:
        return int(os.getenv(key, default))
    except ValueError:
        return int(default)

def safe_bool_env(key: str, default: str) -> bool:
    """Read a boolean flag such as 1/true/yes from the environment"""
    return os.getenv(key, default).strip().lower() in {"1", "true", "yes", "on"}

# Database Configuration
class DatabaseConfig:
    DB_URL = os.getenv("DB_URL", "mongodb://localhost:27017")
    DB_NAME = os.getenv("DB_NAME", "progress_point")
    MAX_POOL_SIZE = safe_int_env("DB_MAX_POOL_SIZE", "50")
    TIMEOUT_MS = safe_int_env("DB_TIMEOUT_MS", "10000")

# Auth Configuration (tokens are issued by the login service)
class AuthConfig:
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "change-me")
    JWT_ACCESS_TOKEN_MINUTES = safe_int_env("JWT_ACCESS_TOKEN_MINUTES", "720")
    ADMIN_ROLES = ("admin", "superAdmin")
    VIEWER_ROLES = ("admin", "superAdmin", "student", "guest")

# Cache Configuration
class CacheConfig:
    LEADERBOARD_CACHE_TTL = safe_int_env("LEADERBOARD_CACHE_TTL", "60")

# Logging Configuration
class LogConfig:
    LOG_DIR = os.getenv("LOG_DIR", os.path.join(os.getcwd(), "logs"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_TO_FILE = safe_bool_env("LOG_TO_FILE", "true")

DEFAULT_TIMEZONE = os.getenv("DEFAULT_TIMEZONE", "Asia/Kolkata")

# Time restriction types (Business Configuration)
ALLOWED_RESTRICTION_TYPES: Set[str] = {"attendance", "marks"}

WEEKDAYS: List[str] = [
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"
]

# Attendance (Business Configuration)
ATTENDANCE_STATUSES: Set[str] = {"Present", "Absent", "On-Duty"}
PRESENT_STATUSES: Set[str] = {"Present", "On-Duty"}  # On-Duty counts towards attendance
ATTENDANCE_SESSIONS: Set[str] = {"FN", "AN"}

# Marks (Business Configuration)
MARK_COMPONENTS: List[str] = ["efforts", "presentation", "assessment", "assignment"]

# Batches left out of department views
EXCLUDED_BATCH_NAMES: Set[str] = {"NOT-WILLING"}

# Collections
COLLECTIONS: Dict[str, str] = {
    "batches_collection": "batches",
    "time_restrictions_collection": "time_restrictions",
}

# Pagination
DEFAULT_PAGE_LIMIT = 10
MAX_PAGE_LIMIT = 1000
