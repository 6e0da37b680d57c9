"""Time Restriction Service - Business Logic Layer (SoC)"""
import logging
from datetime import datetime
from typing import Dict, Optional
from pymongo.errors import PyMongoError
from progress_point.config.settings import DEFAULT_TIMEZONE
from progress_point.exceptions.exceptions import NotFoundError, TimeRestrictedError
from progress_point.repositories.core.repository_factory import RepositoryFactory
from progress_point.utils.formatting.json_utils import sanitize_mongo_document
from progress_point.utils.time.timeutils import now_local
from progress_point.utils.time.window_utils import TimeWindowChecker, WINDOW_EVALUATION_ERRORS
from progress_point.utils.validation.validation_utils import ValidationUtils

logger = logging.getLogger(__name__)

class TimeRestrictionService:
    def __init__(self):
        self.repo_factory = RepositoryFactory()

    def get_all_restrictions(self) -> dict:
        repo = self.repo_factory.get_time_restriction_repo()
        return sanitize_mongo_document({"restrictions": repo.find_all()})

    def get_restriction(self, restriction_type: str) -> dict:
        repo = self.repo_factory.get_time_restriction_repo()
        restriction = repo.find_by_type(restriction_type)
        if not restriction:
            raise NotFoundError("Time restriction not found")
        return sanitize_mongo_document({"restriction": restriction})

    def set_restriction(self, data: dict, admin_name: str = None, restriction_type: str = None) -> dict:
        """Create or update a restriction; the path type wins over the body type"""
        data = dict(ValidationUtils.validate_payload(data or {}))
        if restriction_type:
            data["type"] = restriction_type
        ValidationUtils.validate_required_fields(data, "type", "startTime", "endTime")

        restriction_type = ValidationUtils.validate_restriction_type(data["type"])
        ValidationUtils.validate_time_range(data["startTime"], data["endTime"])
        allowed_days = ValidationUtils.validate_weekdays(data.get("allowedDays"))

        is_enabled = bool(data.get("isEnabled", False))
        allow_weekends = data.get("allowWeekends")
        restriction = {
            "type": restriction_type,
            "isEnabled": is_enabled,
            "startTime": data["startTime"],
            "endTime": data["endTime"],
            "timezone": data.get("timezone") or DEFAULT_TIMEZONE,
            "allowWeekends": True if allow_weekends is None else bool(allow_weekends),
            "allowedDays": allowed_days,
            "lastUpdatedBy": admin_name or "System",
            "lastUpdatedAt": now_local()
        }

        repo = self.repo_factory.get_time_restriction_repo()
        stored = repo.upsert(restriction_type, restriction)
        logger.info(
            f"Time restriction for {restriction_type} set by {restriction['lastUpdatedBy']} "
            f"({restriction['startTime']}-{restriction['endTime']}, enabled={is_enabled})"
        )

        return sanitize_mongo_document({
            "restriction": stored or restriction,
            "message": f"Time restriction for {restriction_type} {'enabled' if is_enabled else 'disabled'} successfully"
        })

    def delete_restriction(self, restriction_type: str) -> dict:
        repo = self.repo_factory.get_time_restriction_repo()
        if not repo.delete(restriction_type):
            raise NotFoundError("Time restriction not found")
        logger.info(f"Time restriction for {restriction_type} deleted")
        return {"message": f"Time restriction for {restriction_type} deleted successfully"}

    def check_access(self, restriction_type: str, now: Optional[datetime] = None) -> dict:
        """Current access decision plus the window that produced it"""
        restriction = self._load_restriction(restriction_type)
        if not restriction or not restriction.get("isEnabled"):
            return {"allowed": True, "message": "No time restrictions in place"}

        result = self._evaluate(restriction_type, restriction, now)
        return sanitize_mongo_document({
            **result,
            "restriction": {
                "startTime": restriction.get("startTime"),
                "endTime": restriction.get("endTime"),
                "allowedDays": restriction.get("allowedDays")
            }
        })

    def is_time_allowed(self, restriction_type: str, now: Optional[datetime] = None) -> Dict:
        """Fail-open access decision: lookup or evaluation problems allow the action"""
        restriction = self._load_restriction(restriction_type)
        if not restriction or not restriction.get("isEnabled"):
            return {"allowed": True, "message": "No restrictions"}
        return self._evaluate(restriction_type, restriction, now)

    def ensure_allowed(self, restriction_type: str, now: Optional[datetime] = None) -> None:
        result = self.is_time_allowed(restriction_type, now)
        if not result["allowed"]:
            raise TimeRestrictedError(result["message"])

    def _load_restriction(self, restriction_type: str) -> Optional[Dict]:
        try:
            repo = self.repo_factory.get_time_restriction_repo()
            return repo.find_by_type(restriction_type)
        except PyMongoError as e:
            logger.warning(f"Could not load {restriction_type} time restriction, allowing: {e}")
            return None

    def _evaluate(self, restriction_type: str, restriction: Dict, now: Optional[datetime]) -> Dict:
        try:
            return TimeWindowChecker.check_time_window(restriction, now or now_local(), restriction_type)
        except WINDOW_EVALUATION_ERRORS as e:
            logger.warning(f"Malformed {restriction_type} time restriction, allowing: {e}")
            return {"allowed": True, "message": "Error checking restrictions"}
