"""Centralized error handling and responses - DRY principle"""
import logging
from typing import Tuple
from progress_point.exceptions.exceptions import ValidationError, NotFoundError, TimeRestrictedError

logger = logging.getLogger(__name__)


def handle_service_error(e: Exception) -> Tuple[dict, int]:
    """Centralized error handling for services"""

    if isinstance(e, ValidationError):
        return {"success": False, "message": str(e)}, 400

    elif isinstance(e, NotFoundError):
        return {"success": False, "message": str(e)}, 404

    elif isinstance(e, TimeRestrictedError):
        return {"success": False, "message": str(e), "timeRestricted": True}, 403

    elif isinstance(e, ValueError):
        return {"success": False, "message": str(e)}, 400

    else:
        sanitized_error = str(e).replace('\n', ' ').replace('\r', ' ')[:500]
        logger.error(f"Unexpected error: {sanitized_error}")
        return {"success": False, "message": "Server error"}, 500
