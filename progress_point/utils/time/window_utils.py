"""Time Window Utilities - DRY Implementation"""
from typing import Dict, Optional
from datetime import datetime
from zoneinfo import ZoneInfoNotFoundError
from progress_point.config.settings import WEEKDAYS
from progress_point.utils.time.timeutils import (
    get_zone, hhmm_to_minutes, minutes_of_day, weekday_name
)

# Anything a malformed restriction document can raise while being evaluated
WINDOW_EVALUATION_ERRORS = (
    KeyError, TypeError, ValueError, AttributeError, ZoneInfoNotFoundError
)

class TimeWindowChecker:
    """Centralized time-restriction checking logic (DRY principle)"""

    @staticmethod
    def check_time_window(config: Dict, now: datetime, action: str = "Action") -> Dict:
        """
        Evaluate a time restriction against a moment.

        The window is inclusive at both ends with minute resolution, so with
        endTime 17:00 an action at 17:00 is still allowed.

        Args:
            config: Restriction document with isEnabled, startTime, endTime,
                allowedDays and optional timezone
            now: Moment to evaluate; aware values are converted to the
                restriction timezone, naive values are taken as local
            action: Label used in the returned message

        Returns:
            Dict with allowed and message

        Raises:
            KeyError, TypeError, ValueError: when the config cannot be evaluated
        """
        if not config.get("isEnabled"):
            return {"allowed": True, "message": "No time restrictions in place"}

        start_minutes = hhmm_to_minutes(config["startTime"])
        end_minutes = hhmm_to_minutes(config["endTime"])
        allowed_days = TimeWindowChecker._allowed_days(config.get("allowedDays"))

        zone = get_zone(config.get("timezone"))
        local_now = now.astimezone(zone) if now.tzinfo is not None else now
        current_day = weekday_name(local_now)

        if current_day not in allowed_days:
            return {"allowed": False, "message": f"{action} is not allowed on {current_day}"}

        current_minutes = minutes_of_day(local_now)
        if start_minutes <= current_minutes <= end_minutes:
            return {"allowed": True, "message": "Access allowed"}

        return {
            "allowed": False,
            "message": f"{action} is only allowed between {config['startTime']} and {config['endTime']}"
        }

    @staticmethod
    def is_action_allowed(config: Optional[Dict], now: datetime) -> bool:
        """Fail-open predicate: a config that cannot be evaluated allows the action"""
        if not config:
            return True
        try:
            return TimeWindowChecker.check_time_window(config, now)["allowed"]
        except WINDOW_EVALUATION_ERRORS:
            return True

    @staticmethod
    def _allowed_days(days) -> set:
        # An empty or missing list means every day, as stored by default
        if not days:
            return set(WEEKDAYS)
        if isinstance(days, str) or not hasattr(days, "__iter__"):
            raise TypeError("allowedDays must be a list of weekday names")
        return set(days)


def is_action_allowed(config: Optional[Dict], now: datetime) -> bool:
    return TimeWindowChecker.is_action_allowed(config, now)
