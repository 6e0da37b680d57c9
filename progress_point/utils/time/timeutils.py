"""Time utilities - DRY principle"""
import re
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo
from progress_point.config.settings import DEFAULT_TIMEZONE, WEEKDAYS

HHMM_PATTERN = re.compile(r"^([01]?[0-9]|2[0-3]):([0-5][0-9])$")

def get_zone(tz_name: Optional[str] = None) -> ZoneInfo:
    """Resolve a timezone name, falling back to the default zone"""
    return ZoneInfo(tz_name or DEFAULT_TIMEZONE)

def now_local(tz_name: Optional[str] = None) -> datetime:
    return datetime.now(get_zone(tz_name))

def is_valid_hhmm(value) -> bool:
    return isinstance(value, str) and HHMM_PATTERN.match(value) is not None

def hhmm_to_minutes(value: str) -> int:
    """Convert 'HH:MM' to minutes since midnight"""
    match = HHMM_PATTERN.match(value) if isinstance(value, str) else None
    if not match:
        raise ValueError(f"Time must be in HH:MM format, got {value!r}")
    return int(match.group(1)) * 60 + int(match.group(2))

def minutes_of_day(moment: datetime) -> int:
    return moment.hour * 60 + moment.minute

def weekday_name(moment: datetime) -> str:
    return WEEKDAYS[moment.weekday()]
