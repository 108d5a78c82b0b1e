"""
Timezone utilities for Desk Calendar.

"Today" is always computed on demand in the local timezone, so a session
left running across midnight picks up the new date. Without a configured
zone the system's own rules decide, including daylight saving time.
"""

from datetime import datetime, date
from typing import Optional
import pytz


# None means: use the system's local zone
_local_timezone_name: Optional[str] = None


def set_timezone(timezone_name: Optional[str]):
    """Set the local timezone for the application."""
    global _local_timezone_name
    _local_timezone_name = timezone_name


def _configured_timezone():
    """The configured pytz zone, or None when unset or unknown."""
    if not _local_timezone_name:
        return None
    try:
        return pytz.timezone(_local_timezone_name)
    except pytz.UnknownTimeZoneError:
        return None


def to_local_datetime(dt: datetime) -> datetime:
    """
    Convert a timezone-aware datetime to local time.

    Without a configured zone the system rules for that instant apply, so a
    summer timestamp gets the summer offset even when converted in winter.
    """
    zone = _configured_timezone()
    if zone is not None:
        return dt.astimezone(zone)
    return dt.astimezone()


def to_local_date(dt: datetime) -> date:
    """Calendar date of an aware datetime in the local zone."""
    return to_local_datetime(dt).date()


def local_now() -> datetime:
    """Current time as a timezone-aware datetime in the local zone."""
    return to_local_datetime(datetime.now(pytz.UTC))


def local_today() -> date:
    """The real current date in the local zone."""
    return local_now().date()
