# File: utils/dt_utils.py
"""Date and time utilities for Stellar Missions.

Pure Python date/time functions. Nothing in the engine reads wall time
except through `LocalClock`, so boundary tests can swap in any object that
implements the `Clock` protocol.

Functions:
    - get_time_zone: Resolve an IANA time zone name
    - dt_now_local: Current datetime in local timezone
    - as_local: Timezone conversion
    - start_of_local_day: Local midnight for a datetime
    - dt_parse_date: Parse a persisted YYYY-MM-DD string
    - dt_format_date: Format a date as YYYY-MM-DD
    - iso_week_key: (ISO year, ISO week) pair for week comparisons
"""

from __future__ import annotations

from datetime import UTC, date, datetime
import logging
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

if TYPE_CHECKING:
    from datetime import tzinfo

# Module-level logger
_LOGGER = logging.getLogger(__name__)

# ==============================================================================
# Constants (local copies to avoid circular imports)
# ==============================================================================

# Local timezone used when none is given
DEFAULT_TIME_ZONE: ZoneInfo = ZoneInfo("UTC")

# Persisted date format
DATE_FORMAT = "%Y-%m-%d"


# ==============================================================================
# Timezone Lookup
# ==============================================================================


def get_time_zone(name: str) -> ZoneInfo | None:
    """Resolve an IANA time zone name, or None when unknown.

    Args:
        name: Time zone name such as "Europe/Madrid"

    Returns:
        ZoneInfo object, or None if the name cannot be resolved.
    """
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        _LOGGER.error("Unknown time zone '%s'", name)
        return None


# ==============================================================================
# Current Date/Time Functions
# ==============================================================================


def dt_now_local(tz: ZoneInfo | None = None) -> datetime:
    """Return the current datetime in local timezone (timezone-aware).

    Args:
        tz: Optional timezone override. Uses DEFAULT_TIME_ZONE if not provided.

    Example:
        datetime.datetime(2025, 4, 7, 14, 30, tzinfo=...)
    """
    tz_info = tz or DEFAULT_TIME_ZONE
    return datetime.now(tz_info)


# ==============================================================================
# Timezone Conversion
# ==============================================================================


def as_local(dt_obj: datetime, tz: tzinfo | None = None) -> datetime:
    """Convert a datetime to local timezone.

    Naive datetimes are assumed to be in UTC.

    Args:
        dt_obj: Datetime object
        tz: Optional timezone override. Uses DEFAULT_TIME_ZONE if not provided.
    """
    tz_info = tz or DEFAULT_TIME_ZONE
    if dt_obj.tzinfo is None:
        dt_obj = dt_obj.replace(tzinfo=UTC)
    return dt_obj.astimezone(tz_info)


def start_of_local_day(dt_obj: datetime, tz: tzinfo | None = None) -> datetime:
    """Get the start of day (00:00:00) for a datetime in local timezone.

    Args:
        dt_obj: Datetime object (can be in any timezone)
        tz: Optional timezone override. Uses DEFAULT_TIME_ZONE if not provided.

    Returns:
        Datetime at 00:00:00 in local timezone (timezone-aware)
    """
    local_dt = as_local(dt_obj, tz)
    return local_dt.replace(hour=0, minute=0, second=0, microsecond=0)


# ==============================================================================
# Date Parsing / Formatting
# ==============================================================================


def dt_parse_date(date_str: str | None) -> date | None:
    """Safely parse a persisted YYYY-MM-DD string into a `datetime.date`.

    Only the persisted format is accepted; anything else is malformed.

    Args:
        date_str: Date string to parse, or None

    Returns:
        datetime.date or None if parsing fails.
    """
    if not date_str or not isinstance(date_str, str):
        return None

    try:
        return datetime.strptime(date_str.strip(), DATE_FORMAT).date()
    except ValueError:
        return None


def dt_format_date(value: date) -> str:
    """Format a date as YYYY-MM-DD."""
    return value.isoformat()


def iso_week_key(value: date) -> tuple[int, int]:
    """Return the (ISO year, ISO week) pair for a date.

    Weeks start on Monday. Comparing the pairs as tuples orders weeks
    correctly across year boundaries (2025-12-29 belongs to 2026-W01).

    Example:
        iso_week_key(date(2026, 1, 1)) → (2026, 1)
    """
    iso = value.isocalendar()
    return (iso.year, iso.week)


# ==============================================================================
# Clock
# ==============================================================================


class LocalClock:
    """Clock reading system time in a fixed local timezone."""

    def __init__(self, tz: ZoneInfo | None = None) -> None:
        """Initialize the clock.

        Args:
            tz: Timezone for local-day boundaries. Uses DEFAULT_TIME_ZONE if
                not provided (resolved on every call).
        """
        self._tz = tz

    @property
    def time_zone(self) -> ZoneInfo:
        """Timezone the clock reports in."""
        return self._tz or DEFAULT_TIME_ZONE

    def now(self) -> datetime:
        """Return the current local datetime."""
        return dt_now_local(self._tz)
