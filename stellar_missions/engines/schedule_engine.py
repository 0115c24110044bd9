"""Schedule Engine for Stellar Missions.

Decides when daily and weekly missions reset, using
`dateutil.relativedelta` for calendar arithmetic (next local midnight, next
Monday).

Boundary rules:
- Daily: due when the local calendar date of "now" is strictly later than
  the date of the last daily reset.
- Weekly: due when the (ISO year, ISO week) pair of "now" is greater than
  the pair of the last weekly reset. Weeks start on Monday.

IMPORTANT: This module must NOT import from coordinator.py or managers.
Only import from const.py, type_defs.py, utils and standard libraries.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import ClassVar

from dateutil.relativedelta import MO, relativedelta

from .. import const
from ..utils.dt_utils import iso_week_key, start_of_local_day

# Sentinel for a missing or malformed last-reset date
BEGINNING_OF_TIME: date = date.min


class ResetScheduleEngine:
    """Pure boundary calculations for periodic mission categories.

    All methods are static - no instance state. Callers pass "now" as a
    timezone-aware datetime already expressed in the player's local zone.
    """

    # Storage key holding the last reset date of each periodic category
    LAST_RESET_KEYS: ClassVar[dict[str, str]] = {
        const.CATEGORY_DAILY: const.STORAGE_KEY_LAST_DAILY_RESET,
        const.CATEGORY_WEEKLY: const.STORAGE_KEY_LAST_WEEKLY_RESET,
    }

    # =========================================================================
    # DUE CHECKS
    # =========================================================================

    @staticmethod
    def is_daily_reset_due(now_local: datetime, last_reset: date) -> bool:
        """Check whether a local midnight has passed since `last_reset`.

        A clock that moved backwards (now earlier than the last reset) is
        never due.
        """
        return now_local.date() > last_reset

    @staticmethod
    def is_weekly_reset_due(now_local: datetime, last_reset: date) -> bool:
        """Check whether a Monday boundary has passed since `last_reset`.

        Examples:
            last Sun 2026-01-04 (2026-W01), now Mon 2026-01-05 (W02) → True
            last Mon 2026-01-05, now Sun 2026-01-11 (same week) → False
            last Wed 2025-12-31 (2026-W01), now Thu 2026-01-01 → False
        """
        return iso_week_key(now_local.date()) > iso_week_key(last_reset)

    @staticmethod
    def is_reset_due(category: str, now_local: datetime, last_reset: date) -> bool:
        """Dispatch to the boundary rule of a periodic category.

        Total missions never reset.
        """
        if category == const.CATEGORY_DAILY:
            return ResetScheduleEngine.is_daily_reset_due(now_local, last_reset)
        if category == const.CATEGORY_WEEKLY:
            return ResetScheduleEngine.is_weekly_reset_due(now_local, last_reset)
        return False

    # =========================================================================
    # NEXT RESET
    # =========================================================================

    @staticmethod
    def next_daily_reset(now_local: datetime) -> datetime:
        """Next local midnight strictly after `now_local`."""
        midnight = start_of_local_day(now_local, now_local.tzinfo)
        return midnight + relativedelta(days=+1)

    @staticmethod
    def next_weekly_reset(now_local: datetime) -> datetime:
        """Next Monday 00:00 local strictly after `now_local`.

        On a Monday this is the following Monday.
        """
        midnight = start_of_local_day(now_local, now_local.tzinfo)
        return midnight + relativedelta(days=+1, weekday=MO(+1))

    @staticmethod
    def next_reset(category: str, now_local: datetime) -> datetime | None:
        """Next boundary for a category, or None for total missions."""
        if category == const.CATEGORY_DAILY:
            return ResetScheduleEngine.next_daily_reset(now_local)
        if category == const.CATEGORY_WEEKLY:
            return ResetScheduleEngine.next_weekly_reset(now_local)
        return None

    @staticmethod
    def boundary_crossed(
        next_reset_at: datetime | None, now_local: datetime
    ) -> bool:
        """Whether "now" reached a previously computed reset instant."""
        return next_reset_at is not None and now_local >= next_reset_at
