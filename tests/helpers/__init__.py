"""Test helpers for Stellar Missions tests.

This module re-exports all helpers for convenient imports:

    from tests.helpers import (
        # Setup
        setup_scenario, setup_from_yaml, SetupResult, ManualClock,

        # Constants
        CATEGORY_DAILY, OBJECTIVE_PLAY_GAMES, SIGNAL_SUFFIX_MISSION_COMPLETED,
    )

See individual modules for full documentation:
- setup.py: Declarative scenario setup (dict or YAML)
- constants.py: Engine constants for test assertions
"""

from tests.helpers.constants import (
    CATEGORY_DAILY,
    CATEGORY_TOTAL,
    CATEGORY_WEEKLY,
    MISSION_STATE_CLAIMED,
    MISSION_STATE_COMPLETED,
    MISSION_STATE_IN_PROGRESS,
    MISSION_STATE_NOT_STARTED,
    OBJECTIVE_AVOID_OBSTACLES,
    OBJECTIVE_COLLECT_CURRENCY,
    OBJECTIVE_DAILY_CHALLENGE,
    OBJECTIVE_PLAY_GAMES,
    OBJECTIVE_REACH_HIGH_SCORE,
    OBJECTIVE_REACH_SCORE,
    OBJECTIVE_SURVIVE_TIME,
    OBJECTIVE_USE_PLANET,
    SCORE_50_DEFINITION,
    SIGNAL_SUFFIX_CURRENCY_CHANGED,
    SIGNAL_SUFFIX_MISSION_CLAIMED,
    SIGNAL_SUFFIX_MISSION_COMPLETED,
    SIGNAL_SUFFIX_MISSION_PROGRESS,
    SIGNAL_SUFFIX_MISSIONS_RESET,
    STORAGE_KEY_CURRENCY,
    STORAGE_KEY_LAST_DAILY_RESET,
    STORAGE_KEY_LAST_WEEKLY_RESET,
    STORAGE_KEY_PROGRESS_PREFIX,
)
from tests.helpers.setup import (
    EventRecorder,
    ManualClock,
    SetupResult,
    load_scenario,
    parse_now,
    setup_from_yaml,
    setup_scenario,
)

__all__ = [
    "CATEGORY_DAILY",
    "CATEGORY_TOTAL",
    "CATEGORY_WEEKLY",
    "MISSION_STATE_CLAIMED",
    "MISSION_STATE_COMPLETED",
    "MISSION_STATE_IN_PROGRESS",
    "MISSION_STATE_NOT_STARTED",
    "OBJECTIVE_AVOID_OBSTACLES",
    "OBJECTIVE_COLLECT_CURRENCY",
    "OBJECTIVE_DAILY_CHALLENGE",
    "OBJECTIVE_PLAY_GAMES",
    "OBJECTIVE_REACH_HIGH_SCORE",
    "OBJECTIVE_REACH_SCORE",
    "OBJECTIVE_SURVIVE_TIME",
    "OBJECTIVE_USE_PLANET",
    "SCORE_50_DEFINITION",
    "SIGNAL_SUFFIX_CURRENCY_CHANGED",
    "SIGNAL_SUFFIX_MISSIONS_RESET",
    "SIGNAL_SUFFIX_MISSION_CLAIMED",
    "SIGNAL_SUFFIX_MISSION_COMPLETED",
    "SIGNAL_SUFFIX_MISSION_PROGRESS",
    "STORAGE_KEY_CURRENCY",
    "STORAGE_KEY_LAST_DAILY_RESET",
    "STORAGE_KEY_LAST_WEEKLY_RESET",
    "STORAGE_KEY_PROGRESS_PREFIX",
    "EventRecorder",
    "ManualClock",
    "SetupResult",
    "load_scenario",
    "parse_now",
    "setup_from_yaml",
    "setup_scenario",
]
