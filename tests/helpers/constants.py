"""Test constants for Stellar Missions tests.

This module re-exports the engine constants used in test assertions.
Import from here, not directly from stellar_missions.const.

The imports are intentionally "unused" here: test files import them via
`from tests.helpers import CONSTANT_NAME`.
"""

# fmt: off
# Objective types
from stellar_missions.const import (
    OBJECTIVE_AVOID_OBSTACLES,
    OBJECTIVE_COLLECT_CURRENCY,
    OBJECTIVE_DAILY_CHALLENGE,
    OBJECTIVE_PLAY_GAMES,
    OBJECTIVE_REACH_HIGH_SCORE,
    OBJECTIVE_REACH_SCORE,
    OBJECTIVE_SURVIVE_TIME,
    OBJECTIVE_USE_PLANET,
)

# Categories
from stellar_missions.const import (
    CATEGORY_DAILY,
    CATEGORY_TOTAL,
    CATEGORY_WEEKLY,
)

# Mission states
from stellar_missions.const import (
    MISSION_STATE_CLAIMED,
    MISSION_STATE_COMPLETED,
    MISSION_STATE_IN_PROGRESS,
    MISSION_STATE_NOT_STARTED,
)

# Persistence keys
from stellar_missions.const import (
    STORAGE_KEY_CURRENCY,
    STORAGE_KEY_LAST_DAILY_RESET,
    STORAGE_KEY_LAST_WEEKLY_RESET,
    STORAGE_KEY_PROGRESS_PREFIX,
)

# Event signal suffixes
from stellar_missions.const import (
    SIGNAL_SUFFIX_CURRENCY_CHANGED,
    SIGNAL_SUFFIX_MISSION_CLAIMED,
    SIGNAL_SUFFIX_MISSION_COMPLETED,
    SIGNAL_SUFFIX_MISSION_PROGRESS,
    SIGNAL_SUFFIX_MISSIONS_RESET,
)
# fmt: on

# Shared mission definition used by several test modules
SCORE_50_DEFINITION = {
    "id": "score_50",
    "title": "Getting Better",
    "description": "Reach 50 points",
    "objective_type": OBJECTIVE_REACH_SCORE,
    "target_value": 50,
    "reward": {"type": "currency", "amount": 100},
}
