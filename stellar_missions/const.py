# File: const.py
"""Constants for the Stellar Missions engine.

This file centralizes objective types, categories, reward types, persistence
keys, event signal suffixes, configuration keys and defaults so every module
refers to the same literal values.
"""

import logging

# ------------------------------------------------------------------------------------------------
# General Information
# ------------------------------------------------------------------------------------------------
STELLAR_MISSIONS_TITLE = "Stellar Missions"

# Domain (used to scope event signals)
DOMAIN = "stellar_missions"

# Logger
LOGGER = logging.getLogger(__package__)

# ------------------------------------------------------------------------------------------------
# Objective Types
# ------------------------------------------------------------------------------------------------
OBJECTIVE_REACH_SCORE = "reach_score"
OBJECTIVE_SURVIVE_TIME = "survive_time"
OBJECTIVE_PLAY_GAMES = "play_games"
OBJECTIVE_AVOID_OBSTACLES = "avoid_obstacles"
OBJECTIVE_REACH_HIGH_SCORE = "reach_high_score"
OBJECTIVE_COLLECT_CURRENCY = "collect_currency"
OBJECTIVE_USE_PLANET = "use_planet"
OBJECTIVE_DAILY_CHALLENGE = "daily_challenge"

OBJECTIVE_TYPES = (
    OBJECTIVE_REACH_SCORE,
    OBJECTIVE_SURVIVE_TIME,
    OBJECTIVE_PLAY_GAMES,
    OBJECTIVE_AVOID_OBSTACLES,
    OBJECTIVE_REACH_HIGH_SCORE,
    OBJECTIVE_COLLECT_CURRENCY,
    OBJECTIVE_USE_PLANET,
    OBJECTIVE_DAILY_CHALLENGE,
)

# Objectives tracked as a running maximum instead of a running sum
WATERMARK_OBJECTIVES = frozenset(
    {
        OBJECTIVE_REACH_SCORE,
        OBJECTIVE_SURVIVE_TIME,
        OBJECTIVE_REACH_HIGH_SCORE,
    }
)

# ------------------------------------------------------------------------------------------------
# Mission Categories
# ------------------------------------------------------------------------------------------------
CATEGORY_TOTAL = "total"
CATEGORY_DAILY = "daily"
CATEGORY_WEEKLY = "weekly"

CATEGORIES = (CATEGORY_DAILY, CATEGORY_WEEKLY, CATEGORY_TOTAL)

# Categories wiped at a boundary crossing
PERIODIC_CATEGORIES = (CATEGORY_DAILY, CATEGORY_WEEKLY)

# Active-set ordering (lower rank first)
CATEGORY_SORT_RANK = {
    CATEGORY_DAILY: 0,
    CATEGORY_WEEKLY: 1,
    CATEGORY_TOTAL: 2,
}

# ------------------------------------------------------------------------------------------------
# Rewards
# ------------------------------------------------------------------------------------------------
REWARD_TYPE_CURRENCY = "currency"
REWARD_TYPE_UNLOCK_ITEM = "unlock_item"

CURRENCY_LABEL = "Stellar Shards"
REWARD_DESCRIPTION_CURRENCY = "{amount} " + CURRENCY_LABEL
REWARD_DESCRIPTION_UNLOCK = "Unlock: {item_id}"
REWARD_DESCRIPTION_DEFAULT = "Reward"

# ------------------------------------------------------------------------------------------------
# Mission States (derived, never persisted)
# ------------------------------------------------------------------------------------------------
MISSION_STATE_NOT_STARTED = "not_started"
MISSION_STATE_IN_PROGRESS = "in_progress"
MISSION_STATE_COMPLETED = "completed"
MISSION_STATE_CLAIMED = "claimed"

# Claim rejection reasons (logged, never raised)
CLAIM_REJECTED_UNKNOWN = "unknown_mission"
CLAIM_REJECTED_NOT_COMPLETED = "not_completed"
CLAIM_REJECTED_ALREADY_CLAIMED = "already_claimed"

# ------------------------------------------------------------------------------------------------
# Template Definition Keys (catalog definitions)
# ------------------------------------------------------------------------------------------------
DATA_MISSION_ID = "id"
DATA_MISSION_TITLE = "title"
DATA_MISSION_DESCRIPTION = "description"
DATA_MISSION_OBJECTIVE_TYPE = "objective_type"
DATA_MISSION_TARGET_VALUE = "target_value"
DATA_MISSION_REWARD = "reward"
DATA_MISSION_CATEGORY = "category"
DATA_MISSION_PRIORITY = "priority"

DATA_REWARD_TYPE = "type"
DATA_REWARD_AMOUNT = "amount"
DATA_REWARD_ITEM_ID = "item_id"

DEFAULT_MISSION_PRIORITY = 0

# ------------------------------------------------------------------------------------------------
# Persistence
# ------------------------------------------------------------------------------------------------
# Serialized progress record fields (camelCase is the on-disk format)
DATA_PROGRESS_CURRENT = "currentProgress"
DATA_PROGRESS_COMPLETED = "isCompleted"
DATA_PROGRESS_CLAIMED = "isClaimed"

STORAGE_KEY_PROGRESS_PREFIX = "mission_progress_"
STORAGE_KEY_LAST_DAILY_RESET = "missions_last_daily_reset"
STORAGE_KEY_LAST_WEEKLY_RESET = "missions_last_weekly_reset"
STORAGE_KEY_CURRENCY = "stellar_shards"
STORAGE_KEY_UNLOCK_PREFIX = "unlock_"

# ------------------------------------------------------------------------------------------------
# Event Signal Suffixes
# ------------------------------------------------------------------------------------------------
SIGNAL_SUFFIX_MISSION_PROGRESS = "mission_progress"
SIGNAL_SUFFIX_MISSION_COMPLETED = "mission_completed"
SIGNAL_SUFFIX_MISSION_CLAIMED = "mission_claimed"
SIGNAL_SUFFIX_MISSIONS_RESET = "missions_reset"
SIGNAL_SUFFIX_CURRENCY_CHANGED = "currency_changed"

# ------------------------------------------------------------------------------------------------
# Configuration Keys and Defaults
# ------------------------------------------------------------------------------------------------
CONF_TIME_ZONE = "time_zone"
CONF_INSTANCE_ID = "instance_id"
CONF_KEY_PREFIX = "key_prefix"
CONF_CHECK_RESETS_ON_ACCESS = "check_resets_on_access"

DEFAULT_TIME_ZONE_NAME = "UTC"
DEFAULT_INSTANCE_ID = "default"
DEFAULT_CHECK_RESETS_ON_ACCESS = True

# Float precision for progress percentages
DATA_FLOAT_PRECISION = 2
