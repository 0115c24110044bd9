# File: mission_registry.py
"""Mission catalog for Stellar Missions.

The registry is built once at startup from a list of plain definitions and
is read-only afterwards. Definitions are validated with voluptuous; a bad
catalog is a programming error and raises ValueError immediately.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import voluptuous as vol

from . import const
from .type_defs import MissionTemplate, RewardSpec

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .type_defs import MissionDefinition, MissionId


# ==============================================================================
# Schemas
# ==============================================================================

CURRENCY_REWARD_SCHEMA = vol.Schema(
    {
        vol.Required(const.DATA_REWARD_TYPE): const.REWARD_TYPE_CURRENCY,
        vol.Required(const.DATA_REWARD_AMOUNT): vol.All(int, vol.Range(min=1)),
    }
)

UNLOCK_REWARD_SCHEMA = vol.Schema(
    {
        vol.Required(const.DATA_REWARD_TYPE): const.REWARD_TYPE_UNLOCK_ITEM,
        vol.Required(const.DATA_REWARD_ITEM_ID): vol.All(str, vol.Length(min=1)),
    }
)

MISSION_DEFINITION_SCHEMA = vol.Schema(
    {
        vol.Required(const.DATA_MISSION_ID): vol.All(str, vol.Length(min=1)),
        vol.Required(const.DATA_MISSION_TITLE): str,
        vol.Required(const.DATA_MISSION_DESCRIPTION): str,
        vol.Required(const.DATA_MISSION_OBJECTIVE_TYPE): vol.In(const.OBJECTIVE_TYPES),
        vol.Required(const.DATA_MISSION_TARGET_VALUE): vol.All(int, vol.Range(min=1)),
        vol.Required(const.DATA_MISSION_REWARD): vol.Any(
            CURRENCY_REWARD_SCHEMA, UNLOCK_REWARD_SCHEMA
        ),
        vol.Optional(const.DATA_MISSION_CATEGORY, default=const.CATEGORY_TOTAL): vol.In(
            const.CATEGORIES
        ),
        vol.Optional(
            const.DATA_MISSION_PRIORITY, default=const.DEFAULT_MISSION_PRIORITY
        ): int,
    }
)


# ==============================================================================
# Default Catalog
# ==============================================================================


def _currency(amount: int) -> dict[str, object]:
    return {const.DATA_REWARD_TYPE: const.REWARD_TYPE_CURRENCY, "amount": amount}


def _unlock(item_id: str) -> dict[str, object]:
    return {const.DATA_REWARD_TYPE: const.REWARD_TYPE_UNLOCK_ITEM, "item_id": item_id}


DEFAULT_MISSION_DEFINITIONS: list[MissionDefinition] = [
    # Permanent missions
    {
        "id": "first_game",
        "title": "First Flight",
        "description": "Play your first game",
        "objective_type": const.OBJECTIVE_PLAY_GAMES,
        "target_value": 1,
        "reward": _currency(50),
    },
    {
        "id": "score_10",
        "title": "Beginner",
        "description": "Reach 10 points",
        "objective_type": const.OBJECTIVE_REACH_SCORE,
        "target_value": 10,
        "reward": _currency(25),
    },
    {
        "id": "score_50",
        "title": "Getting Better",
        "description": "Reach 50 points",
        "objective_type": const.OBJECTIVE_REACH_SCORE,
        "target_value": 50,
        "reward": _currency(100),
    },
    {
        "id": "score_100",
        "title": "Expert",
        "description": "Reach 100 points",
        "objective_type": const.OBJECTIVE_REACH_SCORE,
        "target_value": 100,
        "reward": _currency(250),
    },
    {
        "id": "score_200",
        "title": "Master",
        "description": "Reach 200 points",
        "objective_type": const.OBJECTIVE_REACH_SCORE,
        "target_value": 200,
        "reward": _currency(500),
    },
    {
        "id": "survive_30",
        "title": "Survivor",
        "description": "Survive 30 seconds",
        "objective_type": const.OBJECTIVE_SURVIVE_TIME,
        "target_value": 30,
        "reward": _currency(75),
    },
    {
        "id": "survive_60",
        "title": "Veteran",
        "description": "Survive 60 seconds",
        "objective_type": const.OBJECTIVE_SURVIVE_TIME,
        "target_value": 60,
        "reward": _currency(150),
    },
    {
        "id": "play_5",
        "title": "Regular",
        "description": "Play 5 games",
        "objective_type": const.OBJECTIVE_PLAY_GAMES,
        "target_value": 5,
        "reward": _currency(150),
    },
    {
        "id": "play_10",
        "title": "Dedicated",
        "description": "Play 10 games",
        "objective_type": const.OBJECTIVE_PLAY_GAMES,
        "target_value": 10,
        "reward": _currency(300),
    },
    {
        "id": "play_25",
        "title": "Addicted",
        "description": "Play 25 games",
        "objective_type": const.OBJECTIVE_PLAY_GAMES,
        "target_value": 25,
        "reward": _currency(750),
    },
    {
        "id": "high_score_50",
        "title": "Record Breaker",
        "description": "Set a high score of 50 points",
        "objective_type": const.OBJECTIVE_REACH_HIGH_SCORE,
        "target_value": 50,
        "reward": _currency(200),
    },
    {
        "id": "high_score_100",
        "title": "Legend",
        "description": "Set a high score of 100 points",
        "objective_type": const.OBJECTIVE_REACH_HIGH_SCORE,
        "target_value": 100,
        "reward": _unlock("planet_nebula"),
    },
    # Daily missions
    {
        "id": "daily_play_3",
        "title": "Daily Pilot",
        "description": "Play 3 games today",
        "objective_type": const.OBJECTIVE_PLAY_GAMES,
        "target_value": 3,
        "reward": _currency(30),
        "category": const.CATEGORY_DAILY,
        "priority": 2,
    },
    {
        "id": "daily_score_25",
        "title": "Daily Scorer",
        "description": "Reach 25 points in one run today",
        "objective_type": const.OBJECTIVE_REACH_SCORE,
        "target_value": 25,
        "reward": _currency(40),
        "category": const.CATEGORY_DAILY,
        "priority": 1,
    },
    {
        "id": "daily_collect_20",
        "title": "Shard Hunter",
        "description": "Collect 20 Stellar Shards today",
        "objective_type": const.OBJECTIVE_COLLECT_CURRENCY,
        "target_value": 20,
        "reward": _currency(40),
        "category": const.CATEGORY_DAILY,
    },
    {
        "id": "daily_challenge",
        "title": "Daily Challenge",
        "description": "Complete today's challenge",
        "objective_type": const.OBJECTIVE_DAILY_CHALLENGE,
        "target_value": 1,
        "reward": _currency(60),
        "category": const.CATEGORY_DAILY,
        "priority": 3,
    },
    # Weekly missions
    {
        "id": "weekly_play_20",
        "title": "Weekly Commander",
        "description": "Play 20 games this week",
        "objective_type": const.OBJECTIVE_PLAY_GAMES,
        "target_value": 20,
        "reward": _currency(200),
        "category": const.CATEGORY_WEEKLY,
        "priority": 1,
    },
    {
        "id": "weekly_avoid_200",
        "title": "Dodger",
        "description": "Avoid 200 obstacles this week",
        "objective_type": const.OBJECTIVE_AVOID_OBSTACLES,
        "target_value": 200,
        "reward": _currency(250),
        "category": const.CATEGORY_WEEKLY,
    },
    {
        "id": "weekly_use_planet_5",
        "title": "Explorer",
        "description": "Play 5 games on any planet this week",
        "objective_type": const.OBJECTIVE_USE_PLANET,
        "target_value": 5,
        "reward": _currency(150),
        "category": const.CATEGORY_WEEKLY,
    },
    {
        "id": "weekly_survive_90",
        "title": "Endurance",
        "description": "Survive 90 seconds in one run this week",
        "objective_type": const.OBJECTIVE_SURVIVE_TIME,
        "target_value": 90,
        "reward": _currency(300),
        "category": const.CATEGORY_WEEKLY,
        "priority": 2,
    },
]


# ==============================================================================
# Registry
# ==============================================================================


def build_template(definition: MissionDefinition) -> MissionTemplate:
    """Validate one definition and turn it into a MissionTemplate.

    Raises:
        ValueError: Definition fails MISSION_DEFINITION_SCHEMA.
    """
    try:
        data = MISSION_DEFINITION_SCHEMA(dict(definition))
    except vol.Invalid as err:
        mission_id = definition.get(const.DATA_MISSION_ID, "<missing id>")
        raise ValueError(f"Invalid mission definition '{mission_id}': {err}") from err

    reward = data[const.DATA_MISSION_REWARD]
    return MissionTemplate(
        id=data[const.DATA_MISSION_ID],
        title=data[const.DATA_MISSION_TITLE],
        description=data[const.DATA_MISSION_DESCRIPTION],
        objective_type=data[const.DATA_MISSION_OBJECTIVE_TYPE],
        target_value=data[const.DATA_MISSION_TARGET_VALUE],
        reward=RewardSpec(
            type=reward[const.DATA_REWARD_TYPE],
            amount=reward.get(const.DATA_REWARD_AMOUNT, 0),
            item_id=reward.get(const.DATA_REWARD_ITEM_ID, ""),
        ),
        category=data[const.DATA_MISSION_CATEGORY],
        priority=data[const.DATA_MISSION_PRIORITY],
    )


class MissionRegistry:
    """Immutable, ordered catalog of mission templates."""

    def __init__(
        self, definitions: Iterable[MissionDefinition] | None = None
    ) -> None:
        """Build the catalog.

        Args:
            definitions: Mission definitions in display order. Defaults to
                DEFAULT_MISSION_DEFINITIONS.

        Raises:
            ValueError: A definition is invalid or an id appears twice.
        """
        if definitions is None:
            definitions = DEFAULT_MISSION_DEFINITIONS

        self._templates: dict[MissionId, MissionTemplate] = {}
        for definition in definitions:
            template = build_template(definition)
            if template.id in self._templates:
                raise ValueError(f"Duplicate mission id '{template.id}'")
            self._templates[template.id] = template

        const.LOGGER.debug(
            "MissionRegistry: Loaded %s templates (%s)",
            len(self._templates),
            {
                category: len(self.get_templates_by_category(category))
                for category in const.CATEGORIES
            },
        )

    def get_all_templates(self) -> list[MissionTemplate]:
        """All templates in catalog order."""
        return list(self._templates.values())

    def get_template(self, mission_id: MissionId) -> MissionTemplate | None:
        """Template for `mission_id`, or None when unknown."""
        return self._templates.get(mission_id)

    def get_templates_by_category(self, category: str) -> list[MissionTemplate]:
        """Templates of one category, in catalog order."""
        return [
            template
            for template in self._templates.values()
            if template.category == category
        ]

    def __contains__(self, mission_id: object) -> bool:
        return mission_id in self._templates

    def __len__(self) -> int:
        return len(self._templates)

    def __iter__(self) -> Iterator[MissionTemplate]:
        return iter(self._templates.values())
