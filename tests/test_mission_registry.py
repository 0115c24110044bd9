"""Tests for MissionRegistry and the default catalog."""

from __future__ import annotations

from typing import Any

import pytest

from stellar_missions import const
from stellar_missions.mission_registry import (
    DEFAULT_MISSION_DEFINITIONS,
    MissionRegistry,
    build_template,
)
from stellar_missions.type_defs import RewardSpec
from tests.helpers import SCORE_50_DEFINITION

# =============================================================================
# Default catalog
# =============================================================================


class TestDefaultCatalog:
    """The built-in catalog is valid and complete."""

    def test_default_catalog_builds(self) -> None:
        registry = MissionRegistry()
        assert len(registry) == len(DEFAULT_MISSION_DEFINITIONS)

    def test_permanent_missions(self) -> None:
        registry = MissionRegistry()
        totals = registry.get_templates_by_category(const.CATEGORY_TOTAL)

        assert [t.id for t in totals] == [
            "first_game",
            "score_10",
            "score_50",
            "score_100",
            "score_200",
            "survive_30",
            "survive_60",
            "play_5",
            "play_10",
            "play_25",
            "high_score_50",
            "high_score_100",
        ]

    def test_score_50_matches_original_reward(self) -> None:
        template = MissionRegistry().get_template("score_50")

        assert template is not None
        assert template.objective_type == const.OBJECTIVE_REACH_SCORE
        assert template.target_value == 50
        assert template.reward == RewardSpec(type="currency", amount=100)
        assert template.reward.description == "100 Stellar Shards"

    def test_every_category_is_present(self) -> None:
        registry = MissionRegistry()
        for category in const.CATEGORIES:
            assert registry.get_templates_by_category(category)

    def test_catalog_has_an_unlock_reward(self) -> None:
        rewards = [t.reward for t in MissionRegistry()]
        assert any(r.type == const.REWARD_TYPE_UNLOCK_ITEM for r in rewards)


# =============================================================================
# Registry behavior
# =============================================================================


class TestRegistry:
    """Lookup and ordering."""

    def test_insertion_order_is_kept(self, registry: MissionRegistry) -> None:
        assert [t.id for t in registry.get_all_templates()][:2] == ["score_50", "play_5"]

    def test_get_template_unknown(self, registry: MissionRegistry) -> None:
        assert registry.get_template("nope") is None
        assert "nope" not in registry
        assert "play_5" in registry

    def test_defaults_applied(self) -> None:
        template = build_template(SCORE_50_DEFINITION)  # type: ignore[arg-type]
        assert template.category == const.CATEGORY_TOTAL
        assert template.priority == 0
        assert not template.is_periodic

    def test_unlock_reward_description(self) -> None:
        definition: dict[str, Any] = {
            **SCORE_50_DEFINITION,
            "reward": {"type": "unlock_item", "item_id": "planet_nebula"},
        }
        template = build_template(definition)  # type: ignore[arg-type]
        assert template.reward.description == "Unlock: planet_nebula"


# =============================================================================
# Validation
# =============================================================================


class TestValidation:
    """Invalid catalogs fail at construction."""

    def test_duplicate_ids_raise(self) -> None:
        with pytest.raises(ValueError, match="Duplicate mission id 'score_50'"):
            MissionRegistry([SCORE_50_DEFINITION, SCORE_50_DEFINITION])

    @pytest.mark.parametrize(
        "override",
        [
            {"objective_type": "collect_stars"},
            {"target_value": 0},
            {"target_value": -5},
            {"category": "monthly"},
            {"reward": {"type": "currency", "amount": 0}},
            {"reward": {"type": "unlock_item"}},
            {"reward": {"type": "skin", "amount": 5}},
            {"id": ""},
        ],
    )
    def test_invalid_definition_raises(self, override: dict[str, Any]) -> None:
        definition = {**SCORE_50_DEFINITION, **override}
        with pytest.raises(ValueError, match="Invalid mission definition"):
            MissionRegistry([definition])

    def test_missing_field_raises(self) -> None:
        definition = dict(SCORE_50_DEFINITION)
        del definition["target_value"]
        with pytest.raises(ValueError):
            MissionRegistry([definition])
