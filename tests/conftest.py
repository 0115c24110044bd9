"""Shared fixtures for Stellar Missions tests."""

from __future__ import annotations

from datetime import datetime
from typing import Any
from unittest.mock import MagicMock
from zoneinfo import ZoneInfo

import pytest

from stellar_missions import const
from stellar_missions.coordinator import MissionCoordinator
from stellar_missions.mission_registry import MissionRegistry
from stellar_missions.storage_manager import MissionStore
from stellar_missions.store import MemoryPreferencesStore
from tests.helpers import SCORE_50_DEFINITION, EventRecorder, ManualClock

UTC = ZoneInfo("UTC")


def make_definition(
    mission_id: str,
    objective_type: str,
    target_value: int,
    *,
    category: str = const.CATEGORY_TOTAL,
    priority: int = 0,
    reward: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Build a catalog definition with sensible defaults."""
    return {
        "id": mission_id,
        "title": mission_id.replace("_", " ").title(),
        "description": f"Objective {objective_type} x{target_value}",
        "objective_type": objective_type,
        "target_value": target_value,
        "reward": reward or {"type": "currency", "amount": 10},
        "category": category,
        "priority": priority,
    }


@pytest.fixture
def mission_definitions() -> list[dict[str, Any]]:
    """Small catalog covering every category and reward type."""
    return [
        SCORE_50_DEFINITION,
        make_definition("play_5", const.OBJECTIVE_PLAY_GAMES, 5),
        make_definition("survive_30", const.OBJECTIVE_SURVIVE_TIME, 30),
        make_definition(
            "legend",
            const.OBJECTIVE_REACH_HIGH_SCORE,
            100,
            reward={"type": "unlock_item", "item_id": "planet_nebula"},
        ),
        make_definition(
            "daily_play_5",
            const.OBJECTIVE_PLAY_GAMES,
            5,
            category=const.CATEGORY_DAILY,
            priority=1,
        ),
        make_definition(
            "daily_collect_20",
            const.OBJECTIVE_COLLECT_CURRENCY,
            20,
            category=const.CATEGORY_DAILY,
            priority=2,
        ),
        make_definition(
            "weekly_avoid_200",
            const.OBJECTIVE_AVOID_OBSTACLES,
            200,
            category=const.CATEGORY_WEEKLY,
        ),
    ]


@pytest.fixture
def registry(mission_definitions: list[dict[str, Any]]) -> MissionRegistry:
    """Registry built from the small test catalog."""
    return MissionRegistry(mission_definitions)


@pytest.fixture
def preferences() -> MemoryPreferencesStore:
    """Empty in-memory key-value store."""
    return MemoryPreferencesStore()


@pytest.fixture
def mission_store(
    preferences: MemoryPreferencesStore, registry: MissionRegistry
) -> MissionStore:
    """MissionStore over the in-memory preferences."""
    return MissionStore(preferences, registry)


@pytest.fixture
def clock() -> ManualClock:
    """Manual clock at Wednesday 2026-01-14 10:00 UTC."""
    return ManualClock(datetime(2026, 1, 14, 10, 0, tzinfo=UTC))


@pytest.fixture
def coordinator(
    registry: MissionRegistry, mission_store: MissionStore, clock: ManualClock
) -> MissionCoordinator:
    """Set-up coordinator over the small catalog."""
    instance = MissionCoordinator(registry, mission_store, clock=clock)
    instance.setup()
    yield instance
    instance.shutdown()


@pytest.fixture
def mock_currency_ledger() -> MagicMock:
    """Currency collaborator double."""
    return MagicMock(name="currency_ledger")


@pytest.fixture
def mock_unlock_store() -> MagicMock:
    """Unlock collaborator double."""
    return MagicMock(name="unlock_store")


@pytest.fixture
def mocked_coordinator(
    registry: MissionRegistry,
    mission_store: MissionStore,
    clock: ManualClock,
    mock_currency_ledger: MagicMock,
    mock_unlock_store: MagicMock,
) -> MissionCoordinator:
    """Coordinator whose reward collaborators are MagicMocks."""
    instance = MissionCoordinator(
        registry,
        mission_store,
        clock=clock,
        currency_ledger=mock_currency_ledger,
        unlock_store=mock_unlock_store,
    )
    instance.setup()
    yield instance
    instance.shutdown()


@pytest.fixture
def events(coordinator: MissionCoordinator) -> EventRecorder:
    """Recorder for every event the coordinator emits after setup."""
    recorder = EventRecorder()
    recorder.attach(coordinator)
    return recorder
