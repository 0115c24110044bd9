"""Tests for ProgressManager - gameplay progress reports.

Covers report_increment, report_value and report_run_completed through the
coordinator, including persistence and event ordering.
"""

from __future__ import annotations

import json
import logging

import pytest

from stellar_missions.coordinator import MissionCoordinator
from stellar_missions.store import MemoryPreferencesStore
from stellar_missions.type_defs import RunSummary
from tests.helpers import (
    OBJECTIVE_AVOID_OBSTACLES,
    OBJECTIVE_COLLECT_CURRENCY,
    OBJECTIVE_PLAY_GAMES,
    OBJECTIVE_REACH_HIGH_SCORE,
    OBJECTIVE_REACH_SCORE,
    OBJECTIVE_SURVIVE_TIME,
    OBJECTIVE_USE_PLANET,
    SIGNAL_SUFFIX_MISSION_COMPLETED,
    SIGNAL_SUFFIX_MISSION_PROGRESS,
    STORAGE_KEY_PROGRESS_PREFIX,
    EventRecorder,
)


def stored(preferences: MemoryPreferencesStore, mission_id: str) -> dict:
    return json.loads(preferences.get(f"{STORAGE_KEY_PROGRESS_PREFIX}{mission_id}"))


# =============================================================================
# report_increment
# =============================================================================


class TestReportIncrement:
    """Counting and watermark increments."""

    def test_increment_updates_every_matching_mission(
        self, coordinator: MissionCoordinator
    ) -> None:
        changed = coordinator.report_increment(OBJECTIVE_PLAY_GAMES)

        assert [m.id for m in changed] == ["play_5", "daily_play_5"]
        assert all(m.current_progress == 1 for m in changed)

    def test_increment_accumulates(self, coordinator: MissionCoordinator) -> None:
        coordinator.report_increment(OBJECTIVE_PLAY_GAMES, 2)
        coordinator.report_increment(OBJECTIVE_PLAY_GAMES, 2)

        assert coordinator.get_mission("play_5").current_progress == 4

    def test_increment_clamps_to_target(self, coordinator: MissionCoordinator) -> None:
        coordinator.report_increment(OBJECTIVE_COLLECT_CURRENCY, 75)

        mission = coordinator.get_mission("daily_collect_20")
        assert mission.current_progress == 20
        assert mission.is_completed

    @pytest.mark.parametrize("amount", [0, -3])
    def test_non_positive_increment_is_noop(
        self, coordinator: MissionCoordinator, events: EventRecorder, amount: int
    ) -> None:
        coordinator.report_increment(OBJECTIVE_PLAY_GAMES, 2)
        events.clear()

        assert coordinator.report_increment(OBJECTIVE_PLAY_GAMES, amount) == []
        assert coordinator.get_mission("play_5").current_progress == 2
        assert events.events == []

    def test_watermark_objective_through_increment(
        self, coordinator: MissionCoordinator
    ) -> None:
        coordinator.report_increment(OBJECTIVE_REACH_SCORE, 30)
        coordinator.report_increment(OBJECTIVE_REACH_SCORE, 10)

        # Running maximum, not a sum
        assert coordinator.get_mission("score_50").current_progress == 30

    def test_unknown_objective_is_rejected(
        self,
        coordinator: MissionCoordinator,
        events: EventRecorder,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.WARNING):
            assert coordinator.report_increment("collect_stars", 5) == []

        assert "Unknown objective type 'collect_stars'" in caplog.text
        assert events.events == []

    def test_no_matching_mission_is_noop(
        self,
        coordinator: MissionCoordinator,
        events: EventRecorder,
        preferences: MemoryPreferencesStore,
    ) -> None:
        save_count = preferences.save_count
        assert coordinator.report_increment(OBJECTIVE_USE_PLANET) == []
        assert events.events == []
        assert preferences.save_count == save_count


# =============================================================================
# report_value
# =============================================================================


class TestReportValue:
    """Watermark reports."""

    def test_value_never_decreases(self, coordinator: MissionCoordinator) -> None:
        for value in (12, 40, 7, 33):
            coordinator.report_value(OBJECTIVE_SURVIVE_TIME, value)

        assert coordinator.get_mission("survive_30").current_progress == 30

    def test_final_progress_is_clamped_maximum(
        self, coordinator: MissionCoordinator
    ) -> None:
        values = [5, 44, 3, 21]
        for value in values:
            coordinator.report_value(OBJECTIVE_REACH_SCORE, value)

        assert coordinator.get_mission("score_50").current_progress == min(
            50, max(values)
        )

    def test_lower_value_reports_nothing(
        self, coordinator: MissionCoordinator, events: EventRecorder
    ) -> None:
        coordinator.report_value(OBJECTIVE_REACH_SCORE, 30)
        events.clear()

        assert coordinator.report_value(OBJECTIVE_REACH_SCORE, 30) == []
        assert coordinator.report_value(OBJECTIVE_REACH_SCORE, 10) == []
        assert events.events == []

    def test_value_on_counting_objective_is_watermark(
        self, coordinator: MissionCoordinator
    ) -> None:
        coordinator.report_value(OBJECTIVE_PLAY_GAMES, 3)
        coordinator.report_value(OBJECTIVE_PLAY_GAMES, 2)

        assert coordinator.get_mission("play_5").current_progress == 3


# =============================================================================
# Completion, persistence, events
# =============================================================================


class TestCompletionAndEvents:
    """Side effects of a change."""

    def test_progress_then_completed_events(
        self, coordinator: MissionCoordinator, events: EventRecorder
    ) -> None:
        coordinator.report_value(OBJECTIVE_REACH_SCORE, 30)
        coordinator.report_value(OBJECTIVE_REACH_SCORE, 60)

        assert events.names() == [
            SIGNAL_SUFFIX_MISSION_PROGRESS,
            SIGNAL_SUFFIX_MISSION_PROGRESS,
            SIGNAL_SUFFIX_MISSION_COMPLETED,
        ]
        completed = events.of(SIGNAL_SUFFIX_MISSION_COMPLETED)[0]
        assert completed.id == "score_50"
        assert completed.current_progress == 50
        assert completed.is_completed

    def test_completed_mission_stops_accepting_progress(
        self, coordinator: MissionCoordinator, events: EventRecorder
    ) -> None:
        coordinator.report_increment(OBJECTIVE_PLAY_GAMES, 5)
        events.clear()

        changed = coordinator.report_increment(OBJECTIVE_PLAY_GAMES, 1)

        assert changed == []
        assert events.of(SIGNAL_SUFFIX_MISSION_COMPLETED) == []

    def test_persisted_before_events(
        self,
        coordinator: MissionCoordinator,
        preferences: MemoryPreferencesStore,
    ) -> None:
        seen: list[dict] = []
        coordinator.subscribe_progress(
            lambda mission: seen.append(stored(preferences, mission.id))
        )

        coordinator.report_increment(OBJECTIVE_AVOID_OBSTACLES, 15)

        assert seen == [
            {"currentProgress": 15, "isCompleted": False, "isClaimed": False}
        ]

    def test_one_save_per_changed_mission(
        self,
        coordinator: MissionCoordinator,
        preferences: MemoryPreferencesStore,
    ) -> None:
        before = preferences.save_count
        coordinator.report_increment(OBJECTIVE_PLAY_GAMES)
        assert preferences.save_count - before == 2

    def test_snapshot_is_detached(self, coordinator: MissionCoordinator) -> None:
        (snapshot, _daily) = coordinator.report_increment(OBJECTIVE_PLAY_GAMES)
        coordinator.report_increment(OBJECTIVE_PLAY_GAMES)

        assert snapshot.current_progress == 1
        assert coordinator.get_mission("play_5").current_progress == 2


# =============================================================================
# report_run_completed
# =============================================================================


class TestReportRunCompleted:
    """End-of-run convenience report."""

    def test_run_summary_fans_out(self, coordinator: MissionCoordinator) -> None:
        changed = coordinator.report_run_completed(
            RunSummary(
                score=42,
                survived_seconds=18,
                obstacles_avoided=25,
                currency_collected=7,
                is_new_high_score=True,
                planet_id="mars",
            )
        )

        progress = {m.id: m.current_progress for m in changed}
        assert progress == {
            "play_5": 1,
            "daily_play_5": 1,
            "score_50": 42,
            "survive_30": 18,
            "weekly_avoid_200": 25,
            "daily_collect_20": 7,
            "legend": 42,
        }

    def test_high_score_only_on_new_record(
        self, coordinator: MissionCoordinator
    ) -> None:
        coordinator.report_run_completed(RunSummary(score=80))
        assert coordinator.get_mission("legend").current_progress == 0

    def test_empty_run_counts_one_game(self, coordinator: MissionCoordinator) -> None:
        changed = coordinator.report_run_completed(RunSummary())
        assert sorted(m.id for m in changed) == ["daily_play_5", "play_5"]

    def test_high_score_report_value(self, coordinator: MissionCoordinator) -> None:
        coordinator.report_value(OBJECTIVE_REACH_HIGH_SCORE, 120)
        assert coordinator.get_mission("legend").is_completed
