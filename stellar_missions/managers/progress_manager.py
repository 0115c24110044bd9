"""Progress Manager - Gameplay progress reporting.

This manager turns gameplay reports into mission progress:
- report_increment: counting objectives add, watermark objectives overwrite
  only when the reported value is higher
- report_value: running maximum for any objective
- report_run_completed: every report a finished run produces, in one call

ARCHITECTURE:
- MissionEngine decides the new value and whether completion flipped (STATELESS)
- ProgressManager mutates the coordinator's progress table, persists once
  per changed mission and emits events (STATEFUL)

Event Flow (per changed mission):
    persist -> emit(MISSION_PROGRESS) -> emit(MISSION_COMPLETED) if it just completed
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .. import const
from ..engines.mission_engine import MissionEngine
from .base_manager import BaseManager

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..type_defs import Mission, MissionTemplate, RunSummary


class ProgressManager(BaseManager):
    """Manager for progress reports coming from gameplay.

    Responsibilities:
    - Apply reports to every active mission with the matching objective
    - Persist changed missions
    - Emit SIGNAL_SUFFIX_MISSION_PROGRESS / SIGNAL_SUFFIX_MISSION_COMPLETED

    NOT responsible for:
    - Boundary checks (the coordinator runs them before delegating here)
    - Rewards (RewardManager)
    """

    def setup(self) -> None:
        """No subscriptions; progress only arrives through the report methods."""

    def report_increment(self, objective_type: str, amount: int = 1) -> list[Mission]:
        """Report `amount` units of progress for an objective type.

        Counting objectives add `amount`; non-positive amounts are ignored.
        Watermark objectives (score, survival time, high score) treat
        `amount` as an absolute value.

        Returns:
            Snapshots of the missions whose progress changed
        """
        if not self._validate_objective("report_increment", objective_type):
            return []

        return self._apply(
            objective_type,
            lambda template, current: MissionEngine.calculate_increment(
                objective_type, current, amount, template.target_value
            ),
        )

    def report_value(self, objective_type: str, value: int) -> list[Mission]:
        """Report an absolute value; progress becomes max(current, value).

        Returns:
            Snapshots of the missions whose progress changed
        """
        if not self._validate_objective("report_value", objective_type):
            return []

        return self._apply(
            objective_type,
            lambda template, current: MissionEngine.calculate_watermark(
                current, value, template.target_value
            ),
        )

    def report_run_completed(self, summary: RunSummary) -> list[Mission]:
        """Report everything a finished run contributes.

        One game played, the final score and survival time as watermarks,
        obstacles avoided and shards collected as increments, the high score
        when the run set one, and one planet use when a planet was flown.

        Returns:
            Snapshots of every changed mission, in report order
        """
        changed: list[Mission] = []
        changed += self.report_increment(const.OBJECTIVE_PLAY_GAMES, 1)
        changed += self.report_value(const.OBJECTIVE_REACH_SCORE, summary.score)
        changed += self.report_value(
            const.OBJECTIVE_SURVIVE_TIME, summary.survived_seconds
        )
        changed += self.report_increment(
            const.OBJECTIVE_AVOID_OBSTACLES, summary.obstacles_avoided
        )
        changed += self.report_increment(
            const.OBJECTIVE_COLLECT_CURRENCY, summary.currency_collected
        )
        if summary.is_new_high_score:
            changed += self.report_value(
                const.OBJECTIVE_REACH_HIGH_SCORE, summary.score
            )
        if summary.planet_id:
            changed += self.report_increment(const.OBJECTIVE_USE_PLANET, 1)

        const.LOGGER.debug(
            "ProgressManager.report_run_completed: score=%s survived=%s -> %s changed",
            summary.score,
            summary.survived_seconds,
            len(changed),
        )
        return changed

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _validate_objective(self, operation: str, objective_type: str) -> bool:
        if MissionEngine.is_valid_objective(objective_type):
            return True
        const.LOGGER.warning(
            "WARNING: ProgressManager.%s: Unknown objective type '%s' ignored",
            operation,
            objective_type,
        )
        return False

    def _apply(
        self,
        objective_type: str,
        rule: Callable[[MissionTemplate, int], int],
    ) -> list[Mission]:
        """Run `rule` against every active mission of `objective_type`."""
        changed: list[Mission] = []
        for template in self.coordinator.registry.get_all_templates():
            if template.objective_type != objective_type:
                continue

            progress = self.coordinator.get_progress(template.id)
            if progress is None or not MissionEngine.is_active(progress):
                continue

            effect = MissionEngine.plan_progress(
                progress,
                rule(template, progress.current_progress),
                template.target_value,
            )
            if not effect.changed:
                continue

            MissionEngine.apply_effect(progress, effect, template.target_value)
            self.coordinator._persist(template.id)

            mission = self.coordinator.build_mission(template.id)
            self.emit(const.SIGNAL_SUFFIX_MISSION_PROGRESS, mission)
            if effect.became_completed:
                const.LOGGER.info(
                    "INFO: Mission '%s' completed (%s/%s)",
                    template.id,
                    effect.new_progress,
                    template.target_value,
                )
                self.emit(const.SIGNAL_SUFFIX_MISSION_COMPLETED, mission)

            changed.append(mission)

        return changed
