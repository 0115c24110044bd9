"""Mission Engine - Pure logic for mission progress and claim decisions.

This engine provides stateless, pure Python functions for:
- Progress update rules (additive vs watermark objectives)
- Completion detection and ProgressEffect planning
- Claim validation (unknown / incomplete / already claimed)
- Record normalization (clamping and invariant repair)
- Active-set ordering

ARCHITECTURE: This is a pure logic engine. It never touches persistence,
events or the clock. All methods are static and operate on passed-in data.
State management belongs in the managers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .. import const
from ..utils.math_utils import clamp_progress

if TYPE_CHECKING:
    from ..type_defs import Mission, MissionProgress, MissionTemplate


# =============================================================================
# PROGRESS EFFECT DATA STRUCTURE
# =============================================================================


@dataclass(frozen=True)
class ProgressEffect:
    """Outcome of applying one report to one mission.

    Returned by MissionEngine.plan_progress() so the manager knows what to
    persist and which events to emit.

    Attributes:
        old_progress: Progress before the report
        new_progress: Progress after the report (already clamped)
        became_completed: Completion flipped false -> true
    """

    old_progress: int
    new_progress: int
    became_completed: bool = False

    @property
    def changed(self) -> bool:
        """Whether the report moved progress at all."""
        return self.new_progress != self.old_progress


@dataclass(frozen=True)
class NormalizationResult:
    """Outcome of normalizing a loaded record.

    Attributes:
        progress: Normalized progress value
        is_completed: Completion derived from the normalized progress
        is_claimed: Claim flag after repair
        clamped: Raw progress was outside [0, target]
        repaired_claim: A claimed-but-incomplete record was raised to target
        repaired_completion: Stored completion flag disagreed with progress
    """

    progress: int
    is_completed: bool
    is_claimed: bool
    clamped: bool = False
    repaired_claim: bool = False
    repaired_completion: bool = False


# =============================================================================
# MISSION ENGINE
# =============================================================================


class MissionEngine:
    """Pure logic engine for mission progress and claims.

    All methods are static - no instance state.
    """

    # =========================================================================
    # OBJECTIVE CLASSIFICATION
    # =========================================================================

    @staticmethod
    def is_valid_objective(objective_type: str) -> bool:
        """Check an objective type against the known set."""
        return objective_type in const.OBJECTIVE_TYPES

    @staticmethod
    def is_watermark_objective(objective_type: str) -> bool:
        """True when progress for this objective is a running maximum.

        Score, survival time and high score are reported as absolute values
        and only ever overwrite upward; all other objectives accumulate.
        """
        return objective_type in const.WATERMARK_OBJECTIVES

    @staticmethod
    def is_active(progress: MissionProgress) -> bool:
        """A mission accepts progress until it is completed or claimed."""
        return not progress.is_completed and not progress.is_claimed

    @staticmethod
    def is_completed_value(current: int, target: int) -> bool:
        """Completion rule: progress reached the target."""
        return current >= target

    # =========================================================================
    # PROGRESS RULES
    # =========================================================================

    @staticmethod
    def calculate_increment(
        objective_type: str, current: int, amount: int, target: int
    ) -> int:
        """Calculate new progress for an increment-style report.

        Counting objectives add `amount`. Watermark objectives take `amount`
        as an absolute value and overwrite only when it beats the current
        progress. Non-positive counting increments leave progress unchanged.

        Args:
            objective_type: Objective of the mission being updated
            current: Progress before the report
            amount: Reported amount
            target: Mission target (upper clamp)

        Returns:
            New progress, clamped into [current, target]
        """
        if MissionEngine.is_watermark_objective(objective_type):
            return MissionEngine.calculate_watermark(current, amount, target)

        if amount <= 0:
            return current
        return clamp_progress(current + amount, target)

    @staticmethod
    def calculate_watermark(current: int, value: int, target: int) -> int:
        """Calculate new progress for a high-water-mark report.

        Examples:
            calculate_watermark(30, 20, 50) → 30
            calculate_watermark(30, 45, 50) → 45
            calculate_watermark(30, 80, 50) → 50
        """
        if value <= current:
            return current
        return clamp_progress(value, target)

    @staticmethod
    def plan_progress(
        progress: MissionProgress, new_value: int, target: int
    ) -> ProgressEffect:
        """Describe the transition from the current progress to `new_value`.

        Args:
            progress: Current progress record (not modified)
            new_value: Value computed by one of the rules above
            target: Mission target

        Returns:
            ProgressEffect describing the change
        """
        old_value = progress.current_progress
        # Progress is monotonic within a cycle
        new_value = max(old_value, clamp_progress(new_value, target))
        became_completed = (
            not progress.is_completed
            and MissionEngine.is_completed_value(new_value, target)
        )
        return ProgressEffect(
            old_progress=old_value,
            new_progress=new_value,
            became_completed=became_completed,
        )

    @staticmethod
    def apply_effect(
        progress: MissionProgress, effect: ProgressEffect, target: int
    ) -> None:
        """Write a planned effect into the progress record."""
        progress.current_progress = effect.new_progress
        progress.is_completed = MissionEngine.is_completed_value(
            effect.new_progress, target
        )

    # =========================================================================
    # CLAIM LOGIC
    # =========================================================================

    @staticmethod
    def get_claim_rejection(progress: MissionProgress | None) -> str | None:
        """Return why a claim must be rejected, or None when it may proceed.

        Returns:
            One of const.CLAIM_REJECTED_* or None
        """
        if progress is None:
            return const.CLAIM_REJECTED_UNKNOWN
        if progress.is_claimed:
            return const.CLAIM_REJECTED_ALREADY_CLAIMED
        if not progress.is_completed:
            return const.CLAIM_REJECTED_NOT_COMPLETED
        return None

    # =========================================================================
    # RESET
    # =========================================================================

    @staticmethod
    def reset_progress(progress: MissionProgress) -> bool:
        """Wipe a periodic mission back to NotStarted.

        Returns:
            True when the cycle's reward was forfeited (completed but unclaimed)
        """
        forfeited = progress.is_completed and not progress.is_claimed
        progress.current_progress = 0
        progress.is_completed = False
        progress.is_claimed = False
        return forfeited

    # =========================================================================
    # RECORD NORMALIZATION
    # =========================================================================

    @staticmethod
    def normalize_record(
        raw_progress: int,
        stored_completed: bool,
        stored_claimed: bool,
        template: MissionTemplate,
    ) -> NormalizationResult:
        """Bring a loaded record back inside the progress invariants.

        - progress is clamped into [0, target]
        - is_completed is derived from progress
        - is_claimed on an incomplete record raises progress to target, so a
          granted reward can never be granted again

        Args:
            raw_progress: currentProgress as stored
            stored_completed: isCompleted as stored
            stored_claimed: isClaimed as stored
            template: Mission template (supplies the target)
        """
        target = template.target_value
        progress = clamp_progress(raw_progress, target)
        clamped = progress != raw_progress

        repaired_claim = False
        if stored_claimed and progress < target:
            progress = target
            repaired_claim = True

        is_completed = MissionEngine.is_completed_value(progress, target)
        return NormalizationResult(
            progress=progress,
            is_completed=is_completed,
            is_claimed=stored_claimed,
            clamped=clamped,
            repaired_claim=repaired_claim,
            repaired_completion=(
                not repaired_claim and is_completed != stored_completed
            ),
        )

    # =========================================================================
    # ACTIVE SET ORDERING
    # =========================================================================

    @staticmethod
    def active_sort_key(mission: Mission) -> tuple[int, int, int]:
        """Sort key for the active set.

        Category rank (daily, weekly, total), then completed before
        incomplete, then descending priority. Python's sort is stable, so
        ties keep registry order.
        """
        return (
            const.CATEGORY_SORT_RANK.get(mission.category, len(const.CATEGORIES)),
            0 if mission.is_completed else 1,
            -mission.priority,
        )

    @staticmethod
    def build_active_set(missions: list[Mission]) -> list[Mission]:
        """Filter out claimed missions and order the rest for display."""
        unclaimed = [mission for mission in missions if not mission.is_claimed]
        return sorted(unclaimed, key=MissionEngine.active_sort_key)
