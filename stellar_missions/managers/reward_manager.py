"""Reward Manager - Exactly-once mission reward claims.

ARCHITECTURE:
- MissionEngine validates the claim (unknown / incomplete / already claimed)
- RewardManager grants through the currency ledger or unlock store, marks
  the mission claimed, persists and emits

Event Flow:
    RewardManager.claim_reward() -> CurrencyLedger.add_currency() -> emit(CURRENCY_CHANGED)
                                 -> persist -> emit(MISSION_CLAIMED)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .. import const
from ..engines.mission_engine import MissionEngine
from .base_manager import BaseManager

if TYPE_CHECKING:
    from ..type_defs import MissionId, RewardSpec


class RewardManager(BaseManager):
    """Manager for mission reward claims.

    Responsibilities:
    - Reject invalid claims without side effects
    - Grant the reward exactly once
    - Emit SIGNAL_SUFFIX_MISSION_CLAIMED

    NOT responsible for:
    - Currency balance management (delegated to the currency ledger)
    - Unlock bookkeeping (delegated to the unlock store)
    """

    def setup(self) -> None:
        """No subscriptions; claims arrive through claim_reward()."""

    def claim_reward(self, mission_id: MissionId) -> bool:
        """Claim the reward of a completed mission.

        Args:
            mission_id: Mission to claim

        Returns:
            True when the reward was granted, False when the claim was
            rejected (unknown mission, not completed, already claimed)
        """
        progress = self.coordinator.get_progress(mission_id)
        rejection = MissionEngine.get_claim_rejection(progress)
        if rejection is not None:
            const.LOGGER.debug(
                "RewardManager.claim_reward: Rejected claim for '%s': %s",
                mission_id,
                rejection,
            )
            return False

        template = self.coordinator.registry.get_template(mission_id)
        if template is None or progress is None:
            return False

        self._grant(template.reward)
        progress.is_claimed = True
        self.coordinator._persist(mission_id)

        mission = self.coordinator.build_mission(mission_id)
        const.LOGGER.info(
            "INFO: Mission '%s' claimed, granted %s",
            mission_id,
            template.reward.description,
        )
        self.emit(const.SIGNAL_SUFFIX_MISSION_CLAIMED, mission)
        return True

    def _grant(self, reward: RewardSpec) -> None:
        """Hand the reward to the matching collaborator."""
        if reward.type == const.REWARD_TYPE_CURRENCY:
            self.coordinator.currency_ledger.add_currency(reward.amount)
        elif reward.type == const.REWARD_TYPE_UNLOCK_ITEM:
            self.coordinator.unlock_store.set_unlocked(reward.item_id)
        else:
            const.LOGGER.warning(
                "WARNING: RewardManager: Unknown reward type '%s'", reward.type
            )
