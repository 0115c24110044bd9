"""UI Manager for the missions screen.

Responsible for:
- The active set (unclaimed missions in display order)
- Per-category views and the claimable badge counter
- Tracking whether the claimable set may have changed since the UI last read it

Views are computed on demand from the coordinator's progress table and never
cached, so they always reflect the latest reports, claims and resets.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .. import const
from ..engines.mission_engine import MissionEngine
from .base_manager import BaseManager

if TYPE_CHECKING:
    from ..coordinator import MissionCoordinator
    from ..type_defs import Mission


class UIManager(BaseManager):
    """Manager for the read-only mission views shown by the UI."""

    def __init__(self, coordinator: MissionCoordinator) -> None:
        """Initialize UI manager.

        Args:
            coordinator: Parent coordinator owning this engine instance
        """
        super().__init__(coordinator)

        # Badge refresh hint; True on first load to force the initial build
        self._claimable_changed: bool = True

    def setup(self) -> None:
        """Track events that can change the claimable set."""
        self.listen(const.SIGNAL_SUFFIX_MISSION_COMPLETED, self._on_claimable_changed)
        self.listen(const.SIGNAL_SUFFIX_MISSION_CLAIMED, self._on_claimable_changed)
        self.listen(const.SIGNAL_SUFFIX_MISSIONS_RESET, self._on_claimable_changed)

    def _on_claimable_changed(self, *_args: Any) -> None:
        self._claimable_changed = True

    @property
    def claimable_changed(self) -> bool:
        """Whether the claimable set may have changed since it was last read."""
        return self._claimable_changed

    # -------------------------------------------------------------------------
    # Views
    # -------------------------------------------------------------------------

    def get_all_missions(self) -> list[Mission]:
        """Every mission, claimed included, in catalog order."""
        return [
            self.coordinator.build_mission(template.id)
            for template in self.coordinator.registry.get_all_templates()
        ]

    def get_active_missions(self) -> list[Mission]:
        """Unclaimed missions: daily, weekly, total; completed first; by priority."""
        return MissionEngine.build_active_set(self.get_all_missions())

    def get_active_missions_by_category(self, category: str) -> list[Mission]:
        """Active missions of one category, in active-set order."""
        return [
            mission
            for mission in self.get_active_missions()
            if mission.category == category
        ]

    def get_claimable_missions(self) -> list[Mission]:
        """Completed missions still waiting for their reward."""
        self._claimable_changed = False
        return [mission for mission in self.get_active_missions() if mission.is_claimable]

    def get_claimable_count(self) -> int:
        """Badge counter for the missions tab."""
        return sum(
            1 for mission in self.get_all_missions() if mission.is_claimable
        )
