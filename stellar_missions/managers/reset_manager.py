"""Reset Manager - Daily and weekly mission resets.

Runs at startup and again whenever the coordinator notices that "now" has
reached a mission's next_reset_at. Every run is idempotent: once a category
was reset for the current day or week, running again only refreshes the
next_reset_at values.

Write order for a due category: each mission's wiped record first, then the
category's last-reset date. A crash between the two leaves the date unwritten
and the next start resets again (harmless, the records are already zero).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .. import const
from ..engines.mission_engine import MissionEngine
from ..engines.schedule_engine import ResetScheduleEngine
from .base_manager import BaseManager

if TYPE_CHECKING:
    from datetime import datetime

    from ..type_defs import MissionsResetPayload


class ResetManager(BaseManager):
    """Manager applying periodic boundary crossings."""

    def setup(self) -> None:
        """No subscriptions; the coordinator calls run()."""

    def run(self) -> list[MissionsResetPayload]:
        """Reset every periodic category whose boundary was crossed.

        Returns:
            One payload per category that was reset (empty when nothing was due)
        """
        now_local = self.coordinator.now()
        results: list[MissionsResetPayload] = []
        for category in const.PERIODIC_CATEGORIES:
            payload = self._process_category(category, now_local)
            if payload is not None:
                results.append(payload)
        return results

    def _process_category(
        self, category: str, now_local: datetime
    ) -> MissionsResetPayload | None:
        store = self.coordinator.store
        templates = self.coordinator.registry.get_templates_by_category(category)
        last_reset = store.load_last_reset(category)
        next_reset_at = ResetScheduleEngine.next_reset(category, now_local)

        if not ResetScheduleEngine.is_reset_due(category, now_local, last_reset):
            for template in templates:
                progress = self.coordinator.get_progress(template.id)
                if progress is not None:
                    progress.next_reset_at = next_reset_at
            return None

        reset_ids: list[str] = []
        forfeited_ids: list[str] = []
        for template in templates:
            progress = self.coordinator.get_progress(template.id)
            if progress is None:
                continue
            if MissionEngine.reset_progress(progress):
                forfeited_ids.append(template.id)
            progress.next_reset_at = next_reset_at
            self.coordinator._persist(template.id)
            reset_ids.append(template.id)

        store.save_last_reset(category, now_local.date())

        const.LOGGER.info(
            "INFO: Reset %s %s missions (last reset %s, next %s)",
            len(reset_ids),
            category,
            last_reset,
            next_reset_at,
        )
        if forfeited_ids:
            const.LOGGER.info(
                "INFO: Unclaimed %s rewards forfeited: %s", category, forfeited_ids
            )

        payload: MissionsResetPayload = {
            "category": category,  # type: ignore[typeddict-item]
            "reset_ids": reset_ids,
            "forfeited_ids": forfeited_ids,
            "next_reset_at": next_reset_at.isoformat() if next_reset_at else "",
        }
        self.emit(const.SIGNAL_SUFFIX_MISSIONS_RESET, **payload)
        return payload
