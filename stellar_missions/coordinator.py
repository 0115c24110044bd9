# File: coordinator.py
"""Coordinator for the Stellar Missions engine.

Owns the registry, the mission store, the clock, the event bus, the
in-memory progress table and the managers. It exposes the query surface and
the public operations, and delegates the workflows to the managers:

- ProgressManager: gameplay reports
- RewardManager: reward claims
- ResetManager: daily/weekly boundary crossings
- UIManager: active-set views
- CurrencyLedger / UnlockStore: reward collaborators (replaceable)

Everything runs synchronously on the caller's thread.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from . import const
from .engines.schedule_engine import ResetScheduleEngine
from .event_bus import EventBus, get_event_signal
from .managers import (
    CurrencyLedger,
    ProgressManager,
    ResetManager,
    RewardManager,
    UIManager,
    UnlockStore,
)
from .storage_manager import MissionStore
from .type_defs import Mission
from .utils.dt_utils import LocalClock

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

    from .mission_registry import MissionRegistry
    from .type_defs import (
        Clock,
        CurrencyLedgerProtocol,
        MissionId,
        MissionProgress,
        MissionTemplate,
        RunSummary,
        UnlockStoreProtocol,
    )


class MissionCoordinator:
    """Coordinator for one mission engine instance.

    Manages progress keyed by mission id. Build it, call setup() once, and
    use the public methods; call shutdown() to drop every subscription.
    """

    def __init__(
        self,
        registry: MissionRegistry,
        store: MissionStore,
        *,
        clock: Clock | None = None,
        bus: EventBus | None = None,
        instance_id: str = const.DEFAULT_INSTANCE_ID,
        check_resets_on_access: bool = const.DEFAULT_CHECK_RESETS_ON_ACCESS,
        currency_ledger: CurrencyLedgerProtocol | None = None,
        unlock_store: UnlockStoreProtocol | None = None,
    ) -> None:
        """Initialize the MissionCoordinator."""
        self.registry = registry
        self.store = store
        self.clock: Clock = clock or LocalClock()
        self.bus = bus or EventBus()
        self.instance_id = instance_id
        self.check_resets_on_access = check_resets_on_access

        self._progress: dict[MissionId, MissionProgress] = {}
        self._unsub_callbacks: list[Callable[[], None]] = []
        self._is_setup = False

        self.progress_manager = ProgressManager(self)
        self.reward_manager = RewardManager(self)
        self.reset_manager = ResetManager(self)
        self.ui_manager = UIManager(self)
        self.currency_ledger: CurrencyLedgerProtocol = (
            currency_ledger or CurrencyLedger(self)
        )
        self.unlock_store: UnlockStoreProtocol = unlock_store or UnlockStore(
            store.preferences
        )

    # -------------------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------------------

    def setup(self) -> None:
        """Load progress, set up managers and apply any due resets."""
        if self._is_setup:
            const.LOGGER.debug("MissionCoordinator.setup: Already set up")
            return

        self._progress = self.store.load_all()
        orphaned = self.store.find_orphaned_ids()
        if orphaned:
            const.LOGGER.debug(
                "MissionCoordinator: Ignoring progress for unknown missions: %s",
                orphaned,
            )

        for manager in (
            self.progress_manager,
            self.reward_manager,
            self.reset_manager,
            self.ui_manager,
        ):
            manager.setup()
        if isinstance(self.currency_ledger, CurrencyLedger):
            self.currency_ledger.setup()

        self.reset_manager.run()
        self._is_setup = True
        const.LOGGER.info(
            "INFO: %s ready for instance '%s' with %s missions",
            const.STELLAR_MISSIONS_TITLE,
            self.instance_id,
            len(self._progress),
        )

    def on_shutdown(self, unsub: Callable[[], None]) -> None:
        """Register a callback to run at shutdown."""
        self._unsub_callbacks.append(unsub)

    def shutdown(self) -> None:
        """Remove every subscription made through this coordinator."""
        while self._unsub_callbacks:
            self._unsub_callbacks.pop()()
        self._is_setup = False
        const.LOGGER.debug(
            "MissionCoordinator: Shut down instance '%s'", self.instance_id
        )

    # -------------------------------------------------------------------------------------
    # Internal state access (managers only)
    # -------------------------------------------------------------------------------------

    def now(self) -> datetime:
        """Current local time from the injected clock."""
        return self.clock.now()

    def get_progress(self, mission_id: MissionId) -> MissionProgress | None:
        """Live progress record for `mission_id` (None when unknown)."""
        return self._progress.get(mission_id)

    def _persist(self, mission_id: MissionId) -> None:
        """Save one mission's progress record."""
        progress = self._progress.get(mission_id)
        if progress is not None:
            self.store.save(mission_id, progress)

    def build_mission(self, mission_id: MissionId) -> Mission:
        """Snapshot of a mission's template joined with its progress.

        Raises:
            KeyError: If `mission_id` is not in the registry
        """
        template = self.registry.get_template(mission_id)
        if template is None:
            raise KeyError(mission_id)
        return Mission.from_parts(template, self._progress[mission_id])

    def check_boundaries(self) -> None:
        """Re-run the reset scheduler when a periodic boundary was reached."""
        if not self.check_resets_on_access:
            return

        pending = [
            progress.next_reset_at
            for progress in self._progress.values()
            if progress.next_reset_at is not None
        ]
        if not pending:
            return

        now_local = self.now()
        if ResetScheduleEngine.boundary_crossed(min(pending), now_local):
            const.LOGGER.debug(
                "MissionCoordinator: Reset boundary reached at %s", now_local
            )
            self.reset_manager.run()

    # -------------------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------------------

    def get_all_missions(self) -> list[Mission]:
        """Every mission in catalog order, claimed included."""
        self.check_boundaries()
        return self.ui_manager.get_all_missions()

    def get_active_missions(self) -> list[Mission]:
        """Unclaimed missions in display order."""
        self.check_boundaries()
        return self.ui_manager.get_active_missions()

    def get_active_missions_by_category(self, category: str) -> list[Mission]:
        """Active missions of one category, in display order."""
        self.check_boundaries()
        return self.ui_manager.get_active_missions_by_category(category)

    def get_claimable_missions(self) -> list[Mission]:
        """Completed, unclaimed missions in display order."""
        self.check_boundaries()
        return self.ui_manager.get_claimable_missions()

    def get_claimable_count(self) -> int:
        """Number of rewards waiting to be claimed."""
        self.check_boundaries()
        return self.ui_manager.get_claimable_count()

    def get_templates_by_category(self, category: str) -> list[MissionTemplate]:
        """Catalog entries of one category."""
        return self.registry.get_templates_by_category(category)

    def get_mission(self, mission_id: MissionId) -> Mission | None:
        """Snapshot of one mission, or None when unknown."""
        if mission_id not in self.registry:
            return None
        self.check_boundaries()
        return self.build_mission(mission_id)

    # -------------------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------------------

    def report_increment(self, objective_type: str, amount: int = 1) -> list[Mission]:
        """See ProgressManager.report_increment."""
        self.check_boundaries()
        return self.progress_manager.report_increment(objective_type, amount)

    def report_value(self, objective_type: str, value: int) -> list[Mission]:
        """See ProgressManager.report_value."""
        self.check_boundaries()
        return self.progress_manager.report_value(objective_type, value)

    def report_run_completed(self, summary: RunSummary) -> list[Mission]:
        """See ProgressManager.report_run_completed."""
        self.check_boundaries()
        return self.progress_manager.report_run_completed(summary)

    def claim_reward(self, mission_id: MissionId) -> bool:
        """See RewardManager.claim_reward."""
        self.check_boundaries()
        return self.reward_manager.claim_reward(mission_id)

    def run_resets(self) -> None:
        """Apply any due daily/weekly reset now."""
        self.reset_manager.run()

    # -------------------------------------------------------------------------------------
    # Subscriptions
    # -------------------------------------------------------------------------------------

    def subscribe(
        self, suffix: str, callback: Callable[..., Any]
    ) -> Callable[[], None]:
        """Subscribe to one of this instance's signals.

        Returns:
            Callable removing the subscription
        """
        unsub = self.bus.connect(get_event_signal(self.instance_id, suffix), callback)
        self.on_shutdown(unsub)
        return unsub

    def subscribe_progress(self, callback: Callable[[Mission], Any]) -> Callable[[], None]:
        """Called with the Mission snapshot after every progress change."""
        return self.subscribe(const.SIGNAL_SUFFIX_MISSION_PROGRESS, callback)

    def subscribe_completed(
        self, callback: Callable[[Mission], Any]
    ) -> Callable[[], None]:
        """Called with the Mission snapshot when a mission completes."""
        return self.subscribe(const.SIGNAL_SUFFIX_MISSION_COMPLETED, callback)

    def subscribe_claimed(self, callback: Callable[[Mission], Any]) -> Callable[[], None]:
        """Called with the Mission snapshot after a successful claim."""
        return self.subscribe(const.SIGNAL_SUFFIX_MISSION_CLAIMED, callback)

    def subscribe_reset(
        self, callback: Callable[[dict[str, Any]], Any]
    ) -> Callable[[], None]:
        """Called with a MissionsResetPayload for each reset category."""
        return self.subscribe(const.SIGNAL_SUFFIX_MISSIONS_RESET, callback)
