"""Base manager class for Stellar Missions managers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from .. import const
from ..event_bus import get_event_signal

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..coordinator import MissionCoordinator


class BaseManager(ABC):
    """Base class for all Stellar Missions managers with scoped event support.

    Provides:
    - Instance-scoped event emitting (emit)
    - Instance-scoped event listening (listen)
    - Automatic cleanup via the coordinator's shutdown

    Data Persistence:
    - Use coordinator._persist(mission_id) once per user-visible change,
      before emitting the matching event

    Subclasses must implement:
    - setup(): Subscribe to events, initialize state
    """

    def __init__(self, coordinator: MissionCoordinator) -> None:
        """Initialize manager.

        Args:
            coordinator: Parent coordinator owning this engine instance
        """
        self.coordinator = coordinator
        self.instance_id = coordinator.instance_id

    def emit(self, suffix: str, *args: Any, **payload: Any) -> None:
        """Emit instance-scoped event to listeners.

        Positional args are delivered as-is. Keyword payload is delivered as
        a single dict argument after them.

        Args:
            suffix: Signal suffix constant (e.g., const.SIGNAL_SUFFIX_MISSION_PROGRESS)
            *args: Values passed to listeners (e.g., a Mission snapshot)
            **payload: Event data dict passed to listeners

        Example:
            self.emit(const.SIGNAL_SUFFIX_MISSION_COMPLETED, mission)
            self.emit(
                const.SIGNAL_SUFFIX_MISSIONS_RESET,
                category="daily",
                reset_ids=["daily_play_3"],
                forfeited_ids=[],
                next_reset_at="2026-01-19T00:00:00+00:00",
            )
        """
        signal = get_event_signal(self.instance_id, suffix)
        const.LOGGER.debug(
            "Emitting event '%s' for instance %s with payload keys: %s",
            suffix,
            self.instance_id,
            list(payload.keys()),
        )
        if payload:
            args = (*args, payload)
        self.coordinator.bus.send(signal, *args)

    def listen(self, suffix: str, callback: Callable[..., Any]) -> None:
        """Subscribe to instance-scoped event with automatic cleanup.

        The subscription is removed when the coordinator shuts down.

        Args:
            suffix: Signal suffix constant to listen for
            callback: Function called synchronously when the event fires

        Example:
            def _on_mission_claimed(self, mission: Mission) -> None:
                self._claimable_changed = True

            # In setup():
            self.listen(const.SIGNAL_SUFFIX_MISSION_CLAIMED, self._on_mission_claimed)
        """
        signal = get_event_signal(self.instance_id, suffix)
        unsub = self.coordinator.bus.connect(signal, callback)
        self.coordinator.on_shutdown(unsub)
        const.LOGGER.debug(
            "Manager %s listening to event '%s' for instance %s",
            self.__class__.__name__,
            suffix,
            self.instance_id,
        )

    @abstractmethod
    def setup(self) -> None:
        """Set up the manager (subscribe to events, initialize state).

        Called once during coordinator setup, before the first reset check.
        Subclasses should subscribe to events here using self.listen().
        """
