# File: event_bus.py
"""In-process event bus for Stellar Missions.

Synchronous signal dispatch between managers and UI/analytics listeners.
Signals are plain strings scoped to one engine instance (see
get_event_signal), so two engines in one process never see each other's
events.

Delivery is immediate and in subscription order. A listener that raises is
logged with its traceback and the remaining listeners still run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from . import const

if TYPE_CHECKING:
    from collections.abc import Callable


def get_event_signal(instance_id: str, suffix: str) -> str:
    """Build an instance-scoped signal name.

    Format: 'stellar_missions_{instance_id}_{suffix}'

    Example:
        >>> get_event_signal("abc123", const.SIGNAL_SUFFIX_MISSION_PROGRESS)
        'stellar_missions_abc123_mission_progress'
    """
    return f"{const.DOMAIN}_{instance_id}_{suffix}"


class EventBus:
    """Maps signal names to ordered listener lists."""

    def __init__(self) -> None:
        self._listeners: dict[str, list[Callable[..., Any]]] = {}

    def connect(self, signal: str, target: Callable[..., Any]) -> Callable[[], None]:
        """Subscribe `target` to `signal`.

        Returns:
            Callable that removes the subscription. Calling it twice is safe.
        """
        self._listeners.setdefault(signal, []).append(target)

        def remove_listener() -> None:
            listeners = self._listeners.get(signal)
            if listeners is None or target not in listeners:
                return
            listeners.remove(target)
            if not listeners:
                del self._listeners[signal]

        return remove_listener

    def send(self, signal: str, *args: Any) -> None:
        """Deliver `args` to every listener of `signal`."""
        # Copy so listeners may unsubscribe while being called
        for target in list(self._listeners.get(signal, ())):
            try:
                target(*args)
            except Exception:  # noqa: BLE001
                const.LOGGER.exception(
                    "Error in listener %s for signal '%s'",
                    getattr(target, "__qualname__", target),
                    signal,
                )

    def listener_count(self, signal: str) -> int:
        """Number of listeners currently subscribed to `signal`."""
        return len(self._listeners.get(signal, ()))

    def clear(self) -> None:
        """Drop every subscription."""
        self._listeners.clear()
