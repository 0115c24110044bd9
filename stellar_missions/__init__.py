# File: __init__.py
"""Initialization file for the Stellar Missions engine.

Handles setting up a mission engine instance: validating options, building
the registry and mission store, and preparing the coordinator.

Key Features:
- Options validation (voluptuous).
- Coordinator construction and setup, including the startup reset check.
- Teardown support through MissionCoordinator.shutdown().

Example:
    prefs = JsonPreferencesStore("saves/stellar_missions_prefs.json")
    missions = setup_missions(prefs, {"time_zone": "Europe/Madrid"})
    missions.report_increment("play_games")
    missions.claim_reward("first_game")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import voluptuous as vol

from . import const
from .coordinator import MissionCoordinator
from .mission_registry import MissionRegistry
from .storage_manager import MissionStore
from .store import JsonPreferencesStore, MemoryPreferencesStore
from .type_defs import Mission, MissionTemplate, RewardSpec, RunSummary
from .utils.dt_utils import LocalClock, get_time_zone

if TYPE_CHECKING:
    from .type_defs import (
        Clock,
        CurrencyLedgerProtocol,
        MissionsOptions,
        PreferencesStore,
        UnlockStoreProtocol,
    )


def _time_zone(value: Any) -> str:
    """Accept only resolvable IANA time zone names."""
    if not isinstance(value, str) or get_time_zone(value) is None:
        raise vol.Invalid(f"unknown time zone: {value!r}")
    return value


OPTIONS_SCHEMA = vol.Schema(
    {
        vol.Optional(const.CONF_TIME_ZONE, default=const.DEFAULT_TIME_ZONE_NAME): (
            _time_zone
        ),
        vol.Optional(const.CONF_INSTANCE_ID, default=const.DEFAULT_INSTANCE_ID): vol.All(
            str, vol.Length(min=1)
        ),
        vol.Optional(
            const.CONF_KEY_PREFIX, default=const.STORAGE_KEY_PROGRESS_PREFIX
        ): vol.All(str, vol.Length(min=1)),
        vol.Optional(
            const.CONF_CHECK_RESETS_ON_ACCESS,
            default=const.DEFAULT_CHECK_RESETS_ON_ACCESS,
        ): bool,
    }
)


def setup_missions(
    store: PreferencesStore,
    options: MissionsOptions | dict[str, Any] | None = None,
    *,
    currency_ledger: CurrencyLedgerProtocol | None = None,
    unlock_store: UnlockStoreProtocol | None = None,
    clock: Clock | None = None,
    registry: MissionRegistry | None = None,
) -> MissionCoordinator:
    """Build, set up and return a mission engine instance.

    Args:
        store: Key-value persistence shared with the rest of the game.
        options: Raw options, validated against OPTIONS_SCHEMA.
        currency_ledger: Wallet granting currency rewards. Defaults to a
            CurrencyLedger on `store`.
        unlock_store: Inventory granting unlock rewards. Defaults to an
            UnlockStore on `store`.
        clock: Time source. Defaults to a LocalClock in the configured zone.
        registry: Mission catalog. Defaults to the built-in catalog.

    Raises:
        vol.Invalid: Options fail OPTIONS_SCHEMA.
        ValueError: The catalog is invalid.
    """
    config = OPTIONS_SCHEMA(dict(options or {}))

    if clock is None:
        clock = LocalClock(get_time_zone(config[const.CONF_TIME_ZONE]))
    if registry is None:
        registry = MissionRegistry()

    coordinator = MissionCoordinator(
        registry,
        MissionStore(store, registry, config[const.CONF_KEY_PREFIX]),
        clock=clock,
        instance_id=config[const.CONF_INSTANCE_ID],
        check_resets_on_access=config[const.CONF_CHECK_RESETS_ON_ACCESS],
        currency_ledger=currency_ledger,
        unlock_store=unlock_store,
    )
    coordinator.setup()
    return coordinator


__all__ = [
    "OPTIONS_SCHEMA",
    "JsonPreferencesStore",
    "MemoryPreferencesStore",
    "Mission",
    "MissionCoordinator",
    "MissionRegistry",
    "MissionStore",
    "MissionTemplate",
    "RewardSpec",
    "RunSummary",
    "setup_missions",
]
