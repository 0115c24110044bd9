"""Economy Manager - Stellar Shards balance and item unlocks.

Reference implementations of the two reward collaborators, both backed by
the same key-value store as mission progress:
- CurrencyLedger: soft currency balance under `stellar_shards`
- UnlockStore: boolean unlock flags under `unlock_<item_id>`

Games that already own a wallet or an inventory pass their own objects to
setup_missions() instead; RewardManager only needs add_currency() and
set_unlocked().
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .. import const
from .base_manager import BaseManager

if TYPE_CHECKING:
    from ..coordinator import MissionCoordinator
    from ..type_defs import PreferencesStore


class CurrencyLedger(BaseManager):
    """Manager for the Stellar Shards balance.

    Responsibilities:
    - Add and spend shards, persisting after every change
    - Emit SIGNAL_SUFFIX_CURRENCY_CHANGED
    """

    def __init__(
        self,
        coordinator: MissionCoordinator,
        preferences: PreferencesStore | None = None,
    ) -> None:
        """Initialize the ledger.

        Args:
            coordinator: Parent coordinator owning this engine instance
            preferences: Store holding the balance. Defaults to the
                coordinator's mission store preferences.
        """
        super().__init__(coordinator)
        self._preferences = preferences or coordinator.store.preferences

    def setup(self) -> None:
        """No subscriptions; balance changes arrive through the public methods."""

    @property
    def balance(self) -> int:
        """Current balance (0 when unset or unreadable)."""
        try:
            return int(self._preferences.get(const.STORAGE_KEY_CURRENCY, 0))
        except (TypeError, ValueError):
            return 0

    def add_currency(self, amount: int) -> int:
        """Add shards to the balance.

        Returns:
            New balance

        Raises:
            ValueError: If amount is negative
        """
        if amount < 0:
            raise ValueError(f"Currency amount must be positive, got {amount}")
        return self._update_balance(amount, source="add")

    def spend_currency(self, amount: int) -> bool:
        """Spend shards when the balance covers `amount`.

        Returns:
            True when spent, False on insufficient funds (balance unchanged)

        Raises:
            ValueError: If amount is negative
        """
        if amount < 0:
            raise ValueError(f"Currency amount must be positive, got {amount}")

        current_balance = self.balance
        if current_balance < amount:
            const.LOGGER.debug(
                "CurrencyLedger.spend_currency: Insufficient funds, balance=%s, requested=%s",
                current_balance,
                amount,
            )
            return False

        self._update_balance(-amount, source="spend")
        return True

    def _update_balance(self, delta: int, *, source: str) -> int:
        old_balance = self.balance
        new_balance = old_balance + delta
        self._preferences.set(const.STORAGE_KEY_CURRENCY, new_balance)
        self._preferences.save()

        self.emit(
            const.SIGNAL_SUFFIX_CURRENCY_CHANGED,
            old_balance=old_balance,
            new_balance=new_balance,
            delta=delta,
            source=source,
        )
        const.LOGGER.debug(
            "CurrencyLedger.%s: delta=%s, old=%s, new=%s",
            source,
            delta,
            old_balance,
            new_balance,
        )
        return new_balance


class UnlockStore:
    """Boolean unlock flags keyed by item id."""

    def __init__(self, preferences: PreferencesStore) -> None:
        self._preferences = preferences

    @staticmethod
    def unlock_key(item_id: str) -> str:
        """Storage key holding an item's unlock flag."""
        return f"{const.STORAGE_KEY_UNLOCK_PREFIX}{item_id}"

    def is_unlocked(self, item_id: str) -> bool:
        """Whether `item_id` has been unlocked."""
        return bool(self._preferences.get(self.unlock_key(item_id), False))

    def set_unlocked(self, item_id: str) -> None:
        """Unlock `item_id` and persist."""
        self._preferences.set(self.unlock_key(item_id), True)
        self._preferences.save()
        const.LOGGER.debug("UnlockStore: Unlocked '%s'", item_id)
