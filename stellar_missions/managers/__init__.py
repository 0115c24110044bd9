"""Manager modules for Stellar Missions.

Managers orchestrate workflows and coordinate between engines.
They are stateful, event-aware, and handle cross-cutting concerns.
"""

from .base_manager import BaseManager
from .economy_manager import CurrencyLedger, UnlockStore
from .progress_manager import ProgressManager
from .reset_manager import ResetManager
from .reward_manager import RewardManager
from .ui_manager import UIManager

__all__ = [
    "BaseManager",
    "CurrencyLedger",
    "ProgressManager",
    "ResetManager",
    "RewardManager",
    "UIManager",
    "UnlockStore",
]
