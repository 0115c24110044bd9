"""Type definitions for Stellar Missions data structures.

HYBRID APPROACH (dataclasses + TypedDict + Protocol)
====================================================

1. **Frozen dataclasses** for the catalog and for everything handed to
   callers: MissionTemplate, RewardSpec, Mission snapshots. Callers can read
   them but never mutate engine state through them.

2. **A mutable dataclass** for the in-memory progress table
   (MissionProgress). Only the coordinator and its managers hold references.

3. **TypedDict** for serialized shapes with fixed keys: catalog definitions,
   persisted progress records, event payloads.

4. **Protocol** for the external collaborators (key-value persistence,
   currency, unlocks, clock) so any object with the right methods plugs in.

IMPORTANT: This file must NOT import from coordinator.py, managers or
engines to avoid circular dependencies. Only import from const.py and
typing machinery.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Literal, NotRequired, Protocol, TypedDict

from . import const
from .utils.math_utils import calculate_percentage

# =============================================================================
# Type Aliases (for readability)
# =============================================================================

MissionId = str
ObjectiveType = Literal[
    "reach_score",
    "survive_time",
    "play_games",
    "avoid_obstacles",
    "reach_high_score",
    "collect_currency",
    "use_planet",
    "daily_challenge",
]
MissionCategory = Literal["total", "daily", "weekly"]
RewardType = Literal["currency", "unlock_item"]
ISODate = str  # "2026-01-18"


# =============================================================================
# Catalog Definitions (validated input for MissionRegistry)
# =============================================================================


class RewardDefinition(TypedDict):
    """Raw reward definition as written in the catalog."""

    type: RewardType
    amount: NotRequired[int]
    item_id: NotRequired[str]


class MissionDefinition(TypedDict):
    """Raw mission definition as written in the catalog."""

    id: MissionId
    title: str
    description: str
    objective_type: ObjectiveType
    target_value: int
    reward: RewardDefinition
    category: NotRequired[MissionCategory]
    priority: NotRequired[int]


# =============================================================================
# Persisted Shapes
# =============================================================================

# Keys are camelCase on disk, so the functional TypedDict syntax is used.
ProgressRecord = TypedDict(
    "ProgressRecord",
    {
        "currentProgress": int,
        "isCompleted": bool,
        "isClaimed": bool,
    },
)


class MissionsResetPayload(TypedDict):
    """Payload of the missions_reset signal."""

    category: MissionCategory
    reset_ids: list[MissionId]
    forfeited_ids: list[MissionId]
    next_reset_at: str


class MissionsOptions(TypedDict, total=False):
    """Validated configuration options (see OPTIONS_SCHEMA)."""

    time_zone: str
    instance_id: str
    key_prefix: str
    check_resets_on_access: bool


# =============================================================================
# Catalog Entities (immutable)
# =============================================================================


@dataclass(frozen=True)
class RewardSpec:
    """Reward granted when a completed mission is claimed."""

    type: RewardType
    amount: int = 0
    item_id: str = ""

    @property
    def description(self) -> str:
        """Human-readable reward text, derived from type and value."""
        if self.type == const.REWARD_TYPE_CURRENCY:
            return const.REWARD_DESCRIPTION_CURRENCY.format(amount=self.amount)
        if self.type == const.REWARD_TYPE_UNLOCK_ITEM:
            return const.REWARD_DESCRIPTION_UNLOCK.format(item_id=self.item_id)
        return const.REWARD_DESCRIPTION_DEFAULT


@dataclass(frozen=True)
class MissionTemplate:
    """Immutable catalog entry. Created once at startup."""

    id: MissionId
    title: str
    description: str
    objective_type: ObjectiveType
    target_value: int
    reward: RewardSpec
    category: MissionCategory = "total"
    priority: int = const.DEFAULT_MISSION_PRIORITY

    @property
    def is_periodic(self) -> bool:
        """True for daily and weekly missions."""
        return self.category in const.PERIODIC_CATEGORIES


# =============================================================================
# Progress (mutable, internal)
# =============================================================================


@dataclass
class MissionProgress:
    """Per-mission progress record held in the coordinator's progress table."""

    current_progress: int = 0
    is_completed: bool = False
    is_claimed: bool = False
    next_reset_at: datetime | None = None

    def to_record(self) -> ProgressRecord:
        """Serialize to the persisted record shape."""
        return {
            const.DATA_PROGRESS_CURRENT: self.current_progress,
            const.DATA_PROGRESS_COMPLETED: self.is_completed,
            const.DATA_PROGRESS_CLAIMED: self.is_claimed,
        }


# =============================================================================
# Mission Snapshot (externally visible)
# =============================================================================


@dataclass(frozen=True)
class Mission:
    """Read-only view of a template joined with its current progress."""

    template: MissionTemplate
    current_progress: int
    is_completed: bool
    is_claimed: bool
    next_reset_at: datetime | None = None

    @classmethod
    def from_parts(
        cls, template: MissionTemplate, progress: MissionProgress
    ) -> Mission:
        """Build a snapshot; later mutations of `progress` do not leak in."""
        return cls(
            template=template,
            current_progress=progress.current_progress,
            is_completed=progress.is_completed,
            is_claimed=progress.is_claimed,
            next_reset_at=progress.next_reset_at,
        )

    @property
    def id(self) -> MissionId:
        return self.template.id

    @property
    def title(self) -> str:
        return self.template.title

    @property
    def description(self) -> str:
        return self.template.description

    @property
    def objective_type(self) -> ObjectiveType:
        return self.template.objective_type

    @property
    def target_value(self) -> int:
        return self.template.target_value

    @property
    def reward(self) -> RewardSpec:
        return self.template.reward

    @property
    def category(self) -> MissionCategory:
        return self.template.category

    @property
    def priority(self) -> int:
        return self.template.priority

    @property
    def is_claimable(self) -> bool:
        """Completed and still waiting for its reward to be claimed."""
        return self.is_completed and not self.is_claimed

    @property
    def progress_percentage(self) -> float:
        """Progress as 0-100 with two-decimal rounding."""
        return calculate_percentage(
            self.current_progress, self.target_value, const.DATA_FLOAT_PRECISION
        )

    @property
    def state(self) -> str:
        """Lifecycle state derived from the progress flags."""
        if self.is_claimed:
            return const.MISSION_STATE_CLAIMED
        if self.is_completed:
            return const.MISSION_STATE_COMPLETED
        if self.current_progress > 0:
            return const.MISSION_STATE_IN_PROGRESS
        return const.MISSION_STATE_NOT_STARTED


# =============================================================================
# Gameplay Input
# =============================================================================


@dataclass(frozen=True)
class RunSummary:
    """Outcome of one finished run, reported in a single call.

    Attributes:
        score: Final score of the run
        survived_seconds: Whole seconds survived
        obstacles_avoided: Obstacles dodged during the run
        currency_collected: Shards picked up during the run
        is_new_high_score: Whether the score beat the stored record
        planet_id: Planet used for the run, if any
    """

    score: int = 0
    survived_seconds: int = 0
    obstacles_avoided: int = 0
    currency_collected: int = 0
    is_new_high_score: bool = False
    planet_id: str | None = None


# =============================================================================
# Collaborator Protocols
# =============================================================================


class PreferencesStore(Protocol):
    """Key-value persistence shared with unrelated subsystems."""

    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...

    def has(self, key: str) -> bool: ...

    def delete(self, key: str) -> None: ...

    def keys(self) -> list[str]: ...

    def save(self) -> None: ...


class CurrencyLedgerProtocol(Protocol):
    """Grants soft currency."""

    def add_currency(self, amount: int) -> None: ...


class UnlockStoreProtocol(Protocol):
    """Boolean unlock flags keyed by item id."""

    def set_unlocked(self, item_id: str) -> None: ...


class Clock(Protocol):
    """Source of the current time (timezone-aware)."""

    def now(self) -> datetime: ...
