# File: storage_manager.py
"""Handles durable per-mission progress records for Stellar Missions.

Each mission's progress lives under its own key in the shared key-value
store (`mission_progress_<id>`), serialized as a small JSON object:

    {"currentProgress": 12, "isCompleted": false, "isClaimed": false}

The periodic reset bookkeeping lives next to it as two `YYYY-MM-DD` scalars.
Loading never raises: corrupt or out-of-range records are repaired or
replaced by a zero default, and the repair is logged.
"""

from __future__ import annotations

from datetime import date
import json
from typing import TYPE_CHECKING, Any

import voluptuous as vol

from . import const
from .engines.mission_engine import MissionEngine
from .engines.schedule_engine import BEGINNING_OF_TIME, ResetScheduleEngine
from .type_defs import MissionProgress
from .utils.dt_utils import dt_format_date, dt_parse_date

if TYPE_CHECKING:
    from .mission_registry import MissionRegistry
    from .type_defs import MissionId, PreferencesStore, ProgressRecord


# Persisted progress record. Missing flags default to False; unknown keys are
# dropped so records written by newer builds still load.
PROGRESS_RECORD_SCHEMA = vol.Schema(
    {
        vol.Required(const.DATA_PROGRESS_CURRENT): int,
        vol.Optional(const.DATA_PROGRESS_COMPLETED, default=False): bool,
        vol.Optional(const.DATA_PROGRESS_CLAIMED, default=False): bool,
    },
    extra=vol.REMOVE_EXTRA,
)


# ==============================================================================
# EXCEPTIONS
# ==============================================================================


class MissionRecordError(Exception):
    """A persisted progress record could not be decoded.

    Attributes:
        key: Storage key the record was read from
        reason: Short description of what was wrong
    """

    def __init__(self, key: str, reason: str) -> None:
        """Initialize MissionRecordError.

        Args:
            key: Storage key the record was read from
            reason: Short description of what was wrong
        """
        self.key = key
        self.reason = reason
        super().__init__(f"Invalid progress record '{key}': {reason}")


def parse_progress_record(key: str, raw: Any) -> ProgressRecord:
    """Decode and validate one stored progress record.

    Accepts the JSON text written by MissionStore.save, or an already
    decoded mapping (stores that keep native values).

    Raises:
        MissionRecordError: Record is not JSON, not an object, or fails
            PROGRESS_RECORD_SCHEMA.
    """
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except (ValueError, RecursionError) as err:
            raise MissionRecordError(key, f"not valid JSON ({err})") from err

    if not isinstance(raw, dict):
        raise MissionRecordError(key, f"expected an object, got {type(raw).__name__}")

    try:
        return PROGRESS_RECORD_SCHEMA(raw)
    except vol.Invalid as err:
        raise MissionRecordError(key, str(err)) from err


class MissionStore:
    """Loads and saves mission progress on top of a PreferencesStore.

    The preferences collaborator is shared with other subsystems, so this
    class only ever touches its own keys and never deletes anything.
    """

    def __init__(
        self,
        preferences: PreferencesStore,
        registry: MissionRegistry,
        key_prefix: str = const.STORAGE_KEY_PROGRESS_PREFIX,
    ) -> None:
        """Initialize the mission store.

        Args:
            preferences: Key-value persistence collaborator.
            registry: Catalog used to look up targets while normalizing.
            key_prefix: Prefix of the per-mission progress keys.
        """
        self._preferences = preferences
        self._registry = registry
        self._key_prefix = key_prefix

    @property
    def preferences(self) -> PreferencesStore:
        """The underlying key-value store."""
        return self._preferences

    def progress_key(self, mission_id: MissionId) -> str:
        """Storage key holding a mission's progress record."""
        return f"{self._key_prefix}{mission_id}"

    # ------------------------------------------------------------------
    # Progress records
    # ------------------------------------------------------------------

    def load(self, mission_id: MissionId) -> MissionProgress:
        """Load the progress of one mission.

        Returns a zero default when the record is absent or unreadable.
        Out-of-range progress is clamped, completion is re-derived and a
        claimed record below target is raised to target.
        """
        template = self._registry.get_template(mission_id)
        if template is None:
            const.LOGGER.debug(
                "MissionStore.load: No template for mission '%s'", mission_id
            )
            return MissionProgress()

        key = self.progress_key(mission_id)
        raw = self._preferences.get(key)
        if raw is None:
            return MissionProgress()

        try:
            record = parse_progress_record(key, raw)
        except MissionRecordError as err:
            const.LOGGER.warning(
                "WARNING: MissionStore.load: Discarding progress for '%s': %s",
                mission_id,
                err.reason,
            )
            return MissionProgress()

        result = MissionEngine.normalize_record(
            record[const.DATA_PROGRESS_CURRENT],
            record[const.DATA_PROGRESS_COMPLETED],
            record[const.DATA_PROGRESS_CLAIMED],
            template,
        )
        if result.clamped:
            const.LOGGER.warning(
                "WARNING: MissionStore.load: Clamped progress of '%s' from %s to %s",
                mission_id,
                record[const.DATA_PROGRESS_CURRENT],
                result.progress,
            )
        if result.repaired_claim:
            const.LOGGER.warning(
                "WARNING: MissionStore.load: '%s' was claimed below target; "
                "progress raised to %s",
                mission_id,
                result.progress,
            )
        elif result.repaired_completion:
            const.LOGGER.debug(
                "MissionStore.load: Re-derived completion of '%s' as %s",
                mission_id,
                result.is_completed,
            )

        return MissionProgress(
            current_progress=result.progress,
            is_completed=result.is_completed,
            is_claimed=result.is_claimed,
        )

    def load_all(self) -> dict[MissionId, MissionProgress]:
        """Load progress for every template, in registry order."""
        return {
            template.id: self.load(template.id)
            for template in self._registry.get_all_templates()
        }

    def save(self, mission_id: MissionId, progress: MissionProgress) -> None:
        """Persist one mission's progress record and flush."""
        self._preferences.set(
            self.progress_key(mission_id),
            json.dumps(progress.to_record(), separators=(",", ":")),
        )
        self._preferences.save()
        const.LOGGER.debug(
            "MissionStore.save: '%s' progress=%s completed=%s claimed=%s",
            mission_id,
            progress.current_progress,
            progress.is_completed,
            progress.is_claimed,
        )

    def find_orphaned_ids(self) -> list[MissionId]:
        """Ids with stored progress but no template in the registry.

        Orphans are never loaded and never deleted.
        """
        prefix_len = len(self._key_prefix)
        return [
            key[prefix_len:]
            for key in self._preferences.keys()
            if key.startswith(self._key_prefix)
            and key[prefix_len:] not in self._registry
        ]

    # ------------------------------------------------------------------
    # Reset bookkeeping
    # ------------------------------------------------------------------

    def load_last_reset(self, category: str) -> date:
        """Date of the last reset of a periodic category.

        Missing or malformed values read as BEGINNING_OF_TIME, so the first
        scheduler run always resets.
        """
        key = ResetScheduleEngine.LAST_RESET_KEYS[category]
        raw = self._preferences.get(key)
        parsed = dt_parse_date(raw)
        if parsed is None:
            if raw is not None:
                const.LOGGER.warning(
                    "WARNING: MissionStore: Malformed last %s reset date %r, "
                    "treating as never reset",
                    category,
                    raw,
                )
            return BEGINNING_OF_TIME
        return parsed

    def save_last_reset(self, category: str, value: date) -> None:
        """Record the date a periodic category was last reset."""
        self._preferences.set(
            ResetScheduleEngine.LAST_RESET_KEYS[category], dt_format_date(value)
        )
        self._preferences.save()
