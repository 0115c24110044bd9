"""Engine modules for Stellar Missions.

Contains pure computation engines:
- mission_engine: Progress rules, completion, claims, active-set ordering
- schedule_engine: Daily/weekly boundary checks and next-reset times
"""

from .mission_engine import MissionEngine, NormalizationResult, ProgressEffect
from .schedule_engine import BEGINNING_OF_TIME, ResetScheduleEngine

__all__ = [
    "BEGINNING_OF_TIME",
    "MissionEngine",
    "NormalizationResult",
    "ProgressEffect",
    "ResetScheduleEngine",
]
