"""
Progression module - levels, ranks, skills, mastery tracks, currencies.

Provides:
- XP levels and ranks
- A prerequisite-gated skill tree
- Rift attunement and style mastery tracks
- A currency ledger
- A per-character tracker and registry
"""

from framework.progression.config import ProgressionConfig, load_progression_config
from framework.progression.currency import Currency, CurrencyLedger
from framework.progression.events import ProgressionEvent
from framework.progression.levels import LevelRankModel, SKILL_POINTS_PER_LEVEL
from framework.progression.mastery import (
    MasteryTrack,
    TrackBinding,
    RIFT_ATTUNEMENT,
    STYLE_MASTERY,
)
from framework.progression.registry import ProgressionRegistry
from framework.progression.skills import SkillDefinition, SkillGraph
from framework.progression.tracker import ProgressionTracker

__all__ = [
    # Config
    "ProgressionConfig",
    "load_progression_config",
    "SkillDefinition",
    # Events
    "ProgressionEvent",
    # Models
    "LevelRankModel",
    "SKILL_POINTS_PER_LEVEL",
    "SkillGraph",
    "MasteryTrack",
    "TrackBinding",
    "RIFT_ATTUNEMENT",
    "STYLE_MASTERY",
    "Currency",
    "CurrencyLedger",
    # Tracker
    "ProgressionTracker",
    "ProgressionRegistry",
]
