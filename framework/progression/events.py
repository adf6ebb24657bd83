"""
Progression events published on the event bus.

Payload keys per event:
    LEVEL_UP                    new_level
    RANK_UP                     new_rank
    XP_GAINED                   amount, total
    SKILL_POINTS_CHANGED        skill_points
    SKILL_UNLOCKED              skill_id
    CURRENCY_CHANGED            (none)
    RIFT_ATTUNEMENT_LEVEL_UP    new_level
    RIFT_ENERGY_GAINED          amount, total
    RIFT_CAPABILITIES_UPDATED   level
    STYLE_MASTERY_LEVEL_UP      new_level
    STYLE_EXPERIENCE_GAINED     amount, total
    STYLE_CAPABILITIES_UPDATED  level
    PROGRESSION_SAVED           (none)
    PROGRESSION_LOADED          restored
"""

from enum import Enum, auto


class ProgressionEvent(Enum):
    """Character progression events."""
    # Level / rank
    LEVEL_UP = auto()
    RANK_UP = auto()
    XP_GAINED = auto()

    # Skills
    SKILL_POINTS_CHANGED = auto()
    SKILL_UNLOCKED = auto()

    # Currency
    CURRENCY_CHANGED = auto()

    # Rift attunement
    RIFT_ATTUNEMENT_LEVEL_UP = auto()
    RIFT_ENERGY_GAINED = auto()
    RIFT_CAPABILITIES_UPDATED = auto()

    # Style mastery
    STYLE_MASTERY_LEVEL_UP = auto()
    STYLE_EXPERIENCE_GAINED = auto()
    STYLE_CAPABILITIES_UPDATED = auto()

    # Persistence
    PROGRESSION_SAVED = auto()
    PROGRESSION_LOADED = auto()
