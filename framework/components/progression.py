"""
Progression component - the per-character stat container.
"""

from __future__ import annotations

from pydantic import Field

from engine.core.component import Component, register_component


@register_component
class ProgressionState(Component):
    """
    All numeric progression stats for one character.

    Attributes:
        current_xp: Cumulative experience points
        current_level: Character level (1-based)
        current_rank: Index into the rank ladder
        skill_points: Unspent skill points
        unlocked_skills: Ids of unlocked skill tree nodes
        style_orbs: Currency
        rift_orbs: Currency
        raritanium_shards: Currency
        rift_energy: Resource feeding the rift attunement ladder
        rift_attunement_level: Rift attunement level (1-based)
        style_experience: Resource feeding the style mastery ladder
        style_mastery_level: Style mastery level (1-based)
    """
    current_xp: int = Field(default=0, ge=0)
    current_level: int = Field(default=1, ge=1)
    current_rank: int = Field(default=0, ge=0)

    # Not clamped: add_skill_points accepts negative grants as-is
    skill_points: int = 0
    unlocked_skills: set[str] = Field(default_factory=set)

    style_orbs: int = Field(default=0, ge=0)
    rift_orbs: int = Field(default=0, ge=0)
    raritanium_shards: int = Field(default=0, ge=0)

    rift_energy: int = Field(default=0, ge=0)
    rift_attunement_level: int = Field(default=1, ge=1)

    style_experience: int = Field(default=0, ge=0)
    style_mastery_level: int = Field(default=1, ge=1)

    def restore_from(self, other: ProgressionState) -> None:
        """Copy every field of another state into this one, in place."""
        for name in type(self).model_fields:
            value = getattr(other, name)
            if isinstance(value, set):
                value = set(value)
            setattr(self, name, value)
