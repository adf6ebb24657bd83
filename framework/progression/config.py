"""
Progression configuration - ladders, ranks and the skill tree.

A ProgressionConfig is immutable once built. Trackers hold a read-only
reference to it for their whole lifetime.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_serializer, model_validator

from engine.resources.database import Database
from framework.progression.ladder import is_strictly_increasing
from framework.progression.skills import SkillDefinition, find_cycle


logger = logging.getLogger(__name__)


DEFAULT_LADDER = (1000, 2500, 5000, 10000, 20000)

DEFAULT_RANK_THRESHOLDS = (0, 5000, 15000, 30000, 50000, 75000, 100000)

DEFAULT_RANK_NAMES = (
    "Novice",
    "Adept",
    "Expert",
    "Master",
    "Grandmaster",
    "Legend",
    "Mythic",
)


def _skill(name: str, description: str, cost: int, *prerequisites: str) -> SkillDefinition:
    return SkillDefinition(
        display_name=name,
        description=description,
        cost=cost,
        prerequisites=frozenset(prerequisites),
    )


DEFAULT_SKILL_TREE: dict[str, SkillDefinition] = {
    # Movement
    "DoubleJump": _skill("Double Jump", "Allows a second jump while in the air", 1),
    "AirDash": _skill("Air Dash", "Dash quickly through the air", 2, "DoubleJump"),
    "WallRun": _skill("Wall Run", "Run along walls for a short time", 2, "DoubleJump"),
    # Rift
    "RiftChain": _skill("Rift Chain", "Chain multiple rifts together", 3, "AirDash"),
    "RiftSurge": _skill("Rift Surge", "Gain a burst of speed after rifting", 2, "RiftChain"),
    "RiftCounter": _skill("Rift Counter", "Counter enemy attacks with a rift", 4, "RiftSurge"),
    # Combat
    "AerialRecovery": _skill(
        "Aerial Recovery", "Recover quickly when knocked into the air", 2, "DoubleJump"
    ),
    "StyleBoost": _skill("Style Boost", "Gain more style points from actions", 3, "AerialRecovery"),
    "MomentumMastery": _skill("Momentum Mastery", "Momentum decays slower", 4, "StyleBoost"),
}


class ProgressionConfig(BaseModel):
    """
    Static progression data supplied by the host.

    Attributes:
        level_xp_thresholds: Index i is the XP needed to reach level i + 2
        rank_thresholds: Index i is the minimum XP for rank i
        rank_names: Display names parallel to rank_thresholds
        rift_energy_thresholds: Ladder for rift attunement
        style_experience_thresholds: Ladder for style mastery
        skill_tree: Skill id -> definition, read-only once built

    Raises:
        pydantic.ValidationError: If the skill tree has a prerequisite cycle
    """
    model_config = ConfigDict(frozen=True)

    level_xp_thresholds: tuple[int, ...] = DEFAULT_LADDER
    rank_thresholds: tuple[int, ...] = DEFAULT_RANK_THRESHOLDS
    rank_names: tuple[str, ...] = DEFAULT_RANK_NAMES
    rift_energy_thresholds: tuple[int, ...] = DEFAULT_LADDER
    style_experience_thresholds: tuple[int, ...] = DEFAULT_LADDER
    skill_tree: Mapping[str, SkillDefinition] = Field(
        default_factory=lambda: dict(DEFAULT_SKILL_TREE)
    )

    @model_validator(mode="after")
    def _check(self) -> ProgressionConfig:
        cycle = find_cycle(self.skill_tree)
        if cycle:
            raise ValueError(f"Skill prerequisite cycle: {' -> '.join(cycle)}")

        # Degraded-but-usable data is reported, not repaired
        for field_name in (
            "level_xp_thresholds",
            "rank_thresholds",
            "rift_energy_thresholds",
            "style_experience_thresholds",
        ):
            if not is_strictly_increasing(getattr(self, field_name)):
                logger.warning(f"{field_name} is not strictly increasing")

        if len(self.rank_names) != len(self.rank_thresholds):
            logger.warning(
                f"{len(self.rank_names)} rank names for "
                f"{len(self.rank_thresholds)} rank thresholds"
            )

        for skill_id, skill in self.skill_tree.items():
            unknown = sorted(p for p in skill.prerequisites if p not in self.skill_tree)
            if unknown:
                logger.warning(f"Skill {skill_id} can never unlock, unknown prerequisites: {unknown}")

        # Frozen covers attribute assignment only; the tree itself must not change
        object.__setattr__(self, "skill_tree", MappingProxyType(dict(self.skill_tree)))
        return self

    @field_serializer("skill_tree")
    def _dump_skill_tree(
        self, skill_tree: Mapping[str, SkillDefinition]
    ) -> dict[str, SkillDefinition]:
        return dict(skill_tree)

    @classmethod
    def default(cls) -> ProgressionConfig:
        """The stock ladders, ranks and skill tree."""
        return cls()

    @classmethod
    def from_records(
        cls,
        progression: Mapping[str, Any],
        skills: Mapping[str, Mapping[str, Any]] | None = None,
    ) -> ProgressionConfig:
        """
        Build a config from loaded data records.

        Args:
            progression: A progression record (ladders and ranks). Missing
                keys fall back to the defaults.
            skills: Skill id -> skill record. None keeps the default tree.
        """
        data: dict[str, Any] = {}
        for key in (
            "level_xp_thresholds",
            "rift_energy_thresholds",
            "style_experience_thresholds",
        ):
            if key in progression:
                data[key] = tuple(progression[key])

        if "ranks" in progression:
            ranks = sorted(progression["ranks"], key=lambda r: r["min_xp"])
            data["rank_thresholds"] = tuple(r["min_xp"] for r in ranks)
            data["rank_names"] = tuple(r["name"] for r in ranks)

        if skills is not None:
            data["skill_tree"] = {
                skill_id: SkillDefinition(
                    display_name=record.get("display_name", skill_id),
                    description=record.get("description", ""),
                    cost=record.get("cost", 1),
                    level_requirement=record.get("level_requirement", 1),
                    prerequisites=frozenset(record.get("prerequisites", [])),
                )
                for skill_id, record in skills.items()
            }

        return cls(**data)


def load_progression_config(database: Database, config_id: str = "default") -> ProgressionConfig:
    """
    Build a config from a loaded Database.

    Falls back to the default ladders when the progression record is
    missing, and to the default skill tree when no skills were loaded.
    """
    record = database.get_progression(config_id)
    if record is None:
        logger.warning(f"No progression config '{config_id}', using defaults")
        record = {}
    return ProgressionConfig.from_records(record, database.skills or None)
