"""
Skill system - skill definitions, the prerequisite graph, unlocking.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from framework.progression.base import ProgressionModel
from framework.progression.events import ProgressionEvent


logger = logging.getLogger(__name__)


class SkillDefinition(BaseModel):
    """
    Complete definition of an unlockable skill.

    Attributes:
        display_name: Name shown in the skill tree
        description: Tooltip text
        cost: Skill points spent on unlock
        level_requirement: Minimum character level
        prerequisites: Skill ids that must already be unlocked
    """
    model_config = ConfigDict(frozen=True)

    display_name: str = "Skill"
    description: str = "A skill that can be unlocked"
    cost: int = Field(default=1, ge=0)
    level_requirement: int = Field(default=1, ge=1)
    prerequisites: frozenset[str] = frozenset()


def find_cycle(skill_tree: Mapping[str, SkillDefinition]) -> Optional[list[str]]:
    """
    Find a prerequisite cycle in a skill tree.

    Prerequisites that name unknown skills are ignored here.

    Returns:
        The skill ids forming the cycle (first id repeated at the end),
        or None if the graph is acyclic.
    """
    visiting: list[str] = []
    visited: set[str] = set()

    def dfs(current: str) -> Optional[list[str]]:
        if current in visited:
            return None
        if current in visiting:
            start = visiting.index(current)
            return visiting[start:] + [current]
        visiting.append(current)
        for prereq in sorted(skill_tree[current].prerequisites):
            if prereq in skill_tree:
                cycle = dfs(prereq)
                if cycle:
                    return cycle
        visiting.pop()
        visited.add(current)
        return None

    for skill_id in skill_tree:
        cycle = dfs(skill_id)
        if cycle:
            return cycle
    return None


class SkillGraph(ProgressionModel):
    """
    Skill points and the unlocked set over a prerequisite DAG.

    Unlock checks always read the current state, so a points spend or a
    level change between can_unlock() and unlock() is picked up.
    """

    def get_skill(self, skill_id: str) -> Optional[SkillDefinition]:
        """Get a skill definition."""
        return self.config.skill_tree.get(skill_id)

    def has_skill(self, skill_id: str) -> bool:
        """Check if a skill is unlocked."""
        return skill_id in self.state.unlocked_skills

    def can_unlock(self, skill_id: str) -> bool:
        """Check if a skill can be unlocked right now."""
        skill = self.config.skill_tree.get(skill_id)
        if not skill:
            return False

        if skill_id in self.state.unlocked_skills:
            return False

        if self.state.skill_points < skill.cost:
            return False

        if self.state.current_level < skill.level_requirement:
            return False

        for prereq in skill.prerequisites:
            if prereq not in self.state.unlocked_skills:
                return False

        return True

    def unlock(self, skill_id: str) -> bool:
        """
        Unlock a skill, spending its cost.

        Returns:
            True if unlocked, False (with nothing changed) otherwise
        """
        if not self.can_unlock(skill_id):
            return False

        skill = self.config.skill_tree[skill_id]
        self.state.skill_points -= skill.cost
        self.state.unlocked_skills.add(skill_id)
        logger.debug(f"Unlocked skill {skill_id} for {skill.cost} points")

        self._publish(ProgressionEvent.SKILL_UNLOCKED, skill_id=skill_id)
        self._publish(
            ProgressionEvent.SKILL_POINTS_CHANGED,
            skill_points=self.state.skill_points,
        )
        self._save()
        return True

    def add_skill_points(self, points: int) -> None:
        """Grant (or, with a negative value, remove) skill points."""
        self.state.skill_points += points
        self._publish(
            ProgressionEvent.SKILL_POINTS_CHANGED,
            skill_points=self.state.skill_points,
        )
        self._save()

    def get_missing_prerequisites(self, skill_id: str) -> list[str]:
        """Prerequisites of a skill that are not unlocked yet."""
        skill = self.config.skill_tree.get(skill_id)
        if not skill:
            return []
        return sorted(p for p in skill.prerequisites if p not in self.state.unlocked_skills)

    def get_unlockable_skills(self) -> list[str]:
        """Get all skills that can be unlocked right now."""
        return [skill_id for skill_id in self.config.skill_tree if self.can_unlock(skill_id)]
