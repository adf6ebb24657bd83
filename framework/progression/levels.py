"""
Level and rank model - turns cumulative XP into a level and a rank.
"""

from __future__ import annotations

import logging

from framework.progression import ladder
from framework.progression.base import ProgressionModel
from framework.progression.events import ProgressionEvent


logger = logging.getLogger(__name__)


SKILL_POINTS_PER_LEVEL = 2

UNKNOWN_RANK_NAME = "Unknown Rank"


class LevelRankModel(ProgressionModel):
    """
    Character level and rank, both driven by current_xp.

    The level climbs the level ladder one rung at a time and grants
    SKILL_POINTS_PER_LEVEL per rung. The rank is recomputed from
    scratch against the rank ladder after every grant.
    """

    def add_xp(self, amount: int) -> None:
        """
        Add experience points.

        Publishes LEVEL_UP once per level gained, RANK_UP at most once,
        then XP_GAINED, then persists.

        Args:
            amount: XP to add (expected positive, not enforced)
        """
        if amount <= 0:
            logger.warning(f"Non-positive XP grant: {amount}")

        state = self.state
        state.current_xp += amount
        thresholds = self.config.level_xp_thresholds

        # Re-read state each step; a LEVEL_UP listener may grant more XP
        while ladder.can_climb(state.current_level, state.current_xp, thresholds):
            new_level = state.current_level + 1
            state.current_level = new_level
            state.skill_points += SKILL_POINTS_PER_LEVEL
            logger.debug(f"Level up: {new_level}")
            self._publish(ProgressionEvent.LEVEL_UP, new_level=new_level)

        new_rank = ladder.rank_for(state.current_xp, self.config.rank_thresholds)
        if new_rank != state.current_rank:
            state.current_rank = new_rank
            logger.debug(f"Rank changed: {new_rank}")
            self._publish(ProgressionEvent.RANK_UP, new_rank=new_rank)

        self._publish(
            ProgressionEvent.XP_GAINED,
            amount=amount,
            total=state.current_xp,
        )
        self._save()

    # Rank queries

    def _at_max_rank(self) -> bool:
        return self.state.current_rank >= len(self.config.rank_thresholds) - 1

    def get_xp_to_next_rank(self) -> int:
        """XP needed for the next rank, 0 at the top rank."""
        if self._at_max_rank():
            return 0
        return self.config.rank_thresholds[self.state.current_rank + 1] - self.state.current_xp

    def get_rank_progress(self) -> float:
        """Progress through the current rank band (0-1), 1.0 at the top rank."""
        if self._at_max_rank():
            return 1.0
        thresholds = self.config.rank_thresholds
        rank = self.state.current_rank
        return ladder.band_progress(self.state.current_xp, thresholds[rank], thresholds[rank + 1])

    def get_current_rank_display_name(self) -> str:
        names = self.config.rank_names
        if self.state.current_rank < len(names):
            return names[self.state.current_rank]
        return UNKNOWN_RANK_NAME

    # Level queries

    def get_xp_to_next_level(self) -> int:
        """XP needed for the next level, 0 at the level cap."""
        return ladder.to_next_level(
            self.state.current_level, self.state.current_xp, self.config.level_xp_thresholds
        )

    def get_level_progress(self) -> float:
        """Progress through the current level (0-1), 1.0 at the level cap."""
        return ladder.level_progress(
            self.state.current_level, self.state.current_xp, self.config.level_xp_thresholds
        )
