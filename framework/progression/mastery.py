"""
Secondary mastery tracks - rift attunement and style mastery.

Both tracks run the same ladder algorithm as the character level, over
their own resource counter and thresholds, and are independent of XP.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from framework.progression import ladder
from framework.progression.base import ProgressionModel
from framework.progression.events import ProgressionEvent


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrackBinding:
    """Which state fields, thresholds and events a mastery track uses."""
    name: str
    resource_field: str
    level_field: str
    thresholds_field: str
    level_up_event: ProgressionEvent
    gained_event: ProgressionEvent
    capabilities_event: ProgressionEvent


RIFT_ATTUNEMENT = TrackBinding(
    name="rift_attunement",
    resource_field="rift_energy",
    level_field="rift_attunement_level",
    thresholds_field="rift_energy_thresholds",
    level_up_event=ProgressionEvent.RIFT_ATTUNEMENT_LEVEL_UP,
    gained_event=ProgressionEvent.RIFT_ENERGY_GAINED,
    capabilities_event=ProgressionEvent.RIFT_CAPABILITIES_UPDATED,
)

STYLE_MASTERY = TrackBinding(
    name="style_mastery",
    resource_field="style_experience",
    level_field="style_mastery_level",
    thresholds_field="style_experience_thresholds",
    level_up_event=ProgressionEvent.STYLE_MASTERY_LEVEL_UP,
    gained_event=ProgressionEvent.STYLE_EXPERIENCE_GAINED,
    capabilities_event=ProgressionEvent.STYLE_CAPABILITIES_UPDATED,
)


class MasteryTrack(ProgressionModel):
    """A resource counter climbing its own threshold ladder."""

    def __init__(self, binding: TrackBinding, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.binding = binding

    @property
    def resource(self) -> int:
        return getattr(self.state, self.binding.resource_field)

    @property
    def level(self) -> int:
        return getattr(self.state, self.binding.level_field)

    @property
    def thresholds(self) -> tuple[int, ...]:
        return getattr(self.config, self.binding.thresholds_field)

    def add(self, amount: int) -> None:
        """
        Add to the track's resource.

        Each level gained publishes the level-up event followed by a
        capabilities refresh. The gained event comes last, then persist.
        """
        binding = self.binding
        if amount <= 0:
            logger.warning(f"Non-positive {binding.resource_field} grant: {amount}")

        setattr(self.state, binding.resource_field, self.resource + amount)

        while ladder.can_climb(self.level, self.resource, self.thresholds):
            new_level = self.level + 1
            setattr(self.state, binding.level_field, new_level)
            logger.debug(f"{binding.name} level up: {new_level}")
            self._publish(binding.level_up_event, new_level=new_level)
            self.update_capabilities()

        self._publish(binding.gained_event, amount=amount, total=self.resource)
        self._save()

    def update_capabilities(self) -> None:
        """Announce the current level so dependent systems can re-sync."""
        self._publish(self.binding.capabilities_event, level=self.level)

    def get_to_next_level(self) -> int:
        return ladder.to_next_level(self.level, self.resource, self.thresholds)

    def get_progress(self) -> float:
        return ladder.level_progress(self.level, self.resource, self.thresholds)
