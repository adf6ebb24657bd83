"""
Per-character progression lookup.

Each character entity owns its own ProgressionState component and
tracker; the registry maps entity ids to trackers and drives the spawn
lifecycle (attach, restore, refresh capabilities).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator, Optional

from engine.core.entity import Entity
from engine.core.events import EventBus
from engine.core.world import World
from framework.components.progression import ProgressionState
from framework.progression.config import ProgressionConfig
from framework.progression.tracker import ProgressionTracker

if TYPE_CHECKING:
    from framework.save.manager import ProgressionStore


logger = logging.getLogger(__name__)


class ProgressionRegistry:
    """
    Owns the trackers of every progression-enabled entity in a world.

    Usage:
        registry = ProgressionRegistry(world, store=saves)
        hero = world.create_entity("Hero")
        tracker = registry.spawn(hero)
        registry.get(hero.id).add_xp(500)
    """

    def __init__(
        self,
        world: World,
        config: ProgressionConfig | None = None,
        event_bus: EventBus | None = None,
        store: Optional[ProgressionStore] = None,
    ):
        self.world = world
        self.config = config if config is not None else ProgressionConfig.default()
        self.event_bus = event_bus or world.event_bus
        self.store = store
        self._trackers: dict[int, ProgressionTracker] = {}

    def spawn(self, entity: Entity, slot: str | None = None) -> ProgressionTracker:
        """
        Give an entity progression and restore it.

        Args:
            entity: The character entity
            slot: Save slot; defaults to one derived from the entity id

        Raises:
            ValueError: If the entity already has progression
        """
        if entity.id in self._trackers:
            raise ValueError(f"Entity {entity.name} already has progression")

        if entity.world is None:
            self.world.add_entity(entity)

        state = entity.try_get(ProgressionState)
        if state is None:
            state = entity.add(ProgressionState())
        tracker = ProgressionTracker(
            state=state,
            config=self.config,
            event_bus=self.event_bus,
            store=self.store,
            slot=slot or f"entity-{entity.id}",
        )
        self._trackers[entity.id] = tracker
        tracker.initialize()
        logger.debug(f"Progression spawned for {entity.name} (slot {tracker.slot})")
        return tracker

    def get(self, entity_id: int) -> Optional[ProgressionTracker]:
        """Get the tracker for an entity id."""
        return self._trackers.get(entity_id)

    def despawn(self, entity_id: int) -> None:
        """Drop an entity's tracker and remove the entity from the world."""
        if self._trackers.pop(entity_id, None) is None:
            return
        self.world.destroy_entity(entity_id)

    def __contains__(self, entity_id: int) -> bool:
        return entity_id in self._trackers

    def __iter__(self) -> Iterator[ProgressionTracker]:
        return iter(list(self._trackers.values()))

    def __len__(self) -> int:
        return len(self._trackers)
