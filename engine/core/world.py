"""
World container for entities.

The World holds every live entity, indexes them by component type,
and announces entity/component changes on its event bus.

Usage:
    world = World()
    hero = world.create_entity("Hero")
    hero.add(ProgressionState())

    for entity in world.get_entities_with(ProgressionState):
        ...
"""

from __future__ import annotations

from typing import Iterator

from engine.core.component import Component
from engine.core.entity import Entity
from engine.core.events import EngineEvent, EventBus


class World:
    """
    Container for entities.

    Provides:
    - Entity management (create, add, destroy, lookup by id)
    - Component indices for entity queries
    - Event bus integration
    """

    def __init__(self, event_bus: EventBus | None = None):
        self.event_bus = event_bus or EventBus()

        self._entities: dict[int, Entity] = {}

        # Component index: component_type -> set of entity IDs
        self._component_index: dict[type[Component], set[int]] = {}

    # Entity Management

    def create_entity(self, name: str = "") -> Entity:
        """Create a new entity in this world."""
        entity = Entity(name)
        self._add_entity(entity)
        return entity

    def add_entity(self, entity: Entity) -> Entity:
        """
        Add an existing entity to this world.

        Raises:
            ValueError: If the entity is already in the world
        """
        if entity.id in self._entities:
            raise ValueError(f"Entity {entity.id} already in world")

        self._add_entity(entity)
        return entity

    def _add_entity(self, entity: Entity) -> None:
        entity._world = self
        self._entities[entity.id] = entity

        for component in entity.components:
            self._index_component(entity, type(component))

        self.event_bus.publish(EngineEvent.ENTITY_CREATED, entity=entity)

    def destroy_entity(self, entity: Entity | int) -> None:
        """
        Remove an entity from the world.

        Args:
            entity: Entity or entity ID to destroy
        """
        entity_id = entity.id if isinstance(entity, Entity) else entity
        removed = self._entities.pop(entity_id, None)
        if removed is None:
            return

        for component in removed.components:
            self._unindex_component(removed, type(component))

        removed._world = None
        self.event_bus.publish(EngineEvent.ENTITY_DESTROYED, entity=removed)

    def get_entity(self, entity_id: int) -> Entity | None:
        """Get entity by ID."""
        return self._entities.get(entity_id)

    @property
    def entities(self) -> Iterator[Entity]:
        return iter(self._entities.values())

    @property
    def entity_count(self) -> int:
        return len(self._entities)

    # Component indexing

    def _index_component(self, entity: Entity, component_type: type[Component]) -> None:
        self._component_index.setdefault(component_type, set()).add(entity.id)

    def _unindex_component(self, entity: Entity, component_type: type[Component]) -> None:
        if component_type in self._component_index:
            self._component_index[component_type].discard(entity.id)

    def _on_component_added(self, entity: Entity, component: Component) -> None:
        """Called when a component is added to an entity."""
        self._index_component(entity, type(component))
        self.event_bus.publish(
            EngineEvent.COMPONENT_ADDED,
            entity=entity,
            component=component,
        )

    def _on_component_removed(self, entity: Entity, component: Component) -> None:
        """Called when a component is removed from an entity."""
        self._unindex_component(entity, type(component))
        self.event_bus.publish(
            EngineEvent.COMPONENT_REMOVED,
            entity=entity,
            component=component,
        )

    # Queries

    def get_entities_with(self, *component_types: type[Component]) -> Iterator[Entity]:
        """
        Get all entities that have ALL specified components.

        Args:
            *component_types: Component types to match
        """
        if not component_types:
            return

        candidate_ids = set(self._component_index.get(component_types[0], ()))
        for comp_type in component_types[1:]:
            candidate_ids &= self._component_index.get(comp_type, set())

        for entity_id in sorted(candidate_ids):
            entity = self._entities.get(entity_id)
            if entity:
                yield entity
