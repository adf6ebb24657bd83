"""
Core engine module.

Exports:
- Entity: Entity container
- Component, register_component: Component base and registration
- World: Entity container with component queries
- EventBus, Event, EngineEvent: Event system
"""

from engine.core.entity import Entity
from engine.core.component import Component, register_component, get_component_type
from engine.core.world import World
from engine.core.events import EventBus, Event, EngineEvent

__all__ = [
    # ECS
    "Entity",
    "Component",
    "register_component",
    "get_component_type",
    "World",
    # Events
    "EventBus",
    "Event",
    "EngineEvent",
]
