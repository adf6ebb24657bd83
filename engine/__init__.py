"""
Progression Engine

Entity/component containers and the typed event bus the progression
framework is built on.

Quick Start:
    from engine.core import World, EventBus

    world = World()
    hero = world.create_entity("Hero")
"""

__version__ = "0.1.0"

# Re-export core components for convenience
from engine.core import (
    Entity,
    Component,
    register_component,
    World,
    EventBus,
    Event,
    EngineEvent,
)

__all__ = [
    # ECS
    "Entity",
    "Component",
    "register_component",
    "World",
    # Events
    "EventBus",
    "Event",
    "EngineEvent",
]
