import pytest
from pydantic import ValidationError
from engine.core.entity import Entity
from engine.core.component import Component, get_component_type
from engine.core.events import EngineEvent
from framework.components.progression import ProgressionState

class Wallet(Component):
    gold: int = 0

class Badge(Component):
    title: str = ""

def test_entity_creation():
    e = Entity()
    assert e.id > 0
    assert e.name == f"Entity_{e.id}"

def test_add_get_component():
    e = Entity()
    w = Wallet(gold=10)
    e.add(w)

    retrieved = e.get(Wallet)
    assert retrieved is w
    assert retrieved.gold == 10
    assert w.entity_id == e.id

def test_duplicate_component_rejected():
    e = Entity()
    e.add(Wallet())
    with pytest.raises(ValueError):
        e.add(Wallet())

def test_remove_component():
    e = Entity()
    e.add(Wallet())
    assert e.has(Wallet)

    e.remove(Wallet)
    assert not e.has(Wallet)
    assert e.try_get(Wallet) is None
    with pytest.raises(KeyError):
        e.get(Wallet)

def test_component_validation():
    with pytest.raises(ValidationError):
        Wallet(gold={"invalid": "type"})

def test_progression_state_bounds():
    state = ProgressionState()
    with pytest.raises(ValidationError):
        state.current_level = 0
    with pytest.raises(ValidationError):
        state.style_orbs = -1

    # Skill points are not clamped
    state.skill_points = -3
    assert state.skill_points == -3

def test_progression_state_registered():
    assert get_component_type("ProgressionState") is ProgressionState

def test_world_entity_management(world):
    e = Entity("Hero")
    e.add(Wallet())
    world.add_entity(e)

    assert world.entity_count == 1
    assert world.get_entity(e.id) is e

    results = list(world.get_entities_with(Wallet))
    assert results == [e]

    assert list(world.get_entities_with(Badge)) == []
    assert list(world.get_entities_with(Wallet, Badge)) == []

    with pytest.raises(ValueError):
        world.add_entity(e)

def test_world_indexes_components_added_later(world):
    e = world.create_entity("Hero")
    e.add(Badge(title="Novice"))

    assert list(world.get_entities_with(Badge)) == [e]

    e.remove(Badge)
    assert list(world.get_entities_with(Badge)) == []

def test_world_destroy(world):
    destroyed = []
    world.event_bus.subscribe(EngineEvent.ENTITY_DESTROYED, lambda ev: destroyed.append(ev["entity"]), weak=False)

    e = world.create_entity()
    e.add(Wallet())
    world.destroy_entity(e)

    assert world.entity_count == 0
    assert e.world is None
    assert destroyed == [e]
    assert list(world.get_entities_with(Wallet)) == []

    # Destroying twice is a no-op
    world.destroy_entity(e.id)
    assert destroyed == [e]
