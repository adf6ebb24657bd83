import pytest
from engine.core.entity import Entity
from framework.components.progression import ProgressionState
from framework.progression.events import ProgressionEvent as PE
from framework.progression.registry import ProgressionRegistry
from framework.save.manager import ProgressionSaveManager

def test_spawn_attaches_state_and_initializes(world, recorder):
    registry = ProgressionRegistry(world)
    hero = world.create_entity("Hero")

    tracker = registry.spawn(hero)

    assert hero.get(ProgressionState) is tracker.state
    assert registry.get(hero.id) is tracker
    assert hero.id in registry
    assert tracker.slot == f"entity-{hero.id}"
    assert recorder.types() == [
        PE.PROGRESSION_LOADED,
        PE.RIFT_CAPABILITIES_UPDATED,
        PE.STYLE_CAPABILITIES_UPDATED,
    ]

def test_spawn_adds_entity_to_world(world):
    registry = ProgressionRegistry(world)
    hero = Entity("Hero")

    registry.spawn(hero)

    assert world.get_entity(hero.id) is hero
    assert list(world.get_entities_with(ProgressionState)) == [hero]

def test_characters_are_independent(world):
    registry = ProgressionRegistry(world)
    a = registry.spawn(world.create_entity("A"))
    b = registry.spawn(world.create_entity("B"))

    a.add_xp(1000)

    assert a.state.current_level == 2
    assert b.state.current_level == 1
    assert len(registry) == 2
    assert set(registry) == {a, b}

def test_spawn_twice_rejected(world):
    registry = ProgressionRegistry(world)
    hero = world.create_entity("Hero")
    registry.spawn(hero)

    with pytest.raises(ValueError):
        registry.spawn(hero)

def test_spawn_reuses_existing_state(world):
    registry = ProgressionRegistry(world)
    hero = world.create_entity("Hero")
    state = hero.add(ProgressionState(current_xp=42))

    tracker = registry.spawn(hero)

    assert tracker.state is state
    assert tracker.state.current_xp == 42

def test_spawn_restores_from_store(world, tmp_path):
    saves = ProgressionSaveManager(tmp_path)
    saves.save("hero-1", ProgressionState(current_xp=5000, current_level=4, current_rank=1))
    registry = ProgressionRegistry(world, store=saves)

    tracker = registry.spawn(world.create_entity("Hero"), slot="hero-1")

    assert tracker.state.current_level == 4
    assert tracker.get_current_rank_display_name() == "Adept"

def test_despawn(world):
    registry = ProgressionRegistry(world)
    hero = world.create_entity("Hero")
    registry.spawn(hero)

    registry.despawn(hero.id)

    assert registry.get(hero.id) is None
    assert world.get_entity(hero.id) is None
    registry.despawn(hero.id)  # No-op

def test_same_named_characters_keep_separate_saves(world, tmp_path):
    saves = ProgressionSaveManager(tmp_path)
    registry = ProgressionRegistry(world, store=saves)
    first = registry.spawn(world.create_entity("Guard"))
    second = registry.spawn(world.create_entity("Guard"))

    first.add_xp(1000)
    second.add_xp(2500)

    assert first.slot != second.slot
    assert saves.load(first.slot).current_level == 2
    assert saves.load(second.slot).current_level == 3
