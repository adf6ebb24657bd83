import pytest
import json
from framework.components.progression import ProgressionState
from framework.save.manager import ProgressionSaveManager, SaveEvent

@pytest.fixture
def saves(tmp_path, event_bus):
    return ProgressionSaveManager(tmp_path / "saves", event_bus=event_bus)

def sample_state():
    return ProgressionState(
        current_xp=5200,
        current_level=4,
        current_rank=1,
        skill_points=3,
        unlocked_skills={"DoubleJump", "AirDash"},
        style_orbs=12,
        rift_energy=1500,
        rift_attunement_level=2,
    )

def test_save_and_load(saves):
    assert saves.save("hero", sample_state())
    assert saves.exists("hero")

    restored = saves.load("hero")

    assert restored.model_dump() == sample_state().model_dump()

def test_save_file_layout(saves):
    saves.save("hero", sample_state())

    with open(saves.save_path / "progression_hero.json", encoding="utf-8") as f:
        data = json.load(f)

    assert data["version"] == ProgressionSaveManager.VERSION
    assert data["state"]["unlocked_skills"] == ["AirDash", "DoubleJump"]
    assert "checksum" in data
    assert "timestamp" in data

def test_load_missing_slot(saves):
    assert saves.load("nobody") is None
    assert not saves.validate("nobody")

def test_checksum_mismatch(saves, event_bus):
    failures = []
    event_bus.subscribe(SaveEvent.LOAD_FAILED, lambda e: failures.append(e["error"]), weak=False)
    saves.save("hero", sample_state())

    path = saves.save_path / "progression_hero.json"
    data = json.loads(path.read_text(encoding="utf-8"))
    data["state"]["skill_points"] = 999
    path.write_text(json.dumps(data), encoding="utf-8")

    assert not saves.validate("hero")
    assert saves.load("hero") is None
    assert failures == ["Checksum validation failed"]

def test_checksum_check_can_be_disabled(tmp_path):
    saves = ProgressionSaveManager(tmp_path, validate=False)
    saves.save("hero", sample_state())

    path = tmp_path / "progression_hero.json"
    data = json.loads(path.read_text(encoding="utf-8"))
    data["state"]["skill_points"] = 999
    path.write_text(json.dumps(data), encoding="utf-8")

    assert saves.load("hero").skill_points == 999

def test_invalid_state_fails_load(saves, event_bus):
    failures = []
    event_bus.subscribe(SaveEvent.LOAD_FAILED, lambda e: failures.append(e["slot"]), weak=False)

    path = saves.save_path / "progression_hero.json"
    path.write_text(json.dumps({"version": "1.0", "state": {"current_level": 0}}), encoding="utf-8")

    assert saves.load("hero") is None
    assert failures == ["hero"]

def test_corrupt_json_fails_load(saves):
    (saves.save_path / "progression_hero.json").write_text("{oops", encoding="utf-8")

    assert saves.load("hero") is None
    assert not saves.validate("hero")

@pytest.mark.parametrize("content", ["[1, 2]", '"hero"', "42", "null"])
def test_non_object_json_fails_load(saves, event_bus, content):
    failures = []
    event_bus.subscribe(SaveEvent.LOAD_FAILED, lambda e: failures.append(e["slot"]), weak=False)
    (saves.save_path / "progression_hero.json").write_text(content, encoding="utf-8")

    assert saves.load("hero") is None
    assert not saves.validate("hero")
    assert failures == ["hero"]

def test_save_events(saves, event_bus):
    seen = []
    for event_type in (SaveEvent.SAVE_STARTED, SaveEvent.SAVE_COMPLETED):
        event_bus.subscribe(event_type, lambda e: seen.append(e.type), weak=False)

    saves.save("hero", sample_state())

    assert seen == [SaveEvent.SAVE_STARTED, SaveEvent.SAVE_COMPLETED]

def test_save_failure_is_reported(saves, event_bus):
    failures = []
    event_bus.subscribe(SaveEvent.SAVE_FAILED, lambda e: failures.append(e["slot"]), weak=False)

    # A directory where the file should be makes the write fail
    (saves.save_path / "progression_hero.json").mkdir()

    assert not saves.save("hero", sample_state())
    assert failures == ["hero"]

def test_delete(saves):
    saves.save("hero", sample_state())

    assert saves.delete("hero")
    assert not saves.exists("hero")
    assert saves.delete("hero")
