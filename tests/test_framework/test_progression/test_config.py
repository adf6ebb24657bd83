import pytest
from pathlib import Path
from pydantic import ValidationError
from engine.resources.database import Database
from framework.progression.config import ProgressionConfig, load_progression_config
from framework.progression.skills import SkillDefinition

def test_default_config(config):
    assert config.level_xp_thresholds == (1000, 2500, 5000, 10000, 20000)
    assert config.rank_thresholds == (0, 5000, 15000, 30000, 50000, 75000, 100000)
    assert config.rank_names[0] == "Novice"
    assert config.rank_names[-1] == "Mythic"
    assert len(config.skill_tree) == 9
    assert config.skill_tree["MomentumMastery"].prerequisites == {"StyleBoost"}

def test_config_is_frozen(config):
    with pytest.raises(ValidationError):
        config.level_xp_thresholds = (1,)

def test_cycle_is_rejected():
    with pytest.raises(ValidationError, match="cycle"):
        ProgressionConfig(skill_tree={
            "A": SkillDefinition(prerequisites=frozenset({"B"})),
            "B": SkillDefinition(prerequisites=frozenset({"A"})),
        })

def test_degraded_config_is_reported(caplog):
    config = ProgressionConfig(
        level_xp_thresholds=(100, 100, 50),
        rank_thresholds=(0, 10),
        rank_names=("Only",),
        skill_tree={"Lost": SkillDefinition(prerequisites=frozenset({"Ghost"}))},
    )

    assert config.level_xp_thresholds == (100, 100, 50)
    assert "level_xp_thresholds is not strictly increasing" in caplog.text
    assert "1 rank names for 2 rank thresholds" in caplog.text
    assert "Skill Lost can never unlock" in caplog.text

def test_from_records():
    config = ProgressionConfig.from_records(
        {
            "id": "short",
            "level_xp_thresholds": [10, 20],
            "ranks": [{"name": "B", "min_xp": 50}, {"name": "A", "min_xp": 0}],
        },
        {
            "Jump": {"id": "Jump", "display_name": "Jump", "cost": 1},
            "Flip": {"id": "Flip", "display_name": "Flip", "cost": 2, "prerequisites": ["Jump"]},
        },
    )

    assert config.level_xp_thresholds == (10, 20)
    assert config.rank_thresholds == (0, 50)
    assert config.rank_names == ("A", "B")
    # Unspecified ladders keep their defaults
    assert config.rift_energy_thresholds == (1000, 2500, 5000, 10000, 20000)
    assert config.skill_tree["Flip"].prerequisites == {"Jump"}
    assert config.skill_tree["Flip"].level_requirement == 1

def test_load_shipped_config():
    db = Database(Path(__file__).resolve().parents[3] / "data")
    db.load_all()

    config = load_progression_config(db, "default")

    assert config.model_dump() == ProgressionConfig.default().model_dump()

def test_load_missing_config_uses_defaults(tmp_path):
    db = Database(tmp_path)
    db.load_all()

    assert load_progression_config(db, "nope").model_dump() == ProgressionConfig.default().model_dump()

def test_skill_tree_is_read_only(config):
    with pytest.raises(TypeError):
        config.skill_tree["Loop"] = SkillDefinition(prerequisites=frozenset({"Loop"}))

    assert "Loop" not in config.skill_tree

def test_input_tree_changes_do_not_leak():
    tree = {"Jump": SkillDefinition()}
    config = ProgressionConfig(skill_tree=tree)

    tree["Flip"] = SkillDefinition(prerequisites=frozenset({"Jump"}))

    assert list(config.skill_tree) == ["Jump"]
    assert config.model_dump()["skill_tree"]["Jump"]["cost"] == 1
