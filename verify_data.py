import sys
import logging
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parent))

from engine.resources.database import Database
from framework.progression.config import ProgressionConfig, load_progression_config

def main():
    logging.basicConfig(level=logging.INFO)
    logger = logging.getLogger("DataVerification")

    try:
        # Initialize Database
        db = Database(Path(__file__).parent / "data")

        # Load all data
        logger.info("Loading database...")
        db.load_all()

        # Verify progression ladders
        assert db.get_progression("default") is not None, "Missing default progression"
        config = load_progression_config(db, "default")
        assert config.rank_names[1] == "Adept"

        # Verify skill tree (also rejects prerequisite cycles)
        assert db.get_skill("DoubleJump") is not None, "Missing Double Jump"
        assert set(config.skill_tree) == set(ProgressionConfig.default().skill_tree)
        assert config.skill_tree["AirDash"].prerequisites == {"DoubleJump"}

        logger.info("VERIFICATION SUCCESSFUL: All data loaded and validated.")

    except Exception as e:
        logger.error(f"VERIFICATION FAILED: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
