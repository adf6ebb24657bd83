"""
Save module - progression persistence.

Provides:
- Save/load ProgressionState snapshots per character slot
- Checksum validation
- Save/load events
"""

from framework.save.manager import (
    ProgressionSaveManager,
    ProgressionStore,
    SaveEvent,
)

__all__ = [
    "ProgressionSaveManager",
    "ProgressionStore",
    "SaveEvent",
]
