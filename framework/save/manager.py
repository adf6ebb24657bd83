"""
Save/Load system - progression persistence.

Provides:
- One JSON save file per character slot
- Save integrity validation (checksum)
- Event publishing for save/load operations
"""

from __future__ import annotations

import base64
import hashlib
import json
import logging
from datetime import datetime
from enum import Enum, auto
from pathlib import Path
from typing import Any, Optional, Protocol

from pydantic import ValidationError

from engine.core.events import EventBus
from framework.components.progression import ProgressionState


logger = logging.getLogger(__name__)


class SaveEvent(Enum):
    """Save system events."""
    SAVE_STARTED = auto()
    SAVE_COMPLETED = auto()
    SAVE_FAILED = auto()
    LOAD_STARTED = auto()
    LOAD_COMPLETED = auto()
    LOAD_FAILED = auto()


class ProgressionStore(Protocol):
    """What the progression tracker needs from a persistence service."""

    def save(self, slot: str, state: ProgressionState) -> bool:
        ...

    def load(self, slot: str) -> Optional[ProgressionState]:
        ...


class ProgressionSaveManager:
    """
    Saves and loads ProgressionState snapshots as JSON files.

    Failures are logged, published as SAVE_FAILED / LOAD_FAILED and
    reported through the return value; they never raise to the caller.

    Usage:
        saves = ProgressionSaveManager("saves", event_bus=event_bus)
        saves.save("hero", state)
        restored = saves.load("hero")
    """

    VERSION = "1.0"

    def __init__(
        self,
        save_path: str | Path = "saves",
        event_bus: Optional[EventBus] = None,
        validate: bool = True,
    ):
        self.save_path = Path(save_path)
        self.save_path.mkdir(parents=True, exist_ok=True)
        self.event_bus = event_bus
        self.validate_on_load = validate

    def _get_slot_path(self, slot: str) -> Path:
        """Get path for a save slot."""
        return self.save_path / f"progression_{slot}.json"

    def _publish(self, event_type: SaveEvent, **data: Any) -> None:
        if self.event_bus:
            self.event_bus.publish(event_type, **data)

    def exists(self, slot: str) -> bool:
        return self._get_slot_path(slot).exists()

    def save(self, slot: str, state: ProgressionState) -> bool:
        """
        Save a progression snapshot.

        Returns:
            True if save was successful
        """
        self._publish(SaveEvent.SAVE_STARTED, slot=slot)

        try:
            save_dict = {
                'version': self.VERSION,
                'timestamp': datetime.now().isoformat(),
                'state': state.model_dump(mode="json"),
            }
            # Sets dump in arbitrary order; keep files stable
            save_dict['state']['unlocked_skills'] = sorted(save_dict['state']['unlocked_skills'])
            save_dict['checksum'] = self._calculate_checksum(save_dict)

            with open(self._get_slot_path(slot), 'w', encoding='utf-8') as f:
                json.dump(save_dict, f, indent=2)

        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Save failed for slot {slot}: {e}")
            self._publish(SaveEvent.SAVE_FAILED, slot=slot, error=str(e))
            return False

        logger.debug(f"Saved progression slot {slot}")
        self._publish(SaveEvent.SAVE_COMPLETED, slot=slot)
        return True

    def load(self, slot: str) -> Optional[ProgressionState]:
        """
        Load a progression snapshot.

        Returns:
            The restored state, or None if missing or unreadable
        """
        save_path = self._get_slot_path(slot)
        if not save_path.exists():
            return None

        self._publish(SaveEvent.LOAD_STARTED, slot=slot)

        try:
            with open(save_path, 'r', encoding='utf-8') as f:
                save_dict = json.load(f)

            if not isinstance(save_dict, dict):
                raise ValueError("Save file is not a JSON object")

            if self.validate_on_load:
                checksum = save_dict.get('checksum')
                if checksum and not self._verify_checksum(save_dict, checksum):
                    logger.error(f"Save file corrupted: checksum mismatch in slot {slot}")
                    self._publish(
                        SaveEvent.LOAD_FAILED,
                        slot=slot,
                        error="Checksum validation failed",
                    )
                    return None

            state = ProgressionState.model_validate(save_dict['state'])

        except (OSError, ValueError, KeyError, TypeError, ValidationError) as e:
            logger.error(f"Load failed for slot {slot}: {e}")
            self._publish(SaveEvent.LOAD_FAILED, slot=slot, error=str(e))
            return None

        logger.info(f"Loaded progression slot {slot} (version {save_dict.get('version')})")
        self._publish(SaveEvent.LOAD_COMPLETED, slot=slot)
        return state

    def delete(self, slot: str) -> bool:
        """Delete a save slot."""
        try:
            self._get_slot_path(slot).unlink(missing_ok=True)
        except OSError as e:
            logger.error(f"Could not delete slot {slot}: {e}")
            return False
        return True

    # Checksum validation

    def _calculate_checksum(self, data: dict) -> str:
        """Calculate checksum for save data."""
        json_str = json.dumps(data, sort_keys=True, separators=(',', ':'))
        hash_bytes = hashlib.sha256(json_str.encode('utf-8')).digest()
        return base64.b64encode(hash_bytes).decode('ascii')

    def _verify_checksum(self, data: dict, expected_checksum: str) -> bool:
        """Verify save data checksum."""
        data_copy = data.copy()
        data_copy.pop('checksum', None)
        return self._calculate_checksum(data_copy) == expected_checksum

    def validate(self, slot: str) -> bool:
        """
        Validate a save file's integrity.

        Returns:
            True if save is valid, False if corrupted or missing
        """
        save_path = self._get_slot_path(slot)
        if not save_path.exists():
            return False

        try:
            with open(save_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError):
            return False

        if not isinstance(data, dict):
            return False

        checksum = data.get('checksum')
        if not checksum:
            # No checksum = old save format, assume valid
            return True

        return self._verify_checksum(data, checksum)
