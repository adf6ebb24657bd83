"""
Game Database.

Handles loading and validation of static progression data
(ladders, ranks, skill trees).
"""

import json
import logging
from pathlib import Path
from typing import Any

import jsonschema


class Database:
    """
    Central storage for static game data.

    Layout under data_path:
        schemas/<name>.schema.json
        database/progression/*.json
        database/skills/*.json

    Every record needs an "id". Files may hold one record or a list.
    Records failing schema validation are logged and skipped.
    """

    def __init__(self, data_path: Path | str):
        self._data_path = Path(data_path)
        self._schemas: dict[str, Any] = {}

        # Data stores
        self.progression: dict[str, Any] = {}
        self.skills: dict[str, Any] = {}

        self.logger = logging.getLogger(__name__)

    def load_all(self) -> None:
        """Load all data from disk."""
        self._load_schemas()

        self.progression = self._load_category("progression", "progression.schema.json")
        self.skills = self._load_category("skills", "skill.schema.json")

        self.logger.info(
            f"Loaded {len(self.progression)} progression configs, "
            f"{len(self.skills)} skills."
        )

    def _load_schemas(self) -> None:
        """Load JSON schemas."""
        schema_dir = self._data_path / "schemas"
        if not schema_dir.exists():
            self.logger.warning(f"Schema directory not found: {schema_dir}")
            return

        for schema_file in schema_dir.glob("*.schema.json"):
            try:
                with open(schema_file, 'r', encoding='utf-8') as f:
                    self._schemas[schema_file.name] = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                self.logger.error(f"Failed to load schema {schema_file}: {e}")

    def _load_category(self, folder: str, schema_name: str) -> dict[str, Any]:
        """Load all JSON files in a category folder."""
        category_dir = self._data_path / "database" / folder
        data_store: dict[str, Any] = {}

        if not category_dir.exists():
            self.logger.warning(f"Data directory not found: {category_dir}")
            return data_store

        schema = self._schemas.get(schema_name)
        if not schema:
            self.logger.warning(f"No schema found for {folder} ({schema_name})")
            return data_store

        for file_path in sorted(category_dir.glob("*.json")):
            try:
                with open(file_path, 'r', encoding='utf-8') as f:
                    data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                self.logger.error(f"Failed to load {file_path}: {e}")
                continue

            records = data if isinstance(data, list) else [data]
            for record in records:
                try:
                    jsonschema.validate(instance=record, schema=schema)
                except jsonschema.ValidationError as e:
                    self.logger.error(f"Validation error in {file_path}: {e.message}")
                    continue
                if 'id' not in record:
                    self.logger.warning(f"Record without id in {file_path}")
                    continue
                if record['id'] in data_store:
                    self.logger.warning(f"Duplicate {folder} id {record['id']} in {file_path}")
                data_store[record['id']] = record

        return data_store

    def get_progression(self, config_id: str) -> dict[str, Any] | None:
        return self.progression.get(config_id)

    def get_skill(self, skill_id: str) -> dict[str, Any] | None:
        return self.skills.get(skill_id)
