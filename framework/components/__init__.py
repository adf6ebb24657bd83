"""
Progression Components - data component definitions.

All components are Pydantic models. The logic that mutates them lives
in framework.progression.
"""

from framework.components.progression import ProgressionState

__all__ = [
    "ProgressionState",
]
