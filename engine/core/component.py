"""
Component base class for data containers attached to entities.

Components hold state; the models that mutate them live elsewhere.
Pydantic gives validation on construction and on assignment, plus
JSON-ready dumps for the save layer.

Usage:
    class Wallet(Component):
        gold: int = Field(default=0, ge=0)

    entity.add(Wallet(gold=10))
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict


class Component(BaseModel):
    """
    Base class for all components.

    Pydantic provides:
    - Validation on construction and on every assignment
    - JSON serialization (model_dump / model_validate)
    - Default values
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        validate_assignment=True,
        extra='forbid',
    )

    # Component type name (used for serialization)
    _type_name: ClassVar[str] = ""

    # Owning entity id (set by Entity.add)
    _entity_id: int | None = None

    @classmethod
    def get_type_name(cls) -> str:
        """Get the component type name for serialization."""
        return cls._type_name or cls.__name__

    @property
    def entity_id(self) -> int | None:
        """Id of the entity this component is attached to."""
        return self._entity_id

    def clone(self) -> Component:
        """Create a deep copy of this component."""
        return self.model_copy(deep=True)


_component_registry: dict[str, type[Component]] = {}


def register_component(cls: type[Component]) -> type[Component]:
    """
    Decorator to register a component type for lookup by name.

    Usage:
        @register_component
        class ProgressionState(Component):
            current_xp: int = 0
    """
    _component_registry[cls.get_type_name()] = cls
    return cls


def get_component_type(type_name: str) -> type[Component] | None:
    """Get component class by type name."""
    return _component_registry.get(type_name)
