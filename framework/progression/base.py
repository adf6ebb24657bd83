"""
Shared plumbing for the progression sub-models.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Callable

from engine.core.events import EventBus

if TYPE_CHECKING:
    from framework.components.progression import ProgressionState
    from framework.progression.config import ProgressionConfig


class ProgressionModel:
    """
    Base class for a sub-model over the shared ProgressionState.

    Sub-models mutate the state, publish on the shared bus, and call
    the persist hook once per mutating operation, after all of their
    events have been published.
    """

    def __init__(
        self,
        state: ProgressionState,
        config: ProgressionConfig,
        event_bus: EventBus,
        persist: Callable[[], Any] | None = None,
    ):
        self.state = state
        self.config = config
        self.event_bus = event_bus
        self._persist = persist

    def _publish(self, event_type: Enum, **data: Any) -> None:
        self.event_bus.publish(event_type, **data)

    def _save(self) -> None:
        if self._persist is not None:
            self._persist()
