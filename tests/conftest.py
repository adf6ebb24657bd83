import os
import sys
import pytest

# Ensure engine modules can be imported
sys.path.append(os.getcwd())


class EventRecorder:
    """Collects (event type, data) pairs in delivery order."""

    def __init__(self):
        self.events = []

    def __call__(self, event):
        self.events.append((event.type, dict(event.data)))

    def attach(self, bus, *event_types):
        for event_type in event_types:
            bus.subscribe(event_type, self, weak=False)
        return self

    def types(self):
        return [t for t, _ in self.events]

    def of(self, event_type):
        return [data for t, data in self.events if t == event_type]

    def clear(self):
        self.events.clear()


@pytest.fixture
def event_bus():
    """Fresh EventBus for each test."""
    from engine.core.events import EventBus
    return EventBus()

@pytest.fixture
def world(event_bus):
    """Fresh World for each test."""
    from engine.core.world import World
    return World(event_bus)

@pytest.fixture
def config():
    """Stock progression config."""
    from framework.progression.config import ProgressionConfig
    return ProgressionConfig.default()

@pytest.fixture
def tracker(config, event_bus):
    """Tracker over a fresh state, no persistence."""
    from framework.progression.tracker import ProgressionTracker
    return ProgressionTracker(config=config, event_bus=event_bus)

@pytest.fixture
def recorder(event_bus):
    """Records every progression event published on the bus."""
    from framework.progression.events import ProgressionEvent
    return EventRecorder().attach(event_bus, *ProgressionEvent)
