"""
Progression tracker - the single authority over one character's stats.

Wires the level/rank model, the skill graph, both mastery tracks and the
currency ledger to one ProgressionState, one event bus and one
persistence store, and exposes their operations in one place.

Usage:
    tracker = ProgressionTracker(state, ProgressionConfig.default(), event_bus)
    tracker.initialize()

    tracker.subscribe(ProgressionEvent.LEVEL_UP, on_level_up)
    tracker.add_xp(1000)
    if tracker.can_unlock_skill("DoubleJump"):
        tracker.unlock_skill("DoubleJump")
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Optional

from engine.core.events import EventBus, EventHandler
from framework.components.progression import ProgressionState
from framework.progression.config import ProgressionConfig
from framework.progression.currency import Currency, CurrencyLedger
from framework.progression.events import ProgressionEvent
from framework.progression.levels import LevelRankModel
from framework.progression.mastery import RIFT_ATTUNEMENT, STYLE_MASTERY, MasteryTrack
from framework.progression.skills import SkillDefinition, SkillGraph

if TYPE_CHECKING:
    from framework.save.manager import ProgressionStore


logger = logging.getLogger(__name__)


class ProgressionTracker:
    """
    Character progression for one character.

    Every mutating operation publishes its events synchronously, in
    order, and then persists through save_progression().
    """

    def __init__(
        self,
        state: ProgressionState | None = None,
        config: ProgressionConfig | None = None,
        event_bus: EventBus | None = None,
        store: Optional[ProgressionStore] = None,
        slot: str = "default",
    ):
        self.state = state if state is not None else ProgressionState()
        self.config = config if config is not None else ProgressionConfig.default()
        self.event_bus = event_bus or EventBus()
        self.store = store
        self.slot = slot

        shared = (self.state, self.config, self.event_bus, self.save_progression)
        self.levels = LevelRankModel(*shared)
        self.skills = SkillGraph(*shared)
        self.rift = MasteryTrack(RIFT_ATTUNEMENT, *shared)
        self.style = MasteryTrack(STYLE_MASTERY, *shared)
        self.currency = CurrencyLedger(*shared)

    # Lifecycle

    def initialize(self) -> None:
        """
        Restore saved progression and refresh both capability sets.

        Called once by the host after the character is spawned.
        """
        self.load_progression()
        self.update_rift_capabilities()
        self.update_style_capabilities()

    def save_progression(self) -> bool:
        """
        Persist the current state.

        Returns:
            False if the store reported a failure
        """
        if self.store is not None and not self.store.save(self.slot, self.state):
            logger.warning(f"Progression for slot {self.slot} was not saved")
            return False
        self.event_bus.publish(ProgressionEvent.PROGRESSION_SAVED)
        return True

    def load_progression(self) -> bool:
        """
        Restore the state from the store, in place.

        Returns:
            True if a saved state was restored
        """
        restored = None
        if self.store is not None:
            restored = self.store.load(self.slot)

        if restored is not None:
            self.state.restore_from(restored)
            logger.info(
                f"Restored progression for slot {self.slot}: "
                f"level {self.state.current_level}, rank {self.state.current_rank}"
            )

        self.event_bus.publish(ProgressionEvent.PROGRESSION_LOADED, restored=restored is not None)
        return restored is not None

    # Events

    def subscribe(
        self,
        event_type: Enum,
        handler: EventHandler,
        priority: int = 0,
        one_shot: bool = False,
        weak: bool = False,
    ) -> None:
        """
        Subscribe to a progression event.

        Unlike EventBus.subscribe, handlers are held strongly by default so
        lambdas and closures keep receiving events. Pass weak=True to tie
        a bound method's subscription to its owner's lifetime.
        """
        self.event_bus.subscribe(
            event_type, handler, priority=priority, one_shot=one_shot, weak=weak
        )

    def unsubscribe(self, event_type: Enum, handler: EventHandler) -> None:
        self.event_bus.unsubscribe(event_type, handler)

    # Level / rank

    def add_xp(self, amount: int) -> None:
        self.levels.add_xp(amount)

    def get_xp_to_next_level(self) -> int:
        return self.levels.get_xp_to_next_level()

    def get_level_progress(self) -> float:
        return self.levels.get_level_progress()

    def get_xp_to_next_rank(self) -> int:
        return self.levels.get_xp_to_next_rank()

    def get_rank_progress(self) -> float:
        return self.levels.get_rank_progress()

    def get_current_rank_display_name(self) -> str:
        return self.levels.get_current_rank_display_name()

    # Skills

    def add_skill_points(self, points: int) -> None:
        self.skills.add_skill_points(points)

    def can_unlock_skill(self, skill_id: str) -> bool:
        return self.skills.can_unlock(skill_id)

    def unlock_skill(self, skill_id: str) -> bool:
        return self.skills.unlock(skill_id)

    def has_skill(self, skill_id: str) -> bool:
        return self.skills.has_skill(skill_id)

    def get_skill(self, skill_id: str) -> Optional[SkillDefinition]:
        return self.skills.get_skill(skill_id)

    def get_unlockable_skills(self) -> list[str]:
        return self.skills.get_unlockable_skills()

    # Rift attunement

    def add_rift_energy(self, energy: int) -> None:
        self.rift.add(energy)

    def update_rift_capabilities(self) -> None:
        self.rift.update_capabilities()

    def get_rift_energy_to_next_level(self) -> int:
        return self.rift.get_to_next_level()

    def get_rift_attunement_progress(self) -> float:
        return self.rift.get_progress()

    # Style mastery

    def add_style_experience(self, experience: int) -> None:
        self.style.add(experience)

    def update_style_capabilities(self) -> None:
        self.style.update_capabilities()

    def get_style_experience_to_next_level(self) -> int:
        return self.style.get_to_next_level()

    def get_style_mastery_progress(self) -> float:
        return self.style.get_progress()

    # Currency

    def add_style_orbs(self, orbs: int) -> None:
        self.currency.add(Currency.STYLE_ORBS, orbs)

    def add_rift_orbs(self, orbs: int) -> None:
        self.currency.add(Currency.RIFT_ORBS, orbs)

    def add_raritanium_shards(self, shards: int) -> None:
        self.currency.add(Currency.RARITANIUM_SHARDS, shards)

    def spend_style_orbs(self, orbs: int) -> bool:
        return self.currency.spend(Currency.STYLE_ORBS, orbs)

    def spend_rift_orbs(self, orbs: int) -> bool:
        return self.currency.spend(Currency.RIFT_ORBS, orbs)

    def spend_raritanium_shards(self, shards: int) -> bool:
        return self.currency.spend(Currency.RARITANIUM_SHARDS, shards)
