"""
Currency ledger - independent non-negative counters with add/spend.
"""

from __future__ import annotations

import logging
from enum import Enum

from framework.progression.base import ProgressionModel
from framework.progression.events import ProgressionEvent


logger = logging.getLogger(__name__)


class Currency(Enum):
    """Currencies, valued by their ProgressionState field."""
    STYLE_ORBS = "style_orbs"
    RIFT_ORBS = "rift_orbs"
    RARITANIUM_SHARDS = "raritanium_shards"


class CurrencyLedger(ProgressionModel):
    """
    Add/spend over the three currency counters.

    CURRENCY_CHANGED carries no payload; listeners re-read balances.
    """

    def balance(self, currency: Currency) -> int:
        return getattr(self.state, currency.value)

    def add(self, currency: Currency, amount: int) -> None:
        """Add to a currency unconditionally."""
        if amount <= 0:
            logger.warning(f"Non-positive {currency.value} grant: {amount}")
        setattr(self.state, currency.value, self.balance(currency) + amount)
        self._publish(ProgressionEvent.CURRENCY_CHANGED)
        self._save()

    def spend(self, currency: Currency, amount: int) -> bool:
        """
        Spend a currency.

        Returns:
            True if successful, False if insufficient funds
        """
        current = self.balance(currency)
        if current < amount:
            return False

        setattr(self.state, currency.value, current - amount)
        self._publish(ProgressionEvent.CURRENCY_CHANGED)
        self._save()
        return True
