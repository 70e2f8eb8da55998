"""Bounded in-memory log of recent conversions."""

import logging
from typing import List

from currency_converter.history.models import Conversion
from currency_converter.utils.errors import ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 50
DEFAULT_RECENT_COUNT = 10


class HistoryLog:
    """
    Ordered list of past conversions with a fixed capacity.

    Once the capacity is exceeded the oldest entry is dropped, one entry per
    new record. The log lives only as long as the process.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValidationError(f"History capacity must be at least 1, got: {capacity}")
        self.capacity = capacity
        self._entries: List[Conversion] = []

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> List[Conversion]:
        """Copy of every entry, oldest first."""
        return list(self._entries)

    def record(
        self, amount: float, from_currency: str, to_currency: str, result: float
    ) -> Conversion:
        """Append a conversion stamped with the current time."""
        conversion = Conversion(
            amount=amount,
            from_currency=from_currency,
            to_currency=to_currency,
            result=result,
        )
        self._entries.append(conversion)

        if len(self._entries) > self.capacity:
            evicted = self._entries.pop(0)
            logger.debug("History full, dropped %s", evicted.summary())

        return conversion

    def recent(self, n: int = DEFAULT_RECENT_COUNT) -> List[Conversion]:
        """Last ``n`` conversions in insertion order."""
        if n <= 0:
            return []
        return self._entries[-n:]

    def clear(self) -> None:
        """Remove all entries."""
        self._entries.clear()
