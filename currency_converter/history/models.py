"""Data model for recorded conversions."""

from dataclasses import dataclass, field
from datetime import datetime

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class Conversion:
    """A completed conversion, immutable once recorded"""

    amount: float
    from_currency: str
    to_currency: str
    result: float
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def formatted_timestamp(self) -> str:
        return self.timestamp.strftime(TIMESTAMP_FORMAT)

    @property
    def formatted_result(self) -> str:
        return f"{self.result:.2f}"

    def summary(self) -> str:
        """One-line description, e.g. ``100.0 USD = 92.00 EUR``."""
        return f"{self.amount} {self.from_currency} = {self.formatted_result} {self.to_currency}"
