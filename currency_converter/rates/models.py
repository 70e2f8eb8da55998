"""
Data models for stored exchange rates.

Defines the rate record kept by the rate store (and written to the cache
file) plus the per-target result of a rate comparison.
"""

import time
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictStr, field_validator

NOT_AVAILABLE = "Rate not available"


class ExchangeRate(BaseModel):
    """A single exchange rate for an ordered currency pair.

    Serialized as ``{"from", "to", "rate", "timestamp"}`` where ``timestamp``
    is Unix epoch seconds. Unknown fields in a record are ignored.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    from_currency: StrictStr = Field(..., alias="from", min_length=1)
    to_currency: StrictStr = Field(..., alias="to", min_length=1)
    rate: StrictFloat = Field(..., gt=0, allow_inf_nan=False)
    timestamp: StrictFloat = Field(..., allow_inf_nan=False)

    @field_validator("timestamp")
    @classmethod
    def check_timestamp_range(cls, value: float) -> float:
        # recorded_at must be representable on this platform
        try:
            datetime.fromtimestamp(value)
        except (OverflowError, OSError, ValueError):
            raise ValueError(f"timestamp out of range: {value}")
        return value

    @classmethod
    def create(cls, from_currency: str, to_currency: str, rate: float) -> "ExchangeRate":
        """Build a rate stamped with the current time."""
        return cls(
            from_currency=from_currency,
            to_currency=to_currency,
            rate=rate,
            timestamp=time.time(),
        )

    @classmethod
    def from_record(cls, record: Any) -> "ExchangeRate":
        """Decode one cache record; raises pydantic.ValidationError if malformed."""
        return cls.model_validate(record)

    def to_record(self) -> Dict[str, Any]:
        """Encode as a cache record."""
        return self.model_dump(by_alias=True)

    @property
    def pair(self) -> Tuple[str, str]:
        return (self.from_currency, self.to_currency)

    @property
    def recorded_at(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp)


@dataclass(frozen=True)
class RateComparison:
    """Result of converting an amount into one comparison target"""

    target: str
    value: Optional[float]

    @property
    def available(self) -> bool:
        return self.value is not None

    @property
    def display(self) -> str:
        if self.value is None:
            return NOT_AVAILABLE
        return f"{self.value:.2f}"
