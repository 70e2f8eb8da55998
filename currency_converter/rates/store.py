"""
Rate storage backed by a flat JSON file.

Format of the cache file (``rates_cache.json`` by default):

[
  {"from": "USD", "to": "EUR", "rate": 0.92, "timestamp": 1700000000.0},
  ...
]

The file is rewritten in full after every change. There is no atomic
rename and no locking, the last writer wins.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from pydantic import ValidationError as SchemaError

from currency_converter.rates.models import ExchangeRate, RateComparison
from currency_converter.utils.errors import CacheError, ValidationError
from currency_converter.utils.validation import validate_rate

logger = logging.getLogger(__name__)

DEFAULT_CACHE_FILE = "rates_cache.json"

Pair = Tuple[str, str]


class RateStore:
    """
    Keeps exchange rates keyed by ordered currency pair and converts amounts.

    Pairs are not kept symmetric: (A, B) and (B, A) may both exist with
    unrelated rates. Lookups prefer the direct pair and only then invert the
    reverse one.
    """

    def __init__(
        self,
        cache_file: Union[str, Path] = DEFAULT_CACHE_FILE,
        autoload: bool = True,
    ) -> None:
        self.cache_file = Path(cache_file)
        self._rates: Dict[Pair, ExchangeRate] = {}
        if autoload:
            self.load()

    def __len__(self) -> int:
        return len(self._rates)

    def __contains__(self, pair: Pair) -> bool:
        return tuple(pair) in self._rates

    # ------------------------------------------------------------------
    # Rates
    # ------------------------------------------------------------------
    def add_rate(self, from_currency: str, to_currency: str, rate: float) -> ExchangeRate:
        """
        Insert or overwrite the rate for (from_currency, to_currency) and persist.

        A failed write is logged and otherwise ignored; the new rate stays in
        memory.

        Raises:
            ValidationError: If the rate is not a positive number
        """
        validate_rate(rate)
        try:
            entry = ExchangeRate.create(from_currency, to_currency, rate)
        except SchemaError as e:
            raise ValidationError(
                f"Invalid exchange rate {from_currency} -> {to_currency}: {e}"
            ) from e

        self._rates[entry.pair] = entry

        try:
            self.save()
        except CacheError as e:
            logger.error("Error saving rate cache: %s", e, extra={"cache_file": self.cache_file})

        return entry

    def get_rate(self, from_currency: str, to_currency: str) -> Optional[ExchangeRate]:
        """Return the stored rate for the direct pair only."""
        return self._rates.get((from_currency, to_currency))

    def list_rates(self) -> List[ExchangeRate]:
        """All stored rates, in storage order."""
        return list(self._rates.values())

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------
    def convert(self, amount: float, from_currency: str, to_currency: str) -> Optional[float]:
        """
        Convert an amount between two currencies.

        Returns:
            The converted amount, or None when neither the direct nor the
            reverse pair is stored.
        """
        if from_currency == to_currency:
            return amount

        direct = self._rates.get((from_currency, to_currency))
        if direct is not None:
            return amount * direct.rate

        reverse = self._rates.get((to_currency, from_currency))
        if reverse is not None:
            return amount / reverse.rate

        return None

    def compare_rates(
        self, amount: float, from_currency: str, targets: Iterable[str]
    ) -> List[RateComparison]:
        """Convert one amount into each target, keeping the given order."""
        return [
            RateComparison(target=target, value=self.convert(amount, from_currency, target))
            for target in targets
        ]

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def save(self) -> None:
        """
        Write every rate to the cache file, replacing its contents.

        Raises:
            CacheError: If the file cannot be written
        """
        data = [entry.to_record() for entry in self._rates.values()]
        try:
            with open(self.cache_file, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            raise CacheError(f"Could not write {self.cache_file}: {e}") from e

    def load(self) -> int:
        """
        Read rates from the cache file.

        A missing, unreadable or malformed file leaves the store as it is.
        Records that fail validation are skipped one by one.

        Returns:
            Number of rates loaded
        """
        if not self.cache_file.exists():
            logger.debug("No rate cache at %s", self.cache_file)
            return 0

        try:
            with open(self.cache_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Could not read rate cache %s: %s", self.cache_file, e)
            return 0

        if not isinstance(data, list):
            logger.warning(
                "Ignoring rate cache %s: expected a JSON array, got %s",
                self.cache_file,
                type(data).__name__,
            )
            return 0

        loaded = 0
        skipped = 0
        for index, item in enumerate(data):
            try:
                entry = ExchangeRate.from_record(item)
            except SchemaError as e:
                skipped += 1
                logger.warning(
                    "Skipping invalid rate record #%d in %s: %s",
                    index,
                    self.cache_file,
                    e.errors(include_url=False),
                )
                continue
            self._rates[entry.pair] = entry
            loaded += 1

        logger.info(
            "Loaded %d rates from %s (%d skipped)", loaded, self.cache_file, skipped
        )
        return loaded
