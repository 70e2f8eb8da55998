"""Exchange rate storage and conversion."""

from .models import ExchangeRate, RateComparison, NOT_AVAILABLE
from .store import RateStore, DEFAULT_CACHE_FILE

__all__ = ["ExchangeRate", "RateComparison", "NOT_AVAILABLE", "RateStore", "DEFAULT_CACHE_FILE"]
