"""Recent conversion history."""

from .models import Conversion
from .log import HistoryLog, DEFAULT_CAPACITY, DEFAULT_RECENT_COUNT

__all__ = ["Conversion", "HistoryLog", "DEFAULT_CAPACITY", "DEFAULT_RECENT_COUNT"]
