"""Command-line currency converter with a local JSON rate cache."""

__version__ = "0.1.0"
