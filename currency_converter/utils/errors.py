"""Custom exception classes for the Currency Converter."""


class CurrencyConverterError(Exception):
    """Base exception for all Currency Converter errors."""
    pass


class ConfigurationError(CurrencyConverterError):
    """Raised when there's a configuration error."""
    pass


class ValidationError(CurrencyConverterError):
    """Raised when user input or a stored value fails validation."""
    pass


class CacheError(CurrencyConverterError):
    """Raised when the rate cache file cannot be written."""
    pass
