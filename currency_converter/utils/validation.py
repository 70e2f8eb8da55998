"""Input validation utilities."""
import math
from typing import List

from currency_converter.utils.errors import ValidationError


def normalize_currency_code(code: str) -> str:
    """
    Normalize a currency code typed by the user.

    Codes are stripped and upper-cased. No check is made against the
    ISO-4217 list, any non-empty code is accepted.

    Raises:
        ValidationError: If the code is empty
    """
    code = (code or "").strip().upper()
    if not code:
        raise ValidationError("Currency code must not be empty")
    return code


def parse_amount(raw: str) -> float:
    """
    Parse a conversion amount.

    Args:
        raw: Amount as typed by the user (e.g. "100", "12.5")

    Returns:
        Parsed amount

    Raises:
        ValidationError: If the text is not a finite number
    """
    try:
        amount = float(str(raw).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid amount: {raw!r}")

    if not math.isfinite(amount):
        raise ValidationError(f"Invalid amount: {raw!r}")

    return amount


def parse_rate(raw: str) -> float:
    """
    Parse an exchange rate.

    Raises:
        ValidationError: If the text is not a finite number greater than zero
    """
    try:
        rate = float(str(raw).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid rate: {raw!r}")

    validate_rate(rate)
    return rate


def validate_rate(rate: float) -> float:
    """Check that a rate is a finite, positive number."""
    if isinstance(rate, bool) or not isinstance(rate, (int, float)):
        raise ValidationError(f"Rate must be a number, got: {rate!r}")
    if not math.isfinite(rate) or rate <= 0:
        raise ValidationError(f"Rate must be a positive number, got: {rate}")
    return rate


def parse_currency_list(raw: str) -> List[str]:
    """
    Parse a comma-separated list of target currencies.

    Blank items are dropped, order and duplicates are kept.

    Raises:
        ValidationError: If no currency code is given
    """
    codes = [part.strip().upper() for part in (raw or "").split(",")]
    codes = [code for code in codes if code]
    if not codes:
        raise ValidationError("At least one target currency is required")
    return codes
