"""Tests for validation utilities."""
import pytest
from currency_converter.utils.validation import (
    normalize_currency_code,
    parse_amount,
    parse_rate,
    parse_currency_list,
    validate_rate
)
from currency_converter.utils.errors import ValidationError


def test_normalize_currency_code():
    """Codes are stripped and upper-cased."""
    assert normalize_currency_code("  usd ") == "USD"
    # No ISO-4217 check
    assert normalize_currency_code("xyz1") == "XYZ1"


def test_normalize_currency_code_empty():
    with pytest.raises(ValidationError):
        normalize_currency_code("   ")


def test_parse_amount_valid():
    """Test valid amount."""
    assert parse_amount("100") == 100.0
    assert parse_amount(" 12.5 ") == 12.5
    assert parse_amount("-3") == -3.0


@pytest.mark.parametrize("raw", ["", "abc", "1,000", "nan", "inf"])
def test_parse_amount_invalid(raw):
    with pytest.raises(ValidationError):
        parse_amount(raw)


def test_parse_rate_valid():
    assert parse_rate("0.92") == 0.92
    assert parse_rate("149.50") == 149.5


@pytest.mark.parametrize("raw", ["0", "-1.5", "rate", "inf"])
def test_parse_rate_invalid(raw):
    with pytest.raises(ValidationError):
        parse_rate(raw)


def test_validate_rate():
    assert validate_rate(1.1) == 1.1
    with pytest.raises(ValidationError):
        validate_rate(0.0)


def test_parse_currency_list():
    """Order and duplicates are kept, blanks dropped."""
    assert parse_currency_list("eur, gbp,,XYZ , eur") == ["EUR", "GBP", "XYZ", "EUR"]


def test_parse_currency_list_empty():
    with pytest.raises(ValidationError):
        parse_currency_list(" , ")


@pytest.mark.parametrize("rate", ["0.9", None, True, [1.0]])
def test_validate_rate_rejects_non_numbers(rate):
    with pytest.raises(ValidationError):
        validate_rate(rate)
