"""Tests for rate models."""
import pytest
from pydantic import ValidationError as SchemaError
from currency_converter.rates.models import ExchangeRate, RateComparison, NOT_AVAILABLE


def test_create_stamps_current_time():
    rate = ExchangeRate.create("USD", "EUR", 0.92)
    assert rate.pair == ("USD", "EUR")
    assert rate.rate == 0.92
    assert rate.timestamp > 1_600_000_000


def test_to_record_uses_cache_field_names():
    rate = ExchangeRate(from_currency="USD", to_currency="EUR", rate=0.92, timestamp=1700000000.0)
    assert rate.to_record() == {"from": "USD", "to": "EUR", "rate": 0.92, "timestamp": 1700000000.0}


def test_from_record_ignores_unknown_fields():
    rate = ExchangeRate.from_record(
        {"from": "USD", "to": "GBP", "rate": 0.79, "timestamp": 1700000000.5, "source": "manual"}
    )
    assert rate.pair == ("USD", "GBP")
    assert rate.timestamp == 1700000000.5


def test_from_record_accepts_integer_numbers():
    rate = ExchangeRate.from_record({"from": "USD", "to": "JPY", "rate": 150, "timestamp": 1700000000})
    assert rate.rate == 150
    assert rate.timestamp == 1700000000


@pytest.mark.parametrize("record", [
    {"to": "EUR", "rate": 0.92, "timestamp": 1.0},
    {"from": "USD", "to": "EUR", "timestamp": 1.0},
    {"from": "USD", "to": "EUR", "rate": 0.92},
    {"from": 1, "to": "EUR", "rate": 0.92, "timestamp": 1.0},
    {"from": "USD", "to": "EUR", "rate": "0.92", "timestamp": 1.0},
    {"from": "USD", "to": "EUR", "rate": 0.92, "timestamp": "2023-11-14"},
    {"from": "USD", "to": "EUR", "rate": True, "timestamp": 1.0},
    {"from": "USD", "to": "EUR", "rate": 0, "timestamp": 1.0},
    {"from": "USD", "to": "EUR", "rate": -0.5, "timestamp": 1.0},
    ["USD", "EUR", 0.92, 1.0],
    "USD_EUR",
])
def test_from_record_rejects_malformed(record):
    with pytest.raises(SchemaError):
        ExchangeRate.from_record(record)


def test_exchange_rate_is_immutable():
    rate = ExchangeRate.create("USD", "EUR", 0.92)
    with pytest.raises(SchemaError):
        rate.rate = 1.0


def test_recorded_at():
    rate = ExchangeRate(from_currency="USD", to_currency="EUR", rate=0.92, timestamp=1700000000.0)
    assert rate.recorded_at.timestamp() == 1700000000.0


def test_rate_comparison_display():
    assert RateComparison("EUR", 92.0).display == "92.00"
    assert RateComparison("GBP", 78.999).display == "79.00"
    missing = RateComparison("XYZ", None)
    assert missing.available is False
    assert missing.display == NOT_AVAILABLE


@pytest.mark.parametrize("timestamp", [1e20, -1e20])
def test_from_record_rejects_out_of_range_timestamp(timestamp):
    with pytest.raises(SchemaError):
        ExchangeRate.from_record({"from": "USD", "to": "EUR", "rate": 0.92, "timestamp": timestamp})
