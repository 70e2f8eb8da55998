"""Tests for logging setup."""
import json
import logging
from currency_converter.utils.logging import JsonFormatter, setup_logging


def test_json_formatter():
    record = logging.LogRecord(
        "currency_converter.rates.store", logging.ERROR, __file__, 1,
        "Error saving rate cache: %s", ("disk full",), None
    )
    record.cache_file = "rates_cache.json"
    data = json.loads(JsonFormatter().format(record))
    assert data["level"] == "ERROR"
    assert data["logger"] == "currency_converter.rates.store"
    assert data["message"] == "Error saving rate cache: disk full"
    assert data["cache_file"] == "rates_cache.json"


def test_setup_logging_file(tmp_path):
    log_file = tmp_path / "logs" / "app.log"
    setup_logging(level="INFO", log_file=str(log_file), format_type="json")
    logging.getLogger("currency_converter.test").info("hello")
    for handler in logging.getLogger().handlers:
        handler.flush()
    lines = log_file.read_text().strip().splitlines()
    assert json.loads(lines[-1])["message"] == "hello"


def test_setup_logging_disabled():
    setup_logging(enabled=False)
    assert logging.getLogger("currency_converter").isEnabledFor(logging.CRITICAL) is False
    setup_logging(level="INFO")
    assert logging.getLogger("currency_converter").isEnabledFor(logging.INFO) is True
