"""Pytest configuration and fixtures."""
import logging
import pytest
from pathlib import Path
import tempfile
import yaml
from currency_converter.rates.store import RateStore


@pytest.fixture
def temp_config_file():
    """Create a temporary config file for testing."""
    config_data = {
        'app': {
            'name': 'Test App',
            'version': '0.1.0',
            'debug': True
        },
        'rates': {
            'cache_file': 'test_rates.json',
            'seed_defaults': False,
            'defaults': [
                {'from': 'usd', 'to': 'chf', 'rate': 0.88},
            ],
        },
        'history': {
            'capacity': 5,
            'display_count': 3
        },
        'logging': {
            'level': 'DEBUG',
            'format': 'text'
        }
    }

    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        yaml.dump(config_data, f)
        config_path = f.name

    yield config_path

    # Cleanup
    Path(config_path).unlink()


@pytest.fixture
def cache_path(tmp_path):
    """Path of a rate cache that does not exist yet."""
    return tmp_path / "rates_cache.json"


@pytest.fixture
def store(cache_path):
    """Empty rate store writing to a temporary cache file."""
    return RateStore(cache_path)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep configuration overrides from the shell out of the tests."""
    for var in (
        "CURRENCY_CONVERTER_CONFIG",
        "CURRENCY_CONVERTER_CACHE_FILE",
        "CURRENCY_CONVERTER_HISTORY_CAPACITY",
        "CURRENCY_CONVERTER_DEBUG",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    yield
    logging.disable(logging.NOTSET)
