"""Configuration management for Currency Converter."""
import copy
import os
from pathlib import Path
from typing import Any, Dict, List, Optional
import yaml
from dotenv import load_dotenv
from currency_converter.utils.errors import ConfigurationError
from currency_converter.utils.logging import setup_logging
import logging

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.yaml"

DEFAULTS: Dict[str, Any] = {
    'app': {
        'name': 'Currency Converter',
        'version': '0.1.0',
        'debug': False,
    },
    'rates': {
        'cache_file': 'rates_cache.json',
        'seed_defaults': True,
        'defaults': [
            {'from': 'USD', 'to': 'EUR', 'rate': 0.92},
            {'from': 'USD', 'to': 'GBP', 'rate': 0.79},
            {'from': 'USD', 'to': 'JPY', 'rate': 149.50},
            {'from': 'EUR', 'to': 'GBP', 'rate': 0.86},
        ],
    },
    'history': {
        'capacity': 50,
        'display_count': 10,
    },
    'logging': {
        'enabled': True,
        'level': 'WARNING',
        'format': 'text',
        'file': None,
    },
}

ENV_OVERRIDES = {
    "CURRENCY_CONVERTER_CACHE_FILE": ("rates.cache_file", str),
    "CURRENCY_CONVERTER_HISTORY_CAPACITY": ("history.capacity", int),
    "CURRENCY_CONVERTER_DEBUG": ("app.debug", bool),
    "LOG_LEVEL": ("logging.level", str),
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _coerce(value: str, kind: type) -> Any:
    if kind is bool:
        return value.strip().lower() in ['true', '1', 'yes', 'on']
    return kind(value)


class Config:
    """Application configuration."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_path: Path to YAML configuration file. When omitted,
                ``config.yaml`` is used if it exists, otherwise the built-in
                defaults apply.
        """
        self.config_path = Path(config_path or DEFAULT_CONFIG_PATH)
        self._required = config_path is not None
        self._config: Dict[str, Any] = {}
        self._load()

    def _load(self) -> None:
        """Load configuration from YAML and environment."""
        # Load environment variables from .env
        load_dotenv()

        file_config: Dict[str, Any] = {}
        if self.config_path.exists():
            with open(self.config_path, 'r') as f:
                file_config = yaml.safe_load(f)

            if not file_config:
                raise ConfigurationError(f"Empty configuration file: {self.config_path}")
            if not isinstance(file_config, dict):
                raise ConfigurationError(
                    f"Configuration file must contain a mapping: {self.config_path}"
                )
        elif self._required:
            raise ConfigurationError(f"Config file not found: {self.config_path}")

        self._config = _merge(DEFAULTS, file_config)
        self._apply_environment()

        issues = self.validate()
        if issues:
            raise ConfigurationError("Invalid configuration: " + "; ".join(issues))

        log_config = self._config.get('logging', {})
        setup_logging(
            level=log_config.get('level', 'WARNING'),
            log_file=log_config.get('file'),
            format_type=log_config.get('format', 'text'),
            enabled=log_config.get('enabled', True)
        )

        logger.info("Configuration loaded successfully")

    def _apply_environment(self) -> None:
        """Update configuration from environment variables"""
        for env_var, (key, kind) in ENV_OVERRIDES.items():
            value = os.getenv(env_var)
            if value is None:
                continue
            try:
                self._set(key, _coerce(value, kind))
            except ValueError:
                raise ConfigurationError(
                    f"Invalid environment variable {env_var}: expected {kind.__name__}, got {value!r}"
                )

    def _set(self, key: str, value: Any) -> None:
        keys = key.split('.')
        section = self._config
        for k in keys[:-1]:
            section = section.setdefault(k, {})
        section[keys[-1]] = value

    def validate(self) -> List[str]:
        """Validate configuration and return list of issues"""

        issues = []

        if not isinstance(self.get('rates.cache_file'), str) or not self.get('rates.cache_file'):
            issues.append("rates.cache_file must be a non-empty path")

        capacity = self.get('history.capacity')
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            issues.append("history.capacity must be at least 1")

        display_count = self.get('history.display_count')
        if isinstance(display_count, bool) or not isinstance(display_count, int) or display_count < 1:
            issues.append("history.display_count must be at least 1")

        for entry in self.get('rates.defaults', []) or []:
            if not isinstance(entry, dict) or not {'from', 'to', 'rate'} <= set(entry):
                issues.append(f"rates.defaults entry must have from, to and rate: {entry}")
                continue
            rate = entry['rate']
            if isinstance(rate, bool) or not isinstance(rate, (int, float)) or rate <= 0:
                issues.append(f"rates.defaults rate must be positive: {entry}")

        if self.get('logging.format') not in ["text", "json"]:
            issues.append("logging.format must be one of: text, json")

        return issues

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-separated key.

        Args:
            key: Dot-separated key (e.g., "history.capacity")
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split('.')
        value = self._config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def app_name(self) -> str:
        """Get application name."""
        return self.get('app.name', 'Currency Converter')

    @property
    def app_version(self) -> str:
        """Get application version."""
        return self.get('app.version', '0.1.0')

    @property
    def debug(self) -> bool:
        """Get debug mode."""
        return self.get('app.debug', False)

    @property
    def cache_file(self) -> str:
        """Get rate cache path."""
        return self.get('rates.cache_file', 'rates_cache.json')

    @property
    def seed_defaults(self) -> bool:
        return self.get('rates.seed_defaults', True)

    @property
    def default_rates(self) -> List[Dict[str, Any]]:
        """Rates added on every start when seeding is enabled."""
        return [
            {'from': str(e['from']).upper(), 'to': str(e['to']).upper(), 'rate': float(e['rate'])}
            for e in self.get('rates.defaults', []) or []
        ]

    @property
    def history_capacity(self) -> int:
        return self.get('history.capacity', 50)

    @property
    def history_display_count(self) -> int:
        return self.get('history.display_count', 10)


def load_config(config_path: Optional[str] = None) -> Config:
    """Load configuration, honouring CURRENCY_CONVERTER_CONFIG when no path is given."""
    return Config(config_path or os.getenv("CURRENCY_CONVERTER_CONFIG"))
