"""Runtime settings, read from TODOBAN_* environment variables."""

import logging
from collections.abc import Mapping
from typing import Any

from todoban.errors import ConfigError

ENV_PREFIX = "TODOBAN_"

TODOBAN_DEFAULTS: dict[str, Any] = {
    "seed-cards": True,
    "pause": True,
    "color": True,
    "log-level": "WARNING",
}

_TRUE = ("true", "yes", "on", "1")
_FALSE = ("false", "no", "off", "0")


def _python_key(key: str) -> str:
    """Convert hyphenated setting key to Python-style (underscored)."""
    return key.replace("-", "_")


def _env_key(key: str) -> str:
    """Convert hyphenated setting key to its environment variable name."""
    return ENV_PREFIX + key.replace("-", "_").upper()


def _coerce_value(key: str, raw: str) -> Any:
    """Type-coerce a raw string using the type of the default."""
    default = TODOBAN_DEFAULTS[key]
    if isinstance(default, bool):
        value = raw.strip().lower()
        if value in _TRUE:
            return True
        if value in _FALSE:
            return False
        raise ConfigError(f"{_env_key(key)}: expected a boolean, got {raw!r}")
    if key == "log-level":
        return parse_log_level(raw, source=_env_key(key))
    return raw


def parse_log_level(raw: str, source: str = "log level") -> str:
    """Normalise a logging level name, rejecting unknown ones."""
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"{source}: unknown log level {raw!r}")
    return level


def load_config(environ: Mapping[str, str]) -> dict[str, Any]:
    """Build settings from defaults overlaid with TODOBAN_* variables.

    Keys in the result are underscored: {"seed_cards": True, ...}.
    """
    config = {}
    for key, default in TODOBAN_DEFAULTS.items():
        raw = environ.get(_env_key(key))
        config[_python_key(key)] = default if raw is None else _coerce_value(key, raw)
    return config
