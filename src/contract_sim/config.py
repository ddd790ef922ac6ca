"""
Contract simulator configuration.

Settings come from environment variables so CI jobs can change the
default caller identity or log output without touching test code:

- CONTRACT_SIM_DEFAULT_COIN_PK: 64 hex chars used to seed constructor contexts
- CONTRACT_SIM_LOG_LEVEL: level for the ``contract_sim`` logger
- CONTRACT_SIM_LOG_FORMAT: ``text`` or ``json``

The two log settings only take effect once
``contract_sim.logging_config.configure_from_settings(get_settings())`` is
called. Importing the package leaves logging untouched; the test suite applies
them through a session fixture in ``tests/conftest.py``.
"""

from __future__ import annotations

import logging
import os
import string
from dataclasses import dataclass
from typing import Optional

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_COIN_PK = "0" * 64
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_LOG_FORMATS = ("text", "json")


def _validate_coin_pk(value: str, env_var: str) -> str:
    if len(value) != 64 or any(c not in string.hexdigits for c in value):
        raise ConfigurationError(
            f"{env_var} must be 64 hex characters",
            details={"env_var": env_var, "length": len(value)},
        )
    return value.lower()


@dataclass(frozen=True)
class SimulatorSettings:
    """Resolved simulator settings."""

    default_coin_pk: str = DEFAULT_COIN_PK
    log_level: str = "WARNING"
    log_format: str = "text"

    @classmethod
    def from_env(cls) -> "SimulatorSettings":
        """
        Build settings from the process environment.

        Returns:
            Validated settings

        Raises:
            ConfigurationError: If any variable holds an invalid value
        """
        coin_pk = os.getenv("CONTRACT_SIM_DEFAULT_COIN_PK", "").strip() or DEFAULT_COIN_PK
        coin_pk = _validate_coin_pk(coin_pk, "CONTRACT_SIM_DEFAULT_COIN_PK")

        log_level = os.getenv("CONTRACT_SIM_LOG_LEVEL", "WARNING").strip().upper()
        if log_level not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"CONTRACT_SIM_LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}",
                details={"env_var": "CONTRACT_SIM_LOG_LEVEL", "value": log_level},
            )

        log_format = os.getenv("CONTRACT_SIM_LOG_FORMAT", "text").strip().lower()
        if log_format not in VALID_LOG_FORMATS:
            raise ConfigurationError(
                f"CONTRACT_SIM_LOG_FORMAT must be one of {', '.join(VALID_LOG_FORMATS)}",
                details={"env_var": "CONTRACT_SIM_LOG_FORMAT", "value": log_format},
            )

        if coin_pk != DEFAULT_COIN_PK:
            logger.debug(
                "Using custom default coin public key",
                extra={"event": "config.default_coin_pk", "prefix": coin_pk[:8]},
            )

        return cls(default_coin_pk=coin_pk, log_level=log_level, log_format=log_format)


_settings: Optional[SimulatorSettings] = None


def get_settings() -> SimulatorSettings:
    """Return the cached settings, reading the environment on first use."""
    global _settings
    if _settings is None:
        _settings = SimulatorSettings.from_env()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
