"""
Tests for environment-driven settings.
"""

import pytest

from contract_sim.config import (
    DEFAULT_COIN_PK,
    SimulatorSettings,
    get_settings,
    reset_settings,
)
from contract_sim.exceptions import ConfigurationError

from counter_contract import CounterSimulator


class TestFromEnv:
    """Test SimulatorSettings.from_env"""

    def test_defaults(self, fresh_settings):
        settings = SimulatorSettings.from_env()

        assert settings.default_coin_pk == DEFAULT_COIN_PK
        assert settings.log_level == "WARNING"
        assert settings.log_format == "text"

    def test_custom_values(self, fresh_settings, monkeypatch):
        monkeypatch.setenv("CONTRACT_SIM_DEFAULT_COIN_PK", "AB" * 32)
        monkeypatch.setenv("CONTRACT_SIM_LOG_LEVEL", "debug")
        monkeypatch.setenv("CONTRACT_SIM_LOG_FORMAT", "JSON")

        settings = SimulatorSettings.from_env()

        assert settings.default_coin_pk == "ab" * 32
        assert settings.log_level == "DEBUG"
        assert settings.log_format == "json"

    def test_blank_coin_pk_uses_default(self, fresh_settings, monkeypatch):
        monkeypatch.setenv("CONTRACT_SIM_DEFAULT_COIN_PK", "   ")
        assert SimulatorSettings.from_env().default_coin_pk == DEFAULT_COIN_PK

    @pytest.mark.parametrize("value", ["abc", "zz" * 32, "a" * 65])
    def test_invalid_coin_pk(self, fresh_settings, monkeypatch, value):
        monkeypatch.setenv("CONTRACT_SIM_DEFAULT_COIN_PK", value)

        with pytest.raises(ConfigurationError, match="must be 64 hex characters") as exc_info:
            SimulatorSettings.from_env()
        assert exc_info.value.details["env_var"] == "CONTRACT_SIM_DEFAULT_COIN_PK"

    def test_invalid_log_level(self, fresh_settings, monkeypatch):
        monkeypatch.setenv("CONTRACT_SIM_LOG_LEVEL", "LOUD")
        with pytest.raises(ConfigurationError, match="CONTRACT_SIM_LOG_LEVEL must be one of"):
            SimulatorSettings.from_env()

    def test_invalid_log_format(self, fresh_settings, monkeypatch):
        monkeypatch.setenv("CONTRACT_SIM_LOG_FORMAT", "xml")
        with pytest.raises(ConfigurationError, match="CONTRACT_SIM_LOG_FORMAT must be one of"):
            SimulatorSettings.from_env()


class TestCache:
    """Test get_settings / reset_settings"""

    def test_cached_until_reset(self, fresh_settings, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("CONTRACT_SIM_LOG_LEVEL", "ERROR")

        assert get_settings() is first

        reset_settings()
        assert get_settings().log_level == "ERROR"

    def test_simulators_use_configured_default_caller(self, fresh_settings, monkeypatch):
        monkeypatch.setenv("CONTRACT_SIM_DEFAULT_COIN_PK", "cd" * 32)
        reset_settings()

        sim = CounterSimulator()

        assert sim.circuit_context.current_zswap_local_state.coin_public_key == "cd" * 32
