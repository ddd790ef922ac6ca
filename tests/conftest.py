"""
Test configuration and fixtures
"""
import logging
import sys
from pathlib import Path

# Add project root and src to Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"

sys.path.insert(0, str(project_root))
sys.path.insert(0, str(src_path))

import pytest


@pytest.fixture
def fresh_settings(monkeypatch):
    """Clean simulator environment; the settings cache is dropped before and after."""
    from contract_sim.config import reset_settings

    for var in ("CONTRACT_SIM_DEFAULT_COIN_PK", "CONTRACT_SIM_LOG_LEVEL", "CONTRACT_SIM_LOG_FORMAT"):
        monkeypatch.delenv(var, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(scope="session", autouse=True)
def package_logging():
    """Apply CONTRACT_SIM_LOG_LEVEL / CONTRACT_SIM_LOG_FORMAT for the whole run."""
    from contract_sim.config import get_settings, reset_settings
    from contract_sim.logging_config import configure_from_settings

    logger = configure_from_settings(get_settings())
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    reset_settings()
