"""
Contract Simulator

Runs compiled contract circuits against an in-memory execution context so
contract logic can be tested without a ledger node, prover or wallet.
"""

__version__ = "0.1.0"

from .config import SimulatorSettings, get_settings, reset_settings
from .core import (
    AbstractSimulator,
    CircuitContextManager,
    CircuitProxies,
    CircuitTables,
    ContractSimulator,
    GeneratedSimulator,
    SimulatorConfig,
    create_simulator,
)
from .exceptions import (
    CircuitAssertionError,
    CircuitTypeError,
    ConfigurationError,
    ContractRuntimeError,
    SimulatorError,
    UnknownCircuitError,
    WitnessError,
)
from .logging_config import setup_logging

__all__ = [
    "__version__",
    "SimulatorSettings",
    "get_settings",
    "reset_settings",
    "AbstractSimulator",
    "CircuitContextManager",
    "CircuitProxies",
    "CircuitTables",
    "ContractSimulator",
    "GeneratedSimulator",
    "SimulatorConfig",
    "create_simulator",
    "CircuitAssertionError",
    "CircuitTypeError",
    "ConfigurationError",
    "ContractRuntimeError",
    "SimulatorError",
    "UnknownCircuitError",
    "WitnessError",
    "setup_logging",
]
