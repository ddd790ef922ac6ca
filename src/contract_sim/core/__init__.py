"""
Simulator core: context ownership, caller scope, witness registry,
circuit dispatch tables and the simulator factory.
"""

from .abstract_simulator import AbstractSimulator
from .context_manager import CircuitContextManager
from .contract_simulator import ContractSimulator
from .factory import GeneratedSimulator, SimulatorConfig, create_simulator
from .proxies import (
    CircuitProxies,
    CircuitProxy,
    CircuitTables,
    create_impure_circuit_proxy,
    create_pure_circuit_proxy,
    split_circuits,
)

__all__ = [
    "AbstractSimulator",
    "CircuitContextManager",
    "ContractSimulator",
    "GeneratedSimulator",
    "SimulatorConfig",
    "create_simulator",
    "CircuitProxies",
    "CircuitProxy",
    "CircuitTables",
    "create_impure_circuit_proxy",
    "create_pure_circuit_proxy",
    "split_circuits",
]
