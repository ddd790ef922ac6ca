"""
Initializable simulator.
"""

from __future__ import annotations

from ..contracts import InitializableContract
from ..core import SimulatorConfig, create_simulator
from ..witnesses import EmptyPrivateState, empty_witnesses

InitializableSimulatorBase = create_simulator(
    SimulatorConfig(
        contract_factory=InitializableContract,
        default_private_state=EmptyPrivateState,
        contract_args=lambda: (),
        ledger_extractor=InitializableContract.ledger,
        witnesses_factory=empty_witnesses,
    ),
    name="InitializableSimulatorBase",
)


class InitializableSimulator(InitializableSimulatorBase):
    def initialize(self) -> None:
        self.circuits.impure.initialize()

    def assert_initialized(self) -> None:
        self.circuits.impure.assert_initialized()

    def assert_not_initialized(self) -> None:
        self.circuits.impure.assert_not_initialized()
