"""
Pausable simulator.
"""

from __future__ import annotations

from ..contracts import PausableContract
from ..core import SimulatorConfig, create_simulator
from ..witnesses import EmptyPrivateState, empty_witnesses

PausableSimulatorBase = create_simulator(
    SimulatorConfig(
        contract_factory=PausableContract,
        default_private_state=EmptyPrivateState,
        contract_args=lambda: (),
        ledger_extractor=PausableContract.ledger,
        witnesses_factory=empty_witnesses,
    ),
    name="PausableSimulatorBase",
)


class PausableSimulator(PausableSimulatorBase):
    def is_paused(self) -> bool:
        return self.circuits.impure.is_paused()

    def assert_paused(self) -> None:
        self.circuits.impure.assert_paused()

    def assert_not_paused(self) -> None:
        self.circuits.impure.assert_not_paused()

    def _pause(self) -> None:
        self.circuits.impure._pause()

    def _unpause(self) -> None:
        self.circuits.impure._unpause()
