"""
Ownable simulator.

    simulator = OwnableSimulator(create_either_test_user("OWNER"), True)
    simulator.as_caller(to_hex_padded("OWNER")).transfer_ownership(new_owner)
"""

from __future__ import annotations

from ..contracts import OwnableContract
from ..core import SimulatorConfig, create_simulator
from ..runtime import Either
from ..witnesses import EmptyPrivateState, empty_witnesses

OwnableSimulatorBase = create_simulator(
    SimulatorConfig(
        contract_factory=OwnableContract,
        default_private_state=EmptyPrivateState,
        contract_args=lambda initial_owner, is_init: (initial_owner, is_init),
        ledger_extractor=OwnableContract.ledger,
        witnesses_factory=empty_witnesses,
    ),
    name="OwnableSimulatorBase",
)


class OwnableSimulator(OwnableSimulatorBase):
    """Constructor arguments: ``(initial_owner: Either, is_init: bool)``."""

    def owner(self) -> Either:
        return self.circuits.impure.owner()

    def assert_only_owner(self) -> None:
        self.circuits.impure.assert_only_owner()

    def transfer_ownership(self, new_owner: Either) -> None:
        self.circuits.impure.transfer_ownership(new_owner)

    def _unsafe_transfer_ownership(self, new_owner: Either) -> None:
        self.circuits.impure._unsafe_transfer_ownership(new_owner)

    def renounce_ownership(self) -> None:
        self.circuits.impure.renounce_ownership()

    def _transfer_ownership(self, new_owner: Either) -> None:
        self.circuits.impure._transfer_ownership(new_owner)

    def _unsafe_unchecked_transfer_ownership(self, new_owner: Either) -> None:
        self.circuits.impure._unsafe_unchecked_transfer_ownership(new_owner)
