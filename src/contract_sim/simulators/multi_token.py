"""
MultiToken simulator.
"""

from __future__ import annotations

from ..contracts import MultiTokenContract
from ..core import SimulatorConfig, create_simulator
from ..runtime import Either
from ..witnesses import EmptyPrivateState, empty_witnesses

MultiTokenSimulatorBase = create_simulator(
    SimulatorConfig(
        contract_factory=MultiTokenContract,
        default_private_state=EmptyPrivateState,
        contract_args=lambda uri=None: (uri,),
        ledger_extractor=MultiTokenContract.ledger,
        witnesses_factory=empty_witnesses,
    ),
    name="MultiTokenSimulatorBase",
)


class MultiTokenSimulator(MultiTokenSimulatorBase):
    """Constructor argument: ``uri``; omit it or pass ``None`` to deploy uninitialized."""

    def initialize(self, uri: str) -> None:
        self.circuits.impure.initialize(uri)

    def uri(self, token_id: int) -> str:
        return self.circuits.impure.uri(token_id)

    def balance_of(self, account: Either, token_id: int) -> int:
        return self.circuits.impure.balance_of(account, token_id)

    def set_approval_for_all(self, operator: Either, approved: bool) -> None:
        self.circuits.impure.set_approval_for_all(operator, approved)

    def is_approved_for_all(self, account: Either, operator: Either) -> bool:
        return self.circuits.impure.is_approved_for_all(account, operator)

    def transfer_from(self, from_: Either, to: Either, token_id: int, value: int) -> None:
        self.circuits.impure.transfer_from(from_, to, token_id, value)

    def _unsafe_transfer_from(self, from_: Either, to: Either, token_id: int, value: int) -> None:
        self.circuits.impure._unsafe_transfer_from(from_, to, token_id, value)

    def _transfer(self, from_: Either, to: Either, token_id: int, value: int) -> None:
        self.circuits.impure._transfer(from_, to, token_id, value)

    def _unsafe_transfer(self, from_: Either, to: Either, token_id: int, value: int) -> None:
        self.circuits.impure._unsafe_transfer(from_, to, token_id, value)

    def _set_uri(self, new_uri: str) -> None:
        self.circuits.impure._set_uri(new_uri)

    def _mint(self, to: Either, token_id: int, value: int) -> None:
        self.circuits.impure._mint(to, token_id, value)

    def _unsafe_mint(self, to: Either, token_id: int, value: int) -> None:
        self.circuits.impure._unsafe_mint(to, token_id, value)

    def _burn(self, from_: Either, token_id: int, value: int) -> None:
        self.circuits.impure._burn(from_, token_id, value)

    def _set_approval_for_all(self, owner: Either, operator: Either, approved: bool) -> None:
        self.circuits.impure._set_approval_for_all(owner, operator, approved)
