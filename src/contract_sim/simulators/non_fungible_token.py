"""
NonFungibleToken simulator.
"""

from __future__ import annotations

from ..contracts import NonFungibleTokenContract
from ..core import SimulatorConfig, create_simulator
from ..runtime import Either
from ..witnesses import EmptyPrivateState, empty_witnesses

NonFungibleTokenSimulatorBase = create_simulator(
    SimulatorConfig(
        contract_factory=NonFungibleTokenContract,
        default_private_state=EmptyPrivateState,
        contract_args=lambda name, symbol, is_init: (name, symbol, is_init),
        ledger_extractor=NonFungibleTokenContract.ledger,
        witnesses_factory=empty_witnesses,
    ),
    name="NonFungibleTokenSimulatorBase",
)


class NonFungibleTokenSimulator(NonFungibleTokenSimulatorBase):
    """Constructor arguments: ``(name, symbol, is_init)``."""

    def name(self) -> str:
        return self.circuits.impure.name()

    def symbol(self) -> str:
        return self.circuits.impure.symbol()

    def balance_of(self, owner: Either) -> int:
        return self.circuits.impure.balance_of(owner)

    def owner_of(self, token_id: int) -> Either:
        return self.circuits.impure.owner_of(token_id)

    def token_uri(self, token_id: int) -> str:
        return self.circuits.impure.token_uri(token_id)

    def approve(self, to: Either, token_id: int) -> None:
        self.circuits.impure.approve(to, token_id)

    def get_approved(self, token_id: int) -> Either:
        return self.circuits.impure.get_approved(token_id)

    def set_approval_for_all(self, operator: Either, approved: bool) -> None:
        self.circuits.impure.set_approval_for_all(operator, approved)

    def is_approved_for_all(self, owner: Either, operator: Either) -> bool:
        return self.circuits.impure.is_approved_for_all(owner, operator)

    def transfer_from(self, from_: Either, to: Either, token_id: int) -> None:
        self.circuits.impure.transfer_from(from_, to, token_id)

    def _require_owned(self, token_id: int) -> Either:
        return self.circuits.impure._require_owned(token_id)

    def _owner_of(self, token_id: int) -> Either:
        return self.circuits.impure._owner_of(token_id)

    def _approve(self, to: Either, token_id: int, auth: Either) -> None:
        self.circuits.impure._approve(to, token_id, auth)

    def _check_authorized(self, owner: Either, spender: Either, token_id: int) -> None:
        self.circuits.impure._check_authorized(owner, spender, token_id)

    def _is_authorized(self, owner: Either, spender: Either, token_id: int) -> bool:
        return self.circuits.impure._is_authorized(owner, spender, token_id)

    def _get_approved(self, token_id: int) -> Either:
        return self.circuits.impure._get_approved(token_id)

    def _set_approval_for_all(self, owner: Either, operator: Either, approved: bool) -> None:
        self.circuits.impure._set_approval_for_all(owner, operator, approved)

    def _mint(self, to: Either, token_id: int) -> None:
        self.circuits.impure._mint(to, token_id)

    def _burn(self, token_id: int) -> None:
        self.circuits.impure._burn(token_id)

    def _transfer(self, from_: Either, to: Either, token_id: int) -> None:
        self.circuits.impure._transfer(from_, to, token_id)

    def _set_token_uri(self, token_id: int, uri: str) -> None:
        self.circuits.impure._set_token_uri(token_id, uri)

    def _unsafe_transfer_from(self, from_: Either, to: Either, token_id: int) -> None:
        self.circuits.impure._unsafe_transfer_from(from_, to, token_id)

    def _unsafe_transfer(self, from_: Either, to: Either, token_id: int) -> None:
        self.circuits.impure._unsafe_transfer(from_, to, token_id)

    def _unsafe_mint(self, to: Either, token_id: int) -> None:
        self.circuits.impure._unsafe_mint(to, token_id)
