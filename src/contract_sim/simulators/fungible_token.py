"""
FungibleToken simulator.
"""

from __future__ import annotations

from ..contracts import FungibleTokenContract
from ..core import SimulatorConfig, create_simulator
from ..runtime import Either
from ..witnesses import EmptyPrivateState, empty_witnesses

FungibleTokenSimulatorBase = create_simulator(
    SimulatorConfig(
        contract_factory=FungibleTokenContract,
        default_private_state=EmptyPrivateState,
        contract_args=lambda name, symbol, decimals, is_init: (name, symbol, decimals, is_init),
        ledger_extractor=FungibleTokenContract.ledger,
        witnesses_factory=empty_witnesses,
    ),
    name="FungibleTokenSimulatorBase",
)


class FungibleTokenSimulator(FungibleTokenSimulatorBase):
    """Constructor arguments: ``(name, symbol, decimals, is_init)``."""

    def name(self) -> str:
        return self.circuits.impure.name()

    def symbol(self) -> str:
        return self.circuits.impure.symbol()

    def decimals(self) -> int:
        return self.circuits.impure.decimals()

    def total_supply(self) -> int:
        return self.circuits.impure.total_supply()

    def balance_of(self, account: Either) -> int:
        return self.circuits.impure.balance_of(account)

    def allowance(self, owner: Either, spender: Either) -> int:
        return self.circuits.impure.allowance(owner, spender)

    def transfer(self, to: Either, value: int) -> bool:
        return self.circuits.impure.transfer(to, value)

    def _unsafe_transfer(self, to: Either, value: int) -> bool:
        return self.circuits.impure._unsafe_transfer(to, value)

    def transfer_from(self, from_: Either, to: Either, value: int) -> bool:
        return self.circuits.impure.transfer_from(from_, to, value)

    def _unsafe_transfer_from(self, from_: Either, to: Either, value: int) -> bool:
        return self.circuits.impure._unsafe_transfer_from(from_, to, value)

    def approve(self, spender: Either, value: int) -> bool:
        return self.circuits.impure.approve(spender, value)

    def _approve(self, owner: Either, spender: Either, value: int) -> None:
        self.circuits.impure._approve(owner, spender, value)

    def _transfer(self, from_: Either, to: Either, value: int) -> None:
        self.circuits.impure._transfer(from_, to, value)

    def _unsafe_unchecked_transfer(self, from_: Either, to: Either, value: int) -> None:
        self.circuits.impure._unsafe_unchecked_transfer(from_, to, value)

    def _mint(self, account: Either, value: int) -> None:
        self.circuits.impure._mint(account, value)

    def _unsafe_mint(self, account: Either, value: int) -> None:
        self.circuits.impure._unsafe_mint(account, value)

    def _burn(self, account: Either, value: int) -> None:
        self.circuits.impure._burn(account, value)

    def _spend_allowance(self, owner: Either, spender: Either, value: int) -> None:
        self.circuits.impure._spend_allowance(owner, spender, value)
