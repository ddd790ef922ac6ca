"""
FungibleToken: ERC-20 style token with Uint128 balances.

Accounts are Eithers. Transfers to contract addresses are refused by the
safe circuits and allowed by the ``_unsafe_*`` ones. An allowance of
MAX_UINT128 is never decreased.
"""

from __future__ import annotations

from typing import Optional

from ..runtime import (
    CircuitContext,
    CompiledContract,
    Either,
    Ledger,
    LedgerMap,
    check_uint,
    impure_circuit,
    ledger_field,
    own_public_key,
    require,
)
from . import initializable
from .utils import BURN_ADDRESS, is_contract_address, is_key_or_address_zero

MAX_UINT128 = (1 << 128) - 1

BALANCES = "balances"
ALLOWANCES = "allowances"
TOTAL_SUPPLY = "total_supply"
NAME = "name"
SYMBOL = "symbol"
DECIMALS = "decimals"


class FungibleTokenLedger(Ledger):
    balances = ledger_field()
    allowances = ledger_field()
    total_supply = ledger_field()
    name = ledger_field()
    symbol = ledger_field()
    decimals = ledger_field()
    is_initialized = ledger_field()


class FungibleTokenContract(CompiledContract):
    """Constructor arguments: ``(name: str, symbol: str, decimals: int, is_init: bool)``."""

    LEDGER_CLASS = FungibleTokenLedger
    LEDGER_FIELDS = {
        BALANCES: LedgerMap(),
        ALLOWANCES: LedgerMap(),
        TOTAL_SUPPLY: 0,
        NAME: "",
        SYMBOL: "",
        DECIMALS: 0,
        **initializable.LEDGER_FIELDS,
    }

    def constructor(
        self, context: CircuitContext, name: str, symbol: str, decimals: int, is_init: bool
    ) -> None:
        if is_init:
            initializable.initialize(context)
            self.write(context, NAME, name)
            self.write(context, SYMBOL, symbol)
            self.write(context, DECIMALS, decimals)

    # ==================== Metadata ====================

    @impure_circuit
    def name(self, context: CircuitContext) -> str:
        initializable.assert_initialized(context)
        return self.read(context, NAME)

    @impure_circuit
    def symbol(self, context: CircuitContext) -> str:
        initializable.assert_initialized(context)
        return self.read(context, SYMBOL)

    @impure_circuit
    def decimals(self, context: CircuitContext) -> int:
        initializable.assert_initialized(context)
        return self.read(context, DECIMALS)

    @impure_circuit
    def total_supply(self, context: CircuitContext) -> int:
        initializable.assert_initialized(context)
        return self.read(context, TOTAL_SUPPLY)

    @impure_circuit
    def balance_of(self, context: CircuitContext, account: Either) -> int:
        initializable.assert_initialized(context)
        return self.lookup(context, BALANCES, account, 0)

    @impure_circuit
    def allowance(self, context: CircuitContext, owner: Either, spender: Either) -> int:
        initializable.assert_initialized(context)
        spenders: Optional[LedgerMap] = self.lookup(context, ALLOWANCES, owner)
        if spenders is None:
            return 0
        return spenders.lookup(spender, 0)

    # ==================== Transfers ====================

    @impure_circuit
    def transfer(self, context: CircuitContext, to: Either, value: int) -> bool:
        check_uint("transfer", value)
        initializable.assert_initialized(context)
        require(not is_contract_address(to), "FungibleToken: Unsafe Transfer")
        return self._unsafe_transfer(context, to, value)

    @impure_circuit
    def _unsafe_transfer(self, context: CircuitContext, to: Either, value: int) -> bool:
        check_uint("_unsafe_transfer", value)
        initializable.assert_initialized(context)
        owner = Either.from_key(own_public_key(context))
        self._unsafe_unchecked_transfer(context, owner, to, value)
        return True

    @impure_circuit
    def transfer_from(self, context: CircuitContext, from_: Either, to: Either, value: int) -> bool:
        check_uint("transfer_from", value)
        initializable.assert_initialized(context)
        require(not is_contract_address(to), "FungibleToken: Unsafe Transfer")
        return self._unsafe_transfer_from(context, from_, to, value)

    @impure_circuit
    def _unsafe_transfer_from(self, context: CircuitContext, from_: Either, to: Either, value: int) -> bool:
        check_uint("_unsafe_transfer_from", value)
        initializable.assert_initialized(context)
        spender = Either.from_key(own_public_key(context))
        self._spend_allowance(context, from_, spender, value)
        self._unsafe_unchecked_transfer(context, from_, to, value)
        return True

    @impure_circuit
    def approve(self, context: CircuitContext, spender: Either, value: int) -> bool:
        check_uint("approve", value)
        initializable.assert_initialized(context)
        owner = Either.from_key(own_public_key(context))
        self._approve(context, owner, spender, value)
        return True

    @impure_circuit
    def _transfer(self, context: CircuitContext, from_: Either, to: Either, value: int) -> None:
        check_uint("_transfer", value)
        initializable.assert_initialized(context)
        require(not is_contract_address(to), "FungibleToken: Unsafe Transfer")
        self._unsafe_unchecked_transfer(context, from_, to, value)

    @impure_circuit
    def _unsafe_unchecked_transfer(self, context: CircuitContext, from_: Either, to: Either, value: int) -> None:
        check_uint("_unsafe_unchecked_transfer", value)
        initializable.assert_initialized(context)
        require(not is_key_or_address_zero(from_), "FungibleToken: invalid sender")
        require(not is_key_or_address_zero(to), "FungibleToken: invalid receiver")
        self._update(context, from_, to, value)

    # ==================== Supply ====================

    @impure_circuit
    def _mint(self, context: CircuitContext, account: Either, value: int) -> None:
        check_uint("_mint", value)
        initializable.assert_initialized(context)
        require(not is_contract_address(account), "FungibleToken: Unsafe Transfer")
        self._unsafe_mint(context, account, value)

    @impure_circuit
    def _unsafe_mint(self, context: CircuitContext, account: Either, value: int) -> None:
        check_uint("_unsafe_mint", value)
        initializable.assert_initialized(context)
        require(not is_key_or_address_zero(account), "FungibleToken: invalid receiver")
        self._update(context, BURN_ADDRESS, account, value)

    @impure_circuit
    def _burn(self, context: CircuitContext, account: Either, value: int) -> None:
        check_uint("_burn", value)
        initializable.assert_initialized(context)
        require(not is_key_or_address_zero(account), "FungibleToken: invalid sender")
        self._update(context, account, BURN_ADDRESS, value)

    # ==================== Allowances ====================

    @impure_circuit
    def _approve(self, context: CircuitContext, owner: Either, spender: Either, value: int) -> None:
        check_uint("_approve", value)
        initializable.assert_initialized(context)
        require(not is_key_or_address_zero(owner), "FungibleToken: invalid owner")
        require(not is_key_or_address_zero(spender), "FungibleToken: invalid spender")
        spenders = self.lookup(context, ALLOWANCES, owner, LedgerMap())
        self.insert(context, ALLOWANCES, owner, spenders.insert(spender, value))

    @impure_circuit
    def _spend_allowance(self, context: CircuitContext, owner: Either, spender: Either, value: int) -> None:
        check_uint("_spend_allowance", value)
        initializable.assert_initialized(context)
        current = self.allowance(context, owner, spender)
        if current < MAX_UINT128:
            require(current >= value, "FungibleToken: insufficient allowance")
            self._approve(context, owner, spender, current - value)

    def _update(self, context: CircuitContext, from_: Either, to: Either, value: int) -> None:
        if is_key_or_address_zero(from_):
            supply = self.read(context, TOTAL_SUPPLY)
            require(supply <= MAX_UINT128 - value, "FungibleToken: arithmetic overflow")
            self.write(context, TOTAL_SUPPLY, supply + value)
        else:
            from_balance = self.lookup(context, BALANCES, from_, 0)
            require(from_balance >= value, "FungibleToken: insufficient balance")
            self.insert(context, BALANCES, from_, from_balance - value)

        if is_key_or_address_zero(to):
            self.write(context, TOTAL_SUPPLY, self.read(context, TOTAL_SUPPLY) - value)
        else:
            to_balance = self.lookup(context, BALANCES, to, 0)
            self.insert(context, BALANCES, to, to_balance + value)
