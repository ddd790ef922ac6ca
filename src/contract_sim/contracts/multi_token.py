"""
MultiToken: ERC-1155 style token with per-id Uint128 balances.
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
from .fungible_token import MAX_UINT128
from .utils import BURN_ADDRESS, is_contract_address, is_key_or_address_zero

BALANCES = "balances"
OPERATOR_APPROVALS = "operator_approvals"
URI = "uri"


class MultiTokenLedger(Ledger):
    balances = ledger_field()
    operator_approvals = ledger_field()
    uri = ledger_field()
    is_initialized = ledger_field()


class MultiTokenContract(CompiledContract):
    """Constructor arguments: ``(uri: Optional[str])``; ``None`` deploys uninitialized."""

    LEDGER_CLASS = MultiTokenLedger
    LEDGER_FIELDS = {
        BALANCES: LedgerMap(),
        OPERATOR_APPROVALS: LedgerMap(),
        URI: "",
        **initializable.LEDGER_FIELDS,
    }

    def constructor(self, context: CircuitContext, uri: Optional[str]) -> None:
        if uri is not None:
            self.initialize(context, uri)

    @impure_circuit
    def initialize(self, context: CircuitContext, uri: str) -> None:
        initializable.initialize(context)
        self._set_uri(context, uri)

    # ==================== Queries ====================

    @impure_circuit
    def uri(self, context: CircuitContext, token_id: int) -> str:
        initializable.assert_initialized(context)
        return self.read(context, URI)

    @impure_circuit
    def balance_of(self, context: CircuitContext, account: Either, token_id: int) -> int:
        initializable.assert_initialized(context)
        holders = self.lookup(context, BALANCES, token_id)
        if holders is None:
            return 0
        return holders.lookup(account, 0)

    @impure_circuit
    def is_approved_for_all(self, context: CircuitContext, account: Either, operator: Either) -> bool:
        initializable.assert_initialized(context)
        operators = self.lookup(context, OPERATOR_APPROVALS, account)
        if operators is None:
            return False
        return bool(operators.lookup(operator, False))

    # ==================== Approvals ====================

    @impure_circuit
    def set_approval_for_all(self, context: CircuitContext, operator: Either, approved: bool) -> None:
        initializable.assert_initialized(context)
        caller = Either.from_key(own_public_key(context))
        self._set_approval_for_all(context, caller, operator, approved)

    @impure_circuit
    def _set_approval_for_all(
        self, context: CircuitContext, owner: Either, operator: Either, approved: bool
    ) -> None:
        initializable.assert_initialized(context)
        require(owner != operator, "MultiToken: invalid operator")
        operators = self.lookup(context, OPERATOR_APPROVALS, owner, LedgerMap())
        self.insert(context, OPERATOR_APPROVALS, owner, operators.insert(operator, approved))

    # ==================== Transfers ====================

    @impure_circuit
    def transfer_from(
        self, context: CircuitContext, from_: Either, to: Either, token_id: int, value: int
    ) -> None:
        check_uint("transfer_from", token_id)
        check_uint("transfer_from", value)
        initializable.assert_initialized(context)
        require(not is_contract_address(to), "MultiToken: unsafe transfer")
        self._unsafe_transfer_from(context, from_, to, token_id, value)

    @impure_circuit
    def _unsafe_transfer_from(
        self, context: CircuitContext, from_: Either, to: Either, token_id: int, value: int
    ) -> None:
        check_uint("_unsafe_transfer_from", token_id)
        check_uint("_unsafe_transfer_from", value)
        initializable.assert_initialized(context)
        caller = Either.from_key(own_public_key(context))
        if from_ != caller:
            require(
                self.is_approved_for_all(context, from_, caller),
                "MultiToken: unauthorized operator",
            )
        self._unsafe_transfer(context, from_, to, token_id, value)

    @impure_circuit
    def _transfer(self, context: CircuitContext, from_: Either, to: Either, token_id: int, value: int) -> None:
        check_uint("_transfer", token_id)
        check_uint("_transfer", value)
        initializable.assert_initialized(context)
        require(not is_contract_address(to), "MultiToken: unsafe transfer")
        self._unsafe_transfer(context, from_, to, token_id, value)

    @impure_circuit
    def _unsafe_transfer(
        self, context: CircuitContext, from_: Either, to: Either, token_id: int, value: int
    ) -> None:
        check_uint("_unsafe_transfer", token_id)
        check_uint("_unsafe_transfer", value)
        initializable.assert_initialized(context)
        require(not is_key_or_address_zero(from_), "MultiToken: invalid sender")
        require(not is_key_or_address_zero(to), "MultiToken: invalid receiver")
        self._update(context, from_, to, token_id, value)

    # ==================== Supply ====================

    @impure_circuit
    def _set_uri(self, context: CircuitContext, new_uri: str) -> None:
        initializable.assert_initialized(context)
        self.write(context, URI, new_uri)

    @impure_circuit
    def _mint(self, context: CircuitContext, to: Either, token_id: int, value: int) -> None:
        check_uint("_mint", token_id)
        check_uint("_mint", value)
        initializable.assert_initialized(context)
        require(not is_contract_address(to), "MultiToken: unsafe transfer")
        self._unsafe_mint(context, to, token_id, value)

    @impure_circuit
    def _unsafe_mint(self, context: CircuitContext, to: Either, token_id: int, value: int) -> None:
        check_uint("_unsafe_mint", token_id)
        check_uint("_unsafe_mint", value)
        initializable.assert_initialized(context)
        require(not is_key_or_address_zero(to), "MultiToken: invalid receiver")
        self._update(context, BURN_ADDRESS, to, token_id, value)

    @impure_circuit
    def _burn(self, context: CircuitContext, from_: Either, token_id: int, value: int) -> None:
        check_uint("_burn", token_id)
        check_uint("_burn", value)
        initializable.assert_initialized(context)
        require(not is_key_or_address_zero(from_), "MultiToken: invalid sender")
        self._update(context, from_, BURN_ADDRESS, token_id, value)

    def _update(self, context: CircuitContext, from_: Either, to: Either, token_id: int, value: int) -> None:
        holders = self.lookup(context, BALANCES, token_id, LedgerMap())

        if not is_key_or_address_zero(from_):
            from_balance = holders.lookup(from_, 0)
            require(from_balance >= value, "MultiToken: insufficient balance")
            holders = holders.insert(from_, from_balance - value)

        if not is_key_or_address_zero(to):
            to_balance = holders.lookup(to, 0)
            require(to_balance <= MAX_UINT128 - value, "MultiToken: arithmetic overflow")
            holders = holders.insert(to, to_balance + value)

        self.insert(context, BALANCES, token_id, holders)
