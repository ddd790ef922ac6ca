"""
NonFungibleToken: ERC-721 style token.

Token ids are Uint128 integers, owners are Eithers. A token whose owner
is the zero key does not exist.
"""

from __future__ import annotations

from ..runtime import (
    CircuitContext,
    CompiledContract,
    Either,
    Ledger,
    LedgerMap,
    impure_circuit,
    ledger_field,
    own_public_key,
    require,
)
from . import initializable
from .utils import BURN_ADDRESS, is_contract_address, is_key_or_address_zero

NAME = "name"
SYMBOL = "symbol"
OWNERS = "owners"
BALANCES = "balances"
TOKEN_APPROVALS = "token_approvals"
OPERATOR_APPROVALS = "operator_approvals"
TOKEN_URIS = "token_uris"


class NonFungibleTokenLedger(Ledger):
    name = ledger_field()
    symbol = ledger_field()
    owners = ledger_field()
    balances = ledger_field()
    token_approvals = ledger_field()
    operator_approvals = ledger_field()
    token_uris = ledger_field()
    is_initialized = ledger_field()


class NonFungibleTokenContract(CompiledContract):
    """Constructor arguments: ``(name: str, symbol: str, is_init: bool)``."""

    LEDGER_CLASS = NonFungibleTokenLedger
    LEDGER_FIELDS = {
        NAME: "",
        SYMBOL: "",
        OWNERS: LedgerMap(),
        BALANCES: LedgerMap(),
        TOKEN_APPROVALS: LedgerMap(),
        OPERATOR_APPROVALS: LedgerMap(),
        TOKEN_URIS: LedgerMap(),
        **initializable.LEDGER_FIELDS,
    }

    def constructor(self, context: CircuitContext, name: str, symbol: str, is_init: bool) -> None:
        if is_init:
            initializable.initialize(context)
            self.write(context, NAME, name)
            self.write(context, SYMBOL, symbol)

    # ==================== Queries ====================

    @impure_circuit
    def name(self, context: CircuitContext) -> str:
        initializable.assert_initialized(context)
        return self.read(context, NAME)

    @impure_circuit
    def symbol(self, context: CircuitContext) -> str:
        initializable.assert_initialized(context)
        return self.read(context, SYMBOL)

    @impure_circuit
    def balance_of(self, context: CircuitContext, owner: Either) -> int:
        initializable.assert_initialized(context)
        return self.lookup(context, BALANCES, owner, 0)

    @impure_circuit
    def owner_of(self, context: CircuitContext, token_id: int) -> Either:
        initializable.assert_initialized(context)
        return self._require_owned(context, token_id)

    @impure_circuit
    def token_uri(self, context: CircuitContext, token_id: int) -> str:
        initializable.assert_initialized(context)
        self._require_owned(context, token_id)
        return self.lookup(context, TOKEN_URIS, token_id, "")

    @impure_circuit
    def get_approved(self, context: CircuitContext, token_id: int) -> Either:
        initializable.assert_initialized(context)
        self._require_owned(context, token_id)
        return self._get_approved(context, token_id)

    @impure_circuit
    def is_approved_for_all(self, context: CircuitContext, owner: Either, operator: Either) -> bool:
        initializable.assert_initialized(context)
        operators = self.lookup(context, OPERATOR_APPROVALS, owner)
        if operators is None:
            return False
        return bool(operators.lookup(operator, False))

    # ==================== Approvals ====================

    @impure_circuit
    def approve(self, context: CircuitContext, to: Either, token_id: int) -> None:
        initializable.assert_initialized(context)
        auth = Either.from_key(own_public_key(context))
        self._approve(context, to, token_id, auth)

    @impure_circuit
    def set_approval_for_all(self, context: CircuitContext, operator: Either, approved: bool) -> None:
        initializable.assert_initialized(context)
        owner = Either.from_key(own_public_key(context))
        self._set_approval_for_all(context, owner, operator, approved)

    @impure_circuit
    def _approve(self, context: CircuitContext, to: Either, token_id: int, auth: Either) -> None:
        initializable.assert_initialized(context)
        if not is_key_or_address_zero(auth):
            owner = self._require_owned(context, token_id)
            require(
                owner == auth or self.is_approved_for_all(context, owner, auth),
                "NonFungibleToken: Invalid Approver",
            )
        self.insert(context, TOKEN_APPROVALS, token_id, to)

    @impure_circuit
    def _set_approval_for_all(
        self, context: CircuitContext, owner: Either, operator: Either, approved: bool
    ) -> None:
        initializable.assert_initialized(context)
        require(not is_key_or_address_zero(operator), "NonFungibleToken: Invalid Operator")
        operators = self.lookup(context, OPERATOR_APPROVALS, owner, LedgerMap())
        self.insert(context, OPERATOR_APPROVALS, owner, operators.insert(operator, approved))

    @impure_circuit
    def _get_approved(self, context: CircuitContext, token_id: int) -> Either:
        initializable.assert_initialized(context)
        return self.lookup(context, TOKEN_APPROVALS, token_id, BURN_ADDRESS)

    @impure_circuit
    def _check_authorized(self, context: CircuitContext, owner: Either, spender: Either, token_id: int) -> None:
        initializable.assert_initialized(context)
        if not self._is_authorized(context, owner, spender, token_id):
            require(not is_key_or_address_zero(owner), "NonFungibleToken: Nonexistent Token")
            require(False, "NonFungibleToken: Insufficient Approval")

    @impure_circuit
    def _is_authorized(self, context: CircuitContext, owner: Either, spender: Either, token_id: int) -> bool:
        initializable.assert_initialized(context)
        return not is_key_or_address_zero(spender) and (
            owner == spender
            or self.is_approved_for_all(context, owner, spender)
            or self._get_approved(context, token_id) == spender
        )

    # ==================== Ownership ====================

    @impure_circuit
    def _require_owned(self, context: CircuitContext, token_id: int) -> Either:
        initializable.assert_initialized(context)
        owner = self._owner_of(context, token_id)
        require(not is_key_or_address_zero(owner), "NonFungibleToken: Nonexistent Token")
        return owner

    @impure_circuit
    def _owner_of(self, context: CircuitContext, token_id: int) -> Either:
        initializable.assert_initialized(context)
        return self.lookup(context, OWNERS, token_id, BURN_ADDRESS)

    @impure_circuit
    def _set_token_uri(self, context: CircuitContext, token_id: int, uri: str) -> None:
        initializable.assert_initialized(context)
        self._require_owned(context, token_id)
        self.insert(context, TOKEN_URIS, token_id, uri)

    # ==================== Transfers ====================

    @impure_circuit
    def transfer_from(self, context: CircuitContext, from_: Either, to: Either, token_id: int) -> None:
        initializable.assert_initialized(context)
        require(not is_contract_address(to), "NonFungibleToken: Unsafe Transfer")
        self._unsafe_transfer_from(context, from_, to, token_id)

    @impure_circuit
    def _unsafe_transfer_from(self, context: CircuitContext, from_: Either, to: Either, token_id: int) -> None:
        initializable.assert_initialized(context)
        require(not is_key_or_address_zero(to), "NonFungibleToken: Invalid Receiver")
        auth = Either.from_key(own_public_key(context))
        previous_owner = self._update(context, to, token_id, auth)
        require(previous_owner == from_, "NonFungibleToken: Incorrect Owner")

    @impure_circuit
    def _transfer(self, context: CircuitContext, from_: Either, to: Either, token_id: int) -> None:
        initializable.assert_initialized(context)
        require(not is_contract_address(to), "NonFungibleToken: Unsafe Transfer")
        self._unsafe_transfer(context, from_, to, token_id)

    @impure_circuit
    def _unsafe_transfer(self, context: CircuitContext, from_: Either, to: Either, token_id: int) -> None:
        initializable.assert_initialized(context)
        require(not is_key_or_address_zero(to), "NonFungibleToken: Invalid Receiver")
        previous_owner = self._update(context, to, token_id, BURN_ADDRESS)
        require(not is_key_or_address_zero(previous_owner), "NonFungibleToken: Nonexistent Token")
        require(previous_owner == from_, "NonFungibleToken: Incorrect Owner")

    @impure_circuit
    def _mint(self, context: CircuitContext, to: Either, token_id: int) -> None:
        initializable.assert_initialized(context)
        require(not is_contract_address(to), "NonFungibleToken: Unsafe Transfer")
        self._unsafe_mint(context, to, token_id)

    @impure_circuit
    def _unsafe_mint(self, context: CircuitContext, to: Either, token_id: int) -> None:
        initializable.assert_initialized(context)
        require(not is_key_or_address_zero(to), "NonFungibleToken: Invalid Receiver")
        previous_owner = self._update(context, to, token_id, BURN_ADDRESS)
        require(is_key_or_address_zero(previous_owner), "NonFungibleToken: Invalid Sender")

    @impure_circuit
    def _burn(self, context: CircuitContext, token_id: int) -> None:
        initializable.assert_initialized(context)
        previous_owner = self._update(context, BURN_ADDRESS, token_id, BURN_ADDRESS)
        require(not is_key_or_address_zero(previous_owner), "NonFungibleToken: Nonexistent Token")

    def _update(self, context: CircuitContext, to: Either, token_id: int, auth: Either) -> Either:
        """Move ``token_id`` to ``to`` and return its previous owner.

        A non-zero ``auth`` must be authorized by the current owner.
        """
        from_ = self._owner_of(context, token_id)

        if not is_key_or_address_zero(auth):
            self._check_authorized(context, from_, auth, token_id)

        if not is_key_or_address_zero(from_):
            self._approve(context, BURN_ADDRESS, token_id, BURN_ADDRESS)
            self.insert(context, BALANCES, from_, self.lookup(context, BALANCES, from_, 0) - 1)

        if not is_key_or_address_zero(to):
            self.insert(context, BALANCES, to, self.lookup(context, BALANCES, to, 0) + 1)

        self.insert(context, OWNERS, token_id, to)
        return from_
