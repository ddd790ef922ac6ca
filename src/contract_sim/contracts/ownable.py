"""
Ownable: single-owner access control.

The owner is an Either of a coin public key or a contract address. Only
public-key owners can pass ``assert_only_owner``, so the safe transfer
paths refuse contract addresses; the ``_unsafe_*`` variants accept them.
"""

from __future__ import annotations

from ..runtime import (
    CircuitContext,
    CompiledContract,
    Either,
    Ledger,
    impure_circuit,
    ledger_field,
    own_public_key,
    require,
)
from . import initializable
from .utils import BURN_ADDRESS, is_contract_address, is_key_or_address_zero

OWNER = "owner"


class OwnableLedger(Ledger):
    owner = ledger_field()
    is_initialized = ledger_field()


class OwnableContract(CompiledContract):
    """
    Constructor arguments: ``(initial_owner: Either, is_init: bool)``.

    With ``is_init`` false the contract is deployed uninitialized and every
    circuit fails with ``Initializable: contract not initialized``.
    """

    LEDGER_CLASS = OwnableLedger
    LEDGER_FIELDS = {OWNER: None, **initializable.LEDGER_FIELDS}

    def constructor(self, context: CircuitContext, initial_owner: Either, is_init: bool) -> None:
        if is_init:
            self._initialize(context, initial_owner)

    def _initialize(self, context: CircuitContext, initial_owner: Either) -> None:
        initializable.initialize(context)
        require(not is_key_or_address_zero(initial_owner), "Ownable: invalid initial owner")
        self._transfer_ownership(context, initial_owner)

    @impure_circuit
    def owner(self, context: CircuitContext) -> Either:
        initializable.assert_initialized(context)
        return self.read(context, OWNER)

    @impure_circuit
    def transfer_ownership(self, context: CircuitContext, new_owner: Either) -> None:
        initializable.assert_initialized(context)
        require(not is_contract_address(new_owner), "Ownable: unsafe ownership transfer")
        self._unsafe_transfer_ownership(context, new_owner)

    @impure_circuit
    def _unsafe_transfer_ownership(self, context: CircuitContext, new_owner: Either) -> None:
        initializable.assert_initialized(context)
        self.assert_only_owner(context)
        require(not is_key_or_address_zero(new_owner), "Ownable: invalid new owner")
        self._unsafe_unchecked_transfer_ownership(context, new_owner)

    @impure_circuit
    def renounce_ownership(self, context: CircuitContext) -> None:
        initializable.assert_initialized(context)
        self.assert_only_owner(context)
        self._transfer_ownership(context, BURN_ADDRESS)

    @impure_circuit
    def assert_only_owner(self, context: CircuitContext) -> None:
        initializable.assert_initialized(context)
        owner = self.read(context, OWNER)
        caller = own_public_key(context)
        require(owner.is_left and owner.left == caller, "Ownable: caller is not the owner")

    @impure_circuit
    def _transfer_ownership(self, context: CircuitContext, new_owner: Either) -> None:
        initializable.assert_initialized(context)
        require(not is_contract_address(new_owner), "Ownable: unsafe ownership transfer")
        self._unsafe_unchecked_transfer_ownership(context, new_owner)

    @impure_circuit
    def _unsafe_unchecked_transfer_ownership(self, context: CircuitContext, new_owner: Either) -> None:
        initializable.assert_initialized(context)
        self.write(context, OWNER, new_owner)
