"""
ZOwnablePK: shielded single-owner access control.

The ledger never stores the owner's key. It stores a commitment

    H(owner_id, instance_salt, counter, "ZOwnablePK:shield:")

where ``owner_id = H(public_key, secret_nonce)`` and the nonce is supplied
by the ``wit_secret_nonce`` witness from the owner's private state. The
counter is bumped on every transfer so commitments are never reused.
"""

from __future__ import annotations

from ..runtime import (
    KEY_LENGTH,
    CircuitContext,
    CompiledContract,
    Either,
    Ledger,
    impure_circuit,
    int_to_bytes,
    ledger_field,
    own_public_key,
    persistent_hash,
    pure_circuit,
    require,
)
from . import initializable
from .utils import ZERO_BYTES

OWNER_COMMITMENT = "owner_commitment"
COUNTER = "counter"
INSTANCE_SALT = "instance_salt"

SECRET_NONCE_WITNESS = "wit_secret_nonce"

COMMITMENT_DOMAIN = b"ZOwnablePK:shield:".ljust(KEY_LENGTH, b"\x00")


def compute_owner_id(public_key: Either, secret_nonce: bytes) -> bytes:
    """
    Derive the shielded owner id for a public key and nonce.

    Raises:
        CircuitAssertionError: If ``public_key`` holds a contract address
    """
    require(public_key.is_left, "ZOwnablePK: contract address owners are not yet supported")
    return persistent_hash([public_key.left.data, secret_nonce])


class ZOwnablePKLedger(Ledger):
    owner_commitment = ledger_field()
    counter = ledger_field()
    instance_salt = ledger_field()
    is_initialized = ledger_field()


class ZOwnablePKContract(CompiledContract):
    """Constructor arguments: ``(owner_id: bytes, instance_salt: bytes, is_init: bool)``."""

    LEDGER_CLASS = ZOwnablePKLedger
    LEDGER_FIELDS = {
        OWNER_COMMITMENT: ZERO_BYTES,
        COUNTER: 0,
        INSTANCE_SALT: ZERO_BYTES,
        **initializable.LEDGER_FIELDS,
    }
    REQUIRED_WITNESSES = (SECRET_NONCE_WITNESS,)

    def constructor(
        self, context: CircuitContext, owner_id: bytes, instance_salt: bytes, is_init: bool
    ) -> None:
        if is_init:
            initializable.initialize(context)
            require(owner_id != ZERO_BYTES, "ZOwnablePK: invalid id")
            self.write(context, INSTANCE_SALT, instance_salt)
            self._transfer_ownership(context, owner_id)

    @impure_circuit
    def owner(self, context: CircuitContext) -> bytes:
        initializable.assert_initialized(context)
        return self.read(context, OWNER_COMMITMENT)

    @impure_circuit
    def transfer_ownership(self, context: CircuitContext, new_owner_id: bytes) -> None:
        initializable.assert_initialized(context)
        self.assert_only_owner(context)
        require(new_owner_id != ZERO_BYTES, "ZOwnablePK: invalid id")
        self._transfer_ownership(context, new_owner_id)

    @impure_circuit
    def renounce_ownership(self, context: CircuitContext) -> None:
        initializable.assert_initialized(context)
        self.assert_only_owner(context)
        self.write(context, OWNER_COMMITMENT, ZERO_BYTES)

    @impure_circuit
    def assert_only_owner(self, context: CircuitContext) -> None:
        initializable.assert_initialized(context)
        nonce = self.call_witness(context, SECRET_NONCE_WITNESS)
        caller = Either.from_key(own_public_key(context))
        caller_id = self._compute_owner_id(caller, nonce)
        expected = self._compute_owner_commitment(context, caller_id, self.read(context, COUNTER))
        require(
            self.read(context, OWNER_COMMITMENT) == expected,
            "ZOwnablePK: caller is not the owner",
        )

    @impure_circuit
    def _compute_owner_commitment(self, context: CircuitContext, owner_id: bytes, counter: int) -> bytes:
        initializable.assert_initialized(context)
        return persistent_hash(
            [
                owner_id,
                self.read(context, INSTANCE_SALT),
                int_to_bytes(KEY_LENGTH, counter),
                COMMITMENT_DOMAIN,
            ]
        )

    @pure_circuit
    def _compute_owner_id(self, public_key: Either, secret_nonce: bytes) -> bytes:
        return compute_owner_id(public_key, secret_nonce)

    @impure_circuit
    def _transfer_ownership(self, context: CircuitContext, new_owner_id: bytes) -> None:
        initializable.assert_initialized(context)
        counter = self.read(context, COUNTER) + 1
        self.write(context, COUNTER, counter)
        self.write(
            context,
            OWNER_COMMITMENT,
            self._compute_owner_commitment(context, new_owner_id, counter),
        )
