"""
Execution contexts threaded through circuit calls.
"""

from __future__ import annotations

import hashlib
import secrets
from dataclasses import dataclass
from typing import Any, Generic, Sequence, TypeVar

from ..exceptions import CircuitAssertionError, CircuitTypeError
from .state import ContractState, QueryContext
from .types import KEY_LENGTH, LocalState, ZswapCoinPublicKey

P = TypeVar("P")
L = TypeVar("L")


@dataclass
class CircuitContext(Generic[P]):
    """The state a circuit call reads and produces.

    Attributes:
        original_state: Contract state as last committed
        current_private_state: Private state owned by the simulated party
        current_zswap_local_state: Identity scope of the current caller
        transaction_context: Ledger handle bound to the contract address
    """

    original_state: ContractState
    current_private_state: P
    current_zswap_local_state: LocalState
    transaction_context: QueryContext


@dataclass(frozen=True)
class ConstructorContext(Generic[P]):
    """Input handed to a compiled module's ``initial_state``."""

    initial_private_state: P
    initial_zswap_local_state: LocalState


@dataclass(frozen=True)
class WitnessContext(Generic[L, P]):
    """What a witness function sees when it is invoked."""

    ledger: L
    private_state: P
    contract_address: str


@dataclass(frozen=True)
class CircuitResults(Generic[P]):
    """Return value of every circuit: the result plus the context it produced."""

    result: Any
    context: CircuitContext[P]


@dataclass(frozen=True)
class InitialState(Generic[P]):
    """Return value of ``initial_state``."""

    current_private_state: P
    current_contract_state: ContractState
    current_zswap_local_state: LocalState


def empty_zswap_local_state(coin_public_key: str) -> LocalState:
    """Fresh identity scope for ``coin_public_key``."""
    return LocalState(coin_public_key=coin_public_key)


def constructor_context(private_state: P, coin_public_key: str) -> ConstructorContext[P]:
    return ConstructorContext(
        initial_private_state=private_state,
        initial_zswap_local_state=empty_zswap_local_state(coin_public_key),
    )


def sample_contract_address() -> str:
    """Random contract address, hex encoded."""
    return secrets.token_hex(KEY_LENGTH)


def dummy_contract_address() -> str:
    return "0" * (KEY_LENGTH * 2)


def own_public_key(context: CircuitContext) -> ZswapCoinPublicKey:
    """The coin public key of whoever is calling in ``context``."""
    return ZswapCoinPublicKey(bytes.fromhex(context.current_zswap_local_state.coin_public_key))


def int_to_bytes(length: int, value: int) -> bytes:
    """Little-endian fixed-width encoding of a non-negative integer."""
    return value.to_bytes(length, "little")


def persistent_hash(values: Sequence[bytes]) -> bytes:
    """SHA-256 over a vector of 32-byte chunks."""
    digest = hashlib.sha256()
    for value in values:
        digest.update(bytes(value).ljust(KEY_LENGTH, b"\x00"))
    return digest.digest()


def require(condition: bool, message: str) -> None:
    """Circuit-level assertion."""
    if not condition:
        raise CircuitAssertionError(message)


def check_uint(circuit: str, value: Any, bits: int = 128) -> int:
    """
    Reject arguments that are not unsigned ``bits``-wide integers.

    Raises:
        CircuitTypeError: If ``value`` is not an int in ``[0, 2**bits)``
    """
    if isinstance(value, bool) or not isinstance(value, int) or value < 0 or value >> bits:
        raise CircuitTypeError(circuit, f"Uint<{bits}>", value)
    return value
