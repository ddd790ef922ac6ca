"""
Identity predicates shared by the reference contracts.
"""

from __future__ import annotations

from ..runtime import KEY_LENGTH, Either, ZswapCoinPublicKey

ZERO_BYTES = bytes(KEY_LENGTH)


def is_key_or_address_zero(key_or_address: Either) -> bool:
    """True if the populated side of ``key_or_address`` is all zeros."""
    if key_or_address.is_left:
        return key_or_address.left.data == ZERO_BYTES
    return key_or_address.right.data == ZERO_BYTES


def is_key_zero(key: ZswapCoinPublicKey) -> bool:
    return key.data == ZERO_BYTES


def is_key_or_address_equal(a: Either, b: Either) -> bool:
    """Compare only the populated sides of two identities."""
    if a.is_left and b.is_left:
        return a.left == b.left
    if not a.is_left and not b.is_left:
        return a.right == b.right
    return False


def is_contract_address(key_or_address: Either) -> bool:
    return not key_or_address.is_left


BURN_ADDRESS = Either.from_key(ZswapCoinPublicKey(ZERO_BYTES))
"""Zero public key; the null identity for owners, senders and receivers."""
