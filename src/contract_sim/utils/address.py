"""
Test identity helpers.

Identities are derived from short ASCII labels ("OWNER", "SPENDER") so test
tables stay readable: the label is hex encoded and left padded to 32 bytes.
"""

from __future__ import annotations

from typing import Tuple

from ..contracts.utils import is_contract_address, is_key_or_address_zero
from ..runtime import KEY_LENGTH, ContractAddress, Either, ZswapCoinPublicKey


def to_hex_padded(label: str, length: int = KEY_LENGTH * 2) -> str:
    """
    Hex encode an ASCII label, left padded with zeros.

    Args:
        label: ASCII text to encode
        length: Total number of hex characters (default 64)

    Returns:
        Hex string of ``length`` characters
    """
    return label.encode("ascii").hex().rjust(length, "0")


def encode_to_pk(label: str) -> ZswapCoinPublicKey:
    """Coin public key derived from ``label``."""
    return ZswapCoinPublicKey(bytes.fromhex(to_hex_padded(label)))


def encode_to_address(label: str) -> ContractAddress:
    """Contract address derived from ``label``."""
    return ContractAddress(bytes.fromhex(to_hex_padded(label)))


def create_either_test_user(label: str) -> Either:
    """Either holding the public key derived from ``label``."""
    return Either(is_left=True, left=encode_to_pk(label), right=encode_to_address(""))


def create_either_test_contract_address(label: str) -> Either:
    """Either holding the contract address derived from ``label``."""
    return Either(is_left=False, left=encode_to_pk(""), right=encode_to_address(label))


def generate_pub_key_pair(label: str) -> Tuple[str, ZswapCoinPublicKey]:
    """(hex coin public key usable as a caller, matching ZswapCoinPublicKey)."""
    return to_hex_padded(label), encode_to_pk(label)


def generate_either_pub_key_pair(label: str) -> Tuple[str, Either]:
    """(hex coin public key usable as a caller, matching Either)."""
    return to_hex_padded(label), create_either_test_user(label)


def zero_bytes(length: int = KEY_LENGTH) -> bytes:
    return bytes(length)


ZERO_KEY = Either(
    is_left=True,
    left=ZswapCoinPublicKey(zero_bytes()),
    right=encode_to_address(""),
)

ZERO_ADDRESS = Either(
    is_left=False,
    left=encode_to_pk(""),
    right=ContractAddress(zero_bytes()),
)

