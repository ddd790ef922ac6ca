"""
Value types shared by compiled modules and tests.

Identities are frozen dataclasses so they compare by value and can key
ledger maps, the same way the generated contract types behave.
"""

from __future__ import annotations

from dataclasses import dataclass

KEY_LENGTH = 32


@dataclass(frozen=True)
class ZswapCoinPublicKey:
    """A user's coin public key (32 bytes)."""

    data: bytes


@dataclass(frozen=True)
class ContractAddress:
    """A contract's address (32 bytes)."""

    data: bytes


@dataclass(frozen=True)
class Either:
    """Either a user public key (``is_left``) or a contract address."""

    is_left: bool
    left: ZswapCoinPublicKey
    right: ContractAddress

    @classmethod
    def from_key(cls, key: ZswapCoinPublicKey) -> "Either":
        return cls(True, key, ContractAddress(bytes(KEY_LENGTH)))

    @classmethod
    def from_address(cls, address: ContractAddress) -> "Either":
        return cls(False, ZswapCoinPublicKey(bytes(KEY_LENGTH)), address)


@dataclass(frozen=True)
class LocalState:
    """Identity scope of the party issuing the current call."""

    coin_public_key: str
    current_index: int = 0
