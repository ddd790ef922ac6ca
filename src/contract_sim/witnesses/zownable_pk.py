"""
Private state and witnesses for ZOwnablePK.
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from ..runtime import KEY_LENGTH, WitnessContext


@dataclass(frozen=True)
class ZOwnablePKPrivateState:
    """Owner-side secret: the nonce mixed into the shielded owner id.

    Attributes:
        secret_nonce: 32-byte nonce
    """

    secret_nonce: bytes

    @classmethod
    def generate(cls) -> "ZOwnablePKPrivateState":
        """Private state with a random nonce."""
        return cls(secret_nonce=secrets.token_bytes(KEY_LENGTH))

    @classmethod
    def with_nonce(cls, nonce: bytes) -> "ZOwnablePKPrivateState":
        """Private state with a caller-chosen nonce, e.g. from a deterministic scheme."""
        return cls(secret_nonce=nonce)


def wit_secret_nonce(context: WitnessContext) -> Tuple[ZOwnablePKPrivateState, bytes]:
    return context.private_state, context.private_state.secret_nonce


def zownable_pk_witnesses() -> Dict[str, Callable]:
    """Witness table for ZOwnablePKContract."""
    return {"wit_secret_nonce": wit_secret_nonce}
