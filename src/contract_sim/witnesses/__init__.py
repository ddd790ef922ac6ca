"""
Private-state types and witness-table factories for the reference contracts.
"""

from .common import EmptyPrivateState, empty_witnesses
from .zownable_pk import ZOwnablePKPrivateState, wit_secret_nonce, zownable_pk_witnesses

__all__ = [
    "EmptyPrivateState",
    "empty_witnesses",
    "ZOwnablePKPrivateState",
    "wit_secret_nonce",
    "zownable_pk_witnesses",
]
