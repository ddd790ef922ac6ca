"""
Simulators for the reference contracts.
"""

from .access_control import AccessControlSimulator
from .fungible_token import FungibleTokenSimulator
from .initializable import InitializableSimulator
from .multi_token import MultiTokenSimulator
from .non_fungible_token import NonFungibleTokenSimulator
from .ownable import OwnableSimulator
from .pausable import PausableSimulator
from .zownable_pk import ZOwnablePKSimulator

__all__ = [
    "AccessControlSimulator",
    "FungibleTokenSimulator",
    "InitializableSimulator",
    "MultiTokenSimulator",
    "NonFungibleTokenSimulator",
    "OwnableSimulator",
    "PausableSimulator",
    "ZOwnablePKSimulator",
]
