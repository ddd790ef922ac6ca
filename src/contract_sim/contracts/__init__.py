"""
Reference compiled contract modules.
"""

from .access_control import DEFAULT_ADMIN_ROLE, AccessControlContract, AccessControlLedger
from .fungible_token import MAX_UINT128, FungibleTokenContract, FungibleTokenLedger
from .initializable import InitializableContract, InitializableLedger
from .multi_token import MultiTokenContract, MultiTokenLedger
from .non_fungible_token import NonFungibleTokenContract, NonFungibleTokenLedger
from .ownable import OwnableContract, OwnableLedger
from .pausable import PausableContract, PausableLedger
from .utils import BURN_ADDRESS
from .zownable_pk import ZOwnablePKContract, ZOwnablePKLedger, compute_owner_id

__all__ = [
    "AccessControlContract",
    "AccessControlLedger",
    "DEFAULT_ADMIN_ROLE",
    "FungibleTokenContract",
    "FungibleTokenLedger",
    "MAX_UINT128",
    "InitializableContract",
    "InitializableLedger",
    "MultiTokenContract",
    "MultiTokenLedger",
    "NonFungibleTokenContract",
    "NonFungibleTokenLedger",
    "OwnableContract",
    "OwnableLedger",
    "PausableContract",
    "PausableLedger",
    "BURN_ADDRESS",
    "ZOwnablePKContract",
    "ZOwnablePKLedger",
    "compute_owner_id",
]
