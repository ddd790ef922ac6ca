"""
Private state and witnesses for contracts that need neither.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict


@dataclass(frozen=True)
class EmptyPrivateState:
    """Private state of a contract that keeps no secrets."""


def empty_witnesses() -> Dict[str, Callable]:
    return {}
