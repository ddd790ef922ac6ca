"""
Caller scope and the inspection surface shared by every simulator.

Two caller overrides exist:

- a single-use override set by ``as_caller`` that applies to the next
  circuit call only and is dropped afterwards, whether the call returned
  or raised;
- a persistent override set by ``set_caller`` that applies until cleared.

The single-use override takes precedence. Neither is ever written into the
persisted context; they only shape the working context handed to impure
circuits.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from ..runtime import CircuitContext, ContractState

P = TypeVar("P")
L = TypeVar("L")


class AbstractSimulator(ABC, Generic[P, L]):
    """Base for contract simulators: caller scope plus state inspection."""

    def __init__(self) -> None:
        self._caller_override: Optional[str] = None
        self._persistent_caller_override: Optional[str] = None

    # ==================== Required by subclasses ====================

    @property
    @abstractmethod
    def contract_address(self) -> str:
        """Address the deployed contract is bound to."""

    @property
    @abstractmethod
    def circuit_context(self) -> CircuitContext[P]:
        """The persisted circuit context."""

    @abstractmethod
    def get_public_state(self) -> L:
        """Decoded ledger state."""

    @abstractmethod
    def reset_circuit_proxies(self) -> None:
        """Drop cached dispatch tables so they are rebuilt on next use."""

    # ==================== State inspection ====================

    def get_private_state(self) -> P:
        return self.circuit_context.current_private_state

    def get_contract_state(self) -> ContractState:
        return self.circuit_context.original_state

    # ==================== Caller scope ====================

    def as_caller(self, caller: str) -> "AbstractSimulator[P, L]":
        """
        Run the next circuit call as ``caller``.

        Args:
            caller: Coin public key (hex) to attribute the next call to

        Returns:
            This simulator, so the call can be chained
        """
        self._caller_override = caller
        return self

    def set_caller(self, caller: Optional[str]) -> None:
        """Attribute every following impure call to ``caller`` until cleared.

        A falsy value clears the persistent override.
        """
        self._persistent_caller_override = caller or None

    def clear_caller(self) -> None:
        """Clear both the single-use and the persistent override."""
        self._caller_override = None
        self._persistent_caller_override = None

    @property
    def active_caller(self) -> Optional[str]:
        """The override the next impure call will use, if any."""
        return self._caller_override or self._persistent_caller_override

    def _reset_single_use_caller(self) -> None:
        self._caller_override = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(address={self.contract_address[:10]}...)"
