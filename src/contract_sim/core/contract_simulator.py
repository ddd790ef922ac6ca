"""
Simulator base backed by a CircuitContextManager.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from ..runtime import CircuitContext, empty_zswap_local_state
from .abstract_simulator import AbstractSimulator
from .context_manager import CircuitContextManager

logger = logging.getLogger(__name__)

P = TypeVar("P")
L = TypeVar("L")


class ContractSimulator(AbstractSimulator[P, L]):
    """Adds context ownership and private-state test helpers."""

    circuit_context_manager: CircuitContextManager[P]

    @property
    def circuit_context(self) -> CircuitContext[P]:
        return self.circuit_context_manager.get_context()

    @circuit_context.setter
    def circuit_context(self, context: CircuitContext[P]) -> None:
        self.circuit_context_manager.set_context(context)

    def get_caller_context(self) -> CircuitContext[P]:
        """
        Working context for the next impure call.

        With a caller override active the persisted context is copied with a
        fresh identity scope for that caller; otherwise it is returned as is.
        """
        caller = self.active_caller
        if not caller:
            return self.circuit_context
        return dataclasses.replace(
            self.circuit_context,
            current_zswap_local_state=empty_zswap_local_state(caller),
        )

    def _commit_context(self, context: CircuitContext[P]) -> None:
        """Persist the context an impure call returned.

        The identity scope of an override stays out of the persisted context.
        """
        if self.active_caller:
            context = dataclasses.replace(
                context,
                current_zswap_local_state=self.circuit_context.current_zswap_local_state,
            )
        self.circuit_context_manager.set_context(context)

    # ==================== Private state helpers ====================

    def update_private_state(self, new_private_state: P) -> P:
        """
        Replace the private state.

        Args:
            new_private_state: Private state to install

        Returns:
            The installed private state
        """
        self.circuit_context_manager.update_private_state(new_private_state)
        return new_private_state

    def inject_private_state(self, **fields: Any) -> P:
        """
        Overwrite selected fields of the current private state.

        Works for dataclass and mapping private states.

        Raises:
            TypeError: If the private state is neither a dataclass nor a mapping
        """
        current = self.get_private_state()
        if dataclasses.is_dataclass(current) and not isinstance(current, type):
            updated = dataclasses.replace(current, **fields)
        elif isinstance(current, Mapping):
            updated = {**current, **fields}
        else:
            raise TypeError(
                f"cannot inject fields into private state of type {type(current).__name__}"
            )

        self.circuit_context_manager.update_private_state(updated)
        logger.debug(
            "Private state fields injected",
            extra={"event": "simulator.private_state_injected", "fields": sorted(fields)},
        )
        return updated
