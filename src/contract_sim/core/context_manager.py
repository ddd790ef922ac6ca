"""
Circuit context lifecycle.

CircuitContextManager owns the single live CircuitContext of a simulator
instance. It seeds the context by running the compiled module's
``initial_state`` and afterwards only ever swaps it out whole.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Generic, TypeVar

from ..runtime import CircuitContext, QueryContext, constructor_context

logger = logging.getLogger(__name__)

P = TypeVar("P")


class CircuitContextManager(Generic[P]):
    """Holds and replaces the execution context of one simulator."""

    def __init__(
        self,
        contract: Any,
        private_state: P,
        coin_pk: str,
        contract_address: str,
        *contract_args: Any,
    ) -> None:
        """
        Seed the context from the contract's constructor.

        Args:
            contract: Compiled module binding exposing ``initial_state``
            private_state: Initial private state handed to the constructor
            coin_pk: Coin public key of the deploying party
            contract_address: Address the transaction context is bound to
            *contract_args: Constructor arguments for the contract

        Raises:
            ContractRuntimeError: If the contract's constructor rejects the arguments
        """
        initial = contract.initial_state(
            constructor_context(private_state, coin_pk), *contract_args
        )
        contract_state = initial.current_contract_state

        self._context: CircuitContext[P] = CircuitContext(
            original_state=contract_state,
            current_private_state=initial.current_private_state,
            current_zswap_local_state=initial.current_zswap_local_state,
            transaction_context=QueryContext(contract_state.data, contract_address),
        )

    @property
    def context(self) -> CircuitContext[P]:
        return self._context

    def get_context(self) -> CircuitContext[P]:
        """Return the current circuit context."""
        return self._context

    def set_context(self, new_context: CircuitContext[P]) -> None:
        """Replace the circuit context."""
        self._context = new_context

    def update_private_state(self, new_private_state: P) -> None:
        """Replace only the private state, keeping every other field."""
        self._context = dataclasses.replace(
            self._context, current_private_state=new_private_state
        )
        logger.debug(
            "Private state replaced",
            extra={
                "event": "context.private_state_updated",
                "address": self._context.transaction_context.address[:10],
            },
        )
