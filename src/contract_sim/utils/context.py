"""
Circuit context builders for calling compiled modules directly.
"""

from __future__ import annotations

from typing import TypeVar

from ..core import AbstractSimulator
from ..runtime import CircuitContext, ContractState, QueryContext, empty_zswap_local_state

P = TypeVar("P")


def use_circuit_context(
    private_state: P,
    contract_state: ContractState,
    sender: str,
    contract_address: str,
) -> CircuitContext[P]:
    """
    Build a circuit context from explicit state and sender.

    Args:
        private_state: Private state of the calling party
        contract_state: Contract state to execute against
        sender: Coin public key (hex) of the caller
        contract_address: Address of the contract being executed

    Returns:
        A context ready to pass to any entry of ``contract.circuits``
    """
    return CircuitContext(
        original_state=contract_state,
        current_private_state=private_state,
        current_zswap_local_state=empty_zswap_local_state(sender),
        transaction_context=QueryContext(contract_state.data, contract_address),
    )


def use_circuit_context_sender(simulator: AbstractSimulator[P, object], sender: str) -> CircuitContext[P]:
    """Context over ``simulator``'s committed state, attributed to ``sender``."""
    return use_circuit_context(
        simulator.get_private_state(),
        simulator.get_contract_state(),
        sender,
        simulator.contract_address,
    )
