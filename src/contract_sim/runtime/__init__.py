"""
In-process runtime used by compiled contract modules.

Provides the value types, immutable ledger state, execution contexts and
the CompiledContract base that generated contract bindings build on.
"""

from .context import (
    CircuitContext,
    CircuitResults,
    ConstructorContext,
    InitialState,
    WitnessContext,
    check_uint,
    constructor_context,
    dummy_contract_address,
    empty_zswap_local_state,
    int_to_bytes,
    own_public_key,
    persistent_hash,
    require,
    sample_contract_address,
)
from .contract import CompiledContract, Ledger, impure_circuit, ledger_field, pure_circuit
from .state import ContractState, LedgerMap, QueryContext, StateValue
from .types import KEY_LENGTH, ContractAddress, Either, LocalState, ZswapCoinPublicKey

__all__ = [
    # Types
    "KEY_LENGTH",
    "ZswapCoinPublicKey",
    "ContractAddress",
    "Either",
    "LocalState",
    # State
    "StateValue",
    "LedgerMap",
    "ContractState",
    "QueryContext",
    # Contexts
    "CircuitContext",
    "ConstructorContext",
    "WitnessContext",
    "CircuitResults",
    "InitialState",
    "check_uint",
    "constructor_context",
    "empty_zswap_local_state",
    "sample_contract_address",
    "dummy_contract_address",
    "own_public_key",
    "int_to_bytes",
    "persistent_hash",
    "require",
    # Compiled modules
    "CompiledContract",
    "Ledger",
    "ledger_field",
    "impure_circuit",
    "pure_circuit",
]
