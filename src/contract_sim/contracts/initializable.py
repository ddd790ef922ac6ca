"""
Initializable: one-shot initialization flag.

The module-level functions are the reusable part; other contracts call
them from their own circuits and include LEDGER_FIELDS in their layout.
"""

from __future__ import annotations

from ..runtime import CircuitContext, CompiledContract, Ledger, impure_circuit, ledger_field, require

IS_INITIALIZED = "is_initialized"

LEDGER_FIELDS = {IS_INITIALIZED: False}


def initialize(context: CircuitContext) -> None:
    assert_not_initialized(context)
    context.transaction_context = context.transaction_context.write(IS_INITIALIZED, True)


def assert_initialized(context: CircuitContext) -> None:
    require(
        context.transaction_context.read(IS_INITIALIZED),
        "Initializable: contract not initialized",
    )


def assert_not_initialized(context: CircuitContext) -> None:
    require(
        not context.transaction_context.read(IS_INITIALIZED),
        "Initializable: contract already initialized",
    )


class InitializableLedger(Ledger):
    is_initialized = ledger_field()


class InitializableContract(CompiledContract):
    """Standalone binding exposing the Initializable circuits."""

    LEDGER_CLASS = InitializableLedger
    LEDGER_FIELDS = LEDGER_FIELDS

    @impure_circuit
    def initialize(self, context: CircuitContext) -> None:
        initialize(context)

    @impure_circuit
    def assert_initialized(self, context: CircuitContext) -> None:
        assert_initialized(context)

    @impure_circuit
    def assert_not_initialized(self, context: CircuitContext) -> None:
        assert_not_initialized(context)
