"""
Pausable: emergency stop flag.
"""

from __future__ import annotations

from ..runtime import CircuitContext, CompiledContract, Ledger, impure_circuit, ledger_field, require

IS_PAUSED = "is_paused"


class PausableLedger(Ledger):
    is_paused = ledger_field()


class PausableContract(CompiledContract):
    LEDGER_CLASS = PausableLedger
    LEDGER_FIELDS = {IS_PAUSED: False}

    @impure_circuit
    def is_paused(self, context: CircuitContext) -> bool:
        return self.read(context, IS_PAUSED)

    @impure_circuit
    def assert_paused(self, context: CircuitContext) -> None:
        require(self.read(context, IS_PAUSED), "Pausable: not paused")

    @impure_circuit
    def assert_not_paused(self, context: CircuitContext) -> None:
        require(not self.read(context, IS_PAUSED), "Pausable: paused")

    @impure_circuit
    def _pause(self, context: CircuitContext) -> None:
        self.assert_not_paused(context)
        self.write(context, IS_PAUSED, True)

    @impure_circuit
    def _unpause(self, context: CircuitContext) -> None:
        self.assert_paused(context)
        self.write(context, IS_PAUSED, False)
