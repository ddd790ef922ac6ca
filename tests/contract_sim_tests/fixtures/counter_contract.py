"""
Counter fixture contract for exercising dispatch edge cases.

- increment(by) / fail_after_write(by) / record_caller() are impure
- add(a, b) / echo(value) are pure
- ``add`` is also forced into the impure set by OverlappingCounterContract
- bump_secret() updates private state through the ``wit_next_secret`` witness
- MappingNamedCounterContract adds circuits named like mapping members
"""

from dataclasses import dataclass

from contract_sim.core import SimulatorConfig, create_simulator
from contract_sim.runtime import (
    CompiledContract,
    Ledger,
    LedgerMap,
    impure_circuit,
    ledger_field,
    own_public_key,
    pure_circuit,
    require,
)


class CounterLedger(Ledger):
    count = ledger_field()
    callers = ledger_field()


@dataclass(frozen=True)
class CounterPrivateState:
    secret: int = 0


def wit_next_secret(context):
    next_state = CounterPrivateState(secret=context.private_state.secret + 1)
    return next_state, next_state.secret


def counter_witnesses():
    return {"wit_next_secret": wit_next_secret}


class CounterContract(CompiledContract):
    LEDGER_CLASS = CounterLedger
    LEDGER_FIELDS = {"count": 0, "callers": LedgerMap()}
    REQUIRED_WITNESSES = ("wit_next_secret",)

    def constructor(self, context, initial_count):
        require(initial_count >= 0, "Counter: negative start")
        self.write(context, "count", initial_count)

    @impure_circuit
    def increment(self, context, by):
        require(by > 0, "Counter: non-positive step")
        count = self.read(context, "count") + by
        self.write(context, "count", count)
        return count

    @impure_circuit
    def fail_after_write(self, context, by):
        self.write(context, "count", self.read(context, "count") + by)
        self.call_witness(context, "wit_next_secret")
        require(False, "Counter: rejected after write")

    @impure_circuit
    def bump_secret(self, context):
        return self.call_witness(context, "wit_next_secret")

    @impure_circuit
    def record_caller(self, context):
        caller = own_public_key(context)
        seen = self.lookup(context, "callers", caller, 0)
        self.insert(context, "callers", caller, seen + 1)
        return caller

    @impure_circuit
    def count(self, context):
        return self.read(context, "count")

    @pure_circuit
    def add(self, a, b):
        return a + b

    @pure_circuit
    def echo(self, value):
        return value


class OverlappingCounterContract(CounterContract):
    """Lists ``add`` as impure while keeping it in ``circuits``."""

    def __init__(self, witnesses):
        super().__init__(witnesses)
        add = self.circuits["add"]
        self.impure_circuits["add"] = add


class MappingNamedCounterContract(CounterContract):
    @impure_circuit
    def get(self, context):
        return self.read(context, "count")

    @impure_circuit
    def kind(self, context, by):
        count = self.read(context, "count") + by
        self.write(context, "count", count)
        return count

    @pure_circuit
    def keys(self):
        return "circuit"


def counter_config(contract_factory=CounterContract):
    return SimulatorConfig(
        contract_factory=contract_factory,
        default_private_state=CounterPrivateState,
        contract_args=lambda initial_count=0: (initial_count,),
        ledger_extractor=CounterContract.ledger,
        witnesses_factory=counter_witnesses,
    )


CounterSimulatorBase = create_simulator(counter_config(), name="CounterSimulatorBase")


class CounterSimulator(CounterSimulatorBase):
    def increment(self, by=1):
        return self.circuits.impure.increment(by)

    def fail_after_write(self, by=1):
        return self.circuits.impure.fail_after_write(by)

    def bump_secret(self):
        return self.circuits.impure.bump_secret()

    def record_caller(self):
        return self.circuits.impure.record_caller()

    def count(self):
        return self.circuits.impure.count()

    def add(self, a, b):
        return self.circuits.pure.add(a, b)

    def echo(self, value):
        return self.circuits.pure.echo(value)
