"""
Tests for the CompiledContract binding surface.
"""

import pytest

from contract_sim.exceptions import CircuitAssertionError, CircuitTypeError, WitnessError
from contract_sim.runtime import (
    CircuitContext,
    QueryContext,
    constructor_context,
    own_public_key,
)

from counter_contract import CounterContract, CounterPrivateState, counter_witnesses

COIN_PK = "ab" * 32
ADDRESS = "cd" * 32


def deploy(initial_count=0):
    contract = CounterContract(counter_witnesses())
    initial = contract.initial_state(constructor_context(CounterPrivateState(), COIN_PK), initial_count)
    state = initial.current_contract_state
    context = CircuitContext(
        original_state=state,
        current_private_state=initial.current_private_state,
        current_zswap_local_state=initial.current_zswap_local_state,
        transaction_context=QueryContext(state.data, ADDRESS),
    )
    return contract, context


class TestBinding:
    """Test circuit tables exposed by a binding"""

    def test_circuit_sets(self):
        contract = CounterContract(counter_witnesses())

        assert {"increment", "fail_after_write", "bump_secret", "record_caller", "count"} <= set(
            contract.impure_circuits
        )
        assert set(contract.pure_circuits) == {"add", "echo"}
        assert set(contract.circuits) == set(contract.impure_circuits) | set(contract.pure_circuits)

    def test_pure_circuits_are_contextless(self):
        contract = CounterContract(counter_witnesses())
        assert contract.pure_circuits["add"](2, 3) == 5

    def test_rejects_non_mapping_witnesses(self):
        with pytest.raises(WitnessError, match="is not a mapping"):
            CounterContract(None)

    def test_rejects_missing_witness(self):
        with pytest.raises(WitnessError, match="function-valued field named wit_next_secret"):
            CounterContract({})

    def test_rejects_non_callable_witness(self):
        with pytest.raises(WitnessError) as exc_info:
            CounterContract({"wit_next_secret": 42})
        assert exc_info.value.details == {"witness": "wit_next_secret"}


class TestInitialState:
    """Test initial_state and the contract constructor"""

    def test_runs_constructor(self):
        contract, context = deploy(initial_count=7)
        assert contract.ledger(context.transaction_context.state).count == 7

    def test_operations_recorded(self):
        _, context = deploy()
        assert "increment" in context.original_state.operations

    def test_caller_identity_from_constructor_context(self):
        _, context = deploy()
        assert context.current_zswap_local_state.coin_public_key == COIN_PK

    def test_constructor_rejection(self):
        contract = CounterContract(counter_witnesses())
        with pytest.raises(CircuitAssertionError, match="Counter: negative start"):
            contract.initial_state(constructor_context(CounterPrivateState(), COIN_PK), -1)

    def test_rejects_malformed_constructor_context(self):
        contract = CounterContract(counter_witnesses())
        with pytest.raises(CircuitTypeError, match="expected ConstructorContext"):
            contract.initial_state({"private_state": None}, 0)


class TestCircuitCalls:
    """Test the (context, *args) -> CircuitResults calling convention"""

    def test_impure_returns_new_context(self):
        contract, context = deploy()
        results = contract.circuits["increment"](context, 2)

        assert results.result == 2
        assert results.context is not context
        assert contract.ledger(results.context.transaction_context.state).count == 2
        assert results.context.original_state.data == results.context.transaction_context.state

    def test_impure_leaves_input_context_untouched(self):
        contract, context = deploy()
        before = context.transaction_context

        contract.circuits["increment"](context, 2)

        assert context.transaction_context is before

    def test_failed_call_leaves_input_context_untouched(self):
        contract, context = deploy()
        before_state = context.transaction_context.state
        before_private = context.current_private_state

        with pytest.raises(CircuitAssertionError, match="Counter: rejected after write"):
            contract.circuits["fail_after_write"](context, 5)

        assert context.transaction_context.state == before_state
        assert context.current_private_state == before_private

    def test_pure_echoes_context(self):
        contract, context = deploy()
        results = contract.circuits["add"](context, 1, 2)

        assert results.result == 3
        assert results.context is context

    def test_rejects_non_context(self):
        contract, _ = deploy()
        with pytest.raises(CircuitTypeError, match="increment: expected CircuitContext"):
            contract.circuits["increment"]({}, 1)

    def test_witness_updates_private_state(self):
        contract, context = deploy()
        results = contract.circuits["bump_secret"](context)

        assert results.result == 1
        assert results.context.current_private_state == CounterPrivateState(secret=1)
        assert context.current_private_state == CounterPrivateState(secret=0)

    def test_malformed_witness_return(self):
        contract = CounterContract({"wit_next_secret": lambda ctx: 5})
        initial = contract.initial_state(constructor_context(CounterPrivateState(), COIN_PK), 0)
        state = initial.current_contract_state
        context = CircuitContext(
            state, initial.current_private_state, initial.current_zswap_local_state,
            QueryContext(state.data, ADDRESS),
        )

        with pytest.raises(WitnessError, match="wit_next_secret: witness must return"):
            contract.circuits["bump_secret"](context)

    def test_own_public_key(self):
        _, context = deploy()
        assert own_public_key(context).data == bytes.fromhex(COIN_PK)
