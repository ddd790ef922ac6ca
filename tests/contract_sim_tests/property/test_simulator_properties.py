"""
Property-based tests for the simulator's state-threading guarantees.

Covers rollback on failure, commit on success, caller-scope isolation,
state preservation across witness swaps and idempotent pure calls.

Uses Hypothesis for property-based testing with random inputs.
"""

import pytest
from hypothesis import given, settings, strategies as st

from contract_sim.exceptions import CircuitAssertionError
from contract_sim.utils import to_hex_padded

from counter_contract import CounterPrivateState, CounterSimulator

DEPLOYER = to_hex_padded("DEPLOYER")

labels = st.text(alphabet="ABCDEFGHIJKLMNOPQRSTUVWXYZ", min_size=1, max_size=16)

# (operation, argument): step 0 always fails, fail_after_write always fails
operations = st.lists(
    st.one_of(
        st.tuples(st.just("increment"), st.integers(min_value=0, max_value=1000)),
        st.tuples(st.just("fail_after_write"), st.integers(min_value=1, max_value=1000)),
        st.tuples(st.just("bump_secret"), st.none()),
    ),
    min_size=1,
    max_size=20,
)


def run(sim, name, arg):
    if arg is None:
        return getattr(sim, name)()
    return getattr(sim, name)(arg)


@pytest.mark.property
class TestRollbackAndCommit:
    """Property tests for failed and successful impure calls."""

    @given(ops=operations)
    @settings(max_examples=50, deadline=None)
    def test_failed_calls_leave_no_trace(self, ops):
        """Public and private state are unchanged by any call that raises."""
        sim = CounterSimulator(0, coin_pk=DEPLOYER)

        for name, arg in ops:
            public_before = sim.get_public_state().state
            private_before = sim.get_private_state()
            context_before = sim.circuit_context
            try:
                run(sim, name, arg)
            except CircuitAssertionError:
                assert sim.get_public_state().state == public_before
                assert sim.get_private_state() == private_before
                assert sim.circuit_context is context_before

    @given(ops=operations)
    @settings(max_examples=50, deadline=None)
    def test_successful_calls_commit_returned_context(self, ops):
        """The persisted context equals the context the circuit returned."""
        sim = CounterSimulator(0, coin_pk=DEPLOYER)

        for name, arg in ops:
            args = () if arg is None else (arg,)
            try:
                expected = sim.contract.circuits[name](sim.get_caller_context(), *args)
            except CircuitAssertionError:
                continue

            result = run(sim, name, arg)

            assert result == expected.result
            assert sim.circuit_context == expected.context

    @given(steps=st.lists(st.integers(min_value=1, max_value=50), min_size=1, max_size=20))
    @settings(max_examples=50, deadline=None)
    def test_count_is_sum_of_successful_steps(self, steps):
        sim = CounterSimulator(0)
        for step in steps:
            sim.increment(step)
            with pytest.raises(CircuitAssertionError):
                sim.fail_after_write(step)

        assert sim.count() == sum(steps)


@pytest.mark.property
class TestCallerIsolation:
    """Property tests for caller overrides."""

    @given(callers=st.lists(labels, min_size=1, max_size=10))
    @settings(max_examples=50, deadline=None)
    def test_persistent_override_never_leaks(self, callers):
        sim = CounterSimulator(0, coin_pk=DEPLOYER)
        identity_before = sim.circuit_context.current_zswap_local_state

        for label in callers:
            sim.set_caller(to_hex_padded(label))
            sim.record_caller()
            sim.increment(1)
        sim.clear_caller()

        assert sim.circuit_context.current_zswap_local_state == identity_before
        assert sim.record_caller().data == bytes.fromhex(DEPLOYER)
        assert sim.count() == len(callers)

    @given(callers=st.lists(labels, min_size=1, max_size=10))
    @settings(max_examples=50, deadline=None)
    def test_single_use_override_applies_once(self, callers):
        sim = CounterSimulator(0, coin_pk=DEPLOYER)

        for label in callers:
            pk = to_hex_padded(label)
            assert sim.as_caller(pk).record_caller().data == bytes.fromhex(pk)
            assert sim.record_caller().data == bytes.fromhex(DEPLOYER)

        seen = sim.get_public_state().callers
        assert sum(seen.values()) == 2 * len(callers)


@pytest.mark.property
class TestWitnessSwap:
    """Property tests for witness table replacement."""

    @given(
        bumps=st.integers(min_value=0, max_value=10),
        jump=st.integers(min_value=1, max_value=1000),
        whole_table=st.booleans(),
    )
    @settings(max_examples=50, deadline=None)
    def test_swap_preserves_public_and_private_state(self, bumps, jump, whole_table):
        sim = CounterSimulator(3)
        for _ in range(bumps):
            sim.bump_secret()

        public_before = sim.get_public_state().state
        private_before = sim.get_private_state()

        def wit_jump(context):
            next_state = CounterPrivateState(secret=context.private_state.secret + jump)
            return next_state, next_state.secret

        if whole_table:
            sim.witnesses = {"wit_next_secret": wit_jump}
        else:
            sim.override_witness("wit_next_secret", wit_jump)

        assert sim.get_public_state().state == public_before
        assert sim.get_private_state() == private_before
        assert sim.bump_secret() == bumps + jump


@pytest.mark.property
class TestPureCalls:
    """Property tests for pure dispatch."""

    @given(a=st.integers(), b=st.integers())
    @settings(max_examples=100, deadline=None)
    def test_pure_calls_idempotent(self, a, b):
        sim = CounterSimulator(1)
        context_before = sim.circuit_context

        first = sim.add(a, b)
        second = sim.add(a, b)

        assert first == second == a + b
        assert sim.circuit_context is context_before
