"""
Tests for the Initializable contract.
"""

import pytest

from contract_sim.exceptions import CircuitAssertionError
from contract_sim.simulators import InitializableSimulator

NOT_INITIALIZED = "Initializable: contract not initialized"
ALREADY_INITIALIZED = "Initializable: contract already initialized"


@pytest.fixture
def initializable():
    return InitializableSimulator()


class TestInitializable:
    def test_starts_uninitialized(self, initializable):
        assert initializable.get_public_state().is_initialized is False
        initializable.assert_not_initialized()

    def test_assert_initialized_fails(self, initializable):
        with pytest.raises(CircuitAssertionError, match=NOT_INITIALIZED):
            initializable.assert_initialized()

    def test_initialize(self, initializable):
        initializable.initialize()

        assert initializable.get_public_state().is_initialized is True
        initializable.assert_initialized()
        with pytest.raises(CircuitAssertionError, match=ALREADY_INITIALIZED):
            initializable.assert_not_initialized()

    def test_initialize_once(self, initializable):
        initializable.initialize()
        with pytest.raises(CircuitAssertionError, match=ALREADY_INITIALIZED):
            initializable.initialize()
        assert initializable.get_public_state().is_initialized is True
