import sys
from pathlib import Path

import pytest

# Fixture contracts live beside the tests, not in the installed package
fixtures = Path(__file__).parent / "fixtures"
if fixtures.exists():
    sys.path.insert(0, str(fixtures))

from contract_sim.utils import create_either_test_user, to_hex_padded


@pytest.fixture
def owner_pk():
    return to_hex_padded("OWNER")


@pytest.fixture
def owner():
    return create_either_test_user("OWNER")


@pytest.fixture
def unauthorized_pk():
    return to_hex_padded("UNAUTHORIZED")


@pytest.fixture
def unauthorized():
    return create_either_test_user("UNAUTHORIZED")
