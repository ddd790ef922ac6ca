"""
Tests for the shielded ZOwnablePK contract.
"""

import pytest

from contract_sim.contracts import compute_owner_id
from contract_sim.contracts.zownable_pk import COMMITMENT_DOMAIN
from contract_sim.exceptions import CircuitAssertionError, WitnessError
from contract_sim.runtime import int_to_bytes, persistent_hash
from contract_sim.simulators import ZOwnablePKSimulator
from contract_sim.utils import (
    create_either_test_contract_address,
    create_either_test_user,
    to_hex_padded,
)
from contract_sim.witnesses import ZOwnablePKPrivateState

OWNER_PK = to_hex_padded("OWNER")
NEW_OWNER_PK = to_hex_padded("NEW_OWNER")
UNAUTHORIZED_PK = to_hex_padded("UNAUTHORIZED")

OWNER_NONCE = b"\x11" * 32
NEW_OWNER_NONCE = b"\x22" * 32
BAD_NONCE = b"\x99" * 32
INSTANCE_SALT = b"\x05" * 32

OWNER_ID = compute_owner_id(create_either_test_user("OWNER"), OWNER_NONCE)
NEW_OWNER_ID = compute_owner_id(create_either_test_user("NEW_OWNER"), NEW_OWNER_NONCE)

NOT_OWNER = "ZOwnablePK: caller is not the owner"


def commitment(owner_id, counter, salt=INSTANCE_SALT):
    return persistent_hash([owner_id, salt, int_to_bytes(32, counter), COMMITMENT_DOMAIN])


@pytest.fixture
def ownable():
    return ZOwnablePKSimulator(
        OWNER_ID,
        INSTANCE_SALT,
        True,
        private_state=ZOwnablePKPrivateState.with_nonce(OWNER_NONCE),
    )


class TestConstruction:
    def test_initial_commitment(self, ownable):
        assert ownable.owner() == commitment(OWNER_ID, 1)
        assert ownable.get_public_state().counter == 1
        assert ownable.get_public_state().instance_salt == INSTANCE_SALT

    def test_rejects_zero_id(self):
        with pytest.raises(CircuitAssertionError, match="ZOwnablePK: invalid id"):
            ZOwnablePKSimulator(bytes(32), INSTANCE_SALT, True)

    def test_uninitialized(self):
        sim = ZOwnablePKSimulator(OWNER_ID, INSTANCE_SALT, False)
        with pytest.raises(CircuitAssertionError, match="Initializable: contract not initialized"):
            sim.owner()

    def test_generated_private_state(self):
        sim = ZOwnablePKSimulator(OWNER_ID, INSTANCE_SALT, True)
        assert len(sim.get_current_secret_nonce()) == 32

    def test_requires_nonce_witness(self):
        with pytest.raises(WitnessError, match="wit_secret_nonce"):
            ZOwnablePKSimulator(OWNER_ID, INSTANCE_SALT, True, witnesses={})


class TestAssertOnlyOwner:
    """Caller key and nonce must both match"""

    def test_owner_with_correct_nonce(self, ownable):
        assert ownable.get_current_secret_nonce() == OWNER_NONCE
        ownable.as_caller(OWNER_PK).assert_only_owner()

    def test_owner_with_wrong_nonce(self, ownable):
        ownable.inject_secret_nonce(BAD_NONCE)

        assert ownable.get_current_secret_nonce() == BAD_NONCE
        with pytest.raises(CircuitAssertionError, match=NOT_OWNER):
            ownable.as_caller(OWNER_PK).assert_only_owner()

    def test_unauthorized_with_correct_nonce(self, ownable):
        with pytest.raises(CircuitAssertionError, match=NOT_OWNER):
            ownable.as_caller(UNAUTHORIZED_PK).assert_only_owner()

    def test_unauthorized_with_wrong_nonce(self, ownable):
        ownable.inject_secret_nonce(BAD_NONCE)
        with pytest.raises(CircuitAssertionError, match=NOT_OWNER):
            ownable.as_caller(UNAUTHORIZED_PK).assert_only_owner()


class TestTransferOwnership:
    def test_transfer(self, ownable):
        ownable.as_caller(OWNER_PK).transfer_ownership(NEW_OWNER_ID)

        assert ownable.owner() == commitment(NEW_OWNER_ID, 2)
        with pytest.raises(CircuitAssertionError, match=NOT_OWNER):
            ownable.as_caller(OWNER_PK).assert_only_owner()

        ownable.inject_secret_nonce(NEW_OWNER_NONCE)
        ownable.as_caller(NEW_OWNER_PK).assert_only_owner()

    def test_counter_bumps(self, ownable):
        before = ownable.get_public_state().counter
        ownable.as_caller(OWNER_PK).transfer_ownership(NEW_OWNER_ID)
        assert ownable.get_public_state().counter == before + 1

    def test_transfer_to_self_changes_commitment(self, ownable):
        initial = ownable.owner()

        ownable.as_caller(OWNER_PK).transfer_ownership(OWNER_ID)

        assert ownable.owner() != initial
        assert ownable.owner() == commitment(OWNER_ID, 2)
        ownable.as_caller(OWNER_PK).assert_only_owner()

    def test_rejects_zero_id(self, ownable):
        with pytest.raises(CircuitAssertionError, match="ZOwnablePK: invalid id"):
            ownable.as_caller(OWNER_PK).transfer_ownership(bytes(32))

    def test_unauthorized_transfer(self, ownable):
        with pytest.raises(CircuitAssertionError, match=NOT_OWNER):
            ownable.as_caller(UNAUTHORIZED_PK).transfer_ownership(NEW_OWNER_ID)
        assert ownable.owner() == commitment(OWNER_ID, 1)


class TestRenounceOwnership:
    def test_renounce(self, ownable):
        ownable.as_caller(OWNER_PK).renounce_ownership()

        assert ownable.owner() == bytes(32)
        with pytest.raises(CircuitAssertionError, match=NOT_OWNER):
            ownable.as_caller(OWNER_PK).assert_only_owner()

    def test_unauthorized_renounce(self, ownable):
        with pytest.raises(CircuitAssertionError, match=NOT_OWNER):
            ownable.as_caller(UNAUTHORIZED_PK).renounce_ownership()

    def test_owner_with_bad_nonce_cannot_renounce(self, ownable):
        ownable.inject_secret_nonce(BAD_NONCE)
        with pytest.raises(CircuitAssertionError, match=NOT_OWNER):
            ownable.as_caller(OWNER_PK).renounce_ownership()


class TestHelpers:
    def test_compute_owner_id_matches_module_function(self, ownable):
        either = create_either_test_user("OWNER")
        assert ownable._compute_owner_id(either, OWNER_NONCE) == OWNER_ID
        assert ownable._compute_owner_id(either, OWNER_NONCE) == compute_owner_id(either, OWNER_NONCE)

    def test_compute_owner_id_rejects_contract(self, ownable):
        with pytest.raises(
            CircuitAssertionError,
            match="ZOwnablePK: contract address owners are not yet supported",
        ):
            ownable._compute_owner_id(create_either_test_contract_address("C"), OWNER_NONCE)

    @pytest.mark.parametrize("counter", [0, 1, 2, 255, 2**64])
    def test_compute_owner_commitment(self, ownable, counter):
        assert ownable._compute_owner_commitment(OWNER_ID, counter) == commitment(OWNER_ID, counter)

    def test_internal_transfer_skips_auth(self, ownable):
        ownable.as_caller(UNAUTHORIZED_PK)._transfer_ownership(NEW_OWNER_ID)
        assert ownable.owner() == commitment(NEW_OWNER_ID, 2)

    def test_different_salts_give_different_commitments(self):
        first = ZOwnablePKSimulator(OWNER_ID, b"\x01" * 32, True)
        second = ZOwnablePKSimulator(OWNER_ID, b"\x02" * 32, True)
        assert first.owner() != second.owner()
