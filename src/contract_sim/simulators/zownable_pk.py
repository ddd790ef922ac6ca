"""
ZOwnablePK simulator.

The deploying test derives the owner id itself, usually through the pure
``_compute_owner_id`` circuit of a throwaway instance or
``contracts.compute_owner_id``, and the owner's simulator instance must hold
the matching nonce in its private state.
"""

from __future__ import annotations

from typing import Callable, Mapping, Optional

from ..contracts import ZOwnablePKContract
from ..core import SimulatorConfig, create_simulator
from ..runtime import Either
from ..witnesses import ZOwnablePKPrivateState, zownable_pk_witnesses

ZOwnablePKSimulatorBase = create_simulator(
    SimulatorConfig(
        contract_factory=ZOwnablePKContract,
        default_private_state=ZOwnablePKPrivateState.generate,
        contract_args=lambda owner_id, instance_salt, is_init: (owner_id, instance_salt, is_init),
        ledger_extractor=ZOwnablePKContract.ledger,
        witnesses_factory=zownable_pk_witnesses,
    ),
    name="ZOwnablePKSimulatorBase",
)


class ZOwnablePKSimulator(ZOwnablePKSimulatorBase):
    def __init__(
        self,
        owner_id: bytes,
        instance_salt: bytes,
        is_init: bool,
        *,
        private_state: Optional[ZOwnablePKPrivateState] = None,
        witnesses: Optional[Mapping[str, Callable]] = None,
        coin_pk: Optional[str] = None,
        address: Optional[str] = None,
    ) -> None:
        super().__init__(
            owner_id,
            instance_salt,
            is_init,
            private_state=private_state,
            witnesses=witnesses,
            coin_pk=coin_pk,
            address=address,
        )

    def owner(self) -> bytes:
        return self.circuits.impure.owner()

    def transfer_ownership(self, new_owner_id: bytes) -> None:
        self.circuits.impure.transfer_ownership(new_owner_id)

    def renounce_ownership(self) -> None:
        self.circuits.impure.renounce_ownership()

    def assert_only_owner(self) -> None:
        self.circuits.impure.assert_only_owner()

    def _compute_owner_commitment(self, owner_id: bytes, counter: int) -> bytes:
        return self.circuits.impure._compute_owner_commitment(owner_id, counter)

    def _compute_owner_id(self, public_key: Either, secret_nonce: bytes) -> bytes:
        return self.circuits.pure._compute_owner_id(public_key, secret_nonce)

    def _transfer_ownership(self, new_owner_id: bytes) -> None:
        self.circuits.impure._transfer_ownership(new_owner_id)

    # ==================== Private state ====================

    def inject_secret_nonce(self, nonce: bytes) -> ZOwnablePKPrivateState:
        """Replace the secret nonce in the private state."""
        return self.inject_private_state(secret_nonce=nonce)

    def get_current_secret_nonce(self) -> bytes:
        return self.get_private_state().secret_nonce
