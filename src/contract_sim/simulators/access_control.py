"""
AccessControl simulator.
"""

from __future__ import annotations

from ..contracts import AccessControlContract
from ..core import SimulatorConfig, create_simulator
from ..runtime import Either
from ..witnesses import EmptyPrivateState, empty_witnesses

AccessControlSimulatorBase = create_simulator(
    SimulatorConfig(
        contract_factory=AccessControlContract,
        default_private_state=EmptyPrivateState,
        contract_args=lambda: (),
        ledger_extractor=AccessControlContract.ledger,
        witnesses_factory=empty_witnesses,
    ),
    name="AccessControlSimulatorBase",
)


class AccessControlSimulator(AccessControlSimulatorBase):
    def has_role(self, role_id: bytes, account: Either) -> bool:
        return self.circuits.impure.has_role(role_id, account)

    def assert_only_role(self, role_id: bytes) -> None:
        self.circuits.impure.assert_only_role(role_id)

    def _check_role(self, role_id: bytes, account: Either) -> None:
        self.circuits.impure._check_role(role_id, account)

    def get_role_admin(self, role_id: bytes) -> bytes:
        return self.circuits.impure.get_role_admin(role_id)

    def grant_role(self, role_id: bytes, account: Either) -> None:
        self.circuits.impure.grant_role(role_id, account)

    def revoke_role(self, role_id: bytes, account: Either) -> None:
        self.circuits.impure.revoke_role(role_id, account)

    def renounce_role(self, role_id: bytes, caller_confirmation: Either) -> None:
        self.circuits.impure.renounce_role(role_id, caller_confirmation)

    def _set_role_admin(self, role_id: bytes, admin_role: bytes) -> None:
        self.circuits.impure._set_role_admin(role_id, admin_role)

    def _grant_role(self, role_id: bytes, account: Either) -> bool:
        return self.circuits.impure._grant_role(role_id, account)

    def _unsafe_grant_role(self, role_id: bytes, account: Either) -> bool:
        return self.circuits.impure._unsafe_grant_role(role_id, account)

    def _revoke_role(self, role_id: bytes, account: Either) -> bool:
        return self.circuits.impure._revoke_role(role_id, account)
