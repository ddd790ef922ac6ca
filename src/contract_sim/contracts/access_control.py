"""
AccessControl: role-based permissions.

Roles are 32-byte identifiers. Each role has an admin role whose members
may grant and revoke it; unless set otherwise that is DEFAULT_ADMIN_ROLE.
"""

from __future__ import annotations

from ..runtime import (
    CircuitContext,
    CompiledContract,
    Either,
    Ledger,
    LedgerMap,
    impure_circuit,
    ledger_field,
    own_public_key,
    require,
)
from .utils import ZERO_BYTES, is_contract_address

OPERATOR_ROLES = "operator_roles"
ADMIN_ROLES = "admin_roles"

DEFAULT_ADMIN_ROLE = ZERO_BYTES


class AccessControlLedger(Ledger):
    operator_roles = ledger_field()
    admin_roles = ledger_field()


class AccessControlContract(CompiledContract):
    LEDGER_CLASS = AccessControlLedger
    LEDGER_FIELDS = {OPERATOR_ROLES: LedgerMap(), ADMIN_ROLES: LedgerMap()}

    @impure_circuit
    def has_role(self, context: CircuitContext, role_id: bytes, account: Either) -> bool:
        members = self.lookup(context, OPERATOR_ROLES, role_id)
        if members is None:
            return False
        return bool(members.lookup(account, False))

    @impure_circuit
    def assert_only_role(self, context: CircuitContext, role_id: bytes) -> None:
        self._check_role(context, role_id, Either.from_key(own_public_key(context)))

    @impure_circuit
    def _check_role(self, context: CircuitContext, role_id: bytes, account: Either) -> None:
        require(self.has_role(context, role_id, account), "AccessControl: unauthorized account")

    @impure_circuit
    def get_role_admin(self, context: CircuitContext, role_id: bytes) -> bytes:
        return self.lookup(context, ADMIN_ROLES, role_id, DEFAULT_ADMIN_ROLE)

    @impure_circuit
    def grant_role(self, context: CircuitContext, role_id: bytes, account: Either) -> None:
        self.assert_only_role(context, self.get_role_admin(context, role_id))
        self._grant_role(context, role_id, account)

    @impure_circuit
    def revoke_role(self, context: CircuitContext, role_id: bytes, account: Either) -> None:
        self.assert_only_role(context, self.get_role_admin(context, role_id))
        self._revoke_role(context, role_id, account)

    @impure_circuit
    def renounce_role(self, context: CircuitContext, role_id: bytes, caller_confirmation: Either) -> None:
        require(
            caller_confirmation == Either.from_key(own_public_key(context)),
            "AccessControl: bad confirmation",
        )
        self._revoke_role(context, role_id, caller_confirmation)

    @impure_circuit
    def _set_role_admin(self, context: CircuitContext, role_id: bytes, admin_role: bytes) -> None:
        self.insert(context, ADMIN_ROLES, role_id, admin_role)

    @impure_circuit
    def _grant_role(self, context: CircuitContext, role_id: bytes, account: Either) -> bool:
        require(not is_contract_address(account), "AccessControl: unsafe role approval")
        return self._unsafe_grant_role(context, role_id, account)

    @impure_circuit
    def _unsafe_grant_role(self, context: CircuitContext, role_id: bytes, account: Either) -> bool:
        if self.has_role(context, role_id, account):
            return False
        self._set_membership(context, role_id, account, True)
        return True

    @impure_circuit
    def _revoke_role(self, context: CircuitContext, role_id: bytes, account: Either) -> bool:
        if not self.has_role(context, role_id, account):
            return False
        self._set_membership(context, role_id, account, False)
        return True

    def _set_membership(self, context: CircuitContext, role_id: bytes, account: Either, value: bool) -> None:
        members = self.lookup(context, OPERATOR_ROLES, role_id, LedgerMap())
        self.insert(context, OPERATOR_ROLES, role_id, members.insert(account, value))
