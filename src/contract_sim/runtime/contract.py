"""
Base class for compiled contract modules.

A compiled module is bound to one witness table and exposes:

- ``circuits``: every circuit, each ``(context, *args) -> CircuitResults``
- ``impure_circuits``: the subset that reads or writes ledger/private state
- ``pure_circuits``: contextless versions of the pure circuits
- ``initial_state(constructor_context, *args)``: runs the contract constructor
- ``ledger(state)``: read-only accessor over a ledger state tree

Contract authors subclass CompiledContract, declare the ledger layout in
LEDGER_FIELDS, list REQUIRED_WITNESSES, and mark circuit methods with
``@impure_circuit`` or ``@pure_circuit``.
"""

from __future__ import annotations

import copy
from typing import Any, Callable, ClassVar, Dict, Generic, Hashable, List, Mapping, Tuple, TypeVar

from ..exceptions import CircuitTypeError, WitnessError
from .context import (
    CircuitContext,
    CircuitResults,
    ConstructorContext,
    InitialState,
    WitnessContext,
    dummy_contract_address,
)
from .state import ContractState, QueryContext, StateValue

P = TypeVar("P")

IMPURE = "impure"
PURE = "pure"


def impure_circuit(method: Callable) -> Callable:
    """Mark ``method(self, context, *args)`` as an impure circuit."""
    method.__circuit_kind__ = IMPURE
    return method


def pure_circuit(method: Callable) -> Callable:
    """Mark ``method(self, *args)`` as a pure circuit."""
    method.__circuit_kind__ = PURE
    return method


class ledger_field:
    """Descriptor exposing one ledger field on a Ledger accessor."""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: "Ledger", owner: type) -> Any:
        if instance is None:
            return self
        return instance.state.get(self.name)


class Ledger:
    """Read-only view over a contract's public state."""

    def __init__(self, state: StateValue) -> None:
        self.state = state

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.state!r})"


class CompiledContract(Generic[P]):
    """A contract binding constructed from a witness table."""

    LEDGER_CLASS: ClassVar[type] = Ledger
    LEDGER_FIELDS: ClassVar[Mapping[str, Any]] = {}
    REQUIRED_WITNESSES: ClassVar[Tuple[str, ...]] = ()

    def __init__(self, witnesses: Mapping[str, Callable]) -> None:
        if not isinstance(witnesses, Mapping):
            raise WitnessError(
                f"first (witnesses) argument to {type(self).__name__} is not a mapping"
            )
        for name in self.REQUIRED_WITNESSES:
            if not callable(witnesses.get(name)):
                raise WitnessError(
                    f"first (witnesses) argument to {type(self).__name__} does not "
                    f"contain a function-valued field named {name}",
                    details={"witness": name},
                )
        self.witnesses: Dict[str, Callable] = dict(witnesses)

        self.circuits: Dict[str, Callable[..., CircuitResults]] = {}
        self.impure_circuits: Dict[str, Callable[..., CircuitResults]] = {}
        self.pure_circuits: Dict[str, Callable[..., Any]] = {}

        for name, kind in self.circuit_definitions():
            method = getattr(self, name)
            if kind == IMPURE:
                entry = self._bind_impure(name, method)
                self.impure_circuits[name] = entry
            else:
                entry = self._bind_pure(name, method)
                self.pure_circuits[name] = method
            self.circuits[name] = entry

    @classmethod
    def circuit_definitions(cls) -> List[Tuple[str, str]]:
        """(name, kind) for every circuit declared on the class."""
        definitions = []
        for name in dir(cls):
            kind = getattr(getattr(cls, name, None), "__circuit_kind__", None)
            if kind is not None:
                definitions.append((name, kind))
        return definitions

    @classmethod
    def ledger(cls, state: StateValue) -> Any:
        return cls.LEDGER_CLASS(state)

    # ==================== Construction ====================

    def initial_state(self, constructor_ctx: ConstructorContext[P], *args: Any) -> InitialState[P]:
        """
        Build the contract's initial state by running its constructor.

        Args:
            constructor_ctx: Initial private state and caller identity
            *args: Constructor arguments declared by the contract

        Returns:
            Initial private state, contract state and caller identity scope

        Raises:
            CircuitTypeError: If the constructor context is malformed
            CircuitAssertionError: If the constructor rejects its arguments
        """
        if not isinstance(constructor_ctx, ConstructorContext):
            raise CircuitTypeError("initial_state", "ConstructorContext", constructor_ctx)

        data = StateValue(self.LEDGER_FIELDS)
        state = ContractState(data=data, operations=tuple(self.circuits))
        context: CircuitContext[P] = CircuitContext(
            original_state=state,
            current_private_state=constructor_ctx.initial_private_state,
            current_zswap_local_state=constructor_ctx.initial_zswap_local_state,
            transaction_context=QueryContext(data, dummy_contract_address()),
        )
        self.constructor(context, *args)
        return InitialState(
            current_private_state=context.current_private_state,
            current_contract_state=state.with_data(context.transaction_context.state),
            current_zswap_local_state=context.current_zswap_local_state,
        )

    def constructor(self, context: CircuitContext[P]) -> None:
        """Contract constructor; subclasses override with their own arguments."""

    # ==================== Binding ====================

    def _bind_impure(self, name: str, method: Callable) -> Callable[..., CircuitResults]:
        def invoke(context: CircuitContext[P], *args: Any) -> CircuitResults[P]:
            _check_context(name, context)
            working = copy.copy(context)
            result = method(working, *args)
            working.original_state = working.original_state.with_data(
                working.transaction_context.state
            )
            return CircuitResults(result=result, context=working)

        invoke.__name__ = name
        return invoke

    def _bind_pure(self, name: str, method: Callable) -> Callable[..., CircuitResults]:
        def invoke(context: CircuitContext[P], *args: Any) -> CircuitResults[P]:
            _check_context(name, context)
            return CircuitResults(result=method(*args), context=context)

        invoke.__name__ = name
        return invoke

    # ==================== Helpers for circuit bodies ====================

    def call_witness(self, context: CircuitContext[P], name: str, *args: Any) -> Any:
        """Invoke witness ``name`` and thread its private state into ``context``."""
        witness_ctx = WitnessContext(
            ledger=self.ledger(context.transaction_context.state),
            private_state=context.current_private_state,
            contract_address=context.transaction_context.address,
        )
        returned = self.witnesses[name](witness_ctx, *args)
        if not (isinstance(returned, (tuple, list)) and len(returned) == 2):
            raise WitnessError(
                f"{name}: witness must return (private_state, value)",
                details={"witness": name},
            )
        next_private_state, value = returned
        context.current_private_state = next_private_state
        return value

    @staticmethod
    def read(context: CircuitContext, name: str) -> Any:
        return context.transaction_context.read(name)

    @staticmethod
    def write(context: CircuitContext, name: str, value: Any) -> None:
        context.transaction_context = context.transaction_context.write(name, value)

    @staticmethod
    def lookup(context: CircuitContext, name: str, key: Hashable, default: Any = None) -> Any:
        return context.transaction_context.lookup(name, key, default)

    @staticmethod
    def member(context: CircuitContext, name: str, key: Hashable) -> bool:
        return context.transaction_context.member(name, key)

    @staticmethod
    def insert(context: CircuitContext, name: str, key: Hashable, value: Any) -> None:
        context.transaction_context = context.transaction_context.insert(name, key, value)

    @staticmethod
    def remove(context: CircuitContext, name: str, key: Hashable) -> None:
        context.transaction_context = context.transaction_context.remove(name, key)


def _check_context(name: str, context: Any) -> None:
    if not isinstance(context, CircuitContext):
        raise CircuitTypeError(name, "CircuitContext", context)
