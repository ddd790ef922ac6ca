"""
Circuit dispatch tables.

A compiled module's circuits take a context and return the result together
with a new context. The tables built here turn each of them into a plain
``(*args) -> result`` callable:

- pure entries call the circuit with the current context and drop the
  context that comes back;
- impure entries call the circuit with the caller-scoped working context
  and commit the returned context, but only once the circuit has returned.
  A circuit that raises leaves the persisted context exactly as it was.

Tables are keyed by the names the compiled module exposes, verbatim. A name
listed as impure never appears in the pure table.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Generic, Iterator, Mapping, NamedTuple, Optional, Tuple, TypeVar

from ..exceptions import UnknownCircuitError
from ..runtime import CircuitContext

logger = logging.getLogger(__name__)

P = TypeVar("P")

ContextGetter = Callable[[], CircuitContext]
ContextSetter = Callable[[CircuitContext], None]

_PROXY_SLOTS = ("_kind", "_entries")


class CircuitProxy(Mapping):
    """Name to contextless-callable table, also reachable as attributes.

    Circuit names take precedence over the table's own members, so a circuit
    called ``get``, ``keys`` or ``kind`` is still reached as an attribute.
    """

    def __init__(self, kind: str, entries: Dict[str, Callable[..., Any]]) -> None:
        self._kind = kind
        self._entries = entries

    def __getattribute__(self, name: str) -> Any:
        if not name.startswith("__") and name not in _PROXY_SLOTS:
            entries = object.__getattribute__(self, "__dict__").get("_entries", {})
            if name in entries:
                return entries[name]
        return object.__getattribute__(self, name)

    def __getitem__(self, name: str) -> Callable[..., Any]:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getattr__(self, name: str) -> Callable[..., Any]:
        if name.startswith("__") or name in _PROXY_SLOTS:
            raise AttributeError(name)
        raise UnknownCircuitError(name, self._kind)

    def __dir__(self):
        return list(super().__dir__()) + list(self._entries)

    def __repr__(self) -> str:
        return f"CircuitProxy({self._kind}, {sorted(self._entries)})"

    @property
    def kind(self) -> str:
        return self._kind


class CircuitTables(NamedTuple):
    pure: CircuitProxy
    impure: CircuitProxy


def split_circuits(contract: Any) -> Tuple[Dict[str, Callable], Dict[str, Callable]]:
    """
    Partition a compiled module's circuits into (pure, impure).

    Pure names are all names minus the impure names, so a name the module
    lists as impure is only ever dispatched as impure.
    """
    impure = dict(contract.impure_circuits)
    pure = {name: fn for name, fn in contract.circuits.items() if name not in impure}
    return pure, impure


def create_pure_circuit_proxy(
    circuits: Mapping[str, Callable],
    context: ContextGetter,
    after_call: Optional[Callable[[], None]] = None,
) -> CircuitProxy:
    """
    Wrap pure circuits so they take only their own arguments.

    Args:
        circuits: Pure circuit functions ``(context, *args) -> CircuitResults``
        context: Supplies the current circuit context
        after_call: Invoked after every call, whether it returned or raised

    Returns:
        Dispatch table returning only each circuit's result
    """

    def bind(fn: Callable) -> Callable[..., Any]:
        def call(*args: Any) -> Any:
            try:
                return fn(context(), *args).result
            finally:
                if after_call is not None:
                    after_call()

        return call

    return CircuitProxy("pure", {name: bind(fn) for name, fn in circuits.items()})


def create_impure_circuit_proxy(
    circuits: Mapping[str, Callable],
    context: ContextGetter,
    update_context: ContextSetter,
    after_call: Optional[Callable[[], None]] = None,
) -> CircuitProxy:
    """
    Wrap impure circuits so they take only their own arguments and commit.

    Args:
        circuits: Impure circuit functions ``(context, *args) -> CircuitResults``
        context: Supplies the working (caller-scoped) context
        update_context: Commits the context a successful call returned
        after_call: Invoked after every call, whether it returned or raised

    Returns:
        Dispatch table returning only each circuit's result
    """

    def bind(name: str, fn: Callable) -> Callable[..., Any]:
        def call(*args: Any) -> Any:
            try:
                results = fn(context(), *args)
                update_context(results.context)
            finally:
                if after_call is not None:
                    after_call()

            logger.debug(
                "Impure circuit committed",
                extra={"event": "dispatch.commit", "circuit": name},
            )
            return results.result

        return call

    return CircuitProxy("impure", {name: bind(name, fn) for name, fn in circuits.items()})


class CircuitProxies(Generic[P]):
    """
    Lazily built, memoized pair of dispatch tables.

    The tables close over whatever binding ``get_contract`` returned when
    they were built; call reset() after the binding changes.
    """

    def __init__(
        self,
        get_contract: Callable[[], Any],
        get_context: ContextGetter,
        get_caller_context: ContextGetter,
        update_context: ContextSetter,
        after_call: Optional[Callable[[], None]] = None,
    ) -> None:
        self._get_contract = get_contract
        self._get_context = get_context
        self._get_caller_context = get_caller_context
        self._update_context = update_context
        self._after_call = after_call
        self._pure: Optional[CircuitProxy] = None
        self._impure: Optional[CircuitProxy] = None

    def _build(self) -> None:
        contract = self._get_contract()
        pure, impure = split_circuits(contract)
        self._pure = create_pure_circuit_proxy(pure, self._get_context, self._after_call)
        self._impure = create_impure_circuit_proxy(
            impure, self._get_caller_context, self._update_context, self._after_call
        )
        logger.debug(
            "Circuit dispatch tables built",
            extra={
                "event": "dispatch.tables_built",
                "contract": type(contract).__name__,
                "pure": len(pure),
                "impure": len(impure),
            },
        )

    @property
    def pure(self) -> CircuitProxy:
        if self._pure is None:
            self._build()
        return self._pure

    @property
    def impure(self) -> CircuitProxy:
        if self._impure is None:
            self._build()
        return self._impure

    @property
    def circuits(self) -> CircuitTables:
        return CircuitTables(pure=self.pure, impure=self.impure)

    @property
    def is_built(self) -> bool:
        return self._pure is not None and self._impure is not None

    def reset(self) -> None:
        """Drop both tables; they are rebuilt on next access."""
        self._pure = None
        self._impure = None
