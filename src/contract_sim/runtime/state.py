"""
Immutable ledger state tree.

Every write returns a new object and leaves the original untouched. That
property is what lets a failed circuit call disappear without trace: the
caller's context still points at the old tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Hashable, Iterator, Mapping, Optional, Tuple


class LedgerMap(Mapping):
    """Immutable map used for ledger ``Map<K, V>`` fields."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Optional[Mapping] = None) -> None:
        self._entries = MappingProxyType(dict(entries or {}))

    def __getitem__(self, key: Hashable) -> Any:
        return self._entries[key]

    def __iter__(self) -> Iterator:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Mapping):
            return dict(self._entries) == dict(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._entries.items()))

    def __repr__(self) -> str:
        return f"LedgerMap({dict(self._entries)!r})"

    def member(self, key: Hashable) -> bool:
        return key in self._entries

    def lookup(self, key: Hashable, default: Any = None) -> Any:
        return self._entries.get(key, default)

    def is_empty(self) -> bool:
        return not self._entries

    def size(self) -> int:
        return len(self._entries)

    def insert(self, key: Hashable, value: Any) -> "LedgerMap":
        entries = dict(self._entries)
        entries[key] = value
        return LedgerMap(entries)

    def remove(self, key: Hashable) -> "LedgerMap":
        entries = dict(self._entries)
        entries.pop(key, None)
        return LedgerMap(entries)


class StateValue:
    """Immutable field-name to value mapping holding a contract's public state."""

    __slots__ = ("_fields",)

    def __init__(self, fields: Optional[Mapping[str, Any]] = None) -> None:
        self._fields: Mapping[str, Any] = MappingProxyType(dict(fields or {}))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StateValue):
            return NotImplemented
        return dict(self._fields) == dict(other._fields)

    def __hash__(self) -> int:
        return hash(tuple(sorted(self._fields)))

    def __repr__(self) -> str:
        return f"StateValue({dict(self._fields)!r})"

    def __contains__(self, name: str) -> bool:
        return name in self._fields

    def fields(self) -> Tuple[str, ...]:
        return tuple(self._fields)

    def get(self, name: str) -> Any:
        try:
            return self._fields[name]
        except KeyError:
            raise KeyError(f"ledger has no field '{name}'") from None

    def set(self, name: str, value: Any) -> "StateValue":
        updated: Dict[str, Any] = dict(self._fields)
        updated[name] = value
        return StateValue(updated)


@dataclass(frozen=True)
class ContractState:
    """Full on-chain state of a contract: public data plus its operation names."""

    data: StateValue = field(default_factory=StateValue)
    operations: Tuple[str, ...] = ()

    def with_data(self, data: StateValue) -> "ContractState":
        return ContractState(data=data, operations=self.operations)


@dataclass(frozen=True)
class QueryContext:
    """A state tree paired with the address of the contract it belongs to.

    Compiled modules read and write named ledger fields through this
    handle. Writes return a new QueryContext.
    """

    state: StateValue
    address: str

    def read(self, name: str) -> Any:
        return self.state.get(name)

    def write(self, name: str, value: Any) -> "QueryContext":
        return QueryContext(self.state.set(name, value), self.address)

    def lookup(self, name: str, key: Hashable, default: Any = None) -> Any:
        return self.state.get(name).lookup(key, default)

    def member(self, name: str, key: Hashable) -> bool:
        return self.state.get(name).member(key)

    def insert(self, name: str, key: Hashable, value: Any) -> "QueryContext":
        return self.write(name, self.state.get(name).insert(key, value))

    def remove(self, name: str, key: Hashable) -> "QueryContext":
        return self.write(name, self.state.get(name).remove(key))
