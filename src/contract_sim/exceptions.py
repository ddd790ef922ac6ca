"""
Exception hierarchy for the contract simulator.

Errors raised by compiled contract modules (construction, authorization,
invariant, shape and usage errors) all derive from ContractRuntimeError so
tests can assert on the precise type and on the exact contract message.
The simulator core never wraps or swallows these; they surface unchanged.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class SimulatorError(Exception):
    """Base exception for all simulator errors.

    Attributes:
        message: Human-readable error description
        details: Additional context about the error
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(SimulatorError):
    """Raised when an environment setting is missing or invalid."""
    pass


class UnknownCircuitError(SimulatorError, AttributeError):
    """Raised when a dispatch table is asked for a circuit it does not expose."""

    def __init__(self, name: str, kind: str) -> None:
        super().__init__(
            f"no {kind} circuit named '{name}'",
            details={"circuit": name, "kind": kind},
        )
        self.name = name
        self.kind = kind


# ==================== Compiled Module Errors ====================


class ContractRuntimeError(SimulatorError):
    """Raised by a compiled contract module.

    This is the counterpart of the runtime error every generated contract
    raises; subclasses narrow it by origin.
    """
    pass


class CircuitAssertionError(ContractRuntimeError):
    """Raised when an assertion inside a circuit or constructor fails.

    The message is exactly the assertion text written in the contract,
    e.g. ``"Ownable: caller is not the owner"``.
    """
    pass


class CircuitTypeError(ContractRuntimeError):
    """Raised when a compiled module receives a malformed context or argument."""

    def __init__(self, circuit: str, expected: str, received: Any) -> None:
        super().__init__(
            f"{circuit}: expected {expected}, received {type(received).__name__}",
            details={"circuit": circuit, "expected": expected},
        )
        self.circuit = circuit
        self.expected = expected


class WitnessError(ContractRuntimeError):
    """Raised when a witness table is missing an entry or a witness misbehaves."""
    pass
