"""
Simulator factory.

``create_simulator`` turns a SimulatorConfig into a base class. Concrete
simulators subclass it and add only domain-named methods that delegate to
``self.circuits.pure`` / ``self.circuits.impure``:

    OwnableSimulatorBase = create_simulator(
        SimulatorConfig(
            contract_factory=OwnableContract,
            default_private_state=EmptyPrivateState,
            contract_args=lambda initial_owner, is_init: (initial_owner, is_init),
            ledger_extractor=OwnableContract.ledger,
            witnesses_factory=empty_witnesses,
        ),
        name="OwnableSimulatorBase",
    )

    class OwnableSimulator(OwnableSimulatorBase):
        def owner(self):
            return self.circuits.impure.owner()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Generic, Mapping, Optional, Sequence, Type, TypeVar

from ..config import get_settings
from ..runtime import StateValue, WitnessContext, sample_contract_address
from .context_manager import CircuitContextManager
from .contract_simulator import ContractSimulator
from .proxies import CircuitProxies, CircuitProxy, CircuitTables

logger = logging.getLogger(__name__)

P = TypeVar("P")
L = TypeVar("L")
W = TypeVar("W", bound=Mapping)


@dataclass(frozen=True)
class SimulatorConfig(Generic[P, L, W]):
    """Everything a simulator needs to know about one contract.

    Attributes:
        contract_factory: Builds a compiled-module binding from a witness table
        default_private_state: Returns the private state used when none is given
        contract_args: Maps simulator constructor arguments to the compiled
            module's constructor arguments
        ledger_extractor: Decodes a ledger state tree into field accessors
        witnesses_factory: Returns the witness table used when none is given
    """

    contract_factory: Callable[[W], Any]
    default_private_state: Callable[[], P]
    contract_args: Callable[..., Sequence[Any]]
    ledger_extractor: Callable[[StateValue], L]
    witnesses_factory: Callable[[], W]


class GeneratedSimulator(ContractSimulator[P, L]):
    """Simulator base produced by create_simulator."""

    config: ClassVar[SimulatorConfig]

    def __init__(
        self,
        *contract_args: Any,
        private_state: Optional[P] = None,
        witnesses: Optional[Mapping[str, Callable]] = None,
        coin_pk: Optional[str] = None,
        address: Optional[str] = None,
    ) -> None:
        """
        Deploy the contract into a fresh in-memory context.

        Args:
            *contract_args: Simulator constructor arguments, passed through
                ``config.contract_args``
            private_state: Initial private state (default from the config)
            witnesses: Witness table (default from the config)
            coin_pk: Deployer coin public key (default from settings)
            address: Contract address (default: random)

        Raises:
            ContractRuntimeError: If the contract rejects the constructor
                arguments or the witness table
        """
        super().__init__()
        config = self.config

        self._witnesses = witnesses if witnesses is not None else config.witnesses_factory()
        self.contract = config.contract_factory(self._witnesses)

        self.circuit_context_manager = CircuitContextManager(
            self.contract,
            private_state if private_state is not None else config.default_private_state(),
            coin_pk or get_settings().default_coin_pk,
            address or sample_contract_address(),
            *config.contract_args(*contract_args),
        )
        self._contract_address = self.circuit_context.transaction_context.address

        self._proxies: CircuitProxies[P] = CircuitProxies(
            get_contract=lambda: self.contract,
            get_context=lambda: self.circuit_context,
            get_caller_context=self.get_caller_context,
            update_context=self._commit_context,
            after_call=self._reset_single_use_caller,
        )

        logger.debug(
            "Simulator constructed",
            extra={
                "event": "simulator.constructed",
                "contract": type(self.contract).__name__,
                "address": self._contract_address[:10],
            },
        )

    @property
    def contract_address(self) -> str:
        return self._contract_address

    def get_public_state(self) -> L:
        return self.config.ledger_extractor(self.circuit_context.transaction_context.state)

    def get_witness_context(self) -> WitnessContext[L, P]:
        """The context a witness invoked right now would receive."""
        return WitnessContext(
            ledger=self.get_public_state(),
            private_state=self.get_private_state(),
            contract_address=self.contract_address,
        )

    # ==================== Witness registry ====================

    @property
    def witnesses(self) -> Mapping[str, Callable]:
        return self._witnesses

    @witnesses.setter
    def witnesses(self, new_witnesses: Mapping[str, Callable]) -> None:
        """Swap the witness table and rebuild the contract binding.

        The circuit context is left alone, so ledger and private state survive.
        """
        self.contract = self.config.contract_factory(new_witnesses)
        self._witnesses = new_witnesses
        self.reset_circuit_proxies()
        logger.debug(
            "Witness table rebuilt",
            extra={
                "event": "simulator.witnesses_rebuilt",
                "contract": type(self.contract).__name__,
                "witnesses": sorted(new_witnesses),
            },
        )

    def override_witness(self, key: str, fn: Callable) -> None:
        """Replace a single witness, keeping the rest of the table."""
        self.witnesses = {**self._witnesses, key: fn}

    # ==================== Dispatch tables ====================

    @property
    def circuits(self) -> CircuitTables:
        return self._proxies.circuits

    @property
    def pure_circuit(self) -> CircuitProxy:
        return self._proxies.pure

    @property
    def impure_circuit(self) -> CircuitProxy:
        return self._proxies.impure

    def reset_circuit_proxies(self) -> None:
        self._proxies.reset()


def create_simulator(
    config: SimulatorConfig[P, L, W],
    name: Optional[str] = None,
) -> Type[GeneratedSimulator[P, L]]:
    """
    Build a simulator base class for one contract.

    Args:
        config: Contract factory, defaults and ledger decoder
        name: Class name of the generated base (default ``GeneratedSimulator``)

    Returns:
        A GeneratedSimulator subclass bound to ``config``
    """
    metaclass = type(GeneratedSimulator)
    return metaclass(name or "GeneratedSimulator", (GeneratedSimulator,), {"config": config})
