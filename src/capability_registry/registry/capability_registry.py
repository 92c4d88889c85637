"""
Capability Registry - Named Contracts and their Implementers.

This module provides a thread-safe registry of behavioral contracts and
the entities that satisfy them. Implementers declare which contracts
they satisfy; the registry verifies the declaration once at
registration and then dispatches by contract name.

Usage:
    registry = CapabilityRegistry()
    registry.register_contract("flee", Fleeing, ["flee"])
    registry.register_implementer("rabbit", Rabbit, ["flee"])

    registry.invoke("rabbit", "flee")        # *The Rabbit is fleeing*
    registry.implementers_of("flee")         # ["rabbit"]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from threading import RLock
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from capability_registry.errors import CapabilityError, ContractViolation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContractInfo:
    """Metadata about a registered contract."""

    name: str
    protocol: type
    operations: Tuple[str, ...]
    description: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "protocol": self.protocol.__name__,
            "operations": list(self.operations),
            "description": self.description,
        }


@dataclass(frozen=True)
class ImplementerInfo:
    """Metadata about a registered implementer."""

    name: str
    factory: Callable[[], Any]
    contracts: Tuple[str, ...]
    description: str = ""
    tags: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "factory": getattr(self.factory, "__name__", repr(self.factory)),
            "contracts": list(self.contracts),
            "description": self.description,
            "tags": list(self.tags),
        }


class CapabilityRegistry:
    """
    Thread-safe registry of contracts and implementers.

    Supports:
        - Registration of contracts as protocol plus operation names
        - Registration of implementers via zero-argument factories
        - Up-front verification that declared contracts are complete
        - Capability queries and dispatch by contract name
    """

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._contracts: Dict[str, ContractInfo] = {}
        self._implementers: Dict[str, ImplementerInfo] = {}
        self._lock = RLock()
        logger.debug("CapabilityRegistry initialized")

    def register_contract(
        self,
        name: str,
        protocol: type,
        operations: Sequence[str],
        description: str = "",
    ) -> None:
        """
        Register a contract.

        Args:
            name: Unique contract name (e.g. "flee")
            protocol: Protocol class describing the contract
            operations: Operation names every implementer must provide
            description: Optional description

        Raises:
            ValueError: If the name is taken or no operations are given
        """
        with self._lock:
            if name in self._contracts:
                raise ValueError(f"Contract '{name}' is already registered.")
            if not operations:
                raise ValueError(f"Contract '{name}' must declare at least one operation.")

            self._contracts[name] = ContractInfo(
                name=name,
                protocol=protocol,
                operations=tuple(operations),
                description=description,
            )
            logger.info(f"Registered contract: {name} {list(operations)}")

    def register_implementer(
        self,
        name: str,
        factory: Callable[[], Any],
        contracts: Sequence[str],
        description: str = "",
        tags: Optional[Sequence[str]] = None,
    ) -> None:
        """
        Register an implementer and verify its declared contracts.

        The factory is called once to obtain a sample instance, which
        must provide every operation of every declared contract.

        Args:
            name: Unique implementer name (e.g. "rabbit")
            factory: Zero-argument callable creating an instance
            contracts: Names of contracts the implementer satisfies
            description: Optional description
            tags: Optional tags for categorization

        Raises:
            ValueError: If the name is taken or a contract is unknown
            ContractViolation: If an operation is missing or not callable
        """
        with self._lock:
            if name in self._implementers:
                raise ValueError(
                    f"Implementer '{name}' is already registered. "
                    f"Use unregister_implementer() first."
                )

            unknown = [c for c in contracts if c not in self._contracts]
            if unknown:
                raise ValueError(f"Unknown contracts: {unknown}")

            sample = factory()
            for contract_name in contracts:
                missing = self._missing_operations(sample, self._contracts[contract_name])
                if missing:
                    raise ContractViolation(name, contract_name, missing)

            self._implementers[name] = ImplementerInfo(
                name=name,
                factory=factory,
                contracts=tuple(contracts),
                description=description,
                tags=tuple(tags or ()),
            )
            logger.info(f"Registered implementer: {name} -> {list(contracts)}")

    @staticmethod
    def _missing_operations(instance: Any, contract: ContractInfo) -> List[str]:
        """Operations of the contract the instance does not provide."""
        return [
            op for op in contract.operations
            if not callable(getattr(instance, op, None))
        ]

    def unregister_implementer(self, name: str) -> bool:
        """
        Unregister an implementer by name.

        Returns:
            True if removed, False if not found
        """
        with self._lock:
            if name not in self._implementers:
                logger.warning(f"Cannot unregister: implementer '{name}' not found")
                return False

            del self._implementers[name]
            logger.info(f"Unregistered implementer: {name}")
            return True

    def get(self, name: str) -> Optional[Any]:
        """
        Create a fresh instance of an implementer.

        Returns:
            New instance, or None if the name is not registered
        """
        with self._lock:
            info = self._implementers.get(name)
        if info is None:
            return None
        return info.factory()

    def contracts_of(self, name: str) -> List[str]:
        """
        Contracts declared by an implementer, in declaration order.

        Raises:
            KeyError: If the implementer is not registered
        """
        with self._lock:
            return list(self._get_implementer(name).contracts)

    def implementers_of(self, contract: str) -> List[str]:
        """
        Implementers declaring a contract, in registration order.

        Raises:
            KeyError: If the contract is not registered
        """
        with self._lock:
            self._get_contract(contract)
            return [
                info.name for info in self._implementers.values()
                if contract in info.contracts
            ]

    def supports(self, name: str, contract: str) -> bool:
        """Check whether a registered implementer declares a contract."""
        with self._lock:
            info = self._implementers.get(name)
            return info is not None and contract in info.contracts

    def invoke(
        self,
        name: str,
        contract: str,
        *args: Any,
        operation: Optional[str] = None,
    ) -> Any:
        """
        Invoke a contract operation on a fresh instance of an implementer.

        Args:
            name: Implementer name
            contract: Contract name
            *args: Arguments passed to the operation
            operation: Operation to call; required only when the
                contract has more than one

        Returns:
            Whatever the operation returns

        Raises:
            KeyError: If the implementer or contract is not registered
            CapabilityError: If the implementer does not declare the contract
            ValueError: If the operation is ambiguous or not in the contract
        """
        with self._lock:
            info = self._get_implementer(name)
            contract_info = self._get_contract(contract)
            op_name = self._select_operation(contract_info, operation)

        instance = info.factory()
        if contract not in info.contracts:
            raise CapabilityError(instance, contract)

        logger.debug(f"Invoking {name}.{op_name} via '{contract}'")
        return getattr(instance, op_name)(*args)

    @staticmethod
    def _select_operation(contract: ContractInfo, operation: Optional[str]) -> str:
        if operation is None:
            if len(contract.operations) != 1:
                raise ValueError(
                    f"Contract '{contract.name}' has operations "
                    f"{list(contract.operations)}; pass operation="
                )
            return contract.operations[0]
        if operation not in contract.operations:
            raise ValueError(
                f"Operation '{operation}' is not part of contract '{contract.name}'"
            )
        return operation

    def _get_implementer(self, name: str) -> ImplementerInfo:
        info = self._implementers.get(name)
        if info is None:
            raise KeyError(f"Unknown implementer: {name}")
        return info

    def _get_contract(self, name: str) -> ContractInfo:
        info = self._contracts.get(name)
        if info is None:
            raise KeyError(f"Unknown contract: {name}")
        return info

    def list_contracts(self) -> Dict[str, ContractInfo]:
        """List all registered contracts."""
        with self._lock:
            return dict(self._contracts)

    def list_implementers(self) -> Dict[str, ImplementerInfo]:
        """List all registered implementers."""
        with self._lock:
            return dict(self._implementers)

    @property
    def contract_count(self) -> int:
        """Number of registered contracts."""
        with self._lock:
            return len(self._contracts)

    @property
    def implementer_count(self) -> int:
        """Number of registered implementers."""
        with self._lock:
            return len(self._implementers)

    def clear(self) -> None:
        """Remove all contracts and implementers."""
        with self._lock:
            self._contracts.clear()
            self._implementers.clear()
            logger.info("Cleared all contracts and implementers from registry")


def create_default_registry() -> CapabilityRegistry:
    """
    Create a registry preloaded with the built-in contracts and implementers.

    Contracts: flee, hunt, play, log.
    Implementers: rabbit, wolf, fish, video, audio, console_logger.
    """
    from capability_registry.adapters.console_logger import ConsoleLogger
    from capability_registry.domain import Audio, Fish, Rabbit, Video, Wolf
    from capability_registry.interfaces import Fleeing, Hunting, MessageLogger, Playable

    registry = CapabilityRegistry()
    registry.register_contract("flee", Fleeing, ["flee"], "Run away from predators")
    registry.register_contract("hunt", Hunting, ["hunt"], "Hunt prey")
    registry.register_contract("play", Playable, ["play"], "Play a media item")
    registry.register_contract("log", MessageLogger, ["log"], "Write a message")

    registry.register_implementer("rabbit", Rabbit, ["flee"], tags=["animal", "prey"])
    registry.register_implementer("wolf", Wolf, ["hunt"], tags=["animal", "predator"])
    registry.register_implementer(
        "fish", Fish, ["flee", "hunt"], tags=["animal", "prey", "predator"]
    )
    registry.register_implementer("video", Video, ["play"], tags=["media"])
    registry.register_implementer("audio", Audio, ["play"], tags=["media"])
    registry.register_implementer("console_logger", ConsoleLogger, ["log"], tags=["logger"])
    return registry
