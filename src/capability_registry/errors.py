"""
Error Types for Capability Registry.

All errors raised by the package derive from CapabilityRegistryError.
Where a builtin exception already describes the failure category the
error also derives from it, so callers can catch either.

I/O failures from FileLogger are not wrapped: they surface as the
OSError raised by the filesystem.
"""

from __future__ import annotations

from typing import Any, List, Tuple


class CapabilityRegistryError(Exception):
    """Base class for all package errors."""
    pass


class ConfigurationError(CapabilityRegistryError, ValueError):
    """Raised when an object is constructed or wired with invalid settings."""
    pass


class CapabilityError(CapabilityRegistryError, TypeError):
    """Raised when a value is dispatched to a contract it does not satisfy."""

    def __init__(self, value: Any, contract: str) -> None:
        self.value = value
        self.contract = contract
        if isinstance(value, type):
            subject = f"class {value.__name__} (not an instance)"
        else:
            subject = type(value).__name__
        super().__init__(f"{subject} does not satisfy the '{contract}' contract")


class ContractViolation(CapabilityRegistryError):
    """Raised when an implementer declares a contract but omits operations."""

    def __init__(self, implementer: str, contract: str, missing: List[str]) -> None:
        self.implementer = implementer
        self.contract = contract
        self.missing = list(missing)
        super().__init__(
            f"Implementer '{implementer}' declares '{contract}' but is missing "
            f"operations: {', '.join(self.missing)}"
        )


class CompositeLogError(CapabilityRegistryError):
    """Raised by a fail-soft composite when one or more members failed."""

    def __init__(self, failures: List[Tuple[Any, Exception]]) -> None:
        self.failures = list(failures)
        names = ", ".join(type(member).__name__ for member, _ in self.failures)
        super().__init__(f"{len(self.failures)} logger(s) failed: {names}")
