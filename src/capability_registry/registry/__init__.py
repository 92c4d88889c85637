"""
Registry Module - Named Contracts and Implementers.

This module provides a registry mapping capability names to protocols
and implementer names to factories, so behavior can be looked up and
invoked by contract name.

Components:
    - CapabilityRegistry: Central registry
    - ContractInfo: Metadata about a registered contract
    - ImplementerInfo: Metadata about a registered implementer
    - create_default_registry: Registry preloaded with built-ins
"""

from capability_registry.registry.capability_registry import (
    CapabilityRegistry,
    ContractInfo,
    ImplementerInfo,
    create_default_registry,
)

__all__ = [
    "CapabilityRegistry",
    "ContractInfo",
    "ImplementerInfo",
    "create_default_registry",
]
