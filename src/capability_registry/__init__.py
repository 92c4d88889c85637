"""
Capability Registry - Interfaces and Polymorphism by Example.

A small library showing how callers depend on capabilities rather than
concrete types. Entities advertise behavioral contracts (flee, hunt,
play, log) and calling code dispatches through those contracts without
knowing which concrete implementer it holds.

Architecture:
    - Small, focused protocols (typing.Protocol) per capability
    - Concrete implementers satisfy one or more protocols
    - Composite implementers satisfy a protocol by delegation
    - Registry maps contract names to implementers

Main Components:
    - interfaces: Contract protocols (Fleeing, Hunting, Playable, MessageLogger)
    - domain: Animal and media implementers
    - adapters: Console, file and composite loggers
    - dispatch: Capability-typed dispatch helpers
    - registry: Named contracts and implementers
    - config: Logger wiring models and loaders

Example:
    >>> from capability_registry import Fish, make_flee, make_hunt
    >>> fish = Fish()
    >>> make_flee(fish)
    *The Fish is fleeing*
    >>> make_hunt(fish)
    *The Fish is hunting*

"""

import logging

__version__ = "0.1.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure diagnostic logging for Capability Registry.

    Diagnostics go to stderr through the logging module and never mix
    with the text that contract operations print to stdout.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import capability_registry
        >>> capability_registry.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("capability_registry").setLevel(level)


from capability_registry.adapters import CompositeLogger, ConsoleLogger, FileLogger
from capability_registry.dispatch import log_with, make_flee, make_hunt, make_play
from capability_registry.domain import Audio, Fish, Rabbit, Video, Wolf
from capability_registry.errors import (
    CapabilityError,
    CapabilityRegistryError,
    CompositeLogError,
    ConfigurationError,
    ContractViolation,
)
from capability_registry.interfaces import Fleeing, Hunting, MessageLogger, Playable
from capability_registry.registry import CapabilityRegistry, create_default_registry

__all__ = [
    "configure_logging",
    "Fleeing",
    "Hunting",
    "Playable",
    "MessageLogger",
    "Rabbit",
    "Wolf",
    "Fish",
    "Video",
    "Audio",
    "ConsoleLogger",
    "FileLogger",
    "CompositeLogger",
    "make_flee",
    "make_hunt",
    "make_play",
    "log_with",
    "CapabilityRegistry",
    "create_default_registry",
    "CapabilityRegistryError",
    "ConfigurationError",
    "CapabilityError",
    "ContractViolation",
    "CompositeLogError",
]
