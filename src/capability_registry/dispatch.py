"""
Dispatch Helpers - Calling Through a Capability.

Each helper accepts any value satisfying one protocol and invokes that
protocol's operation. Helpers never inspect the concrete type: the
parameter annotation lets a static type checker reject incapable
arguments, and the runtime protocol check rejects them before any
output is produced.

Usage:
    make_flee(Rabbit())   # *The Rabbit is fleeing*
    make_hunt(Fish())     # *The Fish is hunting*
    make_hunt(Rabbit())   # raises CapabilityError
"""

from __future__ import annotations

from typing import Any

from capability_registry.errors import CapabilityError
from capability_registry.interfaces import Fleeing, Hunting, MessageLogger, Playable


def _require(value: Any, protocol: type, contract: str) -> None:
    # A class has the protocol's methods as attributes but cannot call them unbound
    if isinstance(value, type) or not isinstance(value, protocol):
        raise CapabilityError(value, contract)


def make_flee(prey: Fleeing) -> None:
    """Make any fleeing-capable value flee."""
    _require(prey, Fleeing, "flee")
    prey.flee()


def make_hunt(predator: Hunting) -> None:
    """Make any hunting-capable value hunt."""
    _require(predator, Hunting, "hunt")
    predator.hunt()


def make_play(item: Playable) -> None:
    """Play any playable media item."""
    _require(item, Playable, "play")
    item.play()


def log_with(message_logger: MessageLogger, message: str) -> None:
    """Send a message through any message logger."""
    _require(message_logger, MessageLogger, "log")
    message_logger.log(message)
