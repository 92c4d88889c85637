"""
Predator/Prey Protocols.

Defines the two independent animal capabilities. An animal may satisfy
either one, both or neither. There is no common Animal base.

Design Notes:
    - Operations take no input and print their effect
    - Fleeing and Hunting never share output text
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Fleeing(Protocol):
    """Something that can run away from a predator."""

    def flee(self) -> None:
        """Print the fleeing announcement for this entity."""
        ...


@runtime_checkable
class Hunting(Protocol):
    """Something that can hunt prey."""

    def hunt(self) -> None:
        """Print the hunting announcement for this entity."""
        ...
