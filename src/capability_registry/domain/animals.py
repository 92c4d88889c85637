"""
Animal Implementers.

Each animal satisfies the predator/prey protocols that match its role.
Animals are stateless: calling an operation twice prints the same line
twice.
"""

from __future__ import annotations


class Rabbit:
    """Prey only."""

    __slots__ = ()

    def flee(self) -> None:
        """Run from predators."""
        print("*The Rabbit is fleeing*")


class Wolf:
    """Predator only."""

    __slots__ = ()

    def hunt(self) -> None:
        """Hunt prey."""
        print("*The Wolf is hunting*")


class Fish:
    """Both prey and predator."""

    __slots__ = ()

    def flee(self) -> None:
        """Run from bigger fish."""
        print("*The Fish is fleeing*")

    def hunt(self) -> None:
        """Hunt smaller fish."""
        print("*The Fish is hunting*")
