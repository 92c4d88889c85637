"""
Interfaces Layer - Capability Protocols.

Each capability is its own small protocol so that an entity can
advertise any combination of them without a shared supertype.

Protocols:
    - Fleeing: Prey behavior (flee)
    - Hunting: Predator behavior (hunt)
    - Playable: Media playback (play)
    - MessageLogger: Message sink (log)

Design Principles:
    - Use typing.Protocol (not ABC) for structural subtyping
    - Interface Segregation: one capability per protocol
    - runtime_checkable so dispatch can reject incapable values
"""

from capability_registry.interfaces.animal import Fleeing, Hunting
from capability_registry.interfaces.message_logger import MessageLogger
from capability_registry.interfaces.playable import Playable

__all__ = ["Fleeing", "Hunting", "Playable", "MessageLogger"]
