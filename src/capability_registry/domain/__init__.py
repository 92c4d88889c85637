"""
Domain Layer - Concrete Implementers.

Entities:
    - Rabbit: Fleeing
    - Wolf: Hunting
    - Fish: Fleeing and Hunting
    - Video, Audio: Playable
"""

from capability_registry.domain.animals import Fish, Rabbit, Wolf
from capability_registry.domain.media import Audio, Video

__all__ = ["Rabbit", "Wolf", "Fish", "Video", "Audio"]
