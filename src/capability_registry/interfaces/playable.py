"""
Playable Protocol.

Defines the media player capability. A player only needs to know that
an item can be played, not whether it is video or audio.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Playable(Protocol):
    """A media item that can be played."""

    def play(self) -> None:
        """Start playback, printing a description of what plays."""
        ...
