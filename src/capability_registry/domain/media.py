"""
Media Implementers.

Placeholder media items for the player example. Playback only prints a
description of the item being played.
"""

from __future__ import annotations


class Video:
    """A video clip."""

    __slots__ = ()

    def play(self) -> None:
        """Play the video."""
        print("*The Video is playing*")


class Audio:
    """An audio track."""

    __slots__ = ()

    def play(self) -> None:
        """Play the audio track."""
        print("*The Audio is playing*")
