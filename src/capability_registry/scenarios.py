"""
Scenarios - The Three Interface Examples, End to End.

    - predator_prey_scenario: animals dispatched by capability
    - media_scenario: a player that only knows items are Playable
    - logging_scenario: a composite logger writing to console and file
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Union

from capability_registry.adapters import CompositeLogger, ConsoleLogger, FileLogger
from capability_registry.dispatch import log_with, make_flee, make_hunt, make_play
from capability_registry.domain import Audio, Fish, Rabbit, Video, Wolf
from capability_registry.interfaces import Playable


def predator_prey_scenario() -> None:
    """Rabbit and Fish flee, then Wolf and Fish hunt."""
    rabbit = Rabbit()
    wolf = Wolf()
    fish = Fish()

    make_flee(rabbit)
    make_flee(fish)
    make_hunt(wolf)
    make_hunt(fish)


def media_scenario(items: Optional[Sequence[Playable]] = None) -> None:
    """Play every item of a playlist in order."""
    playlist = [Video(), Audio()] if items is None else items
    for item in playlist:
        make_play(item)


def logging_scenario(
    path: Union[str, Path],
    message: str = "Username is: John Doe",
) -> CompositeLogger:
    """
    Log one message to the console and to a file.

    Returns:
        The composite logger used, for further calls
    """
    composite = CompositeLogger([ConsoleLogger(), FileLogger(path)])
    log_with(composite, message)
    return composite
