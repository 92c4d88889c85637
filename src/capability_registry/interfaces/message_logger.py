"""
Message Logger Protocol.

Defines the abstract interface for message sinks. Callers hand a
message to a MessageLogger without knowing whether it ends up on the
console, in a file, or fanned out to several sinks.

The message logger is responsible for:
    - Writing the message verbatim, one line per call
    - Surfacing I/O failures to the caller

Design Notes:
    - No formatting, timestamps or levels are added to the message
    - Composites satisfy the same protocol as primitive sinks
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MessageLogger(Protocol):
    """Abstract interface for message logging."""

    def log(self, message: str) -> None:
        """
        Write a message.

        Args:
            message: Text to write, unchanged
        """
        ...
