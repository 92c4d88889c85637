"""
Console Logger.

A message logger that writes to the console.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO


class ConsoleLogger:
    """Console-based message logger."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        """
        Initialize console logger.

        Args:
            stream: Output stream. Defaults to sys.stdout, looked up at
                each call so redirected stdout is honored.
        """
        self._stream = stream

    def log(self, message: str) -> None:
        """Write the message verbatim, followed by a newline."""
        print(message, file=self._stream or sys.stdout)

    def __repr__(self) -> str:
        return "ConsoleLogger()"
