"""
File Logger.

A message logger that appends each message as a line of a text file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


class FileLogger:
    """
    Append-only file message logger.

    The file is opened, written and closed on every call, so no handle
    outlives a call even when the write fails. Errors opening or writing
    the file propagate to the caller as OSError and are not retried.
    """

    def __init__(self, path: Union[str, Path], encoding: str = "utf-8") -> None:
        """
        Initialize file logger.

        Args:
            path: Target file. Created on first write if missing; the
                parent directory must already exist.
            encoding: Text encoding for the file
        """
        self._path = Path(path)
        self._encoding = encoding

    @property
    def path(self) -> Path:
        """Target file path."""
        return self._path

    def log(self, message: str) -> None:
        """
        Append the message and a newline to the file.

        Raises:
            OSError: If the file cannot be opened for append or written
        """
        with open(self._path, "a", encoding=self._encoding) as f:
            f.write(f"{message}\n")
        logger.debug(f"Appended {len(message)} chars to {self._path}")

    def __repr__(self) -> str:
        return f"FileLogger({str(self._path)!r})"
