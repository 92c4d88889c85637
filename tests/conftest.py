"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from capability_registry.adapters.console_logger import ConsoleLogger
from capability_registry.adapters.file_logger import FileLogger
from capability_registry.domain import Audio, Video
from capability_registry.registry import CapabilityRegistry, create_default_registry


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"


@pytest.fixture
def journal() -> List[str]:
    """Shared list recording the order of logger calls."""
    return []


@pytest.fixture
def console_logger() -> ConsoleLogger:
    """Create console logger for testing."""
    return ConsoleLogger()


@pytest.fixture
def log_file(tmp_path: Path) -> Path:
    """Path of a not-yet-existing log file in a temp directory."""
    return tmp_path / "messages.log"


@pytest.fixture
def file_logger(log_file: Path) -> FileLogger:
    """Create file logger writing into a temp directory."""
    return FileLogger(log_file)


@pytest.fixture
def registry() -> CapabilityRegistry:
    """Registry preloaded with the built-in contracts and implementers."""
    return create_default_registry()


@pytest.fixture
def playlist() -> list:
    """A video followed by an audio track."""
    return [Video(), Audio()]
