"""
Adapters Package - Message Logger Implementations.

This package contains concrete implementations of the MessageLogger
protocol defined in the interfaces package.

Loggers:
    - ConsoleLogger: Writes messages to standard output
    - FileLogger: Appends messages to a text file
    - CompositeLogger: Fans a message out to other loggers

Factory:
    - build_logger: Wires a CompositeLogger from configuration

Design Principles:
    - All adapters implement the MessageLogger protocol
    - Easily swappable via Dependency Injection
    - No message formatting in adapters
"""

from capability_registry.adapters.console_logger import ConsoleLogger
from capability_registry.adapters.file_logger import FileLogger
from capability_registry.adapters.composite_logger import (
    CompositeLogger,
    FailurePolicy,
)
from capability_registry.adapters.factory import build_logger

__all__ = [
    "ConsoleLogger",
    "FileLogger",
    "CompositeLogger",
    "FailurePolicy",
    "build_logger",
]
