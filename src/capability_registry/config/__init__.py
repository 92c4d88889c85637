"""
Configuration Package - Models and Loaders.

This package handles wiring of message loggers from configuration:
    - Pydantic models for type-safe configuration
    - YAML loader with validation
    - Support for configuration profiles

Configuration Structure:
    - AppConfig: Root configuration object
    - LoggerWiringConfig: Which sinks a composite logger fans out to
    - ConsoleSinkConfig: Console sink settings
    - FileSinkConfig: File sink settings

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Support for profiles (overlays merged onto the base file)
"""

from capability_registry.config.loader import ConfigLoader, load_config
from capability_registry.config.models import (
    AppConfig,
    ConsoleSinkConfig,
    FileSinkConfig,
    LoggerWiringConfig,
)

__all__ = [
    "ConfigLoader",
    "load_config",
    "AppConfig",
    "ConsoleSinkConfig",
    "FileSinkConfig",
    "LoggerWiringConfig",
]
