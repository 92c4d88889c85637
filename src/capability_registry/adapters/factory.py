"""
Logger Factory - Build a Composite Logger from Configuration.
"""

from __future__ import annotations

from typing import List, Union

from capability_registry.adapters.composite_logger import CompositeLogger, FailurePolicy
from capability_registry.adapters.console_logger import ConsoleLogger
from capability_registry.adapters.file_logger import FileLogger
from capability_registry.config.models import AppConfig, LoggerWiringConfig
from capability_registry.errors import ConfigurationError
from capability_registry.interfaces.message_logger import MessageLogger


def build_logger(config: Union[AppConfig, LoggerWiringConfig]) -> CompositeLogger:
    """
    Build a composite logger from configuration.

    Enabled sinks are added console first, then file. The file sink path
    is used as given; ConfigLoader has already anchored relative paths
    to the wiring file's directory.

    Args:
        config: Root config or its logging section

    Returns:
        CompositeLogger over the enabled sinks (possibly empty)

    Raises:
        ConfigurationError: If the file sink is enabled without a path
    """
    wiring = config.logging if isinstance(config, AppConfig) else config
    members: List[MessageLogger] = []

    if wiring.console.enabled:
        members.append(ConsoleLogger())

    if wiring.file.enabled:
        if not wiring.file.path:
            raise ConfigurationError("file sink is enabled but no path is set")
        members.append(FileLogger(wiring.file.path, encoding=wiring.file.encoding))

    return CompositeLogger(members, failure_policy=FailurePolicy(wiring.failure_policy))
