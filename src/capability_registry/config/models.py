"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator


class ConsoleSinkConfig(BaseModel):
    """Console sink settings."""

    enabled: bool = True


class FileSinkConfig(BaseModel):
    """File sink settings."""

    enabled: bool = False
    path: Optional[str] = None
    encoding: str = Field(default="utf-8", min_length=1)

    @model_validator(mode="after")
    def _path_required_when_enabled(self) -> "FileSinkConfig":
        if self.enabled and not self.path:
            raise ValueError("file sink is enabled but no path is set")
        return self


class LoggerWiringConfig(BaseModel):
    """Sinks a composite logger delegates to, in console-then-file order."""

    console: ConsoleSinkConfig = Field(default_factory=ConsoleSinkConfig)
    file: FileSinkConfig = Field(default_factory=FileSinkConfig)
    failure_policy: Literal["fail_fast", "fail_soft"] = "fail_fast"


class AppConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    logging: LoggerWiringConfig = Field(default_factory=LoggerWiringConfig)
