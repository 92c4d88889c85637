"""
Configuration Loader - Logger Wiring from YAML.

Reads a wiring file, overlays an optional profile, validates the result
and anchors the file sink to the directory the wiring file lives in, so
`path: messages.log` means "next to this YAML file" regardless of the
process working directory.

Layout:
    config/default.yaml            base wiring
    config/profiles/<name>.yaml    overlays, deep-merged onto the base

Every way the wiring can be wrong (unreadable YAML, a non-mapping
document, values the models reject) surfaces as ConfigurationError.
A missing file stays a FileNotFoundError.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from capability_registry.config.models import AppConfig
from capability_registry.errors import ConfigurationError

if TYPE_CHECKING:
    from capability_registry.adapters.composite_logger import CompositeLogger

logger = logging.getLogger(__name__)

PROFILE_DIR = "profiles"


class ConfigLoader:
    """Loads logger wiring and anchors relative sink paths."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Directory for relative wiring-file paths, and the
                anchor for sink paths in load_from_dict
        """
        self._base_path = Path(base_path) if base_path is not None else Path(".")

    def load(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
    ) -> AppConfig:
        """
        Load wiring from a YAML file, optionally overlaid by a profile.

        Args:
            config_path: Wiring file, relative to base_path unless absolute
            profile: Name of a file in the `profiles/` directory next to
                the wiring file

        Returns:
            Validated AppConfig whose file sink path is absolute or anchored
            to the wiring file's directory

        Raises:
            FileNotFoundError: If the wiring file or profile doesn't exist
            ConfigurationError: If the wiring is unreadable or invalid
        """
        path = self._resolve_path(config_path)
        raw = self._read_mapping(path)

        if profile:
            profile_path = path.parent / PROFILE_DIR / f"{profile}.yaml"
            if not profile_path.exists():
                raise FileNotFoundError(f"Profile not found: {profile} ({profile_path})")
            raw = _deep_merge(raw, self._read_mapping(profile_path))

        config = _validate(raw, source=str(path))
        logger.debug(f"Loaded logger wiring from {path} (profile={profile})")
        return _anchor_file_sink(config, path.parent)

    def load_from_dict(self, config_dict: Dict[str, Any]) -> AppConfig:
        """
        Validate wiring given as a dictionary.

        Relative file sink paths are anchored to base_path.

        Raises:
            ConfigurationError: If the wiring is invalid
        """
        config = _validate(config_dict, source="<dict>")
        return _anchor_file_sink(config, self._base_path)

    def load_logger(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
    ) -> CompositeLogger:
        """
        Load wiring and build the composite logger it describes.

        Raises:
            FileNotFoundError: If the wiring file or profile doesn't exist
            ConfigurationError: If the wiring is unreadable or invalid
        """
        from capability_registry.adapters.factory import build_logger

        return build_logger(self.load(config_path, profile))

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        p = Path(path)
        if p.is_absolute():
            return p
        return self._base_path / p

    def _read_mapping(self, path: Path) -> Dict[str, Any]:
        """Read a YAML file that must hold a mapping (or nothing)."""
        with open(path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Unreadable YAML in {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"{path} must hold a mapping, got {type(data).__name__}"
            )
        return data


def _validate(raw: Dict[str, Any], source: str) -> AppConfig:
    try:
        return AppConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid logger wiring in {source}: {e}") from e


def _anchor_file_sink(config: AppConfig, directory: Path) -> AppConfig:
    """Return config with a relative file sink path joined onto directory."""
    sink = config.logging.file
    if not sink.path or Path(sink.path).is_absolute():
        return config

    anchored = sink.model_copy(update={"path": str(directory / sink.path)})
    wiring = config.logging.model_copy(update={"file": anchored})
    return config.model_copy(update={"logging": wiring})


def _deep_merge(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Overlay wins on scalars; nested mappings merge key by key."""
    result = dict(base)
    for key, value in overlay.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> AppConfig:
    """
    Convenience function to load logger wiring.

    Args:
        config_path: Wiring YAML file
        profile: Optional profile name
        base_path: Directory for a relative config_path

    Returns:
        Validated AppConfig with an anchored file sink path
    """
    return ConfigLoader(base_path=base_path).load(config_path, profile)
