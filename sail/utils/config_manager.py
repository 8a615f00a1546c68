"""Configuration management utilities."""

import os
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ..core.constants import CONFIG_FILE_NAME, META_ROOT_DIR
from ..models.config import SailConfig
from ..services.exceptions import ConfigError
from .path_resolver import PathResolver


def default_config_path() -> Path:
    """Config file location, honouring ``SAIL_CONFIG``."""
    env_path = os.environ.get("SAIL_CONFIG")
    if env_path:
        return Path(env_path)
    return Path(PathResolver.resolve_host_path(META_ROOT_DIR)) / CONFIG_FILE_NAME


def meta_root(config: SailConfig) -> Path:
    """Root of sail's per-container host state."""
    return Path(PathResolver.resolve_host_path(config.meta_root or META_ROOT_DIR))


class ConfigManager:
    """Loads and saves the sail configuration file."""

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize config manager."""
        self.config_path = Path(config_path) if config_path else default_config_path()

    def load(self) -> SailConfig:
        """Load the configuration, falling back to defaults if there is none.

        Raises:
            ConfigError: If the file can't be read or is invalid
        """
        if not self.config_path.exists():
            return SailConfig()
        try:
            return SailConfig.model_validate_json(self.config_path.read_text())
        except (OSError, ValidationError) as e:
            raise ConfigError(f"Failed to read config {self.config_path}: {e}") from e

    def save(self, config: SailConfig):
        """Write config to the config file."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        self.config_path.write_text(config.model_dump_json(indent=2))
