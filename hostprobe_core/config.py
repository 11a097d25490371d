"""Configuration management for hostprobe."""
import json
import logging
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigError
from .probes import DEBIAN_VERSION, LSB_RELEASE_CMD, OS_RELEASE_PATHS, REDHAT_RELEASE

logger = logging.getLogger(__name__)

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class HostProbeConfig(BaseModel):
    """Global hostprobe configuration."""

    log_level: str = Field(default="INFO", description="Logging level")
    os_release_paths: List[str] = Field(
        default_factory=lambda: list(OS_RELEASE_PATHS),
        description="os-release files, tried in order",
    )
    lsb_release_command: str = Field(default=LSB_RELEASE_CMD, description="Release-info executable")
    redhat_release_path: str = Field(default=REDHAT_RELEASE, description="Free-text RedHat release file")
    debian_version_path: str = Field(default=DEBIAN_VERSION, description="Debian version file")
    command_timeout: Optional[float] = Field(
        default=None,
        description="Seconds to wait for external commands (None waits indefinitely)",
    )

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("command_timeout")
    @classmethod
    def check_timeout(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and value <= 0:
            raise ValueError("command_timeout must be positive")
        return value


class ConfigManager:
    """Manages loading and saving of configuration."""

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize the config manager.

        Args:
            config_path: Path to the config file. If None, uses default location.
        """
        if config_path:
            self.config_path = config_path
        else:
            self.config_path = Path.home() / ".hostprobe" / "config.json"

        self._config: Optional[HostProbeConfig] = None

    @property
    def config(self) -> HostProbeConfig:
        """Get the current configuration (lazy loading)."""
        if self._config is None:
            self._load()
        return self._config  # type: ignore

    def _load(self) -> None:
        """Load config from file."""
        if not self.config_path.exists():
            logger.debug("No config file found, using defaults")
            self._config = HostProbeConfig()
            return

        try:
            with open(self.config_path, "r") as f:
                data = json.load(f)
            self._config = HostProbeConfig(**data)
            logger.debug(f"Configuration loaded from {self.config_path}")
        except json.JSONDecodeError as e:
            logger.warning(f"Invalid config file, using defaults: {e}")
            self._config = HostProbeConfig()
        except (OSError, TypeError, ValueError) as e:
            logger.warning(f"Error loading config, using defaults: {e}")
            self._config = HostProbeConfig()

    def save(self) -> None:
        """Save config to file."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w") as f:
            f.write(self.config.model_dump_json(indent=2))
        logger.debug(f"Configuration saved to {self.config_path}")

    def get(self) -> HostProbeConfig:
        """Get the current configuration."""
        return self.config

    def update(self, **kwargs) -> None:
        """Update configuration values.

        Args:
            **kwargs: Configuration values to update.

        Raises:
            ConfigError: If a value is invalid.
        """
        current = self.config.model_dump()
        current.update(kwargs)
        try:
            self._config = HostProbeConfig(**current)
        except ValidationError as e:
            error = e.errors()[0]
            field = ".".join(str(loc) for loc in error["loc"]) or "config"
            raise ConfigError(field, error["msg"]) from e

    def reset(self) -> None:
        """Reset configuration to defaults."""
        self._config = HostProbeConfig()


# Lazy singleton pattern
_config_instance: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get the global config manager instance (lazy initialization)."""
    global _config_instance
    if _config_instance is None:
        _config_instance = ConfigManager()
    return _config_instance


def get_config() -> HostProbeConfig:
    """Get the current configuration."""
    return get_config_manager().config


def reset_config() -> None:
    """Reset the global config instance. Useful for testing."""
    global _config_instance
    _config_instance = None
