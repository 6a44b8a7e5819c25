"""Configuration management for the preflight checks."""
import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".odoo-preflight" / "config.json"


class PreflightConfig(BaseModel):
    """Global preflight configuration."""

    output_path: str = Field(default="odoo_system_analysis.json", description="Where the JSON report is written")
    web_url: str = Field(default="https://www.odoo.com/es_ES/trial", description="Hosted service to suggest")
    web_username: str = Field(default="admin", description="Suggested username for the hosted service")
    web_password_hint: str = Field(default="generar_durante_registro", description="Password placeholder")
    disk_path: Optional[str] = Field(default=None, description="Volume to measure; platform root if unset")
    log_level: str = Field(default="INFO", description="Logging level")


class ConfigManager:
    """Manages loading of configuration."""

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize the config manager.

        Args:
            config_path: Path to the config file. If None, uses default location.
        """
        self.config_path = config_path or DEFAULT_CONFIG_PATH
        self._config: Optional[PreflightConfig] = None

    @property
    def config(self) -> PreflightConfig:
        """Get the current configuration (lazy loading)."""
        if self._config is None:
            self._load()
        return self._config  # type: ignore

    def _load(self) -> None:
        """Load config from file."""
        if self.config_path.exists():
            try:
                with open(self.config_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                    self._config = PreflightConfig(**data)
                    logger.debug(f"Configuration loaded from {self.config_path}")
            except json.JSONDecodeError as e:
                logger.warning(f"Invalid config file, using defaults: {e}")
                self._config = PreflightConfig()
            except Exception as e:
                logger.error(f"Error loading config: {e}")
                self._config = PreflightConfig()
        else:
            logger.debug("No config file found, using defaults")
            self._config = PreflightConfig()

    def update(self, **kwargs) -> None:
        """Override configuration values for this run.

        Args:
            **kwargs: Configuration values to update.
        """
        current = self.config.model_dump()
        current.update(kwargs)
        self._config = PreflightConfig(**current)


# Lazy singleton pattern
_config_instance: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get the global config manager instance (lazy initialization)."""
    global _config_instance
    if _config_instance is None:
        _config_instance = ConfigManager()
    return _config_instance


def get_config() -> PreflightConfig:
    """Get the current configuration."""
    return get_config_manager().config


def reset_config() -> None:
    """Reset the global config instance. Useful for testing."""
    global _config_instance
    _config_instance = None
