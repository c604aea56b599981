"""Configuration management service"""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml

from ..api.exceptions import ConfigError, ValidationError
from ..constants import CONFIG_FILE_NAME, ENV_CONFIG_PATH
from ..core.validation_engine import ValidationEngine
from ..models.config import HumaniserConfig

logger = logging.getLogger(__name__)


def default_config_path() -> Path:
    """Config file location: ``$HUMANISER_CONFIG`` or ``~/.humaniser.yaml``"""
    env_path = os.environ.get(ENV_CONFIG_PATH)
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / CONFIG_FILE_NAME


class ConfigService:
    """Service for loading and saving user defaults"""

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize config service

        Args:
            config_path: Configuration file (defaults to :func:`default_config_path`)
        """
        self.config_path = Path(config_path) if config_path else default_config_path()
        self.validation_engine = ValidationEngine()
        self._config: Optional[HumaniserConfig] = None

    @property
    def config(self) -> HumaniserConfig:
        """Get current configuration (lazy load)"""
        if self._config is None:
            self.load_config()
        return self._config

    def load_config(self) -> HumaniserConfig:
        """Load configuration from file

        A missing file yields the defaults.

        Returns:
            Loaded configuration
        """
        if not self.config_path.exists():
            logger.debug(f"No configuration at {self.config_path}, using defaults")
            self._config = HumaniserConfig()
            return self._config

        try:
            with open(self.config_path, 'r') as f:
                content = f.read()
        except OSError as e:
            raise ConfigError(f"Cannot read configuration {self.config_path}: {e}") from e

        # Simple environment variable expansion
        content = os.path.expandvars(content)

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {self.config_path}: {e}") from e

        if data is None:
            data = {}

        result = self.validation_engine.validate_config(data)
        for warning in result.warnings:
            logger.warning(f"{self.config_path}: {warning}")
        if not result.is_valid:
            raise ValidationError(
                f"Invalid configuration {self.config_path}:\n{result}",
                result.errors,
            )

        self._config = HumaniserConfig.from_dict(data)
        logger.info(f"Loaded configuration from {self.config_path}")
        return self._config

    def save_config(self, config: Optional[HumaniserConfig] = None) -> Path:
        """Save configuration to file

        Args:
            config: Configuration to save (uses current if not provided)

        Returns:
            Path written
        """
        if config:
            self._config = config

        if not self._config:
            raise ConfigError("No configuration to save")

        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, 'w') as f:
            yaml.dump(self._config.to_dict(), f, default_flow_style=False, sort_keys=False)

        logger.info(f"Configuration saved to {self.config_path}")
        return self.config_path


def load_config(config_path: Optional[Path] = None) -> HumaniserConfig:
    """Load configuration from ``config_path`` or the default location"""
    return ConfigService(config_path).load_config()
