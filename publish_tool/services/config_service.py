"""Configuration loading service"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ..api.exceptions import ConfigError
from ..constants import ENV_CONFIG_PATH, PROJECT_CONFIG_FILE
from ..models import PublishConfig

logger = logging.getLogger(__name__)


class ConfigService:
    """Service for loading the publish configuration once per process"""

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """Initialize config service

        Args:
            config_path: Configuration file; defaults to $PUBLISH_TOOL_CONFIG
                or .publish-tool.yaml in the working directory
        """
        if config_path is None:
            config_path = os.environ.get(ENV_CONFIG_PATH) or PROJECT_CONFIG_FILE
        self.config_path = Path(config_path)
        self._config: Optional[PublishConfig] = None

    @property
    def config(self) -> PublishConfig:
        """Get current configuration (lazy load)"""
        if self._config is None:
            self.load_config()
        return self._config

    def load_config(self) -> PublishConfig:
        """Load configuration from file

        Returns:
            Loaded configuration

        Raises:
            ConfigError: If the file is missing or malformed
        """
        if not self.config_path.exists():
            raise ConfigError(f"Configuration file not found: {self.config_path}")

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except OSError as e:
            raise ConfigError(f"Cannot read configuration file {self.config_path}: {e}") from e

        self._config = self.parse(content, source=str(self.config_path))
        logger.info("Loaded configuration from %s", self.config_path)
        return self._config

    @staticmethod
    def parse(content: str, source: str = "<string>") -> PublishConfig:
        """Parse YAML configuration text

        Environment variables ($VAR and ${VAR}) are expanded first; values
        referring to unset variables are treated as unset.
        """
        content = os.path.expandvars(content)

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {source}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {source}")

        return ConfigService.from_dict(data, source)

    @staticmethod
    def from_dict(data: Dict[str, Any], source: str = "<dict>") -> PublishConfig:
        try:
            return PublishConfig.from_dict(data)
        except (AttributeError, TypeError, ValueError) as e:
            raise ConfigError(f"Invalid configuration in {source}: {e}") from e
