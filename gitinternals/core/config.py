"""Configuration management for gitinternals.

Settings are read from an INI file in the user's home directory and
can be overridden per invocation through environment variables.
"""

import configparser
import logging
import os
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}
_FALSE_VALUES = {'0', 'false', 'no', 'off'}


class Config:
    """
    Reads gitinternals configuration.

    Configuration is stored in INI format:
    - Global config: ~/.gitinternalsconfig

    Environment variables (GITINTERNALS_<SECTION>_<KEY>) take precedence.
    The inspected repository's own config is never read.
    """

    GLOBAL_CONFIG_PATH = Path.home() / '.gitinternalsconfig'

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize Config.

        Args:
            config_path: Config file to read instead of the global one
        """
        self.config_path = Path(config_path) if config_path else self.GLOBAL_CONFIG_PATH
        self._config = None

    @property
    def config(self) -> configparser.ConfigParser:
        """Load and return the configuration file."""
        if self._config is None:
            self._config = configparser.ConfigParser(interpolation=None)
            if self.config_path.exists():
                logger.debug("Loading config from %s", self.config_path)
                self._config.read(self.config_path)
        return self._config

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value.

        Priority order (highest to lowest):
        1. Environment variables (GITINTERNALS_<SECTION>_<KEY>)
        2. Config file
        3. Fallback value

        Args:
            section: Config section (e.g., 'flatten', 'output')
            key: Config key (e.g., 'workers', 'color')
            fallback: Default value if not found

        Returns:
            Configuration value or fallback
        """
        env_key = f"GITINTERNALS_{section.upper()}_{key.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return env_value

        if self.config.has_option(section, key):
            return self.config.get(section, key)

        return fallback

    def get_int(self, section: str, key: str, fallback: Optional[int] = None) -> Optional[int]:
        """
        Get an integer configuration value.

        Raises:
            ValueError: If the stored value is not an integer
        """
        value = self.get(section, key)
        if value is None:
            return fallback
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"{section}.{key} must be an integer, got {value!r}")

    def get_bool(self, section: str, key: str, fallback: Optional[bool] = None) -> Optional[bool]:
        """
        Get a boolean configuration value.

        Raises:
            ValueError: If the stored value is not a recognised boolean
        """
        value = self.get(section, key)
        if value is None:
            return fallback
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ValueError(f"{section}.{key} must be a boolean, got {value!r}")

    def list_all(self) -> Dict[str, Dict[str, str]]:
        """
        List all configuration values from the config file.

        Returns:
            Dict of sections to key-value dicts
        """
        result = {}
        for section in self.config.sections():
            result[section] = dict(self.config.items(section))
        return result


def get_config(config_path: Optional[Path] = None) -> Config:
    """
    Get a Config instance.

    Args:
        config_path: Optional config file overriding the global one

    Returns:
        Config instance
    """
    return Config(config_path)
