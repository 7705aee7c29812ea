"""
Configuration management for the Splash client.

This module provides a singleton `ConfigurationManager` class to load and access
configuration settings from YAML files. It supports environment-specific
configurations (e.g., development, production) and allows easy access to
nested configuration values.

Key Features:
- Loads settings from YAML files based on APP_ENV environment variable.
- Defaults to 'development' environment if APP_ENV is not set.
- Provides `get_config_manager()`, which creates the shared instance on first use.
  Importing the package never reads a configuration file.
- Supports dot notation for accessing nested keys (e.g., "splash.host").
"""
import os
import yaml
from typing import Any, Dict, Optional

from splash_client.core.exceptions import ConfigurationError

# DEFAULT_ENV: The default environment to use if APP_ENV is not set.
DEFAULT_ENV = "development"


class ConfigError(ConfigurationError):
    """Base class for errors raised while loading configuration files."""
    pass


class ConfigFileNotFoundError(ConfigError):
    """Raised when a specific configuration file (e.g., development.yaml) cannot be found."""
    pass


class InvalidYamlError(ConfigError):
    """Raised when a configuration file contains invalid YAML syntax or is not a dictionary."""
    pass


class ConfigurationManager:
    """
    Manages loading and accessing configuration settings from YAML files.

    This class is implemented as a singleton. The first time an instance is created,
    it loads the configuration. Subsequent instantiations return the existing instance.
    """
    # Directory holding <env>.yaml files, shipped inside the package.
    CONFIG_DIR: str = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "config")

    _instance: Optional['ConfigurationManager'] = None
    _config: Dict[str, Any] = {}
    _current_env: str = ""

    def __new__(cls) -> 'ConfigurationManager':
        if cls._instance is None:
            instance = super(ConfigurationManager, cls).__new__(cls)
            instance.load_config()
            # Only a successfully loaded instance becomes the singleton.
            cls._instance = instance
        return cls._instance

    def load_config(self, env: Optional[str] = None) -> None:
        """
        Loads configuration from a YAML file corresponding to the specified environment.

        The environment is determined in the following order of precedence:
        1. The `env` parameter passed to this method.
        2. The `APP_ENV` environment variable.
        3. `DEFAULT_ENV` (if neither of the above is set).

        Args:
            env (Optional[str]): The specific environment name (e.g., "production") to load.

        Raises:
            ConfigFileNotFoundError: If the YAML file for the target environment is not found.
            InvalidYamlError: If the YAML file is malformed or not a dictionary.
        """
        target_env = env or os.getenv("APP_ENV", DEFAULT_ENV)
        config_file_path = os.path.join(self.CONFIG_DIR, f"{target_env}.yaml")

        try:
            with open(config_file_path, "r") as f:
                loaded = yaml.safe_load(f)
        except FileNotFoundError:
            raise ConfigFileNotFoundError(
                f"Configuration file not found for environment '{target_env}' at '{config_file_path}'. "
                f"Ensure '{target_env}.yaml' exists in the '{self.CONFIG_DIR}' directory."
            )
        except yaml.YAMLError as e:
            raise InvalidYamlError(
                f"Error parsing YAML in configuration file '{config_file_path}': {e}"
            )
        if not isinstance(loaded, dict):
            raise InvalidYamlError(
                f"Configuration file '{config_file_path}' does not contain a valid YAML dictionary."
            )
        self._config = loaded
        self._current_env = target_env

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        """
        Retrieves a configuration value for the given key.

        Supports accessing nested values using dot notation (e.g., "splash.port").
        If the key is not found, returns the provided default value.

        Args:
            key (str): The configuration key to retrieve.
            default (Optional[Any]): The value to return if the key is not found.

        Returns:
            Any: The configuration value if found, otherwise the default value.
        """
        value = self._config
        try:
            for k_part in key.split("."):
                if isinstance(value, dict):
                    value = value[k_part]
                else:
                    return default
            return value
        except (KeyError, TypeError):
            return default

    def reload_config(self, env: Optional[str] = None) -> None:
        """
        Reloads the configuration, potentially for a different environment.

        Args:
            env (Optional[str]): The environment to reload. If None, reloads the
                                 environment selected by APP_ENV or the default.
        """
        old_env = self._current_env
        self.load_config(env)
        # Imported here: the logger module imports this one.
        from splash_client.core.logger import get_logger
        get_logger(__name__).info(f"Configuration reloaded (previous environment '{old_env}', now '{self._current_env}').")

    @property
    def current_environment(self) -> str:
        """Name of the currently loaded configuration environment."""
        return self._current_env


def get_config_manager() -> ConfigurationManager:
    """
    Returns the shared `ConfigurationManager`, loading the configuration on the first call.

    Raises:
        ConfigFileNotFoundError: If no YAML file exists for the selected environment.
        InvalidYamlError: If that file is malformed.
    """
    return ConfigurationManager()


def get_config(key: str, default: Optional[Any] = None) -> Any:
    """
    A convenience function to access configuration values via the shared manager from `get_config_manager()`.

    Args:
        key (str): The configuration key (dot notation for nested values).
        default (Optional[Any]): Default value if the key is not found.

    Returns:
        Any: The configuration value or the default.
    """
    return get_config_manager().get(key, default)
