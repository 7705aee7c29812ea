from .config import get_config, get_config_manager, ConfigurationManager, ConfigError, ConfigFileNotFoundError, InvalidYamlError
from .exceptions import (
    SplashClientError,
    ConfigurationError,
    ComponentError,
    ParameterError,
    TransportError,
    DecodeError,
    RemoteError,
)
from .logger import setup_logging, get_logger
from .models import ConnectionConfig, RenderOptions, HarOptions, JsonOptions, ScriptOptions

__all__ = [
    # Config
    "get_config",
    "get_config_manager",
    "ConfigurationManager",
    "ConfigError",
    "ConfigFileNotFoundError",
    "InvalidYamlError",
    # Logger
    "setup_logging",
    "get_logger",
    # Exceptions
    "SplashClientError",
    "ConfigurationError",
    "ComponentError",
    "ParameterError",
    "TransportError",
    "DecodeError",
    "RemoteError",
    # Models
    "ConnectionConfig",
    "RenderOptions",
    "HarOptions",
    "JsonOptions",
    "ScriptOptions",
]
