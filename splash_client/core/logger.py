"""
Centralized logging setup for the Splash client.

This module provides functions to configure and obtain logger instances
throughout the package. It reads logging settings from the `logging` section
of the YAML configuration, supporting console and rotating file handlers.

Key Functions:
- `setup_logging()`: Initializes the logging system based on external configuration.
                     Called once by the CLI at startup; library users may call it too.
- `get_logger(name)`: Returns a logger instance for the specified module name.
"""
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional, Dict, Any

from splash_client.core.config import ConfigurationManager

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_logging_initialized = False


def setup_logging(config: Optional[ConfigurationManager] = None, force: bool = False) -> None:
    """
    Sets up logging for the package using the settings from `config`.

    Configures the root logger with handlers (console, rotating file) and
    formatting as specified in the 'logging' section of the configuration.
    Falls back to `logging.basicConfig` when the section is missing.

    Console output always goes to stderr so that stdout stays reserved for
    rendered results printed by the CLI.

    Args:
        config (Optional[ConfigurationManager]): Configuration to read. If None,
            the shared manager from `get_config_manager()` is used.
        force (bool): Re-run the setup even if logging was already initialized.
    """
    global _logging_initialized
    if _logging_initialized and not force:
        logging.getLogger(__name__).debug("setup_logging: already initialized.")
        return

    current_config = config
    if current_config is None:
        from splash_client.core.config import get_config_manager
        current_config = get_config_manager()

    log_settings: Optional[Dict[str, Any]] = current_config.get("logging")

    if not log_settings:
        logging.basicConfig(level=logging.WARNING, format=DEFAULT_LOG_FORMAT)
        logging.getLogger(__name__).debug("'logging' section not found in configuration. Using basicConfig.")
        _logging_initialized = True
        return

    log_level_str = str(log_settings.get("level", "WARNING")).upper()
    log_level = getattr(logging, log_level_str, logging.WARNING)
    log_format = log_settings.get("format", DEFAULT_LOG_FORMAT)

    root_logger = logging.getLogger()

    # Drop handlers from an earlier setup or basicConfig to avoid duplicate output.
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.setLevel(log_level)
    formatter = logging.Formatter(log_format)

    handlers_settings = log_settings.get("handlers") or {}

    console_handler_settings = handlers_settings.get("console") or {}
    if console_handler_settings.get("enabled", False):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    file_handler_settings = handlers_settings.get("file") or {}
    log_file_path_absolute = None
    if file_handler_settings.get("enabled", False):
        log_file_path = file_handler_settings.get("path", "logs/splash_client.log")
        # Relative paths resolve against the working directory.
        log_file_path_absolute = os.path.abspath(log_file_path)
        max_bytes = int(file_handler_settings.get("max_bytes", 10 * 1024 * 1024))
        backup_count = int(file_handler_settings.get("backup_count", 5))

        try:
            os.makedirs(os.path.dirname(log_file_path_absolute), exist_ok=True)
            file_handler = RotatingFileHandler(
                filename=log_file_path_absolute,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding='utf-8'
            )
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            logging.error(f"Failed to configure file logging at '{log_file_path_absolute}': {e}. File logging disabled.", exc_info=True)

    if not root_logger.handlers:
        # Keep records from reaching logging.lastResort when every handler is disabled.
        root_logger.addHandler(logging.NullHandler())

    _logging_initialized = True
    logging.getLogger(__name__).debug(f"Logging initialized. Level: {log_level_str}. Format: '{log_format}'.")
    if log_file_path_absolute:
        logging.getLogger(__name__).debug(f"File logging handler enabled at path: {log_file_path_absolute}")


def get_logger(name: str) -> logging.Logger:
    """
    Retrieves a logger instance with the specified name.

    Loggers are handed out without touching handler configuration, so importing
    the library never reconfigures the host application's logging. Call
    `setup_logging()` to apply the YAML settings.

    Args:
        name (str): The name for the logger, typically `__name__` of the calling module.

    Returns:
        logging.Logger: An instance of `logging.Logger`.
    """
    return logging.getLogger(name)


def is_logging_initialized() -> bool:
    return _logging_initialized
