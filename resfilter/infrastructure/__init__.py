"""ResFilter Infrastructure Layer.

This layer provides services used by the filter loader:
- ConfigManager: Hierarchical YAML configuration with environment overrides
- Logger: Structured logging system
"""

from .config_manager import (
    ConfigError,
    ConfigManager,
    ConfigSource,
    ConfigValue,
    get_config_manager,
    set_global_config,
)
from .logger import (
    Logger,
    LogLevel,
    configure_logger,
    get_logger,
    set_global_logger,
)

__all__ = [
    # Logger exports
    "Logger",
    "LogLevel",
    "configure_logger",
    "get_logger",
    "set_global_logger",
    # ConfigManager exports
    "ConfigSource",
    "ConfigValue",
    "ConfigError",
    "ConfigManager",
    "get_config_manager",
    "set_global_config",
]
