"""
Config Module - Black Box Interface

Purpose: Application configuration management
Interface: load_config(), BubbleConfig, CommandDefinition
Hidden: File format, defaults, environment overrides

The configuration is built once at startup and passed to the app factory.
"""

from .loader import (
    CONFIG_PATH_ENV,
    DEFAULT_CONFIG_PATH,
    REDIS_PASSWORD_ENV,
    ConfigError,
    load_config,
    resolve_config_path,
)
from .models import (
    DEFAULT_LIST_NAME,
    DEFAULT_SERVER_PORT,
    BubbleConfig,
    CommandDefinition,
    RedisConfig,
    ServerConfig,
)

__all__ = [
    "load_config",
    "resolve_config_path",
    "ConfigError",
    "BubbleConfig",
    "CommandDefinition",
    "RedisConfig",
    "ServerConfig",
    "CONFIG_PATH_ENV",
    "REDIS_PASSWORD_ENV",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_LIST_NAME",
    "DEFAULT_SERVER_PORT",
]
