"""Load the Bubble configuration file."""

import os
from typing import Mapping, Optional

import yaml
from pydantic import ValidationError

from .models import BubbleConfig

CONFIG_PATH_ENV = "BUBBLE_CONFIG"
REDIS_PASSWORD_ENV = "REDIS_PASSWORD"
DEFAULT_CONFIG_PATH = "config.yml"


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or parsed."""


def resolve_config_path(environ: Optional[Mapping[str, str]] = None) -> str:
    """Return the config path from BUBBLE_CONFIG, else the default."""
    environ = os.environ if environ is None else environ
    return environ.get(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH


def load_config(
    path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None
) -> BubbleConfig:
    """
    Load configuration from a YAML file.

    Args:
        path: Config file path. Falls back to BUBBLE_CONFIG, then config.yml
        environ: Environment mapping, os.environ when omitted

    Returns:
        Immutable BubbleConfig with defaults applied

    Raises:
        ConfigError: If the file cannot be read, parsed or validated

    Logic:
    1. Read and parse the YAML document
    2. Validate into BubbleConfig (defaults for port and list name)
    3. REDIS_PASSWORD, when set, replaces the file password
    """
    environ = os.environ if environ is None else environ
    path = path or resolve_config_path(environ)

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"failed to read config file: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"failed to parse config file: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"failed to parse config file: expected a mapping at top level, got {type(data).__name__}"
        )

    try:
        config = BubbleConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"failed to parse config file: {e}") from e

    redis_password = environ.get(REDIS_PASSWORD_ENV)
    if redis_password:
        config = config.model_copy(
            update={"redis": config.redis.model_copy(update={"password": redis_password})}
        )

    return config
