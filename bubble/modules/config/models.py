"""
Configuration models.

Everything here is frozen: the configuration is read once at startup
and shared read-only between concurrent requests.
"""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_REDIS_ADDR = "localhost:6379"
DEFAULT_REDIS_PORT = 6379
DEFAULT_LIST_NAME = "poppit:notifications"
DEFAULT_SERVER_HOST = "0.0.0.0"
DEFAULT_SERVER_PORT = "8080"


class CommandDefinition(BaseModel):
    """A named job template shown to the user as a button."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    repo: str = ""
    branch: str = ""
    type: str = ""
    dir: str = ""
    commands: Tuple[str, ...] = ()

    @field_validator("name", "repo", "branch", "type", "dir", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        # YAML keys with no value load as None
        return "" if v is None else v

    @field_validator("commands", mode="before")
    @classmethod
    def commands_default(cls, v):
        return () if v is None else v


class RedisConfig(BaseModel):
    """Redis connection details and the Poppit list name."""

    model_config = ConfigDict(frozen=True)

    addr: str = DEFAULT_REDIS_ADDR
    password: str = ""
    list_name: str = DEFAULT_LIST_NAME
    db: int = Field(default=0, ge=0)

    @field_validator("addr", "list_name", mode="before")
    @classmethod
    def empty_uses_default(cls, v, info):
        if v is None or v == "":
            return cls.model_fields[info.field_name].default
        return v

    @field_validator("addr")
    @classmethod
    def addr_port_must_be_numeric(cls, v: str) -> str:
        host, _, port = v.rpartition(":")
        if host and not port.isdigit():
            raise ValueError(f"addr must be host or host:port, got '{v}'")
        return v

    @field_validator("password", mode="before")
    @classmethod
    def password_default(cls, v):
        return "" if v is None else v

    @property
    def host(self) -> str:
        host, _, _ = self.addr.rpartition(":")
        return host or self.addr

    @property
    def port(self) -> int:
        host, _, port = self.addr.rpartition(":")
        if not host:
            return DEFAULT_REDIS_PORT
        return int(port)


class ServerConfig(BaseModel):
    """HTTP server settings."""

    model_config = ConfigDict(frozen=True)

    host: str = DEFAULT_SERVER_HOST
    port: str = DEFAULT_SERVER_PORT

    @field_validator("host", "port", mode="before")
    @classmethod
    def empty_uses_default(cls, v, info):
        if v is None or v == "":
            return cls.model_fields[info.field_name].default
        # `port: 8080` in YAML loads as an int
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("port")
    @classmethod
    def port_must_be_numeric(cls, v: str) -> str:
        if not v.isdigit() or not 0 < int(v) < 65536:
            raise ValueError(f"port must be a number between 1 and 65535, got '{v}'")
        return v


class BubbleConfig(BaseModel):
    """Complete application configuration."""

    model_config = ConfigDict(frozen=True)

    redis: RedisConfig = Field(default_factory=RedisConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    commands: Tuple[CommandDefinition, ...] = ()

    @field_validator("redis", "server", mode="before")
    @classmethod
    def section_default(cls, v):
        return {} if v is None else v

    @field_validator("commands", mode="before")
    @classmethod
    def commands_default(cls, v):
        return () if v is None else v

