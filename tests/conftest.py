"""
Shared pytest fixtures for Bubble tests.

This module provides common fixtures including:
- Sample YAML configuration files
- Redis mocks for queue/dispatch tests
- FastAPI test client built around a mocked Redis client
"""

import os
import sys
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from bubble.main import create_app
from bubble.modules.config import BubbleConfig, CommandDefinition, RedisConfig


SAMPLE_CONFIG_YAML = """\
redis:
  addr: "localhost:6379"
  password: "config-password"
  list_name: "poppit:notifications"

server:
  port: "8080"

commands:
  - name: "Test Command"
    repo: "test/repo"
    branch: "refs/heads/main"
    type: "manual-trigger"
    dir: "/tmp"
    commands:
      - "echo test"
"""


@pytest.fixture
def write_config(tmp_path):
    """Write YAML text to a temporary config file and return its path."""

    def _write(text: str, name: str = "config.yml") -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def clean_env(monkeypatch):
    """Make sure the Bubble environment variables start unset."""
    monkeypatch.delenv("BUBBLE_CONFIG", raising=False)
    monkeypatch.delenv("REDIS_PASSWORD", raising=False)
    return monkeypatch


@pytest.fixture
def deploy_command():
    return CommandDefinition(
        name="Deploy",
        repo="org/app",
        branch="main",
        type="deploy",
        dir="/srv",
        commands=["make deploy"],
    )


@pytest.fixture
def bubble_config(deploy_command):
    return BubbleConfig(
        redis=RedisConfig(addr="localhost:6379", list_name="poppit:notifications"),
        commands=[
            deploy_command,
            CommandDefinition(
                name="Test Command",
                repo="test/repo",
                branch="refs/heads/main",
                type="manual-trigger",
                dir="/tmp",
                commands=["echo test", "echo done"],
            ),
        ],
    )


@pytest.fixture
def redis_mock():
    """Create a mock async Redis client"""
    redis = AsyncMock()

    redis.ping = AsyncMock(return_value=True)
    redis.rpush = AsyncMock(return_value=1)
    redis.llen = AsyncMock(return_value=0)
    redis.aclose = AsyncMock()

    return redis


@pytest.fixture
def app(bubble_config, redis_mock):
    return create_app(bubble_config, redis_client=redis_mock)


@pytest.fixture
def client(app):
    """Test client with the lifespan running."""
    with TestClient(app) as test_client:
        yield test_client
