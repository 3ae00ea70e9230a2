import json

import pytest
import redis.asyncio as redis

from bubble.modules.api import PoppitNotification
from bubble.modules.queue import PoppitQueue


@pytest.fixture
def queue_module(redis_mock):
    """Create a PoppitQueue instance with mocked Redis"""
    return PoppitQueue(redis_mock, "poppit:notifications")


@pytest.fixture
def notification():
    return PoppitNotification(
        repo="org/app",
        branch="main",
        type="deploy",
        dir="/srv",
        commands=["make deploy"],
    )


@pytest.mark.asyncio
async def test_push_notification_appends_to_tail(queue_module, redis_mock, notification):
    """Test that notifications are right-pushed onto the configured list"""
    redis_mock.rpush.return_value = 3

    length = await queue_module.push_notification(notification)

    assert length == 3
    redis_mock.rpush.assert_called_once()
    call_args = redis_mock.rpush.call_args[0]
    assert call_args[0] == "poppit:notifications"
    assert json.loads(call_args[1]) == {
        "repo": "org/app",
        "branch": "main",
        "type": "deploy",
        "dir": "/srv",
        "commands": ["make deploy"],
    }
    redis_mock.lpush.assert_not_called()


@pytest.mark.asyncio
async def test_push_notification_wire_format(queue_module, redis_mock, notification):
    """Test the exact JSON text written to Redis"""
    await queue_module.push_notification(notification)

    payload = redis_mock.rpush.call_args[0][1]
    assert payload == (
        '{"repo":"org/app","branch":"main","type":"deploy","dir":"/srv",'
        '"commands":["make deploy"]}'
    )


@pytest.mark.asyncio
async def test_push_notification_uses_configured_list(redis_mock, notification):
    """Test a custom list name"""
    queue_module = PoppitQueue(redis_mock, "custom:list")

    await queue_module.push_notification(notification)

    assert redis_mock.rpush.call_args[0][0] == "custom:list"


@pytest.mark.asyncio
async def test_push_notification_propagates_redis_errors(queue_module, redis_mock, notification):
    """Test that write failures reach the caller"""
    redis_mock.rpush.side_effect = redis.ConnectionError("connection refused")

    with pytest.raises(redis.ConnectionError):
        await queue_module.push_notification(notification)


@pytest.mark.asyncio
async def test_ping(queue_module, redis_mock):
    assert await queue_module.ping() is True
    redis_mock.ping.assert_called_once()


@pytest.mark.asyncio
async def test_get_queue_depth(queue_module, redis_mock):
    """Test getting the queue depth"""
    redis_mock.llen.return_value = 5

    depth = await queue_module.get_queue_depth()

    assert depth == 5
    redis_mock.llen.assert_called_once_with("poppit:notifications")


@pytest.mark.asyncio
async def test_close(queue_module, redis_mock):
    await queue_module.close()

    redis_mock.aclose.assert_called_once()
