import logging

from bubble.modules.api import PoppitNotification

logger = logging.getLogger(__name__)


class PoppitQueue:
    def __init__(self, redis_client, list_name: str):
        """
        Initialize queue module.

        Args:
            redis_client: Async Redis client
            list_name: Redis list consumed by Poppit
        """
        self.redis = redis_client
        self.list_name = list_name

    async def ping(self) -> bool:
        """Check the Redis connection. Raises on connection errors."""
        return await self.redis.ping()

    async def push_notification(self, notification: PoppitNotification) -> int:
        """
        Append a notification to the tail of the Poppit list.

        Args:
            notification: Job description for Poppit

        Returns:
            List length after the push

        Raises:
            redis.RedisError: If the write fails
        """
        payload = notification.model_dump_json()
        length = await self.redis.rpush(self.list_name, payload)
        logger.debug(f"Pushed notification to {self.list_name} (length {length})")
        return length

    async def get_queue_depth(self) -> int:
        """Number of notifications not yet consumed by Poppit."""
        return await self.redis.llen(self.list_name)

    async def close(self) -> None:
        """Close the underlying Redis connection pool."""
        await self.redis.aclose()
