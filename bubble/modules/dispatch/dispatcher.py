import logging
from typing import Optional, Sequence

import redis.asyncio as redis

from bubble.modules.api import (
    COMMAND_NOT_FOUND,
    ExecuteResponse,
    PoppitNotification,
    QUEUE_WRITE_FAILED,
)
from bubble.modules.config import CommandDefinition
from bubble.modules.queue import PoppitQueue

logger = logging.getLogger(__name__)


class Dispatcher:
    """Turns a button click into one write on the Poppit queue."""

    def __init__(self, commands: Sequence[CommandDefinition], queue: PoppitQueue):
        self.commands = tuple(commands)
        self.queue = queue

    def find_command(self, name: str) -> Optional[CommandDefinition]:
        """First command with a matching name wins."""
        for command in self.commands:
            if command.name == name:
                return command
        return None

    async def dispatch(self, name: str) -> ExecuteResponse:
        """
        Send the named command to Poppit.

        Args:
            name: Command name as shown on the button

        Returns:
            ExecuteResponse describing the outcome. Failures are
            reported in the response, never raised.
        """
        command = self.find_command(name)
        if command is None:
            logger.warning(f"Command not found: '{name}'")
            return ExecuteResponse.failure(COMMAND_NOT_FOUND)

        notification = PoppitNotification.from_command(command)

        try:
            await self.queue.push_notification(notification)
        except redis.RedisError as e:
            logger.error(f"Redis error: {e}")
            return ExecuteResponse.failure(QUEUE_WRITE_FAILED)

        logger.info(f"Command '{name}' sent to Poppit successfully")
        return ExecuteResponse.ok(name)
