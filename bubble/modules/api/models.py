"""
Bubble shared data models.

These models define the structure of the data passed over HTTP
and onto the Poppit queue.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from bubble.modules.config import CommandDefinition

# Response messages

INVALID_REQUEST = "Invalid request"
COMMAND_NOT_FOUND = "Command not found"
QUEUE_WRITE_FAILED = "Failed to send command to Poppit"


# Request Models (API Input)


class ExecuteRequest(BaseModel):
    """Request to dispatch a configured command by name."""

    name: Optional[str] = Field(None, description="Name of the configured command")


# Response Models (API Output)


class ExecuteResponse(BaseModel):
    """Outcome of a dispatch request. Always returned with HTTP 200."""

    success: bool
    message: str

    @classmethod
    def ok(cls, name: str) -> "ExecuteResponse":
        return cls(success=True, message=f"Command '{name}' sent to Poppit successfully!")

    @classmethod
    def failure(cls, message: str) -> "ExecuteResponse":
        return cls(success=False, message=message)


# Queue Models


class PoppitNotification(BaseModel):
    """Job description pushed onto the Poppit list."""

    repo: str
    branch: str
    type: str
    dir: str
    commands: List[str] = Field(default_factory=list)

    @classmethod
    def from_command(cls, command: CommandDefinition) -> "PoppitNotification":
        """Copy the job fields out of a command definition."""
        return cls(
            repo=command.repo,
            branch=command.branch,
            type=command.type,
            dir=command.dir,
            commands=list(command.commands),
        )
