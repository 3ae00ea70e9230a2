"""
API Module - Black Box Interface

Purpose: Request, response and queue message models
Interface: ExecuteRequest, ExecuteResponse, PoppitNotification
Hidden: Serialization details

The API module only describes data - it contains no business logic.
"""

from .models import (
    COMMAND_NOT_FOUND,
    INVALID_REQUEST,
    QUEUE_WRITE_FAILED,
    ExecuteRequest,
    ExecuteResponse,
    PoppitNotification,
)

__all__ = [
    "ExecuteRequest",
    "ExecuteResponse",
    "PoppitNotification",
    "INVALID_REQUEST",
    "COMMAND_NOT_FOUND",
    "QUEUE_WRITE_FAILED",
]
