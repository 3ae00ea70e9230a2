"""
Queue Module - Black Box Interface

Purpose: Hand job descriptions to the Poppit worker
Interface: push_notification(), ping(), close()
Hidden: Redis list layout, serialization

Can be replaced with RabbitMQ, Kafka, or any message queue.
"""

from .queue import PoppitQueue

__all__ = ["PoppitQueue"]
