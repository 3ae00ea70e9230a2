"""
Bubble - Web Frontend for Poppit

A small web page of named buttons. Each button enqueues a job
description onto the Redis list consumed by the Poppit worker.

Architecture:
- Each module is self-contained with clear interfaces
- Configuration is loaded once and injected, never mutated
- All communication through defined interfaces

Modules:
- config: YAML configuration loading and defaults
- queue: Redis list producer for Poppit notifications
- dispatch: Command lookup and notification dispatch
- web: Button page rendering
- api: Request/response models
"""

__version__ = "1.0.0"
