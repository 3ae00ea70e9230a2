#!/usr/bin/env python3
"""
Bubble - Main Entry Point

This is the thin orchestration layer that:
1. Loads configuration
2. Initializes modules
3. Runs the HTTP server

All business logic is in the modules, following black box principles.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import redis.asyncio as redis
import uvicorn
from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse
from jinja2 import TemplateError
from pydantic import ValidationError

from bubble import __version__
from bubble.logging_config import configure_logging, get_logging_config

# Import modules through their black box interfaces
from bubble.modules.api import INVALID_REQUEST, ExecuteRequest, ExecuteResponse
from bubble.modules.config import BubbleConfig, ConfigError, RedisConfig, load_config
from bubble.modules.dispatch import Dispatcher
from bubble.modules.queue import PoppitQueue
from bubble.modules.web import IndexPage

logger = logging.getLogger(__name__)

# Seconds
SERVER_TIMEOUT = 10
SHUTDOWN_TIMEOUT = 10

router = APIRouter()


def get_redis_client(redis_config: RedisConfig) -> redis.Redis:
    """Create Redis client from configuration."""
    return redis.Redis(
        host=redis_config.host,
        port=redis_config.port,
        db=redis_config.db,
        password=redis_config.password or None,
        encoding="utf-8",
        decode_responses=True,
        socket_timeout=SERVER_TIMEOUT,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle - connect to Redis and wire modules.

    A failed Redis ping aborts startup.
    """
    config: BubbleConfig = app.state.config
    redis_client = app.state.redis_client or get_redis_client(config.redis)
    queue = PoppitQueue(redis_client, config.redis.list_name)

    try:
        await queue.ping()
    except redis.RedisError as e:
        logger.error(f"Failed to connect to Redis: {e}")
        await queue.close()
        raise RuntimeError(f"Failed to connect to Redis: {e}") from e
    logger.info("Connected to Redis successfully")

    app.state.queue = queue
    app.state.dispatcher = Dispatcher(config.commands, queue)

    yield

    logger.info("Shutting down server...")
    try:
        await queue.close()
    except redis.RedisError as e:
        logger.error(f"Redis close error: {e}")
    logger.info("Server stopped")


def create_app(config: BubbleConfig, redis_client: Optional[redis.Redis] = None) -> FastAPI:
    """
    Build the Bubble application.

    Args:
        config: Loaded configuration, shared read-only by all requests
        redis_client: Optional pre-built client, created from config when omitted
    """
    app = FastAPI(
        title="Bubble",
        description="Bubble - Web Frontend for Poppit",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.redis_client = redis_client
    app.state.index_page = IndexPage(config.commands)
    app.include_router(router)
    return app


# UI Endpoints


@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """
    Page listing every configured command as a button.

    Returns:
        200: HTML page
        500: Template rendering failed
    """
    page: IndexPage = request.app.state.index_page
    try:
        return HTMLResponse(page.render())
    except TemplateError as e:
        logger.error(f"Template error: {e}")
        return PlainTextResponse(str(e), status_code=500)


@router.post("/execute", response_model=ExecuteResponse)
async def execute(request: Request) -> ExecuteResponse:
    """
    Send the named command to Poppit.

    Body: {"name": string}

    Returns:
        200: {"success": bool, "message": string}, whatever the outcome
        405: Method other than POST
    """
    body = await request.body()
    try:
        payload = ExecuteRequest.model_validate_json(body)
    except ValidationError as e:
        logger.warning(f"Invalid execute request: {e.errors(include_url=False)}")
        return ExecuteResponse.failure(INVALID_REQUEST)

    dispatcher: Dispatcher = request.app.state.dispatcher
    return await dispatcher.dispatch(payload.name or "")


# Health/Monitoring Endpoints


@router.get("/healthz")
async def healthz():
    """
    Minimal health check endpoint for container readiness/liveness probes.

    Returns:
        200: Service is running
    """
    return {"status": "ok"}


@router.get("/health")
async def health_check(request: Request):
    """
    Health check including the Redis connection.

    Returns:
        200: Service healthy
        503: Redis unreachable
    """
    queue: Optional[PoppitQueue] = getattr(request.app.state, "queue", None)
    if queue is None:
        return JSONResponse(
            status_code=503, content={"status": "unhealthy", "redis": "disconnected"}
        )

    try:
        await queue.ping()
        depth = await queue.get_queue_depth()
    except redis.RedisError as e:
        logger.error(f"Health check failed: {e}")
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "redis": "disconnected", "error": str(e)},
        )

    return {
        "status": "healthy",
        "redis": "connected",
        "queue_depth": depth,
        "version": __version__,
    }


def main() -> None:
    """Load configuration and serve until SIGINT/SIGTERM."""
    configure_logging()

    try:
        config = load_config()
    except ConfigError as e:
        logger.error(f"Failed to load config: {e}")
        sys.exit(1)

    app = create_app(config)

    logger.info(f"Starting Bubble server on port {config.server.port}")
    uvicorn.run(
        app,
        host=config.server.host,
        port=int(config.server.port),
        log_config=get_logging_config(),
        timeout_keep_alive=SERVER_TIMEOUT,
        timeout_graceful_shutdown=SHUTDOWN_TIMEOUT,
    )


if __name__ == "__main__":
    main()
