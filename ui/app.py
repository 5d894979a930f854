"""FastAPI application factory."""

import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config import load_config
from internal.health import (
    check_codec,
    check_event_loop,
    create_entropy_check,
    get_health_checker,
)
from internal.logging import StructuredLogger, parse_level
from utils.crash import create_async_handler
from ui.routes import health, ids, sequence


def create_app(config=None):
    """Create and configure the FastAPI application."""
    config = config or load_config()

    # Configure structured logging
    logger_instance = StructuredLogger.configure(min_level=parse_level(config.logging.level))

    health_checker = get_health_checker()
    health_checker.register("event_loop", check_event_loop, critical=True)
    health_checker.register("entropy", create_entropy_check(), critical=True)
    health_checker.register("codec", check_codec, critical=True)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger_instance.info("Application starting", version="1.0.0")
        loop = asyncio.get_running_loop()
        loop.set_exception_handler(create_async_handler(logger_instance))
        logger_instance.info("Application started successfully")

        yield

        logger_instance.info("Application shutdown complete")

    app = FastAPI(
        title="KSUID Service",
        version="1.0.0",
        description="K-sortable unique identifier generation and inspection",
        lifespan=lifespan,
    )

    # Initialize route modules with dependencies
    ids.init(config.generator, logger_instance.bind(component="ksuids"))
    sequence.init(config.generator, logger_instance.bind(component="sequence"))
    health.init(health_checker)

    # Include routers
    app.include_router(ids.router)
    app.include_router(sequence.router)
    app.include_router(health.router)

    return app
