"""FastAPI application factory exposing the management bus over HTTP."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request

from gxpfru.bus.context import BusContext
from gxpfru.config import FruDeviceConfig, load_config
from gxpfru.core.publisher import InventoryPublisher
from gxpfru.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def get_publisher(request: Request) -> InventoryPublisher:
    """FastAPI dependency returning the app's publisher."""
    return request.app.state.publisher


def get_bus_context(request: Request) -> BusContext:
    """FastAPI dependency returning the app's bus context."""
    return request.app.state.bus_context


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Acquire the bus name and publish on startup; tear down on shutdown."""
    if app.state.configure_logging:
        setup_logging()
    context: BusContext = app.state.bus_context
    publisher: InventoryPublisher = app.state.publisher

    context.request_name()
    publisher.start()
    logger.info("gxpfru_api_started", bus_name=context.bus_name)
    try:
        yield
    finally:
        publisher.shutdown()
        context.close()
        logger.info("gxpfru_api_stopped")


def create_app(
    config: FruDeviceConfig | None = None,
    publisher: InventoryPublisher | None = None,
    configure_logging: bool = True,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Platform config; loaded from the environment if omitted.
        publisher: Prebuilt publisher (its context is reused). Built from
            ``config`` if omitted.
        configure_logging: Call setup_logging() during startup.

    Returns:
        Configured FastAPI application instance.
    """
    if publisher is None:
        config = config or load_config()
        publisher = InventoryPublisher(BusContext(config.bus_name), config)

    app = FastAPI(
        title="GXP FRU Device",
        description="FRU inventory decoded from the platform EEPROM",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.publisher = publisher
    app.state.bus_context = publisher.context
    app.state.configure_logging = configure_logging

    from gxpfru.api.routes import bus, fru
    app.include_router(bus.router, prefix="/api")
    app.include_router(fru.router, prefix="/api")

    return app
