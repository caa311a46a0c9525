from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.codepad.api.middlewares import setup_middlewares
from src.codepad.api.v1.router import api_router
from src.codepad.core.config import Settings, get_settings
from src.codepad.core.db import Database
from src.codepad.core.exceptions import setup_exception_handlers
from src.codepad.core.health import setup_health_endpoint, setup_metrics
from src.codepad.core.logging import get_logger, setup_logging
from src.codepad.core.shutdown import RequestTracker

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings: Settings = app.state.settings
    database: Database = app.state.database
    tracker: RequestTracker = app.state.request_tracker

    setup_logging(settings.debug)
    logger.info(f"Starting {settings.app_name}", env=settings.app_env)

    if settings.database_auto_init:
        await database.create_schema()

    yield

    grace_period = settings.shutdown_grace_period
    await tracker.start_shutdown()
    drained = await tracker.wait_for_drain(timeout=grace_period)
    if not drained:
        logger.warning(
            f"Shutdown timeout after {grace_period}s - "
            f"{tracker.in_flight_count} requests may not have completed"
        )

    logger.info("Closing database connections...")
    await database.dispose()
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "projects", "description": "Create and list projects, bulk-replace and export files"},
    {"name": "files", "description": "Edit, rename and delete single files"},
    {"name": "system", "description": "Health, database check and schema setup"},
]


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    """Build the application.

    Args:
        settings: Settings to use; defaults to the cached environment settings.
        database: Store client to use; defaults to one built from ``settings``.
            The application disposes it on shutdown.
    """
    settings = settings or get_settings()
    database = database or Database.from_settings(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Project and file storage backend for the browser code editor",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
        openapi_url="/openapi.json" if settings.enable_openapi else None,
    )
    app.state.settings = settings
    app.state.database = database
    app.state.request_tracker = RequestTracker()

    setup_exception_handlers(app)
    setup_middlewares(app, settings, app.state.request_tracker)
    setup_health_endpoint(app)
    app.include_router(api_router)
    setup_metrics(app, settings)

    return app


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)
