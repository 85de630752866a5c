"""EcoWatch API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map EcoWatchError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - The store is opened once in the lifespan, held on app.state and closed on
      every exit path; a store that cannot be opened aborts startup

Design Decisions:
    - Lifespan over @app.on_event: single place for startup and guaranteed cleanup
    - Handlers depend on get_store, so tests swap storage via dependency_overrides
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ecowatch.api.error_handlers import register_error_handlers
from ecowatch.api.routes import coordinates, health, reports, service_info
from ecowatch.config import get_settings
from ecowatch.infrastructure.observability import setup_logging
from ecowatch.infrastructure.storage import open_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    async with open_store(settings) as store:
        app.state.store = store
        logger.info("EcoWatch API started", extra={"backend": store.backend_name})
        try:
            yield
        finally:
            app.state.store = None
            logger.info("EcoWatch API shutting down")


settings = get_settings()

app = FastAPI(
    title=settings.service_name, version=settings.service_version, lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(service_info.router)
app.include_router(health.router)
app.include_router(reports.router)
app.include_router(coordinates.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "ecowatch.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
