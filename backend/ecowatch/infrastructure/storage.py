"""Storage Lifecycle - backend selection, scoped open/close, and the FastAPI dependency.

Invariants:
    - Exactly one store per application, opened in the lifespan and held on app.state
    - open_store() closes the store on every exit path (normal, error, interrupt)
    - MongoDB without a connection URI is a fatal startup error
    - Routes receive the store only through get_store (no module-level connection)

Design Decisions:
    - app.state over a module singleton: tests inject stores via dependency_overrides
      and several apps can coexist in one process
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import Request

from ecowatch.config import Settings
from ecowatch.core.errors import StorageConfigurationError, StorageError
from ecowatch.core.repository_protocols import RecordStore
from ecowatch.infrastructure.file_store import JsonFileStore
from ecowatch.infrastructure.mongo_store import MongoStore

logger = logging.getLogger(__name__)


async def create_store(settings: Settings) -> RecordStore:
    """Build the store selected by settings.storage_backend."""
    if settings.storage_backend == "mongodb":
        if not settings.mongodb_uri:
            raise StorageConfigurationError(
                "MONGODB_URI must be set when STORAGE_BACKEND is mongodb",
            )
        try:
            return await MongoStore.connect(
                settings.mongodb_uri, settings.mongodb_database,
            )
        except StorageError as e:
            raise StorageConfigurationError(
                f"Could not connect to MongoDB: {e.message}",
            ) from e
    return JsonFileStore(settings.data_dir)


@asynccontextmanager
async def open_store(settings: Settings) -> AsyncIterator[RecordStore]:
    """Open the configured store and guarantee it is closed afterwards."""
    store = await create_store(settings)
    logger.info(
        f"Storage backend '{store.backend_name}' ready",
        extra={"backend": store.backend_name},
    )
    try:
        yield store
    finally:
        await store.close()
        logger.info(
            f"Storage backend '{store.backend_name}' closed",
            extra={"backend": store.backend_name},
        )


def get_store(request: Request) -> RecordStore:
    """FastAPI dependency returning the application's store."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise StorageError("Storage not initialized", "connect")
    return store
