"""Health Probe - reports process and storage health.

Invariants:
    - GET /health returns 200 {status: "OK"} only when the storage ping succeeds
    - Storage failure returns 500 {status: "error"}: the process is up, storage is not
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ecowatch.core.errors import StorageError
from ecowatch.core.records import utc_timestamp
from ecowatch.core.repository_protocols import RecordStore
from ecowatch.infrastructure.storage import get_store

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(store: RecordStore = Depends(get_store)):
    """Liveness plus a lightweight storage probe."""
    try:
        storage = await store.ping()
    except StorageError as e:
        logger.error(
            f"Health check failed: {e.message}",
            extra={"backend": store.backend_name, "error_code": e.code},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "status": "error",
                "timestamp": utc_timestamp(),
                "message": e.message,
                "storage": {"backend": store.backend_name, "connected": False},
            },
        )
    return {"status": "OK", "timestamp": utc_timestamp(), "storage": storage}
