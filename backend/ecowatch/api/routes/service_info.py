"""Service Metadata - root endpoint describing the API."""

from fastapi import APIRouter, Depends

from ecowatch.config import Settings, get_settings

router = APIRouter(tags=["meta"])


@router.get("/")
async def service_info(settings: Settings = Depends(get_settings)):
    return {
        "message": f"{settings.service_name} running",
        "version": settings.service_version,
        "storage": settings.storage_backend,
        "endpoints": {
            "reports": "/api/reports",
            "coordinates": "/api/coordinates",
            "health": "/health",
            "docs": "/docs",
        },
    }
