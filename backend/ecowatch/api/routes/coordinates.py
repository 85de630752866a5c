"""Coordinate Routes - CRUD and moderation status for water-quality readings.

Invariants:
    - Mirrors report routes; envelopes carry the record under "coordinate"
    - lat/lng are required and must parse as numbers; other readings default to null
"""

from fastapi import APIRouter, Depends, status

from ecowatch.core.domain_types import Collection, RecordId
from ecowatch.core.repository_protocols import RecordStore
from ecowatch.infrastructure.storage import get_store
from ecowatch.schemas.records import (
    CoordinateCreate, CoordinateEnvelope, CoordinateRecord, MessageResponse,
    StatusUpdate,
)
from ecowatch.services.record_service import RecordService

router = APIRouter(prefix="/api/coordinates", tags=["coordinates"])


def get_coordinate_service(store: RecordStore = Depends(get_store)) -> RecordService:
    return RecordService(store, Collection.COORDINATES)


@router.get("", response_model=list[CoordinateRecord])
async def list_coordinates(
    service: RecordService = Depends(get_coordinate_service),
):
    """All readings, newest first."""
    return await service.list_records()


@router.get("/{coordinate_id}", response_model=CoordinateRecord)
async def get_coordinate(
    coordinate_id: str, service: RecordService = Depends(get_coordinate_service),
):
    return await service.get_record(RecordId(coordinate_id))


@router.post(
    "", response_model=CoordinateEnvelope, status_code=status.HTTP_201_CREATED,
)
async def create_coordinate(
    body: CoordinateCreate,
    service: RecordService = Depends(get_coordinate_service),
):
    """Submit a new water-quality reading."""
    coordinate = await service.create_record(body.model_dump())
    return {"message": "Coordinate submitted successfully", "coordinate": coordinate}


@router.put("/{coordinate_id}", response_model=CoordinateEnvelope)
async def update_coordinate_status(
    coordinate_id: str,
    body: StatusUpdate,
    service: RecordService = Depends(get_coordinate_service),
):
    coordinate = await service.update_status(RecordId(coordinate_id), body.status)
    return {"message": "Coordinate updated successfully", "coordinate": coordinate}


@router.delete("/{coordinate_id}", response_model=MessageResponse)
async def delete_coordinate(
    coordinate_id: str,
    service: RecordService = Depends(get_coordinate_service),
):
    await service.delete_record(RecordId(coordinate_id))
    return {"message": "Coordinate deleted successfully"}
