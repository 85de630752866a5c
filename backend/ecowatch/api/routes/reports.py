"""Report Routes - CRUD and moderation status for citizen environmental reports.

Invariants:
    - Handlers delegate to RecordService; no storage access in this module
    - POST returns 201 with {message, report}; DELETE returns 200 with {message}
    - Every failure surfaces as an EcoWatchError and is rendered by the global handlers
"""

from fastapi import APIRouter, Depends, status

from ecowatch.core.domain_types import Collection, RecordId
from ecowatch.core.repository_protocols import RecordStore
from ecowatch.infrastructure.storage import get_store
from ecowatch.schemas.records import (
    MessageResponse, ReportCreate, ReportEnvelope, ReportRecord, StatusUpdate,
)
from ecowatch.services.record_service import RecordService

router = APIRouter(prefix="/api/reports", tags=["reports"])


def get_report_service(store: RecordStore = Depends(get_store)) -> RecordService:
    return RecordService(store, Collection.REPORTS)


@router.get("", response_model=list[ReportRecord])
async def list_reports(service: RecordService = Depends(get_report_service)):
    """All reports, newest first."""
    return await service.list_records()


@router.get("/{report_id}", response_model=ReportRecord)
async def get_report(
    report_id: str, service: RecordService = Depends(get_report_service),
):
    return await service.get_record(RecordId(report_id))


@router.post(
    "", response_model=ReportEnvelope, status_code=status.HTTP_201_CREATED,
)
async def create_report(
    body: ReportCreate, service: RecordService = Depends(get_report_service),
):
    """Submit a new report."""
    report = await service.create_record(body.model_dump())
    return {"message": "Report submitted successfully", "report": report}


@router.put("/{report_id}", response_model=ReportEnvelope)
async def update_report_status(
    report_id: str,
    body: StatusUpdate,
    service: RecordService = Depends(get_report_service),
):
    """Change the moderation status of a report."""
    report = await service.update_status(RecordId(report_id), body.status)
    return {"message": "Report updated successfully", "report": report}


@router.delete("/{report_id}", response_model=MessageResponse)
async def delete_report(
    report_id: str, service: RecordService = Depends(get_report_service),
):
    await service.delete_record(RecordId(report_id))
    return {"message": "Report deleted successfully"}
