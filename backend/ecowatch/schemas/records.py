"""Record Schemas - request bodies and response envelopes for reports and coordinates."""

from typing import Any

from pydantic import BaseModel, ConfigDict

from ecowatch.core.domain_types import RecordStatus

# Numeric fields pass through unconverted; core.records.parse_float decides what counts.
Number = Any


# --- Requests -----------------------------------------------------------------

class ReportCreate(BaseModel):
    """Report submission; type, location and description are checked by the service."""
    model_config = ConfigDict(extra="ignore")

    type: str | None = None
    location: str | None = None
    coordinates: str | None = None
    description: str | None = None
    severity: str | None = None
    email: str | None = None
    phone: str | None = None


class CoordinateCreate(BaseModel):
    """Water-quality reading; numeric fields accept numbers or numeric strings."""
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    lat: Number = None
    lng: Number = None
    transparency: Number = None
    temperature: Number = None
    conductivity: Number = None
    waterlevel: Number = None
    pathogens: str | None = None
    description: str | None = None


class StatusUpdate(BaseModel):
    """Status change request; the value itself is validated by the service."""
    model_config = ConfigDict(extra="ignore")

    status: str | None = None


# --- Responses ----------------------------------------------------------------

class ReportRecord(BaseModel):
    id: str
    type: str
    location: str
    coordinates: str = ""
    description: str
    severity: str = "medium"
    email: str = ""
    phone: str = ""
    status: RecordStatus = RecordStatus.PENDING
    createdAt: str
    updatedAt: str


class CoordinateRecord(BaseModel):
    id: str
    name: str
    lat: float
    lng: float
    transparency: float | None = None
    temperature: float | None = None
    conductivity: float | None = None
    waterlevel: float | None = None
    pathogens: str = "Unknown"
    description: str = ""
    status: RecordStatus = RecordStatus.PENDING
    createdAt: str
    updatedAt: str


class ReportEnvelope(BaseModel):
    message: str
    report: ReportRecord


class CoordinateEnvelope(BaseModel):
    message: str
    coordinate: CoordinateRecord


class MessageResponse(BaseModel):
    message: str
