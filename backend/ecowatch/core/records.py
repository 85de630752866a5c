"""Record Model - builds Report and Coordinate records from submitted payloads.

Invariants:
    - A built record has status "pending" and createdAt == updatedAt
    - Required fields are checked before any record is built (nothing partial escapes)
    - A required field is missing when absent, None or blank; numeric 0 is present
    - Optional measurements are None when absent or unparseable, never NaN/inf
    - Built records carry no "id": identifiers are assigned by the store

Design Decisions:
    - Pure functions taking the timestamp as an argument: deterministic, trivially testable
    - Timestamps are fixed-width UTC ISO strings so lexical order == chronological order
"""

import math
from datetime import datetime, timezone

from ecowatch.core.domain_types import RecordStatus
from ecowatch.core.errors import (
    ErrorContext, InvalidFieldValueError, InvalidStatusError, MissingFieldsError,
)

REPORT_REQUIRED_FIELDS = ("type", "location", "description")
COORDINATE_REQUIRED_FIELDS = ("name", "lat", "lng")
MEASUREMENT_FIELDS = ("transparency", "temperature", "conductivity", "waterlevel")

DEFAULT_SEVERITY = "medium"
DEFAULT_PATHOGENS = "Unknown"


def utc_timestamp(now: datetime | None = None) -> str:
    """Format a UTC instant as YYYY-MM-DDTHH:MM:SS.ffffffZ."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def is_blank(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def find_missing_fields(payload: dict, required: tuple[str, ...]) -> list[str]:
    """Names of required fields that are absent or blank, in declaration order."""
    return [name for name in required if is_blank(payload.get(name))]


def parse_float(value: object) -> float | None:
    """Parse a number or numeric string; None when absent or not a finite number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        result = float(value)
    elif isinstance(value, str):
        try:
            result = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return result if math.isfinite(result) else None


def parse_status(value: object, context: ErrorContext | None = None) -> RecordStatus:
    """Validate a requested workflow status."""
    allowed = [s.value for s in RecordStatus]
    if isinstance(value, str) and value in allowed:
        return RecordStatus(value)
    raise InvalidStatusError(value, allowed, context)


def _text(value: str | None, default: str = "") -> str:
    return default if is_blank(value) else value


def build_report(payload: dict, timestamp: str) -> dict:
    """Build a new pending Report record, applying field defaults."""
    missing = find_missing_fields(payload, REPORT_REQUIRED_FIELDS)
    if missing:
        raise MissingFieldsError(missing, ErrorContext(collection="reports"))
    return {
        "type": payload["type"],
        "location": payload["location"],
        "coordinates": _text(payload.get("coordinates")),
        "description": payload["description"],
        "severity": _text(payload.get("severity"), DEFAULT_SEVERITY),
        "email": _text(payload.get("email")),
        "phone": _text(payload.get("phone")),
        "status": RecordStatus.PENDING.value,
        "createdAt": timestamp,
        "updatedAt": timestamp,
    }


def build_coordinate(payload: dict, timestamp: str) -> dict:
    """Build a new pending Coordinate record, parsing numeric readings."""
    missing = find_missing_fields(payload, COORDINATE_REQUIRED_FIELDS)
    if missing:
        raise MissingFieldsError(missing, ErrorContext(collection="coordinates"))

    position = {}
    for name in ("lat", "lng"):
        parsed = parse_float(payload[name])
        if parsed is None:
            raise InvalidFieldValueError(
                f"Field '{name}' must be a number", name,
                ErrorContext(collection="coordinates"),
            )
        position[name] = parsed

    record = {"name": payload["name"], **position}
    for name in MEASUREMENT_FIELDS:
        record[name] = parse_float(payload.get(name))
    record.update({
        "pathogens": _text(payload.get("pathogens"), DEFAULT_PATHOGENS),
        "description": _text(payload.get("description")),
        "status": RecordStatus.PENDING.value,
        "createdAt": timestamp,
        "updatedAt": timestamp,
    })
    return record


def apply_status(record: dict, status: RecordStatus, updated_at: str) -> dict:
    """Return a copy of record with the new status; every other field preserved."""
    return {**record, "status": status.value, "updatedAt": updated_at}
