"""Record Service - create, list, look up, re-status and delete records in a collection.

Invariants:
    - create stamps createdAt and updatedAt from a single timestamp
    - An invalid status is rejected before the store is touched
    - Unknown ids raise ResourceNotFoundError; state is left unchanged

Design Decisions:
    - One service class parameterized by Collection: reports and coordinates
      share the lifecycle and differ only in how a record is built
    - clock injectable: tests pin timestamps without patching datetime
"""

import logging
from typing import Callable

from ecowatch.core.domain_types import Collection, RecordId
from ecowatch.core.errors import ErrorContext, ResourceNotFoundError
from ecowatch.core.records import (
    build_coordinate, build_report, parse_status, utc_timestamp,
)
from ecowatch.core.repository_protocols import RecordStore

logger = logging.getLogger(__name__)

_BUILDERS: dict[Collection, Callable[[dict, str], dict]] = {
    Collection.REPORTS: build_report,
    Collection.COORDINATES: build_coordinate,
}


class RecordService:
    """Record lifecycle operations for one collection."""

    def __init__(
        self,
        store: RecordStore,
        collection: Collection,
        clock: Callable[[], str] = utc_timestamp,
    ):
        self._store = store
        self.collection = collection
        self._clock = clock

    def _not_found(self, record_id: str) -> ResourceNotFoundError:
        return ResourceNotFoundError(
            self.collection.label, record_id,
            ErrorContext(collection=self.collection.value, record_id=record_id),
        )

    async def list_records(self) -> list[dict]:
        return await self._store.list_all(self.collection)

    async def get_record(self, record_id: RecordId) -> dict:
        record = await self._store.get(self.collection, record_id)
        if record is None:
            raise self._not_found(record_id)
        return record

    async def create_record(self, payload: dict) -> dict:
        """Validate payload, apply defaults and persist a new pending record."""
        record = _BUILDERS[self.collection](payload, self._clock())
        stored = await self._store.insert(self.collection, record)
        logger.info(
            f"{self.collection.label} {stored['id']} created",
            extra={"collection": self.collection.value, "record_id": stored["id"]},
        )
        return stored

    async def update_status(self, record_id: RecordId, status: object) -> dict:
        """Move a record to another workflow status."""
        new_status = parse_status(
            status,
            ErrorContext(collection=self.collection.value, record_id=record_id),
        )
        updated = await self._store.update_status(
            self.collection, record_id, new_status, self._clock(),
        )
        if updated is None:
            raise self._not_found(record_id)
        logger.info(
            f"{self.collection.label} {record_id} status -> {new_status.value}",
            extra={"collection": self.collection.value, "record_id": record_id},
        )
        return updated

    async def delete_record(self, record_id: RecordId) -> None:
        if not await self._store.delete(self.collection, record_id):
            raise self._not_found(record_id)
        logger.info(
            f"{self.collection.label} {record_id} deleted",
            extra={"collection": self.collection.value, "record_id": record_id},
        )
