"""Boundary Protocols - the storage contract between route logic and persistence.

Invariants:
    - Services and routes depend on RecordStore only, never on a concrete backend
    - list_all returns newest-created records first
    - A read following a successful write always reflects it (no caching layer)
    - update_status mutates only `status` and `updatedAt`
    - Every IO failure surfaces as StorageError (core/errors.py)

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
    - Records cross the boundary as plain dicts keyed by their JSON field names,
      with the identifier always under "id"
"""

from typing import Protocol

from ecowatch.core.domain_types import Collection, RecordId, RecordStatus


class RecordStore(Protocol):
    """Contract for record persistence - implemented by infrastructure."""
    backend_name: str

    async def list_all(self, collection: Collection) -> list[dict]: ...
    async def get(self, collection: Collection, record_id: RecordId) -> dict | None: ...
    async def insert(self, collection: Collection, record: dict) -> dict: ...
    async def update_status(
        self,
        collection: Collection,
        record_id: RecordId,
        status: RecordStatus,
        updated_at: str,
    ) -> dict | None: ...
    async def delete(self, collection: Collection, record_id: RecordId) -> bool: ...
    async def ping(self) -> dict: ...
    async def close(self) -> None: ...
