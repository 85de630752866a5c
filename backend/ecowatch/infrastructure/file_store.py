"""JSON File Store - RecordStore backed by one pretty-printed JSON array per collection.

Invariants:
    - <data_dir>/<collection>.json holds the whole collection, newest record first
    - The data directory is created lazily on every access; a missing directory
      never fails a request
    - A missing file reads as an empty collection; a file that is not a JSON array
      of objects raises StorageError instead of being silently reset
    - Writes go to a sibling temp file then os.replace(): readers see the old or
      the new array, never a truncated one
    - Read-modify-write sequences hold a per-collection asyncio.Lock

Design Decisions:
    - Whole-file rewrite on every mutation: acceptable for low-volume moderation data
    - Disk IO in asyncio.to_thread: the event loop never blocks on the filesystem
    - The lock only serializes writers inside one process; multiple workers
      sharing a directory can still lose updates
    - UUID4 identifiers: timestamp-derived ids collide within the same tick
"""

import asyncio
import json
import logging
import os
import uuid
from pathlib import Path

from ecowatch.core.domain_types import Collection, RecordId, RecordStatus
from ecowatch.core.errors import ErrorContext, StorageError
from ecowatch.core.records import apply_status

logger = logging.getLogger(__name__)


class JsonFileStore:
    """Persists each collection as a JSON array file inside data_dir."""

    backend_name = "file"

    def __init__(self, data_dir: str | Path):
        self.data_dir = Path(data_dir)
        self._locks: dict[Collection, asyncio.Lock] = {}

    def path_for(self, collection: Collection) -> Path:
        return self.data_dir / f"{collection.value}.json"

    def _lock(self, collection: Collection) -> asyncio.Lock:
        lock = self._locks.get(collection)
        if lock is None:
            lock = self._locks[collection] = asyncio.Lock()
        return lock

    # ─── Blocking helpers (run in a worker thread) ─────────────────

    def _ensure_dir(self) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def _read_sync(self, collection: Collection) -> list[dict]:
        self._ensure_dir()
        path = self.path_for(collection)
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        if not raw.strip():
            return []
        data = json.loads(raw)
        if not isinstance(data, list):
            raise ValueError(f"{path.name} does not contain a JSON array")
        if not all(isinstance(item, dict) for item in data):
            raise ValueError(f"{path.name} contains entries that are not objects")
        return data

    def _write_sync(self, collection: Collection, records: list[dict]) -> None:
        self._ensure_dir()
        path = self.path_for(collection)
        tmp_path = path.with_name(f".{path.name}.{uuid.uuid4().hex}.tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(records, f, indent=2, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, path)
        finally:
            if tmp_path.exists():
                tmp_path.unlink()

    # ─── Async wrappers with error mapping ─────────────────────────

    async def _read(self, collection: Collection) -> list[dict]:
        try:
            return await asyncio.to_thread(self._read_sync, collection)
        except (OSError, ValueError) as e:
            logger.error(
                f"Failed to read {collection.value}: {e}",
                extra={"collection": collection.value, "backend": self.backend_name},
            )
            raise StorageError(str(e), "read", ErrorContext(collection=collection.value))

    async def _write(self, collection: Collection, records: list[dict]) -> None:
        try:
            await asyncio.to_thread(self._write_sync, collection, records)
        except (OSError, TypeError, ValueError) as e:
            logger.error(
                f"Failed to write {collection.value}: {e}",
                extra={"collection": collection.value, "backend": self.backend_name},
            )
            raise StorageError(str(e), "write", ErrorContext(collection=collection.value))

    # ─── RecordStore ───────────────────────────────────────────────

    async def list_all(self, collection: Collection) -> list[dict]:
        return await self._read(collection)

    async def get(self, collection: Collection, record_id: RecordId) -> dict | None:
        for record in await self._read(collection):
            if record.get("id") == record_id:
                return record
        return None

    async def insert(self, collection: Collection, record: dict) -> dict:
        stored = {"id": str(uuid.uuid4()), **record}
        async with self._lock(collection):
            records = await self._read(collection)
            records.insert(0, stored)
            await self._write(collection, records)
        return stored

    async def update_status(
        self,
        collection: Collection,
        record_id: RecordId,
        status: RecordStatus,
        updated_at: str,
    ) -> dict | None:
        async with self._lock(collection):
            records = await self._read(collection)
            for index, record in enumerate(records):
                if record.get("id") == record_id:
                    records[index] = apply_status(record, status, updated_at)
                    await self._write(collection, records)
                    return records[index]
        return None

    async def delete(self, collection: Collection, record_id: RecordId) -> bool:
        async with self._lock(collection):
            records = await self._read(collection)
            remaining = [r for r in records if r.get("id") != record_id]
            if len(remaining) == len(records):
                return False
            await self._write(collection, remaining)
        return True

    async def ping(self) -> dict:
        """Check the data directory is usable and report collection sizes."""
        def probe() -> dict:
            self._ensure_dir()
            if not os.access(self.data_dir, os.W_OK):
                raise PermissionError(f"{self.data_dir} is not writable")
            return {c.value: len(self._read_sync(c)) for c in Collection}

        try:
            counts = await asyncio.to_thread(probe)
        except (OSError, ValueError) as e:
            raise StorageError(str(e), "ping")
        return {
            "backend": self.backend_name,
            "connected": True,
            "data_dir": str(self.data_dir.resolve()),
            "collections": counts,
        }

    async def close(self) -> None:
        self._locks.clear()
