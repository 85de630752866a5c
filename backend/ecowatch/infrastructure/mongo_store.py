"""MongoDB Store - RecordStore backed by a MongoDB database via pymongo's async client.

Invariants:
    - One MongoDB collection per Collection enum value, inside a single database
    - Identifiers are ObjectIds, exposed to callers as hex strings under "id";
      "_id" never leaves this module
    - list_all sorts by createdAt descending, tie-broken by _id descending
    - Ids that are not valid ObjectIds resolve to "not found", never to an error
    - Every PyMongoError is mapped to StorageError

Design Decisions:
    - AsyncMongoClient (pymongo >= 4.13) over Motor: first-party async driver
    - find_one_and_update for status changes: a single atomic document operation,
      no read-modify-write race
    - connect() pings once so an unreachable server or a malformed URI aborts startup
"""

import logging

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import AsyncMongoClient, DESCENDING, ReturnDocument
from pymongo.errors import PyMongoError

from ecowatch.core.domain_types import Collection, RecordId, RecordStatus
from ecowatch.core.errors import ErrorContext, StorageError

logger = logging.getLogger(__name__)


def to_object_id(record_id: str) -> ObjectId | None:
    try:
        return ObjectId(record_id)
    except (InvalidId, TypeError):
        return None


def to_record(document: dict) -> dict:
    """Convert a stored document into the wire shape ("_id" → "id")."""
    record = {"id": str(document["_id"])}
    record.update({k: v for k, v in document.items() if k != "_id"})
    return record


class MongoStore:
    """Persists records in MongoDB collections."""

    backend_name = "mongodb"

    def __init__(self, client: AsyncMongoClient, database_name: str):
        self._client = client
        self._db = client[database_name]
        self.database_name = database_name

    @classmethod
    async def connect(cls, uri: str, database_name: str) -> "MongoStore":
        """Create a client and verify the server answers a ping."""
        try:
            client = AsyncMongoClient(uri)
        except PyMongoError as e:
            logger.error(f"Invalid MongoDB URI: {e}", extra={"backend": cls.backend_name})
            raise StorageError(f"invalid MongoDB URI ({e})", "connect")
        store = cls(client, database_name)
        try:
            await store.ping()
        except StorageError:
            await client.close()
            raise
        logger.info(
            f"Connected to MongoDB database '{database_name}'",
            extra={"backend": cls.backend_name},
        )
        return store

    def _collection(self, collection: Collection):
        return self._db[collection.value]

    def _failure(self, e: Exception, operation: str, collection: Collection,
                 record_id: str | None = None) -> StorageError:
        logger.error(
            f"MongoDB {operation} on {collection.value} failed: {e}",
            extra={
                "collection": collection.value, "record_id": record_id,
                "backend": self.backend_name, "operation": operation,
            },
        )
        return StorageError(
            "Database operation failed", operation,
            ErrorContext(collection=collection.value, record_id=record_id),
        )

    async def list_all(self, collection: Collection) -> list[dict]:
        try:
            cursor = self._collection(collection).find({}).sort(
                [("createdAt", DESCENDING), ("_id", DESCENDING)],
            )
            documents = await cursor.to_list(length=None)
        except PyMongoError as e:
            raise self._failure(e, "list", collection)
        return [to_record(d) for d in documents]

    async def get(self, collection: Collection, record_id: RecordId) -> dict | None:
        oid = to_object_id(record_id)
        if oid is None:
            return None
        try:
            document = await self._collection(collection).find_one({"_id": oid})
        except PyMongoError as e:
            raise self._failure(e, "get", collection, record_id)
        return to_record(document) if document else None

    async def insert(self, collection: Collection, record: dict) -> dict:
        document = {k: v for k, v in record.items() if k != "id"}
        try:
            result = await self._collection(collection).insert_one(document)
        except PyMongoError as e:
            raise self._failure(e, "insert", collection)
        return to_record({**document, "_id": result.inserted_id})

    async def update_status(
        self,
        collection: Collection,
        record_id: RecordId,
        status: RecordStatus,
        updated_at: str,
    ) -> dict | None:
        oid = to_object_id(record_id)
        if oid is None:
            return None
        try:
            document = await self._collection(collection).find_one_and_update(
                {"_id": oid},
                {"$set": {"status": status.value, "updatedAt": updated_at}},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise self._failure(e, "update", collection, record_id)
        return to_record(document) if document else None

    async def delete(self, collection: Collection, record_id: RecordId) -> bool:
        oid = to_object_id(record_id)
        if oid is None:
            return False
        try:
            result = await self._collection(collection).delete_one({"_id": oid})
        except PyMongoError as e:
            raise self._failure(e, "delete", collection, record_id)
        return result.deleted_count > 0

    async def ping(self) -> dict:
        try:
            await self._client.admin.command("ping")
        except PyMongoError as e:
            logger.error(f"MongoDB ping failed: {e}", extra={"backend": self.backend_name})
            raise StorageError("MongoDB is unreachable", "ping")
        return {
            "backend": self.backend_name,
            "connected": True,
            "database": self.database_name,
        }

    async def close(self) -> None:
        await self._client.close()
