from datetime import datetime

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ASCENDING

from config.constants import LIST_LIMIT
from config.env import MONGO_URI


class _ServerTimestamp:
    """Placeholder replaced with the write time when a record is stored."""

    def __repr__(self):
        return "SERVER_TIMESTAMP"


SERVER_TIMESTAMP = _ServerTimestamp()

_client = None


def get_db():
    global _client
    if _client is None:
        if not MONGO_URI:
            raise RuntimeError("MONGODB_URI not set")
        _client = AsyncIOMotorClient(MONGO_URI)
    return _client.get_default_database()


def to_object_id(value):
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


def stamp(record: dict) -> dict:
    now = datetime.utcnow()
    return {
        key: now if value is SERVER_TIMESTAMP else value
        for key, value in record.items()
    }


class DocumentStore:
    """
    Thin record store over a Mongo database.
    Single-record reads and writes only; nothing here spans records.
    """

    def __init__(self, db):
        self.db = db

    async def add(self, collection: str, record: dict) -> str:
        result = await self.db[collection].insert_one(stamp(record))
        return str(result.inserted_id)

    async def get(self, collection: str, record_id) -> dict | None:
        oid = to_object_id(record_id)
        if oid is None:
            return None
        return await self.db[collection].find_one({"_id": oid})

    async def query(self, collection: str, filters: dict, limit: int | None = None) -> list[dict]:
        cursor = self.db[collection].find(filters)
        if limit:
            cursor = cursor.limit(limit)
        return [doc async for doc in cursor]

    async def list(self, collection: str, order_by: str, limit: int = LIST_LIMIT) -> list[dict]:
        cursor = self.db[collection].find().sort(order_by, ASCENDING).limit(limit)
        return [doc async for doc in cursor]

    async def set(self, collection: str, record_id, patch: dict, merge: bool = True) -> None:
        oid = to_object_id(record_id)
        if oid is None:
            raise ValueError(f"Invalid record id: {record_id}")

        if merge:
            # an empty $set is rejected by the server
            if not patch:
                return
            await self.db[collection].update_one(
                {"_id": oid},
                {"$set": stamp(patch)},
                upsert=True,
            )
        else:
            await self.db[collection].replace_one({"_id": oid}, stamp(patch), upsert=True)

    async def delete(self, collection: str, record_id) -> None:
        oid = to_object_id(record_id)
        if oid is None:
            return
        await self.db[collection].delete_one({"_id": oid})

    async def ping(self) -> None:
        await self.db.command("ping")


def get_store() -> DocumentStore:
    return DocumentStore(get_db())
