"""MongoDB access shared by every cache-backed tool.

One `AsyncMongoClient` per process, created lazily with a bounded connect
retry. Tools never hold a client themselves; they go through
`DocumentCache`, which implements the find-or-upsert cache-aside pattern.
"""

import asyncio
from typing import Any

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from toolbelt.core.configs import app_config
from toolbelt.core.deps import logger


class _MongoHolder:
    """Holder for the singleton Mongo client and database."""

    client: AsyncMongoClient | None = None
    database: AsyncDatabase | None = None


async def connect_with_retry(uri: str, attempts: int = 5) -> AsyncMongoClient:
    """Connect to MongoDB, waiting `attempt` seconds between failed tries.

    Raises:
        PyMongoError: When the last attempt fails
    """
    for attempt in range(1, attempts + 1):
        client: AsyncMongoClient = AsyncMongoClient(uri)
        try:
            await client.aconnect()
            return client
        except PyMongoError as e:
            await client.close()
            logger.warning('Mongo connection attempt failed', attempt=attempt, error=str(e))
            if attempt >= attempts:
                raise
            await asyncio.sleep(attempt)
    raise RuntimeError('Connection attempts exceeded.')


async def get_database() -> AsyncDatabase:
    """Get the configured database, connecting on first use."""
    if _MongoHolder.database is None:
        if not app_config.DB_CLUSTER or not app_config.DB_NAME:
            raise ValueError('DB_CLUSTER and DB_NAME must be set to use the cache.')
        _MongoHolder.client = await connect_with_retry(app_config.mongo_uri, app_config.DB_CONNECT_ATTEMPTS)
        _MongoHolder.database = _MongoHolder.client[app_config.DB_NAME]
    return _MongoHolder.database


async def get_collection(name: str) -> AsyncCollection:
    database = await get_database()
    return database[name]


async def close_database() -> None:
    """Close the Mongo client if one was opened."""
    if _MongoHolder.client is not None:
        await _MongoHolder.client.close()
    _MongoHolder.client = None
    _MongoHolder.database = None


class DocumentCache:
    """Cache-aside access to one collection, keyed by a query filter.

    Stored documents are returned without Mongo's `_id`. Writes are upserts
    so concurrent writers simply overwrite each other.
    """

    def __init__(self, collection_name: str) -> None:
        self.collection_name = collection_name

    async def find(self, query: dict[str, Any]) -> dict[str, Any] | None:
        collection = await get_collection(self.collection_name)
        document = await collection.find_one(query)
        if document is None:
            return None
        document.pop('_id', None)
        return document

    async def upsert(self, query: dict[str, Any], data: dict[str, Any]) -> None:
        collection = await get_collection(self.collection_name)
        await collection.update_one(query, {'$set': data}, upsert=True)
