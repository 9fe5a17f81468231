"""MongoDB implementation of DocumentStore.

Wraps a single collection of pymongo's async API. It's the default
implementation and satisfies the DocumentStore protocol.
"""

import logging
from typing import Any

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import DuplicateKeyError, PyMongoError

from content_cms.config import get_mongo_client, settings
from content_cms.errors import DuplicateDocumentError

logger = logging.getLogger(__name__)


class MongoDocumentStore:
    """MongoDB collection adapter.

    This class satisfies the DocumentStore protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(self, collection: AsyncCollection) -> None:
        """Initialize the store.

        Args:
            collection: The async collection holding content documents.
        """
        self._collection = collection

    @classmethod
    def create(
        cls,
        client: AsyncMongoClient | None = None,
        database: str | None = None,
        collection: str | None = None,
    ) -> "MongoDocumentStore":
        """Factory method to create MongoDocumentStore with defaults.

        Args:
            client: Mongo client. If None, creates one from settings.
            database: Database name. If None, uses settings.
            collection: Collection name. If None, uses settings.

        Returns:
            Configured MongoDocumentStore
        """
        client = client or get_mongo_client()
        db = client[database or settings.mongo_db_name]
        return cls(db[collection or settings.mongo_collection])

    async def ensure_indexes(self) -> None:
        """Ensure the unique slug index exists."""
        name = await self._collection.create_index("slug", unique=True)
        logger.info("Using index %s on %s", name, self._collection.full_name)

    async def find_one(
        self,
        filter: dict[str, Any],
        projection: dict[str, Any] | None = None,
    ) -> dict[str, Any] | None:
        return await self._collection.find_one(filter, projection)

    async def aggregate(self, pipeline: list[dict[str, Any]]) -> list[dict[str, Any]]:
        cursor = await self._collection.aggregate(pipeline)
        return await cursor.to_list()

    async def insert_one(self, document: dict[str, Any]) -> str:
        try:
            result = await self._collection.insert_one(document)
        except DuplicateKeyError as e:
            raise DuplicateDocumentError(str(e)) from e
        return str(result.inserted_id)

    async def update_one(
        self,
        filter: dict[str, Any],
        update: dict[str, Any],
        upsert: bool = False,
    ) -> int:
        try:
            result = await self._collection.update_one(filter, update, upsert=upsert)
        except DuplicateKeyError as e:
            raise DuplicateDocumentError(str(e)) from e
        return result.matched_count

    async def delete_one(self, filter: dict[str, Any]) -> int:
        result = await self._collection.delete_one(filter)
        return result.deleted_count

    async def health_check(self) -> bool:
        """Check if MongoDB is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            await self.client.admin.command("ping")
            return True
        except PyMongoError:
            logger.warning("MongoDB ping failed", exc_info=True)
            return False

    async def close(self) -> None:
        await self.client.close()

    @property
    def client(self) -> AsyncMongoClient:
        """Get the Mongo client."""
        return self._collection.database.client
