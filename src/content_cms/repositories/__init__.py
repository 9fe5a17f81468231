"""Repository layer for data access.

This layer puts the external dependencies (MongoDB, Redis) behind the
protocol-based interfaces from the protocols package. The repositories are
protocol-based (structural typing), not inheritance-based.
"""

from content_cms.protocols import ContentCache, DocumentStore

from .mongo_document_store import MongoDocumentStore
from .redis_content_cache import RedisContentCache

__all__ = [
    "ContentCache",
    "DocumentStore",
    "MongoDocumentStore",
    "RedisContentCache",
]
