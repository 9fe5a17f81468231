"""Content CMS - content management API with a cache-aside read path.

Single-content reads are served from Redis when possible and fall back to
MongoDB, listings always query MongoDB, and writes invalidate the cached
entry of the slug they touch.

Layers:
    - protocols: Interface contracts (DocumentStore, ContentCache)
    - repositories: Data access implementations (MongoDB, Redis)
    - services: Content access policy
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from content_cms.repositories import MongoDocumentStore, RedisContentCache
    from content_cms.services import ContentService

    service = ContentService.create(
        store=MongoDocumentStore.create(),
        cache=RedisContentCache.create(),
    )
    ```

For HTTP API:
    ```python
    from content_cms.api.app import app
    ```
"""

from content_cms.config import get_mongo_client, get_redis_client, settings
from content_cms.dto import CreateContentRequest, UpdateContentRequest
from content_cms.entities import ActorStamp, ContentEntity, ContentStatus
from content_cms.errors import ContentConflictError, ContentError, ContentNotFoundError
from content_cms.handlers import ContentHandler
from content_cms.protocols import ContentCache, DocumentStore
from content_cms.repositories import MongoDocumentStore, RedisContentCache
from content_cms.services import ContentService

__all__ = [
    # Configuration
    "settings",
    "get_mongo_client",
    "get_redis_client",
    # Protocols (interfaces)
    "ContentCache",
    "DocumentStore",
    # Services (access policy)
    "ContentService",
    # Handlers (HTTP)
    "ContentHandler",
    # Repositories (data access)
    "MongoDocumentStore",
    "RedisContentCache",
    # Entities (domain models)
    "ActorStamp",
    "ContentEntity",
    "ContentStatus",
    # Errors
    "ContentError",
    "ContentNotFoundError",
    "ContentConflictError",
    # DTOs (API contracts)
    "CreateContentRequest",
    "UpdateContentRequest",
]
