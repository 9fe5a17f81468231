"""Content service: the cache-aside access policy for contents.

Single-content reads go through the cache, listings go straight to the
store, and every write drops the affected cache entry after the store
has accepted it. The cache is a memoized projection of the store with
bounded staleness, never a source of truth.
"""

import json
import logging
from collections.abc import Iterable
from datetime import UTC, datetime
from typing import Any

from content_cms.config import settings
from content_cms.entities import ALL_STATUSES, ContentEntity, ContentStatus
from content_cms.errors import (
    ContentConflictError,
    ContentNotFoundError,
    DuplicateDocumentError,
)
from content_cms.protocols import ContentCache, DocumentStore

logger = logging.getLogger(__name__)

CACHE_KEY_PREFIX = "content:"

# Largest page size or page number accepted from callers
MAX_PAGE_VALUE = 2**31 - 1

# Fields owned by the service, never taken from an update payload
PROTECTED_FIELDS = frozenset({"_id", "created_at", "updated"})


def cache_key(slug: str) -> str:
    """Return the cache key for a slug."""
    return f"{CACHE_KEY_PREFIX}{slug}"


def resolve_statuses(status: str | Iterable[str] | None) -> list[str]:
    """Resolve a status filter to the list of statuses to match.

    - None: every known status
    - a single string: itself if known, otherwise every known status
    - several values: only the known ones (possibly none)
    """
    if status is None:
        return list(ALL_STATUSES)
    if isinstance(status, str):
        value = status.value if isinstance(status, ContentStatus) else status
        return [value] if value in ALL_STATUSES else list(ALL_STATUSES)

    values = (s.value if isinstance(s, ContentStatus) else s for s in status)
    return list(dict.fromkeys(v for v in values if v in ALL_STATUSES))


def status_match(statuses: list[str]) -> dict[str, Any]:
    """Build the ``$match`` body for resolved statuses.

    No predicate is emitted when nothing or everything is selected.
    """
    if statuses and set(statuses) != set(ALL_STATUSES):
        return {"status": {"$in": statuses}}
    return {}


def parse_int(
    value: Any,
    default: int,
    minimum: int = 0,
    maximum: int = MAX_PAGE_VALUE,
) -> int:
    """Leniently read a number, falling back to ``default``.

    Accepts ints, integral floats and numeric strings. Anything else,
    or a value outside ``minimum``..``maximum``, yields ``default``.
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        number = value
    elif isinstance(value, float) and value.is_integer():
        number = int(value)
    elif isinstance(value, str):
        try:
            number = int(value.strip())
        except ValueError:
            return default
    else:
        return default
    return number if minimum <= number <= maximum else default


def _json_default(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class ContentService:
    """Core content access service.

    This service depends on PROTOCOLS, not concrete implementations:
    - DocumentStore: source of truth (MongoDB by default)
    - ContentCache: volatile memo for single-content reads (Redis by default)

    It keeps no mutable state of its own and can be shared by concurrent
    requests. There are no retries: a failing store call, or a failing
    cache read, propagates to the caller. Cache writes and invalidations
    are best-effort and only logged when they fail.

    Example:
        ```python
        from content_cms.repositories import MongoDocumentStore, RedisContentCache
        from content_cms.services import ContentService

        service = ContentService.create(
            store=MongoDocumentStore.create(),
            cache=RedisContentCache.create(),
        )
        content = await service.get_content("hello-world")
        ```
    """

    def __init__(
        self,
        store: DocumentStore,
        cache: ContentCache,
        cache_ttl: int | None = None,
        default_limit: int | None = None,
    ) -> None:
        """Initialize the content service.

        Args:
            store: Document store holding the contents (required).
            cache: Cache used for single-content reads (required).
            cache_ttl: Expiry of cache entries in seconds. Defaults to settings.
            default_limit: Page size when none is given. Defaults to settings.
        """
        self._store = store
        self._cache = cache
        self._ttl = cache_ttl or settings.content_cache_ttl
        self._default_limit = default_limit or settings.content_page_limit

    @classmethod
    def create(
        cls,
        store: DocumentStore,
        cache: ContentCache,
        cache_ttl: int | None = None,
        default_limit: int | None = None,
    ) -> "ContentService":
        """Factory method to create ContentService with settings defaults."""
        return cls(
            store=store,
            cache=cache,
            cache_ttl=cache_ttl,
            default_limit=default_limit,
        )

    async def get_content(self, slug: str) -> ContentEntity:
        """Get a content by slug, reading through the cache.

        Business logic:
        1. Return the cached snapshot if there is one (the store is not queried)
        2. Otherwise load the document from the store
        3. Populate the cache with the document, best-effort

        Args:
            slug: The content slug

        Returns:
            The content

        Raises:
            ContentNotFoundError: If no content has this slug
        """
        key = cache_key(slug)

        cached = await self._cache.get(key)
        if cached:
            entity = self._decode(key, cached)
            if entity is not None:
                logger.debug("Cache hit for %s", key)
                return entity

        logger.debug("Cache miss for %s", key)
        document = await self._store.find_one({"slug": slug})
        if document is None:
            raise ContentNotFoundError(slug)

        entity = ContentEntity.from_document(document)
        await self._populate(key, entity)
        return entity

    async def list_contents(
        self,
        status: str | Iterable[str] | None = None,
        limit: Any = None,
        page: Any = None,
    ) -> list[ContentEntity]:
        """List contents from the store, filtered by status and paginated.

        This path never touches the cache.

        Args:
            status: One status, several statuses, or None for all
            limit: Page size; invalid values fall back to the default
            page: Zero-based page number; invalid values fall back to 0

        Returns:
            At most ``limit`` contents after skipping ``page * limit``
        """
        limit = parse_int(limit, self._default_limit, minimum=1)
        page = parse_int(page, 0, minimum=0)
        statuses = resolve_statuses(status)

        pipeline = [
            {"$match": status_match(statuses)},
            {"$skip": page * limit},
            {"$limit": limit},
        ]
        documents = await self._store.aggregate(pipeline)
        return [ContentEntity.from_document(document) for document in documents]

    async def create_content(self, document: dict[str, Any]) -> str:
        """Insert a new content.

        ``created_at`` is stamped here, replacing any value in ``document``.
        The cache is left alone since nothing can be cached for a new slug.

        Args:
            document: Content fields in document form, without ``_id``

        Returns:
            The identifier of the new document

        Raises:
            ContentConflictError: If the slug is already taken
        """
        slug = document["slug"]

        exists = await self._store.find_one({"slug": slug}, {"_id": 1})
        if exists is not None:
            raise ContentConflictError(slug)

        new_document = {key: value for key, value in document.items() if key != "_id"}
        new_document["created_at"] = datetime.now(UTC)

        try:
            inserted_id = await self._store.insert_one(new_document)
        except DuplicateDocumentError as e:
            # Lost a race with a concurrent create of the same slug
            raise ContentConflictError(slug) from e

        logger.info("Created content %s (%s)", slug, inserted_id)
        return inserted_id

    async def update_content(self, slug: str, changes: dict[str, Any], by: str) -> None:
        """Merge ``changes`` into a content and record who changed it.

        The merge and the history append are one store operation. The
        cache entry is dropped afterwards; if that fails the entry stays
        stale until it expires.

        Args:
            slug: Slug of the content to update
            changes: Fields to set, in document form; other fields are untouched
            by: Identifier of the actor making the change

        Raises:
            ContentNotFoundError: If no content has this slug
            ContentConflictError: If ``changes`` renames to a slug already in use
        """
        existing = await self._store.find_one({"slug": slug}, {"_id": 1})
        if existing is None:
            raise ContentNotFoundError(slug)

        fields = {key: value for key, value in changes.items() if key not in PROTECTED_FIELDS}

        new_slug = fields.get("slug")
        renamed = bool(new_slug) and new_slug != slug
        if renamed:
            taken = await self._store.find_one({"slug": new_slug}, {"_id": 1})
            if taken is not None:
                raise ContentConflictError(new_slug)

        update: dict[str, Any] = {"$push": {"updated": {"at": datetime.now(UTC), "by": by}}}
        if fields:
            update["$set"] = fields

        try:
            await self._store.update_one({"_id": existing["_id"]}, update, upsert=False)
        except DuplicateDocumentError as e:
            raise ContentConflictError(new_slug or slug) from e

        logger.info("Updated content %s by %s", slug, by)
        await self._invalidate(cache_key(slug))
        if renamed:
            await self._invalidate(cache_key(new_slug))

    async def delete_content(self, slug: str) -> None:
        """Delete a content and drop its cache entry.

        Args:
            slug: Slug of the content to delete

        Raises:
            ContentNotFoundError: If no content has this slug
        """
        existing = await self._store.find_one({"slug": slug}, {"_id": 1})
        if existing is None:
            raise ContentNotFoundError(slug)

        await self._store.delete_one({"slug": slug})
        logger.info("Deleted content %s", slug)
        await self._invalidate(cache_key(slug))

    async def is_healthy(self) -> dict[str, bool]:
        """Report reachability of the store and the cache."""
        return {
            "store": await self._store.health_check(),
            "cache": await self._cache.health_check(),
        }

    def _decode(self, key: str, raw: str) -> ContentEntity | None:
        try:
            return ContentEntity.from_document(json.loads(raw))
        except (ValueError, KeyError, TypeError, AttributeError):
            logger.warning("Ignoring undecodable cache entry %s", key, exc_info=True)
            return None

    def _encode(self, entity: ContentEntity) -> str:
        return json.dumps(entity.to_document(), default=_json_default)

    async def _populate(self, key: str, entity: ContentEntity) -> None:
        # Best-effort: the read already has its result
        try:
            await self._cache.set_with_expiry(key, self._encode(entity), self._ttl)
        except Exception:
            logger.warning("Failed to populate cache entry %s", key, exc_info=True)

    async def _invalidate(self, key: str) -> None:
        # Best-effort: the store write has already committed
        try:
            await self._cache.delete(key)
        except Exception:
            logger.warning(
                "Failed to invalidate cache entry %s; it may be stale until it expires",
                key,
                exc_info=True,
            )

    @property
    def cache_ttl(self) -> int:
        """Get the cache entry expiry in seconds."""
        return self._ttl

    @property
    def default_limit(self) -> int:
        """Get the default page size."""
        return self._default_limit

    @property
    def store(self) -> DocumentStore:
        """Get the underlying document store (for testing)."""
        return self._store

    @property
    def cache(self) -> ContentCache:
        """Get the underlying cache (for testing)."""
        return self._cache
