"""
Shared fixtures: in-memory substitutes for the document store and the cache.
"""

import copy
from datetime import UTC, datetime
from typing import Any

import pytest
from bson import ObjectId
from redis.exceptions import ConnectionError as RedisConnectionError

from content_cms.errors import DuplicateDocumentError
from content_cms.services import ContentService


def _matches(document: dict[str, Any], filter: dict[str, Any]) -> bool:
    for field, expected in filter.items():
        if isinstance(expected, dict) and "$in" in expected:
            if document.get(field) not in expected["$in"]:
                return False
        elif document.get(field) != expected:
            return False
    return True


class InMemoryDocumentStore:
    """DocumentStore substitute understanding the subset of MQL the service uses."""

    def __init__(self) -> None:
        self.documents: list[dict[str, Any]] = []
        self.calls: list[tuple[str, tuple]] = []
        self.fail_on: set[str] = set()
        self.healthy = True

    def _record(self, method: str, *args: Any) -> None:
        self.calls.append((method, args))
        if method in self.fail_on:
            raise RuntimeError(f"store unavailable during {method}")

    def calls_to(self, method: str) -> list[tuple]:
        return [args for name, args in self.calls if name == method]

    def _slug_taken(self, slug: str, other_than: Any = None) -> bool:
        return any(d.get("slug") == slug and d["_id"] != other_than for d in self.documents)

    def seed(self, *documents: dict[str, Any]) -> None:
        for document in documents:
            document = copy.deepcopy(document)
            document.setdefault("_id", ObjectId())
            self.documents.append(document)

    async def find_one(self, filter, projection=None):
        self._record("find_one", filter, projection)
        for document in self.documents:
            if _matches(document, filter):
                found = copy.deepcopy(document)
                if projection:
                    keep = {key for key, flag in projection.items() if flag} | {"_id"}
                    found = {key: value for key, value in found.items() if key in keep}
                return found
        return None

    async def aggregate(self, pipeline):
        self._record("aggregate", pipeline)
        results = list(self.documents)
        for stage in pipeline:
            if "$match" in stage:
                results = [d for d in results if _matches(d, stage["$match"])]
            elif "$skip" in stage:
                results = results[stage["$skip"]:]
            elif "$limit" in stage:
                results = results[: stage["$limit"]]
        return copy.deepcopy(results)

    async def insert_one(self, document):
        self._record("insert_one", document)
        if self._slug_taken(document.get("slug")):
            raise DuplicateDocumentError(f"duplicate slug {document.get('slug')}")
        stored = copy.deepcopy(document)
        stored["_id"] = ObjectId()
        self.documents.append(stored)
        return str(stored["_id"])

    async def update_one(self, filter, update, upsert=False):
        self._record("update_one", filter, update, upsert)
        for document in self.documents:
            if _matches(document, filter):
                changes = update.get("$set", {})
                if "slug" in changes and self._slug_taken(changes["slug"], document["_id"]):
                    raise DuplicateDocumentError(f"duplicate slug {changes['slug']}")
                document.update(copy.deepcopy(changes))
                for field, value in update.get("$push", {}).items():
                    document.setdefault(field, []).append(copy.deepcopy(value))
                return 1
        if upsert:
            await self.insert_one({**filter, **update.get("$set", {})})
        return 0

    async def delete_one(self, filter):
        self._record("delete_one", filter)
        for index, document in enumerate(self.documents):
            if _matches(document, filter):
                del self.documents[index]
                return 1
        return 0

    async def health_check(self):
        return self.healthy


class InMemoryContentCache:
    """ContentCache substitute with a controllable clock."""

    def __init__(self) -> None:
        self.now = 0.0
        self.entries: dict[str, tuple[str, float]] = {}
        self.ttls: dict[str, int] = {}
        self.calls: list[tuple[str, str]] = []
        self.fail_on: set[str] = set()
        self.healthy = True

    def _record(self, method: str, key: str) -> None:
        self.calls.append((method, key))
        if method in self.fail_on:
            raise RedisConnectionError(f"cache unavailable during {method}")

    def advance(self, seconds: float) -> None:
        self.now += seconds

    async def get(self, key):
        self._record("get", key)
        entry = self.entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self.now >= expires_at:
            del self.entries[key]
            return None
        return value

    async def set_with_expiry(self, key, value, ttl_seconds):
        self._record("set_with_expiry", key)
        self.entries[key] = (value, self.now + ttl_seconds)
        self.ttls[key] = ttl_seconds

    async def delete(self, key):
        self._record("delete", key)
        self.entries.pop(key, None)

    async def health_check(self):
        return self.healthy


def make_document(slug: str, status: str = "draft", **overrides: Any) -> dict[str, Any]:
    document = {
        "slug": slug,
        "title": f"Title of {slug}",
        "description": "A longer description",
        "subDesc": "Short description",
        "alt": "thumbnail",
        "thumbnailUrl": f"https://cdn.example.com/{slug}.png",
        "tags": ["news"],
        "related": [],
        "status": status,
        "created_at": datetime(2024, 1, 1, 12, 0, tzinfo=UTC),
        "created_by": "alice",
    }
    document.update(overrides)
    return document


@pytest.fixture
def store():
    """Create an empty in-memory document store."""
    return InMemoryDocumentStore()


@pytest.fixture
def cache():
    """Create an empty in-memory cache."""
    return InMemoryContentCache()


@pytest.fixture
def service(store, cache):
    """Create a content service over the in-memory substitutes."""
    return ContentService(store=store, cache=cache, cache_ttl=60, default_limit=30)


@pytest.fixture
def document_factory():
    """Build content documents in stored form."""
    return make_document
