"""Content domain entity."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any


class ContentStatus(str, Enum):
    """Editorial status of a content item."""

    PENDING = "pending"
    CORRECTION = "correction"
    DRAFT = "draft"
    PUBLISHED = "published"
    REVIEWED = "reviewed"


ALL_STATUSES: tuple[str, ...] = tuple(status.value for status in ContentStatus)


def parse_datetime(value: datetime | str) -> datetime:
    """Normalise a stored or cached timestamp to an aware UTC datetime.

    The store hands back ``datetime`` objects, the cache hands back
    ISO-8601 strings (older entries carry a trailing ``Z``).
    """
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    elif not isinstance(value, datetime):
        raise TypeError(f"Expected a datetime or ISO-8601 string, got {type(value).__name__}")
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


@dataclass(frozen=True)
class ActorStamp:
    """A point in time together with the actor responsible for it.

    Attributes:
        at: When the action happened
        by: Identifier of the actor
    """

    at: datetime
    by: str

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "ActorStamp":
        return cls(at=parse_datetime(document["at"]), by=str(document["by"]))

    def to_document(self) -> dict[str, Any]:
        return {"at": self.at, "by": self.by}


@dataclass(frozen=True)
class ContentEntity:
    """Domain entity for a content item.

    This is an internal representation used by services and repositories.
    For API contracts, use the DTO classes from the dto package.

    Attributes:
        id: Opaque document store identifier
        slug: Unique human-readable key, also used as the cache key
        title: Content title
        description: Long description
        sub_desc: Short description (``subDesc`` in documents)
        alt: Alternative text for the thumbnail
        thumbnail_url: Media reference (``thumbnailUrl`` in documents)
        tags: Tag set
        related: Identifiers of related contents
        status: Editorial status
        created_at: Insertion time
        created_by: Author identifier
        published: Publication stamp, absent if never published
        updated: Append-only history of update stamps, oldest first
    """

    id: str
    slug: str
    title: str
    status: ContentStatus
    created_at: datetime
    created_by: str
    description: str = ""
    sub_desc: str = ""
    alt: str = ""
    thumbnail_url: str = ""
    tags: list[str] = field(default_factory=list)
    related: list[str] = field(default_factory=list)
    published: ActorStamp | None = None
    updated: list[ActorStamp] = field(default_factory=list)

    @property
    def is_published(self) -> bool:
        return self.published is not None

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "ContentEntity":
        """Build an entity from a store document or a decoded cache snapshot."""
        published = document.get("published")
        return cls(
            id=str(document["_id"]),
            slug=document["slug"],
            title=document.get("title", ""),
            status=ContentStatus(document["status"]),
            created_at=parse_datetime(document["created_at"]),
            created_by=document.get("created_by", ""),
            description=document.get("description", ""),
            sub_desc=document.get("subDesc", ""),
            alt=document.get("alt", ""),
            thumbnail_url=document.get("thumbnailUrl", ""),
            tags=list(document.get("tags") or []),
            related=[str(item) for item in document.get("related") or []],
            published=ActorStamp.from_document(published) if published else None,
            updated=[ActorStamp.from_document(stamp) for stamp in document.get("updated") or []],
        )

    def to_document(self) -> dict[str, Any]:
        """Return the document shape, using the store's field names."""
        document: dict[str, Any] = {
            "_id": self.id,
            "slug": self.slug,
            "title": self.title,
            "description": self.description,
            "subDesc": self.sub_desc,
            "alt": self.alt,
            "thumbnailUrl": self.thumbnail_url,
            "tags": list(self.tags),
            "related": list(self.related),
            "status": self.status.value,
            "created_at": self.created_at,
            "created_by": self.created_by,
        }
        if self.published is not None:
            document["published"] = self.published.to_document()
        if self.updated:
            document["updated"] = [stamp.to_document() for stamp in self.updated]
        return document
