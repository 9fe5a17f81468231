"""Response DTOs for API endpoints.

Every response uses the ``{"success", "message", "data"}`` envelope.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from content_cms.entities import ActorStamp, ContentEntity


class ActorStampItem(BaseModel):
    """Timestamp plus actor."""

    at: datetime
    by: str

    @classmethod
    def from_entity(cls, stamp: ActorStamp) -> "ActorStampItem":
        return cls(at=stamp.at, by=stamp.by)


class ContentItem(BaseModel):
    """A content, serialized with the stored document's field names."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="Document store identifier")
    slug: str
    title: str
    description: str
    sub_desc: str = Field(..., alias="subDesc")
    alt: str
    thumbnail_url: str = Field(..., alias="thumbnailUrl")
    tags: list[str]
    related: list[str]
    status: str
    created_at: datetime
    created_by: str
    published: ActorStampItem | None = None
    updated: list[ActorStampItem] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, entity: ContentEntity) -> "ContentItem":
        return cls(
            id=entity.id,
            slug=entity.slug,
            title=entity.title,
            description=entity.description,
            sub_desc=entity.sub_desc,
            alt=entity.alt,
            thumbnail_url=entity.thumbnail_url,
            tags=list(entity.tags),
            related=list(entity.related),
            status=entity.status.value,
            created_at=entity.created_at,
            created_by=entity.created_by,
            published=ActorStampItem.from_entity(entity.published) if entity.published else None,
            updated=[ActorStampItem.from_entity(stamp) for stamp in entity.updated],
        )


class MessageResponse(BaseModel):
    """Response DTO for operations without a payload."""

    success: bool = Field(..., description="Whether the operation succeeded")
    message: str = Field(..., description="Human-readable status message")


class ContentResponse(MessageResponse):
    """Response DTO for a single content."""

    data: ContentItem


class ContentListResponse(MessageResponse):
    """Response DTO for a page of contents."""

    data: list[ContentItem] = Field(default_factory=list)


class ContentCreatedResponse(MessageResponse):
    """Response DTO for content creation."""

    id: str = Field(..., description="Identifier of the new document")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    store_healthy: bool = Field(..., description="Whether the document store is reachable")
    cache_healthy: bool = Field(..., description="Whether the cache backend is reachable")
