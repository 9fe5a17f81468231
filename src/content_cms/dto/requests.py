"""Request DTOs for API endpoints."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from content_cms.entities import ContentStatus


class ActorStampPayload(BaseModel):
    """A timestamp plus the actor responsible for it."""

    at: datetime = Field(..., description="When the action happened (ISO-8601)")
    by: str = Field(..., description="Actor identifier", min_length=1)


class CreateContentRequest(BaseModel):
    """Request DTO for creating a content.

    Wire names follow the stored document format (``subDesc``,
    ``thumbnailUrl``). ``created_at`` is stamped by the server.
    """

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    slug: str = Field(..., description="Unique human-readable key", min_length=1, max_length=200)
    title: str = Field(..., description="Content title", min_length=1)
    description: str = Field(..., description="Long description")
    sub_desc: str = Field(..., alias="subDesc", description="Short description")
    alt: str = Field(..., description="Alternative text for the thumbnail")
    thumbnail_url: str = Field(..., alias="thumbnailUrl", description="Thumbnail media reference")
    tags: list[str] = Field(..., description="Tags")
    related: list[str] = Field(..., description="Identifiers of related contents")
    status: ContentStatus = Field(..., description="Editorial status")
    created_by: str = Field(..., description="Author identifier", min_length=1)
    published: ActorStampPayload | None = Field(
        None,
        description="Publication stamp, omit if the content was never published",
    )

    def to_document(self) -> dict[str, Any]:
        """Return the fields in document form."""
        return self.model_dump(by_alias=True, exclude_none=True)


class UpdateContentRequest(BaseModel):
    """Request DTO for a partial content update.

    Only fields present in the request are applied. ``by`` identifies the
    actor and is recorded in the update history.
    """

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    by: str = Field(..., description="Actor making the change", min_length=1)
    slug: str | None = Field(None, description="New slug", min_length=1, max_length=200)
    title: str | None = Field(None, description="Content title", min_length=1)
    description: str | None = None
    sub_desc: str | None = Field(None, alias="subDesc")
    alt: str | None = None
    thumbnail_url: str | None = Field(None, alias="thumbnailUrl")
    tags: list[str] | None = None
    related: list[str] | None = None
    status: ContentStatus | None = None
    created_by: str | None = Field(None, min_length=1)
    published: ActorStampPayload | None = None

    def changes(self) -> dict[str, Any]:
        """Return the fields that were sent, in document form, without ``by``."""
        return self.model_dump(
            by_alias=True,
            exclude_unset=True,
            exclude_none=True,
            exclude={"by"},
        )
