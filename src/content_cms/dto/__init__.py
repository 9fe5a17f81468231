"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import ActorStampPayload, CreateContentRequest, UpdateContentRequest
from .responses import (
    ActorStampItem,
    ContentCreatedResponse,
    ContentItem,
    ContentListResponse,
    ContentResponse,
    HealthCheckResponse,
    MessageResponse,
)

__all__ = [
    "ActorStampPayload",
    "CreateContentRequest",
    "UpdateContentRequest",
    "ActorStampItem",
    "ContentItem",
    "MessageResponse",
    "ContentResponse",
    "ContentListResponse",
    "ContentCreatedResponse",
    "HealthCheckResponse",
]
