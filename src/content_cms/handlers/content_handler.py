"""HTTP handlers for content operations.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes, validation, and error handling.
"""

import logging

from fastapi import HTTPException, status

from content_cms.dto import (
    ContentCreatedResponse,
    ContentItem,
    ContentListResponse,
    ContentResponse,
    CreateContentRequest,
    HealthCheckResponse,
    MessageResponse,
    UpdateContentRequest,
)
from content_cms.errors import ContentConflictError, ContentNotFoundError
from content_cms.services import ContentService

logger = logging.getLogger(__name__)


def _internal_error(action: str) -> HTTPException:
    logger.exception("Failed to %s", action)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error",
    )


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Content not found")


def _conflict(error: ContentConflictError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail=f"Content {error.slug} already exists",
    )


def _require_slug(slug: str) -> str:
    if not slug.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid slug")
    return slug


class ContentHandler:
    """HTTP handlers for content operations.

    This handler delegates the access policy to ContentService
    and handles HTTP-specific concerns like:
    - Converting entities to DTOs
    - Setting appropriate status codes
    - Mapping domain errors and unexpected failures to responses

    Example:
        ```python
        handler = ContentHandler(content_service=service)

        @app.get("/contents/{slug}", response_model=ContentResponse)
        async def get_content(slug: str):
            return await handler.get_content(slug)
        ```
    """

    def __init__(self, content_service: ContentService) -> None:
        """Initialize the content handler.

        Args:
            content_service: The content service (required).
        """
        self._contents = content_service

    async def list_contents(
        self,
        statuses: list[str] | None = None,
        limit: str | None = None,
        page: str | None = None,
    ) -> ContentListResponse:
        """Handle GET /contents requests.

        A single ``status`` query value is forwarded as a string, repeated
        values as a list.
        """
        status_filter: str | list[str] | None = statuses
        if statuses is not None and len(statuses) == 1:
            status_filter = statuses[0]

        try:
            contents = await self._contents.list_contents(
                status=status_filter,
                limit=limit,
                page=page,
            )
        except Exception as e:
            raise _internal_error("list contents") from e

        return ContentListResponse(
            success=True,
            message="Successfully get contents.",
            data=[ContentItem.from_entity(content) for content in contents],
        )

    async def get_content(self, slug: str) -> ContentResponse:
        """Handle GET /contents/{slug} requests."""
        slug = _require_slug(slug)
        try:
            content = await self._contents.get_content(slug)
        except ContentNotFoundError as e:
            raise _not_found() from e
        except Exception as e:
            raise _internal_error(f"get content {slug}") from e

        return ContentResponse(
            success=True,
            message=f"Successfully get {slug} data.",
            data=ContentItem.from_entity(content),
        )

    async def create_content(self, request: CreateContentRequest) -> ContentCreatedResponse:
        """Handle POST /contents requests."""
        try:
            inserted_id = await self._contents.create_content(request.to_document())
        except ContentConflictError as e:
            raise _conflict(e) from e
        except Exception as e:
            raise _internal_error(f"create content {request.slug}") from e

        return ContentCreatedResponse(
            success=True,
            message=f"Successfully create {request.slug} data",
            id=inserted_id,
        )

    async def update_content(self, slug: str, request: UpdateContentRequest) -> MessageResponse:
        """Handle PATCH /contents/{slug} requests."""
        slug = _require_slug(slug)
        try:
            await self._contents.update_content(slug, request.changes(), by=request.by)
        except ContentNotFoundError as e:
            raise _not_found() from e
        except ContentConflictError as e:
            raise _conflict(e) from e
        except Exception as e:
            raise _internal_error(f"update content {slug}") from e

        return MessageResponse(success=True, message=f"Successfully update {slug} data")

    async def delete_content(self, slug: str) -> MessageResponse:
        """Handle DELETE /contents/{slug} requests."""
        slug = _require_slug(slug)
        try:
            await self._contents.delete_content(slug)
        except ContentNotFoundError as e:
            raise _not_found() from e
        except Exception as e:
            raise _internal_error(f"delete content {slug}") from e

        return MessageResponse(success=True, message=f"Successfully delete {slug} data")

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        health = await self._contents.is_healthy()
        healthy = health["store"] and health["cache"]

        return HealthCheckResponse(
            status="healthy" if healthy else "unhealthy",
            store_healthy=health["store"],
            cache_healthy=health["cache"],
        )
