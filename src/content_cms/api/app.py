from typing import Annotated, Any

from fastapi import FastAPI, Query, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.requests import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from content_cms.api.dependencies import HandlerDep, lifespan
from content_cms.config import settings
from content_cms.dto import (
    ContentCreatedResponse,
    ContentListResponse,
    ContentResponse,
    CreateContentRequest,
    HealthCheckResponse,
    MessageResponse,
    UpdateContentRequest,
)

app = FastAPI(
    title="Content CMS API",
    description="Content management API with a read-through Redis cache over MongoDB",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render errors in the response envelope."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.detail},
        headers=exc.headers,
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request validation failures in the response envelope."""
    return JSONResponse(
        status_code=422,
        content={"success": False, "message": "Invalid data!", "errors": jsonable_encoder(exc.errors())},
    )


@app.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": "Content CMS API",
        "version": "0.1.0",
        "description": "Content management API with a read-through Redis cache over MongoDB",
        "endpoints": {
            "contents": "/contents",
            "health": "/health",
            "docs": "/docs",
        },
    }


@app.get("/health", response_model=HealthCheckResponse)
async def health(handler: HandlerDep, response: Response) -> HealthCheckResponse:
    """Health check endpoint. Answers 503 when the store or cache is down."""
    result = await handler.health_check()
    if result.status != "healthy":
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return result


@app.get("/contents", response_model=ContentListResponse)
async def list_contents(
    handler: HandlerDep,
    status_filter: Annotated[list[str] | None, Query(alias="status")] = None,
    limit: str | None = None,
    page: str | None = None,
) -> ContentListResponse:
    """
    List contents, optionally filtered by status.

    Args:
        status_filter: One or more ``status`` query values; unknown values are ignored.
        limit: Page size (default 30).
        page: Zero-based page number (default 0).
    """
    return await handler.list_contents(statuses=status_filter, limit=limit, page=page)


@app.get("/contents/{slug}", response_model=ContentResponse)
async def get_content(slug: str, handler: HandlerDep) -> ContentResponse:
    """Get a single content by slug."""
    return await handler.get_content(slug)


@app.post(
    "/contents",
    response_model=ContentCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_content(
    request: CreateContentRequest,
    handler: HandlerDep,
) -> ContentCreatedResponse:
    """Create a content. Answers 409 if the slug is already taken."""
    return await handler.create_content(request)


@app.patch("/contents/{slug}", response_model=MessageResponse)
async def update_content(
    slug: str,
    request: UpdateContentRequest,
    handler: HandlerDep,
) -> MessageResponse:
    """Apply a partial update to a content."""
    return await handler.update_content(slug, request)


@app.delete("/contents/{slug}", response_model=MessageResponse)
async def delete_content(slug: str, handler: HandlerDep) -> MessageResponse:
    """Delete a content."""
    return await handler.delete_content(slug)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "content_cms.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
