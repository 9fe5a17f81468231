"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Clients and services created once during lifespan
    - Dependency functions retrieve them from request.app.state
    - No module-level connections
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from content_cms.config import configure_logging, settings
from content_cms.handlers import ContentHandler
from content_cms.repositories import MongoDocumentStore, RedisContentCache
from content_cms.services import ContentService

logger = logging.getLogger(__name__)


def get_content_service(request: Request) -> ContentService:
    """Dependency injection for ContentService from app.state.

    Raises:
        RuntimeError: If service is not initialized
    """
    service = getattr(request.app.state, "content_service", None)
    if service is None:
        raise RuntimeError("ContentService not initialized. Check lifespan setup.")
    return service


def get_handler(request: Request) -> ContentHandler:
    """Dependency injection for ContentHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "content_handler", None)
    if handler is None:
        raise RuntimeError("ContentHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores them in app.state:
    1. Store and cache adapters (one client each for the process)
    2. Service (access policy) - app.state.content_service
    3. Handler (HTTP endpoints) - app.state.content_handler

    Clients are closed and app.state is cleared on shutdown.
    """
    configure_logging()
    logger.info("Starting Content CMS API")
    logger.info("MongoDB database: %s.%s", settings.mongo_db_name, settings.mongo_collection)
    logger.info("Redis URL: %s", settings.redis_url)

    store = MongoDocumentStore.create()
    cache = RedisContentCache.create()
    await store.ensure_indexes()

    content_service = ContentService.create(store=store, cache=cache)
    content_handler = ContentHandler(content_service=content_service)

    app.state.store = store
    app.state.cache = cache
    app.state.content_service = content_service
    app.state.content_handler = content_handler

    logger.info("Content service initialized (cache TTL %ss)", content_service.cache_ttl)
    logger.info("Health: %s", await content_service.is_healthy())

    try:
        yield
    finally:
        del app.state.content_handler
        del app.state.content_service
        del app.state.cache
        del app.state.store
        await cache.close()
        await store.close()
        logger.info("Content service shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[ContentHandler, Depends(get_handler)]
ServiceDep = Annotated[ContentService, Depends(get_content_service)]
