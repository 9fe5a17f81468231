"""Service layer for business logic.

Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Access policy) -> (Data Access)
"""

from .content_service import (
    CACHE_KEY_PREFIX,
    ContentService,
    cache_key,
    parse_int,
    resolve_statuses,
    status_match,
)

__all__ = [
    "CACHE_KEY_PREFIX",
    "ContentService",
    "cache_key",
    "parse_int",
    "resolve_statuses",
    "status_match",
]
