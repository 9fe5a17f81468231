"""Handler layer for HTTP endpoints.

Handlers depend on services (business logic), not directly on repositories.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Access policy) -> (Data Access)
"""

from .content_handler import ContentHandler

__all__ = [
    "ContentHandler",
]
