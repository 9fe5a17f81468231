"""Protocol interfaces for swappable implementations.

Protocols use structural typing, so any class implementing the methods
satisfies them. The content service depends only on these interfaces,
which keeps it testable with in-memory substitutes.
"""

from .content_cache import ContentCache
from .document_store import DocumentStore

__all__ = [
    "ContentCache",
    "DocumentStore",
]
