"""Content cache protocol.

Defines the key-value interface used to memoize single-content lookups.
Values are serialized content snapshots (JSON text).
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ContentCache(Protocol):
    """Protocol for volatile key-value cache backends."""

    async def get(self, key: str) -> str | None:
        """Return the cached value, or None when absent or expired."""
        ...

    async def set_with_expiry(self, key: str, value: str, ttl_seconds: int) -> None:
        """Store a value that expires after ``ttl_seconds``."""
        ...

    async def delete(self, key: str) -> None:
        """Remove a key. Deleting a missing key is not an error."""
        ...

    async def health_check(self) -> bool:
        """Check if the cache is reachable."""
        ...
