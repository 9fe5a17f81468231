"""Domain errors raised by the content access layer.

Store and cache connectivity failures are not wrapped here: they propagate
as the driver's own exceptions and are reported as internal errors by the
handler layer.
"""


class ContentError(Exception):
    """Base class for content access errors."""


class ContentNotFoundError(ContentError):
    """No content document matches the given slug."""

    def __init__(self, slug: str) -> None:
        super().__init__(f"Content not found: {slug}")
        self.slug = slug


class ContentConflictError(ContentError):
    """Another content document already uses the given slug."""

    def __init__(self, slug: str) -> None:
        super().__init__(f"Content already exists: {slug}")
        self.slug = slug


class DuplicateDocumentError(ContentError):
    """A unique index rejected a write to the document store."""
