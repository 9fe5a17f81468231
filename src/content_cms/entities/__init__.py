"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .content import ALL_STATUSES, ActorStamp, ContentEntity, ContentStatus, parse_datetime

__all__ = [
    "ALL_STATUSES",
    "ActorStamp",
    "ContentEntity",
    "ContentStatus",
    "parse_datetime",
]
