import logging
import os
from dataclasses import dataclass
from functools import lru_cache

import redis.asyncio as redis
from dotenv import load_dotenv
from pymongo import AsyncMongoClient

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # MongoDB
    mongodb_uri: str = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
    mongo_db_name: str = os.getenv("MONGO_DB_NAME", "cms")
    mongo_collection: str = os.getenv("MONGO_COLLECTION", "contents")

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")

    # Content access
    content_cache_ttl: int = int(os.getenv("CONTENT_CACHE_TTL", "60"))
    content_page_limit: int = int(os.getenv("CONTENT_PAGE_LIMIT", "30"))

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"

    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.content_cache_ttl <= 0:
            raise ValueError("CONTENT_CACHE_TTL must be a positive number of seconds")

        if self.content_page_limit <= 0:
            raise ValueError(
                f"CONTENT_PAGE_LIMIT must be positive, got {self.content_page_limit}"
            )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the API process."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def get_redis_client() -> redis.Redis:
    """Create an async Redis client instance.

    Responses are decoded to ``str`` since cached contents are JSON text.
    """
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=True,
    )


def get_mongo_client() -> AsyncMongoClient:
    """Create an async MongoDB client instance."""
    return AsyncMongoClient(settings.mongodb_uri, tz_aware=True)
