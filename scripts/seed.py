#!/usr/bin/env python3
"""
Seed script for the content CMS.

Inserts a few sample contents into MongoDB and shows the cache-aside read
path against Redis: a first read misses and fills the cache, a second read
is served from it, and an update drops the entry again.
"""

import asyncio
import time

from content_cms.errors import ContentConflictError
from content_cms.repositories import MongoDocumentStore, RedisContentCache
from content_cms.services import ContentService, cache_key

SAMPLE_CONTENTS = [
    {
        "slug": "welcome",
        "title": "Welcome",
        "description": "What this site is about.",
        "subDesc": "Start here",
        "alt": "Waving hand",
        "thumbnailUrl": "https://cdn.example.com/welcome.png",
        "tags": ["intro"],
        "related": [],
        "status": "published",
        "created_by": "editor",
    },
    {
        "slug": "release-notes",
        "title": "Release notes",
        "description": "Changes in the latest release.",
        "subDesc": "What's new",
        "alt": "Changelog",
        "thumbnailUrl": "https://cdn.example.com/release.png",
        "tags": ["news", "release"],
        "related": [],
        "status": "draft",
        "created_by": "editor",
    },
    {
        "slug": "style-guide",
        "title": "Style guide",
        "description": "How we write.",
        "subDesc": "House style",
        "alt": "Pen",
        "thumbnailUrl": "https://cdn.example.com/style.png",
        "tags": ["guide"],
        "related": [],
        "status": "reviewed",
        "created_by": "editor",
    },
]


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


async def seed(service: ContentService) -> None:
    """Insert the sample contents, skipping slugs that already exist."""
    print_section("Seeding contents")
    for document in SAMPLE_CONTENTS:
        try:
            inserted_id = await service.create_content(document)
            print(f"  ✓ Created {document['slug']} ({inserted_id})")
        except ContentConflictError:
            print(f"  - {document['slug']} already exists")


async def demo_read_path(service: ContentService, cache: RedisContentCache) -> None:
    """Show a miss, a hit and an invalidation for one slug."""
    print_section("Cache-aside reads")
    slug = "welcome"

    await cache.delete(cache_key(slug))
    for label in ("miss", "hit"):
        start = time.perf_counter()
        content = await service.get_content(slug)
        elapsed_ms = (time.perf_counter() - start) * 1000
        print(f"  {label:>4}: {content.title!r} in {elapsed_ms:.2f} ms")

    await service.update_content(slug, {"subDesc": "Start here!"}, by="seed-script")
    cached = await cache.get(cache_key(slug))
    print(f"  after update, cached entry present: {cached is not None}")

    print_section("Listing")
    for content in await service.list_contents(status=["draft", "reviewed"]):
        print(f"  {content.status.value:<10} {content.slug}")


async def main() -> None:
    """Run the seed and the demo."""
    store = MongoDocumentStore.create()
    cache = RedisContentCache.create()
    service = ContentService.create(store=store, cache=cache)

    try:
        await store.ensure_indexes()
        await seed(service)
        await demo_read_path(service, cache)
        print("\n✅ Done")
    except Exception as e:
        print(f"\n❌ Error: {e}")
        print("\nMake sure MongoDB and Redis are running,")
        print("or set MONGODB_URI and REDIS_URL.")
    finally:
        await cache.close()
        await store.close()


if __name__ == "__main__":
    asyncio.run(main())
