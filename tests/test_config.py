"""
Tests for settings validation.
"""

import pytest

from content_cms.config import Settings


def test_defaults():
    settings = Settings(content_cache_ttl=60, content_page_limit=30)

    assert settings.content_cache_ttl == 60
    assert settings.content_page_limit == 30


@pytest.mark.parametrize("ttl", [0, -1])
def test_rejects_non_positive_ttl(ttl):
    with pytest.raises(ValueError, match="CONTENT_CACHE_TTL"):
        Settings(content_cache_ttl=ttl)


def test_rejects_non_positive_page_limit():
    with pytest.raises(ValueError, match="CONTENT_PAGE_LIMIT"):
        Settings(content_page_limit=0)
