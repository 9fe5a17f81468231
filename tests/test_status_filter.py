"""
Tests for listing filter resolution and lenient number parsing.
"""

import pytest

from content_cms.entities import ALL_STATUSES, ContentStatus
from content_cms.services import cache_key, parse_int, resolve_statuses, status_match


def test_cache_key_format():
    assert cache_key("hello-world") == "content:hello-world"


@pytest.mark.parametrize(
    "status, expected",
    [
        (None, list(ALL_STATUSES)),
        ("draft", ["draft"]),
        ("bogus", list(ALL_STATUSES)),
        ("", list(ALL_STATUSES)),
        (ContentStatus.REVIEWED, ["reviewed"]),
        (["draft", "bogus", "published"], ["draft", "published"]),
        (["bogus"], []),
        ([], []),
        (["draft", "draft"], ["draft"]),
    ],
)
def test_resolve_statuses(status, expected):
    assert resolve_statuses(status) == expected


def test_status_match_restricts_partial_sets():
    assert status_match(["draft", "published"]) == {"status": {"$in": ["draft", "published"]}}


@pytest.mark.parametrize("statuses", [[], list(ALL_STATUSES), list(reversed(ALL_STATUSES))])
def test_status_match_is_empty_for_none_or_all(statuses):
    assert status_match(statuses) == {}


@pytest.mark.parametrize(
    "value, expected",
    [
        (10, 10),
        ("10", 10),
        (" 7 ", 7),
        (4.0, 4),
        (None, 30),
        ("ten", 30),
        ("1.5", 30),
        (2.5, 30),
        (True, 30),
        ([5], 30),
        (0, 30),
        (-3, 30),
        (2**31 - 1, 2**31 - 1),
        (2**31, 30),
        ("99999999999999999999", 30),
    ],
)
def test_parse_int_with_minimum_one(value, expected):
    assert parse_int(value, 30, minimum=1) == expected


def test_parse_int_allows_zero_page():
    assert parse_int("0", 0) == 0
    assert parse_int("-1", 0) == 0


def test_parse_int_rejects_page_beyond_maximum():
    assert parse_int("99999999999999999999", 0) == 0
