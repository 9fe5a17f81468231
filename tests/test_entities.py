"""
Tests for mapping content documents to entities.
"""

from datetime import UTC, datetime, timedelta, timezone

import pytest
from bson import ObjectId

from content_cms.entities import ActorStamp, ContentEntity, ContentStatus, parse_datetime


def test_parse_datetime_accepts_js_iso_strings():
    parsed = parse_datetime("2024-03-01T10:15:30.250Z")

    assert parsed == datetime(2024, 3, 1, 10, 15, 30, 250000, tzinfo=UTC)


def test_parse_datetime_treats_naive_as_utc():
    assert parse_datetime(datetime(2024, 3, 1, 10)).tzinfo is UTC


def test_parse_datetime_converts_offsets_to_utc():
    local = datetime(2024, 3, 1, 12, tzinfo=timezone(timedelta(hours=2)))

    assert parse_datetime(local) == datetime(2024, 3, 1, 10, tzinfo=UTC)


def test_from_document_maps_store_field_names(document_factory):
    object_id = ObjectId()
    document = document_factory(
        "mapped",
        _id=object_id,
        related=[ObjectId("65a1f0c2e4b0a1b2c3d4e5f6")],
        published={"at": datetime(2024, 2, 1, tzinfo=UTC), "by": "bob"},
        updated=[{"at": datetime(2024, 2, 2, tzinfo=UTC), "by": "carol"}],
    )

    entity = ContentEntity.from_document(document)

    assert entity.id == str(object_id)
    assert entity.sub_desc == "Short description"
    assert entity.thumbnail_url == "https://cdn.example.com/mapped.png"
    assert entity.related == ["65a1f0c2e4b0a1b2c3d4e5f6"]
    assert entity.status is ContentStatus.DRAFT
    assert entity.published == ActorStamp(at=datetime(2024, 2, 1, tzinfo=UTC), by="bob")
    assert [stamp.by for stamp in entity.updated] == ["carol"]


def test_never_published_has_no_published_key(document_factory):
    entity = ContentEntity.from_document({**document_factory("draft-only"), "_id": "abc"})

    assert not entity.is_published
    document = entity.to_document()
    assert "published" not in document
    assert "updated" not in document
    assert document["_id"] == "abc"
    assert document["subDesc"] == "Short description"


def test_unknown_status_is_rejected(document_factory):
    with pytest.raises(ValueError):
        ContentEntity.from_document({**document_factory("bad", status="archived"), "_id": "abc"})


@pytest.mark.parametrize("value", [5, None, [2024, 1, 1]])
def test_parse_datetime_rejects_other_types(value):
    with pytest.raises(TypeError):
        parse_datetime(value)
