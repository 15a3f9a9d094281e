"""Tests for guides module models."""

from datetime import datetime, timedelta, timezone

from modules.guides.models import Guide, GuideStatus, Tag, UpdateGuideRequest, format_rfc3339


class TestTimestamps:
    def test_rfc3339_utc(self):
        value = datetime(2024, 3, 1, 12, 30, 15, 123456, tzinfo=timezone.utc)
        assert format_rfc3339(value) == "2024-03-01T12:30:15Z"

    def test_rfc3339_converts_offsets(self):
        value = datetime(2024, 3, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))
        assert format_rfc3339(value) == "2024-03-01T12:00:00Z"

    def test_naive_is_treated_as_utc(self):
        assert format_rfc3339(datetime(2024, 3, 1)) == "2024-03-01T00:00:00Z"

    def test_guide_serialization(self):
        guide = Guide(
            id="g",
            creator_id="u",
            title="T",
            content="C",
            status=GuideStatus.DRAFT,
            tags=[Tag(id="t", name="go")],
            created_at="2024-01-01T00:00:00+00:00",
            updated_at="2024-01-02T00:00:00+00:00",
        )
        data = guide.model_dump(mode="json")
        assert data["created_at"] == "2024-01-01T00:00:00Z"
        assert data["updated_at"] == "2024-01-02T00:00:00Z"
        assert data["status"] == "draft"
        assert data["tags"] == [{"id": "t", "name": "go"}]


class TestUpdateGuideRequest:
    def test_omitted_tags_are_none(self):
        assert UpdateGuideRequest(title="t", content="c").tags is None

    def test_empty_tags_are_kept(self):
        assert UpdateGuideRequest(title="t", content="c", tags=[]).tags == []
