"""Tests for tag normalization."""

from modules.guides.tags import MAX_TAG_LENGTH, normalize_tag, normalize_tags


class TestNormalizeTags:
    def test_collapses_case_and_whitespace_duplicates(self):
        assert normalize_tags(["Go", "go", "  Go  "]) == ["go"]

    def test_drops_empty(self):
        assert normalize_tags(["", "   ", "Python"]) == ["python"]

    def test_keeps_first_seen_order(self):
        assert normalize_tags(["Rust", "go", "RUST", "c"]) == ["rust", "go", "c"]

    def test_truncates(self):
        tags = normalize_tags(["x" * 80])
        assert tags == ["x" * MAX_TAG_LENGTH]

    def test_truncation_does_not_leave_trailing_space(self):
        name = normalize_tag("a" * 49 + " b")
        assert name == "a" * 49

    def test_none(self):
        assert normalize_tags(None) == []

    def test_idempotent(self):
        raw = ["Go", " Web Dev ", "WEB DEV", "y" * 70, "", "Ünïcode"]
        once = normalize_tags(raw)
        assert normalize_tags(once) == once
