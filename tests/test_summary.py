"""Tests for visualization/summary.py badges."""
import pytest

from floorcanvas.io.parser import normalize
from floorcanvas.visualization.summary import PlanSummary, summarize, truncate_description


class TestTruncateDescription:
    def test_short_text_is_kept(self):
        assert truncate_description("test") == "test"

    def test_exact_limit_is_kept(self):
        text = "x" * 50
        assert truncate_description(text) == text

    def test_long_text_is_cut(self):
        text = "A cozy two bedroom apartment with an open kitchen and a balcony"
        badge = truncate_description(text)
        assert badge == text[:50] + "..."
        assert len(badge) == 53

    def test_custom_limit(self):
        assert truncate_description("abcdef", limit=3) == "abc..."


class TestBadges:
    def test_office_plan(self, office_doc):
        assert summarize(office_doc).badges() == ["1 rooms", "test"]

    def test_empty_plan(self, empty_doc):
        summary = summarize(empty_doc)
        assert summary.room_count == 0
        assert summary.badges() == ["0 rooms"]

    def test_hallways_are_not_rooms(self, layered_doc):
        assert summarize(layered_doc).room_count == 1

    def test_total_square_footage(self):
        doc = normalize({
            "floorPlan": {"rooms": [{"id": "a"}, {"id": "b"}], "totalSquareFootage": 1450},
            "description": "Two rooms",
        })
        assert summarize(doc).badges() == ["2 rooms", "1,450 sq ft", "Two rooms"]

    def test_long_description_badge(self, fallback_raw):
        fallback_raw["description"] = "d" * 80
        badges = summarize(normalize(fallback_raw)).badges()
        assert badges[-1] == "d" * 50 + "..."

    @pytest.mark.parametrize("total", [float("inf"), float("nan")])
    def test_non_finite_total_is_omitted(self, total):
        summary = PlanSummary(room_count=3, total_square_footage=total, description="")
        assert summary.badges() == ["3 rooms"]

    def test_summary_is_independent_of_view(self, office_doc):
        assert summarize(office_doc) == summarize(office_doc)
