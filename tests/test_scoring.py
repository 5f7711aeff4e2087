"""Tests for score aggregation and fix ranking."""

import pytest

from seoaio.models import AIOBreakdown, ItemStatus, ScoreItem, SEOBreakdown
from seoaio.scoring import (
    calculate_category_score,
    calculate_total_score,
    get_top_recommendations,
    round_half_up,
)


def make_item(name, score, max_score, status=ItemStatus.FAIL, fix=None):
    return ScoreItem(
        name=name,
        score=score,
        max_score=max_score,
        status=status,
        reason=f"{name} reason",
        how_to_fix=fix,
    )


class TestRounding:
    """Half-up rounding."""

    @pytest.mark.parametrize("value,expected", [
        (0.5, 1), (1.5, 2), (2.5, 3), (2.49, 2), (97.5, 98), (0, 0),
    ])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected


class TestCategoryScore:
    """calculate_category_score."""

    def test_empty_category_is_zero(self):
        assert calculate_category_score([]) == 0

    def test_full_marks(self):
        items = [make_item("a", 5, 5), make_item("b", 15, 15)]
        assert calculate_category_score(items) == 20

    def test_scaled_to_twenty(self):
        # 7 / 20 * 20 = 7
        items = [make_item("a", 3, 10), make_item("b", 4, 10)]
        assert calculate_category_score(items) == 7

    def test_rounds_half_up(self):
        # 1 / 8 * 20 = 2.5
        assert calculate_category_score([make_item("a", 1, 8)]) == 3


class TestTotalScore:
    """calculate_total_score."""

    def test_empty_breakdown_is_zero(self):
        assert calculate_total_score(SEOBreakdown()) == 0
        assert calculate_total_score(AIOBreakdown()) == 0

    def test_scaled_to_hundred(self):
        breakdown = SEOBreakdown(
            technical=(make_item("a", 10, 20),),
            meta=(make_item("b", 20, 20),),
        )
        assert calculate_total_score(breakdown) == 75


class TestTopRecommendations:
    """get_top_recommendations."""

    def test_biggest_loss_first(self):
        breakdown = SEOBreakdown(
            technical=(make_item("small", 0, 3, fix="fix small"),),
            performance=(make_item("big", 0, 10, fix="fix big"),),
        )
        assert get_top_recommendations(breakdown) == ["fix big", "fix small"]

    def test_ties_keep_breakdown_order(self):
        breakdown = AIOBreakdown(
            structure=(make_item("a", 0, 5, fix="first"),),
            authority=(make_item("b", 0, 5, fix="second"),),
            quotability=(make_item("c", 0, 5, fix="third"),),
        )
        assert get_top_recommendations(breakdown) == ["first", "second", "third"]

    def test_skips_passing_and_unfixable_items(self):
        breakdown = SEOBreakdown(content=(
            make_item("ok", 5, 5, ItemStatus.PASS, fix="already fine"),
            make_item("no-fix", 0, 5, ItemStatus.FAIL),
            make_item("empty-fix", 0, 5, ItemStatus.FAIL, fix=""),
            make_item("warn", 2, 5, ItemStatus.WARNING, fix="tune it"),
        ))
        assert get_top_recommendations(breakdown) == ["tune it"]

    def test_limit(self):
        items = tuple(make_item(f"i{n}", 0, 10 - n, fix=f"fix {n}") for n in range(8))
        breakdown = SEOBreakdown(technical=items)
        assert get_top_recommendations(breakdown, limit=3) == ["fix 0", "fix 1", "fix 2"]
        assert len(get_top_recommendations(breakdown)) == 5
        assert get_top_recommendations(breakdown, limit=0) == []
