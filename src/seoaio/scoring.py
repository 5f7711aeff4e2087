"""Category and total score aggregation, and fix ranking."""

import math
from typing import Iterable, Union

from seoaio.constants import (
    CATEGORY_MAX_SCORE,
    DEFAULT_RECOMMENDATION_LIMIT,
    TOTAL_MAX_SCORE,
)
from seoaio.models import AIOBreakdown, ItemStatus, ScoreItem, SEOBreakdown

Breakdown = Union[SEOBreakdown, AIOBreakdown]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def _scaled(items: Iterable[ScoreItem], scale: int) -> int:
    total = 0
    maximum = 0
    for item in items:
        total += item.score
        maximum += item.max_score
    if maximum <= 0:
        return 0
    return round_half_up(total / maximum * scale)


def calculate_category_score(items: Iterable[ScoreItem]) -> int:
    """Scale a category's items to 0-20; an empty category scores 0."""
    return _scaled(items, CATEGORY_MAX_SCORE)


def calculate_total_score(breakdown: Breakdown) -> int:
    """Scale every item of a breakdown to 0-100; an empty breakdown scores 0."""
    return _scaled(breakdown.items(), TOTAL_MAX_SCORE)


def get_top_recommendations(
    breakdown: Breakdown, limit: int = DEFAULT_RECOMMENDATION_LIMIT
) -> list[str]:
    """Fixes for unresolved items, most points lost first.

    Ties keep the breakdown's category/rule order.

    Args:
        breakdown: SEO or AIO breakdown
        limit: Maximum number of fixes to return

    Returns:
        Up to ``limit`` how-to-fix strings
    """
    if limit <= 0:
        return []
    open_items = [
        item for item in breakdown.items()
        if item.status != ItemStatus.PASS and item.how_to_fix
    ]
    ranked = sorted(open_items, key=lambda item: item.points_lost, reverse=True)
    return [item.how_to_fix for item in ranked[:limit]]
