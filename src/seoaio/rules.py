"""Declarative scoring rules.

A rule pairs a fixed point budget with a ``check`` callable that inspects a
PageInput and returns a RuleOutcome. The rule tables in seo_rules.py and
aio_rules.py are validated at import so that every category spends exactly
CATEGORY_MAX_SCORE points.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence

from seoaio.constants import CATEGORY_MAX_SCORE
from seoaio.models import ItemStatus, PageInput, ScoreItem

logger = logging.getLogger(__name__)


class RuleTableError(ValueError):
    """Raised when a rule table violates its point budget."""


@dataclass(frozen=True)
class RuleOutcome:
    """What a check decided for one page."""

    score: int
    status: ItemStatus
    reason: str
    how_to_fix: Optional[str] = None
    metric: Optional[float] = None


@dataclass(frozen=True)
class Rule:
    """One scoring rule."""

    id: str
    name: str
    category: str
    max_score: int
    check: Callable[[PageInput], RuleOutcome]

    def evaluate(self, page: PageInput) -> ScoreItem:
        """Run the check and build a ScoreItem, never raising.

        Args:
            page: Page to evaluate

        Returns:
            ScoreItem with the score clamped to [0, max_score]
        """
        try:
            outcome = self.check(page)
        except (AttributeError, TypeError, ValueError, OverflowError) as e:
            logger.warning("Rule %s could not evaluate %s: %s", self.id, page.url, e)
            outcome = RuleOutcome(
                score=0,
                status=ItemStatus.FAIL,
                reason=f"{self.name} could not be evaluated",
            )

        return ScoreItem(
            name=self.name,
            score=max(0, min(self.max_score, int(outcome.score))),
            max_score=self.max_score,
            status=outcome.status,
            reason=outcome.reason,
            how_to_fix=outcome.how_to_fix,
            metric=outcome.metric,
        )


def binary(
    detected: bool,
    points: int,
    passed: str,
    failed: str,
    fix: str,
    miss_status: ItemStatus = ItemStatus.FAIL,
    always_fix: bool = False,
) -> RuleOutcome:
    """Outcome for an all-or-nothing check.

    Args:
        detected: Whether the signal was found
        points: Points awarded when detected
        passed: Reason when detected
        failed: Reason when missing
        fix: How to fix a miss
        miss_status: Status reported when missing
        always_fix: Keep the fix text on passing items too
    """
    if detected:
        return RuleOutcome(points, ItemStatus.PASS, passed, fix if always_fix else None)
    return RuleOutcome(0, miss_status, failed, fix)


def band_at_least(value: float, bands: Sequence[tuple]) -> tuple[int, ItemStatus]:
    """First (points, status) whose minimum ``value`` reaches; else (0, fail)."""
    for minimum, points, status in bands:
        if value >= minimum:
            return points, ItemStatus(status)
    return 0, ItemStatus.FAIL


def band_at_most(value: float, bands: Sequence[tuple]) -> tuple[int, ItemStatus]:
    """First (points, status) whose maximum ``value`` stays within; else (0, fail)."""
    for maximum, points, status in bands:
        if value <= maximum:
            return points, ItemStatus(status)
    return 0, ItemStatus.FAIL


def band_within(value: float, bands: Sequence[tuple]) -> Optional[tuple[int, ItemStatus]]:
    """First (points, status) whose inclusive [low, high] range holds ``value``."""
    for low, high, points, status in bands:
        if low <= value <= high:
            return points, ItemStatus(status)
    return None


def category_totals(rules: Iterable[Rule]) -> dict[str, int]:
    totals: dict[str, int] = defaultdict(int)
    for rule in rules:
        totals[rule.category] += rule.max_score
    return dict(totals)


def validate_rule_table(
    rules: Sequence[Rule],
    categories: Sequence[str],
    category_max: int = CATEGORY_MAX_SCORE,
) -> None:
    """Check that a rule table matches its categories and point budget.

    Raises:
        RuleTableError: On unknown categories, duplicate ids or names, or a
            category whose max scores do not sum to ``category_max``
    """
    ids = [rule.id for rule in rules]
    if len(ids) != len(set(ids)):
        raise RuleTableError(f"Duplicate rule ids in {ids}")

    names = [rule.name for rule in rules]
    if len(names) != len(set(names)):
        raise RuleTableError(f"Duplicate rule names in {names}")

    totals = category_totals(rules)
    unknown = set(totals) - set(categories)
    if unknown:
        raise RuleTableError(f"Unknown categories: {sorted(unknown)}")

    for category in categories:
        total = totals.get(category, 0)
        if total != category_max:
            raise RuleTableError(
                f"Category '{category}' allots {total} points, expected {category_max}"
            )


def evaluate_rules(
    rules: Sequence[Rule], page: PageInput, categories: Sequence[str]
) -> dict[str, tuple[ScoreItem, ...]]:
    """Evaluate every rule, grouping items by category in table order."""
    grouped: dict[str, list[ScoreItem]] = {category: [] for category in categories}
    for rule in rules:
        grouped[rule.category].append(rule.evaluate(page))
    return {category: tuple(items) for category, items in grouped.items()}
