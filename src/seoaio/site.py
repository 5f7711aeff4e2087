"""Site-level aggregation across many analyzed pages."""

import logging
from concurrent.futures import ProcessPoolExecutor
from functools import partial
from typing import Iterable, Optional, Sequence

from seoaio.analyzer import analyze_page_unified
from seoaio.config import Config
from seoaio.constants import DEFAULT_RECOMMENDATION_LIMIT, DEFAULT_SITE_FIX_LIMIT
from seoaio.models import (
    AnalysisResult,
    IssueTotals,
    ItemStatus,
    PageInput,
    SiteAnalysis,
)
from seoaio.scoring import round_half_up

logger = logging.getLogger(__name__)


def _dedupe(fixes: Iterable[str], limit: int) -> tuple[str, ...]:
    """First ``limit`` distinct fixes, in first-seen order."""
    unique = list(dict.fromkeys(fixes))
    return tuple(unique[:max(limit, 0)])


def _average(values: Sequence[int]) -> int:
    if not values:
        return 0
    return round_half_up(sum(values) / len(values))


def aggregate_results(
    results: Sequence[AnalysisResult], fix_limit: int = DEFAULT_SITE_FIX_LIMIT
) -> SiteAnalysis:
    """Reduce per-page results, in the order given, into a SiteAnalysis."""
    if not results:
        return SiteAnalysis()

    seo_score = _average([r.seo_score for r in results])
    aio_score = _average([r.aio_score for r in results])

    issues = IssueTotals(
        critical=sum(r.seo.issue_count.critical for r in results),
        warnings=sum(r.seo.issue_count.warning for r in results),
        passed=sum(r.seo.details.count(ItemStatus.PASS) for r in results),
    )

    return SiteAnalysis(
        seo_score=seo_score,
        aio_score=aio_score,
        combined_score=round_half_up((seo_score + aio_score) / 2),
        pages_analyzed=len(results),
        issues=issues,
        top_seo_fixes=_dedupe((f for r in results for f in r.seo.recommendations), fix_limit),
        top_aio_fixes=_dedupe((f for r in results for f in r.aio.recommendations), fix_limit),
    )


def analyze_multiple_pages(
    pages: Iterable[PageInput],
    fix_limit: int = DEFAULT_SITE_FIX_LIMIT,
    recommendation_limit: int = DEFAULT_RECOMMENDATION_LIMIT,
    max_workers: int = 1,
) -> SiteAnalysis:
    """Analyze every page and aggregate the results.

    Args:
        pages: Pages to analyze; zero pages yields an all-zero SiteAnalysis
        fix_limit: Pooled fixes to keep per dimension
        recommendation_limit: Fixes each page contributes per dimension
        max_workers: Values above 1 fan the pages out to a process pool

    Returns:
        SiteAnalysis, independent of how the work was scheduled
    """
    pages = list(pages)
    analyze = partial(analyze_page_unified, recommendation_limit=recommendation_limit)

    if max_workers > 1 and len(pages) > 1:
        # map() yields in submission order, keeping the reduction deterministic
        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            results = list(executor.map(analyze, pages))
    else:
        results = [analyze(page) for page in pages]

    site = aggregate_results(results, fix_limit)
    logger.info(
        "Analyzed %d pages: SEO %d, AIO %d, combined %d",
        site.pages_analyzed, site.seo_score, site.aio_score, site.combined_score,
    )
    return site


class SiteAnalyzer:
    """Scores a set of pages using a Config."""

    def __init__(self, config: Optional[Config] = None):
        """Initialize the site analyzer.

        Args:
            config: Scorer configuration (defaults to Config())
        """
        self.config = config or Config()

    def analyze(self, pages: Iterable[PageInput]) -> SiteAnalysis:
        return analyze_multiple_pages(
            pages,
            fix_limit=self.config.site_fix_limit,
            recommendation_limit=self.config.recommendation_limit,
            max_workers=self.config.max_workers,
        )
