"""Unified page analysis - SEO and AIO scoring for a single page."""

import logging
from typing import Optional

from seoaio.aio_rules import analyze_aio
from seoaio.config import Config
from seoaio.constants import DEFAULT_RECOMMENDATION_LIMIT
from seoaio.detectors import schema_types
from seoaio.models import (
    AIOBreakdown,
    AIOCategoryScores,
    AIOFactors,
    AIOResult,
    AnalysisResult,
    IssueCount,
    ItemStatus,
    PageInfo,
    PageInput,
    SEOBreakdown,
    SEOCategoryScores,
    SEOResult,
)
from seoaio.scoring import (
    calculate_category_score,
    calculate_total_score,
    get_top_recommendations,
    round_half_up,
)
from seoaio.seo_rules import analyze_seo

logger = logging.getLogger(__name__)


def _passed(breakdown: AIOBreakdown, name: str) -> bool:
    item = breakdown.find(name)
    return item is not None and item.status == ItemStatus.PASS


def derive_factors(breakdown: AIOBreakdown) -> AIOFactors:
    """Boolean AI-readiness factors read off the named AIO items."""
    brevity = breakdown.find("Sentence Brevity")
    average = brevity.metric if brevity and brevity.metric is not None else 0
    return AIOFactors(
        has_direct_answers=_passed(breakdown, "Direct Answers"),
        has_faq_section=_passed(breakdown, "FAQ Section"),
        has_schema=_passed(breakdown, "JSON-LD Present"),
        has_author_info=_passed(breakdown, "Author Information"),
        has_citations=_passed(breakdown, "Citations & Sources"),
        has_key_takeaways=_passed(breakdown, "Key Takeaways"),
        avg_sentence_length=round_half_up(average),
    )


def seo_category_scores(breakdown: SEOBreakdown) -> SEOCategoryScores:
    return SEOCategoryScores(**{
        f"{name}_score": calculate_category_score(items)
        for name, items in breakdown.categories().items()
    })


def aio_category_scores(breakdown: AIOBreakdown) -> AIOCategoryScores:
    return AIOCategoryScores(**{
        f"{name}_score": calculate_category_score(items)
        for name, items in breakdown.categories().items()
    })


def analyze_page_unified(
    page: PageInput, recommendation_limit: int = DEFAULT_RECOMMENDATION_LIMIT
) -> AnalysisResult:
    """Run SEO and AIO scoring on one page.

    Args:
        page: Crawled page snapshot
        recommendation_limit: Fixes to keep per dimension

    Returns:
        AnalysisResult; identical input always yields an equal result
    """
    seo_breakdown = analyze_seo(page)
    aio_breakdown = analyze_aio(page)

    seo_score = calculate_total_score(seo_breakdown)
    aio_score = calculate_total_score(aio_breakdown)

    seo = SEOResult(
        score=seo_score,
        breakdown=seo_category_scores(seo_breakdown),
        details=seo_breakdown,
        issue_count=IssueCount(
            critical=seo_breakdown.count(ItemStatus.FAIL),
            warning=seo_breakdown.count(ItemStatus.WARNING),
        ),
        recommendations=tuple(get_top_recommendations(seo_breakdown, recommendation_limit)),
    )
    aio = AIOResult(
        score=aio_score,
        breakdown=aio_category_scores(aio_breakdown),
        details=aio_breakdown,
        factors=derive_factors(aio_breakdown),
        recommendations=tuple(get_top_recommendations(aio_breakdown, recommendation_limit)),
    )
    page_info = PageInfo(
        word_count=page.word_count or 0,
        has_h1=len(page.h1) > 0,
        has_meta_description=bool(page.meta_description),
        schema_types=tuple(schema_types(page.schema_markup)),
    )

    combined = round_half_up((seo_score + aio_score) / 2)
    logger.debug(
        "Analyzed %s: SEO %d, AIO %d, combined %d",
        page.url, seo_score, aio_score, combined,
    )

    return AnalysisResult(
        url=page.url,
        seo_score=seo_score,
        aio_score=aio_score,
        combined_score=combined,
        seo=seo,
        aio=aio,
        page_info=page_info,
    )


class PageAnalyzer:
    """Scores single pages using a Config."""

    def __init__(self, config: Optional[Config] = None):
        """Initialize the analyzer.

        Args:
            config: Scorer configuration (defaults to Config())
        """
        self.config = config or Config()

    def analyze(self, page: PageInput) -> AnalysisResult:
        return analyze_page_unified(page, self.config.recommendation_limit)

    def analyze_dict(self, data: dict) -> AnalysisResult:
        """Analyze a raw crawler payload (see PageInput.from_dict)."""
        return self.analyze(PageInput.from_dict(data))
