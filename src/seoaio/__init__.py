"""SEO and AIO page scoring engine."""

__version__ = "0.1.0"

from seoaio.analyzer import PageAnalyzer, analyze_page_unified
from seoaio.site import SiteAnalyzer, aggregate_results, analyze_multiple_pages
from seoaio.seo_rules import SEO_RULES, analyze_seo
from seoaio.aio_rules import AIO_RULES, analyze_aio
from seoaio.scoring import (
    calculate_category_score,
    calculate_total_score,
    get_top_recommendations,
)
from seoaio.rules import Rule, RuleOutcome, RuleTableError
from seoaio.models import (
    ImageRef,
    PageInput,
    ItemStatus,
    ScoreItem,
    SEOBreakdown,
    AIOBreakdown,
    AnalysisResult,
    SiteAnalysis,
)
from seoaio.grading import score_to_grade, score_label
from seoaio.summary import ScoreSummary, summarize
from seoaio.extraction import page_input_from_html
from seoaio.config import Config

__all__ = [
    # Analysis
    "PageAnalyzer",
    "SiteAnalyzer",
    "analyze_page_unified",
    "analyze_multiple_pages",
    "aggregate_results",
    "analyze_seo",
    "analyze_aio",
    # Scoring
    "calculate_category_score",
    "calculate_total_score",
    "get_top_recommendations",
    # Rules
    "SEO_RULES",
    "AIO_RULES",
    "Rule",
    "RuleOutcome",
    "RuleTableError",
    # Models
    "ImageRef",
    "PageInput",
    "ItemStatus",
    "ScoreItem",
    "SEOBreakdown",
    "AIOBreakdown",
    "AnalysisResult",
    "SiteAnalysis",
    # Presentation helpers
    "score_to_grade",
    "score_label",
    "ScoreSummary",
    "summarize",
    "page_input_from_html",
    "Config",
]
