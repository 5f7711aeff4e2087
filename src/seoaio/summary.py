"""Free-score teaser summaries.

Onboarding and public-analyzer flows show a page's headline scores and a
handful of fixes before gating the full breakdown.
"""

from dataclasses import dataclass
from itertools import chain, zip_longest

from seoaio.constants import DEFAULT_TEASER_FIX_LIMIT
from seoaio.grading import score_label, score_to_grade
from seoaio.models import AnalysisResult, to_camel_dict


@dataclass(frozen=True)
class ScoreSummary:
    """Headline view of an AnalysisResult."""

    url: str
    seo_score: int
    aio_score: int
    combined_score: int
    grade: str
    label: str
    critical_issues: int
    warnings: int
    top_fixes: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return to_camel_dict(self)


def summarize(result: AnalysisResult, fix_limit: int = DEFAULT_TEASER_FIX_LIMIT) -> ScoreSummary:
    """Condense a page result for display ahead of the full report.

    Fixes alternate SEO, AIO, SEO, ... so both dimensions are represented;
    duplicates are dropped.
    """
    paired = zip_longest(result.seo.recommendations, result.aio.recommendations)
    fixes = [fix for fix in chain.from_iterable(paired) if fix]
    unique = list(dict.fromkeys(fixes))

    return ScoreSummary(
        url=result.url,
        seo_score=result.seo_score,
        aio_score=result.aio_score,
        combined_score=result.combined_score,
        grade=score_to_grade(result.combined_score),
        label=score_label(result.combined_score),
        critical_issues=result.seo.issue_count.critical,
        warnings=result.seo.issue_count.warning,
        top_fixes=tuple(unique[:max(fix_limit, 0)]),
    )
