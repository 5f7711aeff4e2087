"""Data models for SEO and AIO page scoring."""

import hashlib
import json
import logging
import math
from dataclasses import asdict, dataclass, field, fields, is_dataclass
from enum import Enum
from typing import Any, ClassVar, Optional

logger = logging.getLogger(__name__)


class ItemStatus(str, Enum):
    """Severity a rule assigns to its own result."""

    PASS = "pass"
    WARNING = "warning"
    FAIL = "fail"


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def to_camel_dict(value: Any) -> Any:
    """Serialize dataclasses into the camelCase JSON shape callers store.

    None-valued dataclass fields are omitted.
    """
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value) and not isinstance(value, type):
        result = {}
        for f in fields(value):
            item = getattr(value, f.name)
            if item is None:
                continue
            result[_camel(f.name)] = to_camel_dict(item)
        return result
    if isinstance(value, (list, tuple)):
        return [to_camel_dict(v) for v in value]
    if isinstance(value, dict):
        return {k: to_camel_dict(v) for k, v in value.items()}
    return value


# ============================================================================
# Input
# ============================================================================

@dataclass(frozen=True)
class ImageRef:
    """An <img> found on the page."""

    src: str
    alt: Optional[str] = None

    @property
    def has_alt(self) -> bool:
        return bool(self.alt and self.alt.strip())


@dataclass(frozen=True)
class PageInput:
    """Snapshot of one crawled page. Only ``url`` is required."""

    url: str
    title: Optional[str] = None
    meta_description: Optional[str] = None
    h1: tuple[str, ...] = ()
    h2: tuple[str, ...] = ()
    h3: tuple[str, ...] = ()
    word_count: Optional[int] = None
    images: tuple[ImageRef, ...] = ()
    internal_links: tuple[str, ...] = ()
    external_links: tuple[str, ...] = ()
    load_time_ms: Optional[float] = None
    html_size: Optional[int] = None  # bytes
    schema_markup: tuple[Any, ...] = ()  # parsed JSON-LD blocks
    raw_html: Optional[str] = None
    text_content: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "PageInput":
        """Build a PageInput from a crawler payload.

        Accepts camelCase or snake_case keys. ``links`` may be either a list
        of ``{"href", "isInternal"}`` records or an ``{"internal", "external"}``
        mapping. Malformed optional fields are treated as absent.

        Raises:
            ValueError: If ``url`` is missing or empty
        """
        def get(*keys):
            for key in keys:
                if data.get(key) is not None:
                    return data[key]
            return None

        url = get("url")
        if not url:
            raise ValueError("PageInput requires a url")

        internal, external = _split_links(get("links"))
        internal = _str_tuple(get("internal_links", "internalLinks")) or internal
        external = _str_tuple(get("external_links", "externalLinks")) or external

        return cls(
            url=str(url),
            title=_as_str(get("title")),
            meta_description=_as_str(get("meta_description", "metaDescription")),
            h1=_str_tuple(get("h1")),
            h2=_str_tuple(get("h2")),
            h3=_str_tuple(get("h3")),
            word_count=_as_number(get("word_count", "wordCount"), int),
            images=_images(get("images")),
            internal_links=internal,
            external_links=external,
            load_time_ms=_as_number(get("load_time_ms", "loadTimeMs"), float),
            html_size=_as_number(get("html_size", "htmlSize"), int),
            schema_markup=_blocks(get("schema_markup", "schemaMarkup")),
            raw_html=_as_str(get("raw_html", "rawHtml")),
            text_content=_as_str(get("text_content", "textContent")),
        )

    def fingerprint(self) -> str:
        """Stable SHA-256 hex digest of the page content, for memoization."""
        payload = json.dumps(asdict(self), sort_keys=True, default=str)
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def _as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _as_number(value: Any, kind: type) -> Optional[Any]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.debug("Ignoring non-numeric value %r", value)
        return None
    if not math.isfinite(number):
        logger.debug("Ignoring non-finite value %r", value)
        return None
    return kind(number)


def _str_tuple(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(v for v in value if isinstance(v, str))


def _blocks(value: Any) -> tuple[Any, ...]:
    if isinstance(value, dict):
        return (value,)
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return ()


def _images(value: Any) -> tuple[ImageRef, ...]:
    if not isinstance(value, (list, tuple)):
        return ()
    images = []
    for img in value:
        if isinstance(img, ImageRef):
            images.append(img)
        elif isinstance(img, dict):
            images.append(ImageRef(src=str(img.get("src") or ""), alt=_as_str(img.get("alt"))))
    return tuple(images)


def _split_links(value: Any) -> tuple[tuple[str, ...], tuple[str, ...]]:
    if isinstance(value, dict):
        return _str_tuple(value.get("internal")), _str_tuple(value.get("external"))
    if not isinstance(value, (list, tuple)):
        return (), ()
    internal, external = [], []
    for link in value:
        if not isinstance(link, dict) or not isinstance(link.get("href"), str):
            continue
        is_internal = link.get("isInternal", link.get("is_internal", False))
        (internal if is_internal else external).append(link["href"])
    return tuple(internal), tuple(external)


# ============================================================================
# Score Items & Breakdowns
# ============================================================================

@dataclass(frozen=True)
class ScoreItem:
    """One named check with a bounded score and an explanation."""

    name: str
    score: int
    max_score: int
    status: ItemStatus
    reason: str
    how_to_fix: Optional[str] = None
    metric: Optional[float] = None  # underlying measurement, when the rule has one

    @property
    def points_lost(self) -> int:
        return self.max_score - self.score

    @property
    def passed(self) -> bool:
        return self.status == ItemStatus.PASS

    def to_dict(self) -> dict:
        return to_camel_dict(self)


class _Breakdown:
    """Shared behaviour of the SEO and AIO breakdowns."""

    CATEGORIES: ClassVar[tuple[str, ...]] = ()

    def categories(self) -> dict[str, tuple[ScoreItem, ...]]:
        return {name: tuple(getattr(self, name)) for name in self.CATEGORIES}

    def items(self) -> list[ScoreItem]:
        """All items, in category order then rule order."""
        return [item for name in self.CATEGORIES for item in getattr(self, name)]

    def find(self, name: str) -> Optional[ScoreItem]:
        return next((item for item in self.items() if item.name == name), None)

    def count(self, status: ItemStatus) -> int:
        return sum(1 for item in self.items() if item.status == status)

    def to_dict(self) -> dict:
        return {_camel(name): [item.to_dict() for item in items]
                for name, items in self.categories().items()}


@dataclass(frozen=True)
class SEOBreakdown(_Breakdown):
    """SEO score items grouped by category."""

    CATEGORIES: ClassVar[tuple[str, ...]] = (
        "technical", "content", "meta", "performance", "accessibility",
    )

    technical: tuple[ScoreItem, ...] = ()
    content: tuple[ScoreItem, ...] = ()
    meta: tuple[ScoreItem, ...] = ()
    performance: tuple[ScoreItem, ...] = ()
    accessibility: tuple[ScoreItem, ...] = ()


@dataclass(frozen=True)
class AIOBreakdown(_Breakdown):
    """AIO score items grouped by category."""

    CATEGORIES: ClassVar[tuple[str, ...]] = (
        "structure", "authority", "schema", "content_quality", "quotability",
    )

    structure: tuple[ScoreItem, ...] = ()
    authority: tuple[ScoreItem, ...] = ()
    schema: tuple[ScoreItem, ...] = ()
    content_quality: tuple[ScoreItem, ...] = ()
    quotability: tuple[ScoreItem, ...] = ()


# ============================================================================
# Page Analysis Result
# ============================================================================

@dataclass(frozen=True)
class SEOCategoryScores:
    """Per-category SEO scores, each 0-20."""

    technical_score: int = 0
    content_score: int = 0
    meta_score: int = 0
    performance_score: int = 0
    accessibility_score: int = 0


@dataclass(frozen=True)
class AIOCategoryScores:
    """Per-category AIO scores, each 0-20."""

    structure_score: int = 0
    authority_score: int = 0
    schema_score: int = 0
    content_quality_score: int = 0
    quotability_score: int = 0


@dataclass(frozen=True)
class IssueCount:
    critical: int = 0
    warning: int = 0


@dataclass(frozen=True)
class AIOFactors:
    """Boolean AI-readiness signals derived from the AIO breakdown."""

    has_direct_answers: bool = False
    has_faq_section: bool = False
    has_schema: bool = False
    has_author_info: bool = False
    has_citations: bool = False
    has_key_takeaways: bool = False
    avg_sentence_length: int = 0

    def to_dict(self) -> dict:
        data = to_camel_dict(self)
        # Stored reports spell the acronym in capitals
        data["hasFAQSection"] = data.pop("hasFaqSection")
        return data


@dataclass(frozen=True)
class SEOResult:
    score: int
    breakdown: SEOCategoryScores
    details: SEOBreakdown
    issue_count: IssueCount
    recommendations: tuple[str, ...] = ()


@dataclass(frozen=True)
class AIOResult:
    score: int
    breakdown: AIOCategoryScores
    details: AIOBreakdown
    factors: AIOFactors
    recommendations: tuple[str, ...] = ()


@dataclass(frozen=True)
class PageInfo:
    word_count: int = 0
    has_h1: bool = False
    has_meta_description: bool = False
    schema_types: tuple[str, ...] = ()


@dataclass(frozen=True)
class AnalysisResult:
    """SEO and AIO evaluation of a single page."""

    url: str
    seo_score: int
    aio_score: int
    combined_score: int
    seo: SEOResult
    aio: AIOResult
    page_info: PageInfo = field(default_factory=PageInfo)

    def to_dict(self) -> dict:
        data = to_camel_dict(self)
        data["aio"]["factors"] = self.aio.factors.to_dict()
        return data


# ============================================================================
# Site Aggregate
# ============================================================================

@dataclass(frozen=True)
class IssueTotals:
    critical: int = 0
    warnings: int = 0
    passed: int = 0


@dataclass(frozen=True)
class SiteAnalysis:
    """Averaged scores and pooled fixes across several pages."""

    seo_score: int = 0
    aio_score: int = 0
    combined_score: int = 0
    pages_analyzed: int = 0
    issues: IssueTotals = field(default_factory=IssueTotals)
    top_seo_fixes: tuple[str, ...] = ()
    top_aio_fixes: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return to_camel_dict(self)
