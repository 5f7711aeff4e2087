"""
Pattern detectors for page signals.

Each predicate answers one "does this page have X" question using a fixed
regex over raw markup or extracted text. They take plain strings so any
single heuristic can be replaced by a real parser or model without
touching the rule tables or the aggregation code.
"""

import re
from typing import Any, Iterable

# Markup patterns
CANONICAL_PATTERN = re.compile(r"<link[^>]+rel=[\"']canonical[\"']", re.IGNORECASE)
OPEN_GRAPH_PATTERN = re.compile(r"<meta[^>]+property=[\"']og:", re.IGNORECASE)
VIEWPORT_PATTERN = re.compile(r"<meta[^>]+name=[\"']viewport[\"']", re.IGNORECASE)
LANG_PATTERN = re.compile(r"<html[^>]+lang=", re.IGNORECASE)
ARIA_PATTERN = re.compile(r"aria-|role=[\"']", re.IGNORECASE)
JSON_LD_PATTERN = re.compile(r"application/ld\+json", re.IGNORECASE)
LIST_PATTERN = re.compile(r"<ul[^>]*>|<ol[^>]*>", re.IGNORECASE)
TABLE_PATTERN = re.compile(r"<table[^>]*>", re.IGNORECASE)
EMPHASIS_PATTERN = re.compile(r"<(?:strong|b|em)>", re.IGNORECASE)
AUTHOR_PATTERN = re.compile(
    r"author|written\s+by|by\s+[A-Z][a-z]+\s+[A-Z][a-z]+", re.IGNORECASE
)
PUBLISH_DATE_PATTERN = re.compile(
    r"publish(?:ed)?[\s:-]+\d{4}|date[\s:-]+\d{4}", re.IGNORECASE
)
UPDATE_DATE_PATTERN = re.compile(
    r"updat(?:ed)?[\s:-]+\d{4}|last\s+(?:updated|modified)", re.IGNORECASE
)

# Schema type patterns, matched against markup or declared @type values
FAQ_SCHEMA_PATTERN = re.compile(r"FAQPage", re.IGNORECASE)
HOWTO_SCHEMA_PATTERN = re.compile(r"HowTo", re.IGNORECASE)
ARTICLE_SCHEMA_PATTERN = re.compile(r"Article|NewsArticle|BlogPosting", re.IGNORECASE)

# Text patterns
DIRECT_ANSWER_PATTERN = re.compile(
    r"^[A-Z][^.!?]*(?:is|are|refers to|means|involves)[^.!?]*[.!?]", re.MULTILINE
)
FAQ_SECTION_PATTERN = re.compile(r"faq|frequently\s+asked|common\s+questions", re.IGNORECASE)
TAKEAWAYS_PATTERN = re.compile(
    r"key\s+takeaways?|summary|in\s+(?:summary|conclusion)|tl;?dr", re.IGNORECASE
)
CITATION_PATTERN = re.compile(
    r"\[[0-9]+\]|\(source\)|according\s+to\s+[A-Z]|cited|reference", re.IGNORECASE
)
EXPERT_QUOTE_PATTERN = re.compile(
    r"\"[^\"]{20,}\"[^\"]*(?:said|says|according\s+to|notes)", re.IGNORECASE
)
DEFINITION_PATTERN = re.compile(
    r"(?:is\s+(?:a|an|the)|refers\s+to|means|defined\s+as)", re.IGNORECASE
)
STATISTIC_PATTERN = re.compile(
    r"\d+(?:\.\d+)?%|\d+\s+(?:million|billion|thousand)|data\s+shows", re.IGNORECASE
)
COMPARISON_PATTERN = re.compile(
    r"\bvs\.?\b|versus|compared\s+to|difference\s+between", re.IGNORECASE
)
RESEARCH_PATTERN = re.compile(
    r"our\s+(?:research|analysis|findings)|we\s+(?:found|discovered|analyzed)",
    re.IGNORECASE,
)
OPENING_DEFINITION_PATTERN = re.compile(r"(?:is|are|means|refers)", re.IGNORECASE)

SENTENCE_BOUNDARY = re.compile(r"[.!?]+")


# ============================================================================
# SEO signals
# ============================================================================

def is_https(url: str) -> bool:
    return url.startswith("https://")


def has_json_ld(html: str) -> bool:
    return bool(JSON_LD_PATTERN.search(html))


def has_canonical_tag(html: str) -> bool:
    return bool(CANONICAL_PATTERN.search(html))


def has_open_graph(html: str) -> bool:
    return bool(OPEN_GRAPH_PATTERN.search(html))


def has_viewport_meta(html: str) -> bool:
    return bool(VIEWPORT_PATTERN.search(html))


def has_lang_attribute(html: str) -> bool:
    return bool(LANG_PATTERN.search(html))


def has_aria(html: str) -> bool:
    return bool(ARIA_PATTERN.search(html))


def title_keywords(title: str, min_length: int) -> list[str]:
    """Lowercased title words longer than ``min_length`` characters."""
    return [w for w in title.lower().split() if len(w) > min_length]


def has_keyword_overlap(title: str, heading: str, min_length: int) -> bool:
    """True when any title keyword appears inside the heading."""
    heading = heading.lower()
    return any(word in heading for word in title_keywords(title, min_length))


# ============================================================================
# AIO signals
# ============================================================================

def has_direct_answer(text: str) -> bool:
    return bool(DIRECT_ANSWER_PATTERN.search(text))


def has_faq_section(text: str) -> bool:
    return bool(FAQ_SECTION_PATTERN.search(text))


def has_lists(html: str) -> bool:
    return bool(LIST_PATTERN.search(html))


def has_tables(html: str) -> bool:
    return bool(TABLE_PATTERN.search(html))


def has_key_takeaways(text: str) -> bool:
    return bool(TAKEAWAYS_PATTERN.search(text))


def has_author_byline(html: str) -> bool:
    return bool(AUTHOR_PATTERN.search(html))


def has_citations(text: str) -> bool:
    return bool(CITATION_PATTERN.search(text))


def has_publish_date(html: str) -> bool:
    return bool(PUBLISH_DATE_PATTERN.search(html))


def has_update_date(html: str) -> bool:
    return bool(UPDATE_DATE_PATTERN.search(html))


def has_expert_quote(text: str) -> bool:
    return bool(EXPERT_QUOTE_PATTERN.search(text))


def has_definitions(text: str) -> bool:
    return bool(DEFINITION_PATTERN.search(text))


def has_statistics(text: str) -> bool:
    return bool(STATISTIC_PATTERN.search(text))


def has_comparisons(text: str) -> bool:
    return bool(COMPARISON_PATTERN.search(text))


def has_original_research(text: str) -> bool:
    return bool(RESEARCH_PATTERN.search(text))


def has_emphasis(html: str) -> bool:
    return bool(EMPHASIS_PATTERN.search(html))


def has_opening_definition(text: str) -> bool:
    return bool(OPENING_DEFINITION_PATTERN.search(text))


def mentions_schema(html: str, types: Iterable[str], pattern: re.Pattern) -> bool:
    """True when the markup or any declared @type matches ``pattern``."""
    if pattern.search(html):
        return True
    return any(pattern.search(t) for t in types)


# ============================================================================
# Text helpers
# ============================================================================

def split_sentences(text: str) -> list[str]:
    """Split on terminal punctuation, dropping blank fragments."""
    return [s for s in SENTENCE_BOUNDARY.split(text) if s.strip()]


def sentence_word_count(sentence: str) -> int:
    return len(sentence.split())


def schema_types(blocks: Iterable[Any]) -> list[str]:
    """Collect ``@type`` strings from parsed JSON-LD blocks.

    Handles list-valued types and ``@graph`` containers; anything that is
    not a mapping is ignored.
    """
    found = []
    for block in blocks:
        if not isinstance(block, dict):
            continue
        declared = block.get("@type")
        if isinstance(declared, str) and declared:
            found.append(declared)
        elif isinstance(declared, list):
            found.extend(t for t in declared if isinstance(t, str) and t)
        graph = block.get("@graph")
        if isinstance(graph, list):
            found.extend(schema_types(graph))
    return found
