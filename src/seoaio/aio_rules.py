"""AIO rule table - 22 checks across 5 categories, 100 points total.

Measures how readily an AI answer engine can lift and cite the page's
content. All detection is pattern matching over ``raw_html`` and
``text_content``; see detectors.py.
"""

from seoaio import detectors
from seoaio.constants import (
    OPENING_MIN_CHARS,
    OPENING_SENTENCES,
    QUOTABLE_MAX_WORDS,
    QUOTABLE_MIN_WORDS,
    QUOTABLE_PARTIAL_CAP,
    QUOTABLE_POINTS_PER_SENTENCE,
    QUOTABLE_TARGET,
    SENTENCE_LENGTH_BANDS,
    SENTENCE_LENGTH_GOOD,
)
from seoaio.models import AIOBreakdown, ItemStatus, PageInput
from seoaio.rules import (
    Rule,
    RuleOutcome,
    band_at_most,
    binary,
    evaluate_rules,
    validate_rule_table,
)
from seoaio.scoring import round_half_up


def _html(page: PageInput) -> str:
    return page.raw_html or ""


def _text(page: PageInput) -> str:
    return page.text_content or ""


def _flag(detected, points, passed, failed, fix, miss_status=ItemStatus.FAIL):
    # AIO items keep their fix text even when passing
    return binary(detected, points, passed, failed, fix, miss_status, always_fix=True)


# ============================================================================
# STRUCTURE (0-20 points) - how AI extracts content
# ============================================================================

def check_direct_answers(page: PageInput) -> RuleOutcome:
    return _flag(
        detectors.has_direct_answer(_text(page)), 5,
        "Content starts with clear, direct answers",
        "No direct answer statements found at start",
        "Start with 'X is...' or 'X refers to...' definitions that AI can quote",
    )


def check_faq_section(page: PageInput) -> RuleOutcome:
    return _flag(
        detectors.has_faq_section(_text(page)), 4,
        "FAQ section detected - great for AI extraction",
        "No FAQ section found - AI loves Q&A format",
        "Add a 'Frequently Asked Questions' section with common queries",
    )


def check_lists(page: PageInput) -> RuleOutcome:
    return _flag(
        detectors.has_lists(_html(page)), 4,
        "Bulleted/numbered lists found - easy AI extraction",
        "No structured lists - add bullet points for key info",
        "Use <ul> or <ol> lists to organize key points",
    )


def check_tables(page: PageInput) -> RuleOutcome:
    return _flag(
        detectors.has_tables(_html(page)), 3,
        "Data tables present - great for comparisons",
        "No tables found - useful for comparing data",
        "Add comparison tables where relevant",
        ItemStatus.WARNING,
    )


def check_key_takeaways(page: PageInput) -> RuleOutcome:
    return _flag(
        detectors.has_key_takeaways(_text(page)), 4,
        "Summary/takeaways section found",
        "No key takeaways - AI loves quick summaries",
        "Add a 'Key Takeaways' or 'Summary' section at top or bottom",
    )


# ============================================================================
# AUTHORITY (0-20 points) - trust signals
# ============================================================================

def check_author(page: PageInput) -> RuleOutcome:
    return _flag(
        detectors.has_author_byline(_html(page)), 5,
        "Author attribution found",
        "No author info - hurts E-E-A-T signals",
        "Add author name, bio, and credentials to your content",
    )


def check_citations(page: PageInput) -> RuleOutcome:
    return _flag(
        detectors.has_citations(_text(page)), 5,
        "Citations or source references found",
        "No citations - AI trusts sourced content more",
        "Cite authoritative sources with 'According to [Source]...'",
    )


def check_publish_date(page: PageInput) -> RuleOutcome:
    return _flag(
        detectors.has_publish_date(_html(page)), 3,
        "Publication date is visible",
        "No publish date - shows content freshness",
        "Display the publication date clearly on the page",
        ItemStatus.WARNING,
    )


def check_last_updated(page: PageInput) -> RuleOutcome:
    return _flag(
        detectors.has_update_date(_html(page)), 4,
        "Last updated date shown",
        "No update date - shows content is maintained",
        "Add 'Last updated: [date]' to your content",
        ItemStatus.WARNING,
    )


def check_expert_quotes(page: PageInput) -> RuleOutcome:
    return _flag(
        detectors.has_expert_quote(_text(page)), 3,
        "Expert quotes detected",
        "No expert quotes - adds credibility",
        "Include quotes from industry experts with attribution",
        ItemStatus.WARNING,
    )


# ============================================================================
# SCHEMA (0-20 points) - structured data
# ============================================================================

def check_json_ld(page: PageInput) -> RuleOutcome:
    found = bool(page.schema_markup) or detectors.has_json_ld(_html(page))
    return _flag(
        found, 5,
        "Structured data (JSON-LD) detected",
        "No structured data - critical for AI visibility",
        "Add JSON-LD structured data to your page",
    )


def _declares(page: PageInput, pattern) -> bool:
    types = detectors.schema_types(page.schema_markup)
    return detectors.mentions_schema(_html(page), types, pattern)


def check_faq_schema(page: PageInput) -> RuleOutcome:
    return _flag(
        _declares(page, detectors.FAQ_SCHEMA_PATTERN), 5,
        "FAQ schema markup present",
        "No FAQ schema - huge boost for AI citations",
        "Add FAQPage schema with your Q&A content",
    )


def check_howto_schema(page: PageInput) -> RuleOutcome:
    return _flag(
        _declares(page, detectors.HOWTO_SCHEMA_PATTERN), 5,
        "HowTo schema detected",
        "No HowTo schema - add for step-by-step content",
        "Add HowTo schema for instructional content",
        ItemStatus.WARNING,
    )


def check_article_schema(page: PageInput) -> RuleOutcome:
    return _flag(
        _declares(page, detectors.ARTICLE_SCHEMA_PATTERN), 5,
        "Article schema present",
        "No Article schema - helps categorize content",
        "Add Article or BlogPosting schema",
        ItemStatus.WARNING,
    )


# ============================================================================
# CONTENT QUALITY (0-20 points)
# ============================================================================

def check_definitions(page: PageInput) -> RuleOutcome:
    return _flag(
        detectors.has_definitions(_text(page)), 5,
        "Clear definitions found - AI loves to cite these",
        "No 'X is...' definitions - AI can't extract definitions",
        "Include 'X is...' or 'X refers to...' definitions",
    )


def check_statistics(page: PageInput) -> RuleOutcome:
    return _flag(
        detectors.has_statistics(_text(page)), 5,
        "Statistics and data points found",
        "No statistics - specific numbers are highly citable",
        "Include specific statistics, percentages, or data points",
        ItemStatus.WARNING,
    )


def check_comparisons(page: PageInput) -> RuleOutcome:
    return _flag(
        detectors.has_comparisons(_text(page)), 4,
        "Comparison content detected",
        "No comparisons - 'X vs Y' content is popular",
        "Add comparison sections or 'X vs Y' content",
        ItemStatus.WARNING,
    )


def check_original_research(page: PageInput) -> RuleOutcome:
    return _flag(
        detectors.has_original_research(_text(page)), 6,
        "Original research/analysis mentioned",
        "No original insights - unique data is more citable",
        "Include your own research, analysis, or unique findings",
        ItemStatus.WARNING,
    )


# ============================================================================
# QUOTABILITY (0-20 points)
# ============================================================================

def check_quotable_snippets(page: PageInput) -> RuleOutcome:
    count = sum(
        1 for s in detectors.split_sentences(_text(page))
        if QUOTABLE_MIN_WORDS <= detectors.sentence_word_count(s) <= QUOTABLE_MAX_WORDS
    )
    fix = "Write self-contained sentences that can stand alone as quotes"
    if count >= QUOTABLE_TARGET:
        return RuleOutcome(
            6, ItemStatus.PASS,
            f"{count} quotable sentences found (15-60 words)",
            fix, metric=count,
        )
    return RuleOutcome(
        min(count * QUOTABLE_POINTS_PER_SENTENCE, QUOTABLE_PARTIAL_CAP),
        ItemStatus.WARNING if count > 0 else ItemStatus.FAIL,
        f"Only {count} quotable sentences - need standalone quotes",
        fix, metric=count,
    )


def average_sentence_length(text: str) -> float:
    sentences = detectors.split_sentences(text)
    if not sentences:
        return 0.0
    return sum(detectors.sentence_word_count(s) for s in sentences) / len(sentences)


def check_sentence_brevity(page: PageInput) -> RuleOutcome:
    fix = "Shorten sentences to under 20 words on average"
    if not detectors.split_sentences(_text(page)):
        return RuleOutcome(0, ItemStatus.FAIL, "No sentences found to measure", fix, metric=0.0)

    average = average_sentence_length(_text(page))
    points, status = band_at_most(average, SENTENCE_LENGTH_BANDS)
    shown = round_half_up(average)
    if average <= SENTENCE_LENGTH_GOOD:
        reason = f"Average {shown} words/sentence - good for AI"
    else:
        reason = f"Average {shown} words/sentence - too long for AI"

    return RuleOutcome(
        points, status, reason,
        None if status == ItemStatus.PASS else fix,
        metric=average,
    )


def check_strong_opening(page: PageInput) -> RuleOutcome:
    opening = ". ".join(detectors.split_sentences(_text(page))[:OPENING_SENTENCES])
    good = len(opening) >= OPENING_MIN_CHARS and detectors.has_opening_definition(opening)
    return _flag(
        good, 5,
        "First paragraph is AI-friendly",
        "Opening doesn't have extractable definitions",
        "Start with a clear, definition-style answer in first paragraph",
        ItemStatus.WARNING,
    )


def check_scannable_format(page: PageInput) -> RuleOutcome:
    return _flag(
        detectors.has_emphasis(_html(page)), 3,
        "Uses bold/emphasis for key points",
        "No text emphasis - highlight key terms",
        "Bold important terms and key phrases",
        ItemStatus.WARNING,
    )


AIO_RULES = (
    Rule("direct_answers", "Direct Answers", "structure", 5, check_direct_answers),
    Rule("faq_section", "FAQ Section", "structure", 4, check_faq_section),
    Rule("lists", "Lists & Steps", "structure", 4, check_lists),
    Rule("tables", "Data Tables", "structure", 3, check_tables),
    Rule("key_takeaways", "Key Takeaways", "structure", 4, check_key_takeaways),
    Rule("author", "Author Information", "authority", 5, check_author),
    Rule("citations", "Citations & Sources", "authority", 5, check_citations),
    Rule("publish_date", "Publish Date", "authority", 3, check_publish_date),
    Rule("last_updated", "Last Updated", "authority", 4, check_last_updated),
    Rule("expert_quotes", "Expert Quotes", "authority", 3, check_expert_quotes),
    Rule("json_ld", "JSON-LD Present", "schema", 5, check_json_ld),
    Rule("faq_schema", "FAQ Schema", "schema", 5, check_faq_schema),
    Rule("howto_schema", "HowTo Schema", "schema", 5, check_howto_schema),
    Rule("article_schema", "Article Schema", "schema", 5, check_article_schema),
    Rule("definitions", "Definitions", "content_quality", 5, check_definitions),
    Rule("statistics", "Statistics & Data", "content_quality", 5, check_statistics),
    Rule("comparisons", "Comparisons", "content_quality", 4, check_comparisons),
    Rule("original_research", "Original Research", "content_quality", 6, check_original_research),
    Rule("quotable_snippets", "Quotable Snippets", "quotability", 6, check_quotable_snippets),
    Rule("sentence_brevity", "Sentence Brevity", "quotability", 6, check_sentence_brevity),
    Rule("strong_opening", "Strong Opening", "quotability", 5, check_strong_opening),
    Rule("scannable_format", "Scannable Format", "quotability", 3, check_scannable_format),
)

validate_rule_table(AIO_RULES, AIOBreakdown.CATEGORIES)


def analyze_aio(page: PageInput) -> AIOBreakdown:
    """Score a page against the AIO rule table.

    Missing markup or text earns no credit; this never raises.
    """
    return AIOBreakdown(**evaluate_rules(AIO_RULES, page, AIOBreakdown.CATEGORIES))
