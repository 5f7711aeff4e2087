"""SEO rule table - 17 checks across 5 categories, 100 points total."""

from seoaio import detectors
from seoaio.constants import (
    ALT_TEXT_PASS_RATIO,
    ALT_TEXT_WARNING_RATIO,
    DESCRIPTION_ANY_POINTS,
    DESCRIPTION_LENGTH_BANDS,
    H1_MULTIPLE_POINTS,
    H1_SINGLE_POINTS,
    H2_SINGLE_POINTS,
    H2_TARGET,
    H2_TARGET_POINTS,
    HTML_SIZE_GOOD_KB,
    HTML_SIZE_HUGE_POINTS,
    HTML_SIZE_LARGE_KB,
    HTML_SIZE_LARGE_POINTS,
    INTERNAL_LINKS_PARTIAL_CAP,
    INTERNAL_LINKS_TARGET,
    LOAD_TIME_BANDS_MS,
    LOAD_TIME_FAST_MS,
    MIN_TITLE_KEYWORD_LENGTH,
    TITLE_ANY_POINTS,
    TITLE_LENGTH_BANDS,
    WORD_COUNT_BANDS,
    WORD_COUNT_COMPREHENSIVE,
    WORD_COUNT_MODERATE,
)
from seoaio.models import ItemStatus, PageInput, SEOBreakdown
from seoaio.rules import (
    Rule,
    RuleOutcome,
    band_at_least,
    band_at_most,
    band_within,
    binary,
    evaluate_rules,
    validate_rule_table,
)
from seoaio.scoring import round_half_up


# ============================================================================
# TECHNICAL (0-20 points)
# ============================================================================

def check_https(page: PageInput) -> RuleOutcome:
    return binary(
        detectors.is_https(page.url), 5,
        "Your site uses secure HTTPS connection",
        "Your site is not using HTTPS, which is required for security and SEO",
        "Install an SSL certificate and redirect HTTP to HTTPS",
    )


def check_schema_markup(page: PageInput) -> RuleOutcome:
    found = bool(page.schema_markup) or detectors.has_json_ld(page.raw_html or "")
    return binary(
        found, 5,
        "Structured data (Schema.org) detected on your page",
        "No structured data found - this helps search engines understand your content",
        "Add JSON-LD schema markup (Article, FAQ, HowTo, etc.)",
    )


def check_internal_links(page: PageInput) -> RuleOutcome:
    count = len(page.internal_links)
    if count >= INTERNAL_LINKS_TARGET:
        return RuleOutcome(
            5, ItemStatus.PASS,
            f"Good internal linking structure ({count} internal links)",
            metric=count,
        )
    return RuleOutcome(
        min(count, INTERNAL_LINKS_PARTIAL_CAP),
        ItemStatus.WARNING if count > 0 else ItemStatus.FAIL,
        f"Only {count} internal links found - more helps SEO and user navigation",
        "Add links to related pages on your site",
        metric=count,
    )


def check_canonical(page: PageInput) -> RuleOutcome:
    return binary(
        detectors.has_canonical_tag(page.raw_html or ""), 5,
        "Canonical URL is properly set",
        "No canonical tag found - helps prevent duplicate content issues",
        "Add <link rel='canonical' href='...'> in your <head>",
        miss_status=ItemStatus.WARNING,
    )


# ============================================================================
# CONTENT (0-20 points)
# ============================================================================

def check_h1(page: PageInput) -> RuleOutcome:
    count = len(page.h1)
    if count == 1:
        return RuleOutcome(
            H1_SINGLE_POINTS, ItemStatus.PASS, "Page has exactly one H1 heading", metric=count
        )
    if count == 0:
        return RuleOutcome(
            0, ItemStatus.FAIL,
            "Missing H1 heading - every page needs a main heading",
            "Add a descriptive H1 heading to your page",
            metric=count,
        )
    return RuleOutcome(
        H1_MULTIPLE_POINTS, ItemStatus.WARNING,
        f"{count} H1 headings found - should have exactly one",
        "Keep only one H1 and convert others to H2",
        metric=count,
    )


def check_h2(page: PageInput) -> RuleOutcome:
    count = len(page.h2)
    if count >= H2_TARGET:
        return RuleOutcome(
            H2_TARGET_POINTS, ItemStatus.PASS,
            f"{count} H2 subheadings found - good content structure",
            metric=count,
        )
    return RuleOutcome(
        H2_SINGLE_POINTS if count == 1 else 0,
        ItemStatus.WARNING if count > 0 else ItemStatus.FAIL,
        f"Only {count} H2 headings - use more to organize content",
        "Break content into sections with H2 headings",
        metric=count,
    )


def check_content_length(page: PageInput) -> RuleOutcome:
    words = page.word_count or 0
    points, status = band_at_least(words, WORD_COUNT_BANDS)

    if words >= WORD_COUNT_COMPREHENSIVE:
        reason = f"{words} words - comprehensive content length"
    elif words >= WORD_COUNT_MODERATE:
        reason = f"{words} words - consider adding more depth"
    else:
        reason = f"Only {words} words - thin content hurts rankings"

    fix = None if status == ItemStatus.PASS else (
        "Expand content to at least 800 words with valuable information"
    )
    return RuleOutcome(points, status, reason, fix, metric=words)


def check_keyword_in_h1(page: PageInput) -> RuleOutcome:
    heading = page.h1[0] if page.h1 else ""
    matched = detectors.has_keyword_overlap(
        page.title or "", heading, MIN_TITLE_KEYWORD_LENGTH
    )
    return binary(
        matched, 5,
        "Title keywords appear in H1 heading",
        "H1 doesn't reflect title keywords - important for relevance",
        "Include your main keyword in both title and H1",
        miss_status=ItemStatus.WARNING,
    )


# ============================================================================
# META (0-20 points)
# ============================================================================

def check_title(page: PageInput) -> RuleOutcome:
    length = len(page.title or "")
    band = band_within(length, TITLE_LENGTH_BANDS)
    if band:
        points, status = band
    elif length > 0:
        points, status = TITLE_ANY_POINTS, ItemStatus.WARNING
    else:
        points, status = 0, ItemStatus.FAIL

    if length == 0:
        reason = "Missing title tag - critical for SEO"
    elif status == ItemStatus.PASS:
        reason = f"Title is {length} chars - optimal length"
    else:
        reason = f"Title is {length} chars - aim for 50-60 characters"

    fix = None if status == ItemStatus.PASS else (
        "Write a compelling title between 50-60 characters"
    )
    return RuleOutcome(points, status, reason, fix, metric=length)


def check_meta_description(page: PageInput) -> RuleOutcome:
    length = len(page.meta_description or "")
    band = band_within(length, DESCRIPTION_LENGTH_BANDS)
    if band:
        points, status = band
    elif length > 0:
        points, status = DESCRIPTION_ANY_POINTS, ItemStatus.WARNING
    else:
        points, status = 0, ItemStatus.FAIL

    if length == 0:
        reason = "Missing meta description - important for click-through rates"
    elif status == ItemStatus.PASS:
        reason = f"Description is {length} chars - optimal"
    else:
        reason = f"Description is {length} chars - aim for 120-160 characters"

    fix = None if status == ItemStatus.PASS else (
        "Write a compelling description between 120-160 characters"
    )
    return RuleOutcome(points, status, reason, fix, metric=length)


def check_open_graph(page: PageInput) -> RuleOutcome:
    return binary(
        detectors.has_open_graph(page.raw_html or ""), 4,
        "Open Graph tags present for social sharing",
        "Missing Open Graph tags - affects social media previews",
        "Add og:title, og:description, og:image meta tags",
        miss_status=ItemStatus.WARNING,
    )


# ============================================================================
# PERFORMANCE (0-20 points)
# ============================================================================

def check_load_time(page: PageInput) -> RuleOutcome:
    fix = "Optimize images, enable caching, minify CSS/JS"
    load_time = page.load_time_ms or 0
    if load_time <= 0:
        return RuleOutcome(0, ItemStatus.FAIL, "Load time not measured", fix)

    points, status = band_at_most(load_time, LOAD_TIME_BANDS_MS)
    shown = round_half_up(load_time)
    if load_time <= LOAD_TIME_FAST_MS:
        reason = f"Fast load time ({shown}ms)"
    else:
        reason = f"Slow load time ({shown}ms) - aim for under 2 seconds"

    return RuleOutcome(
        points, status, reason,
        None if status == ItemStatus.PASS else fix,
        metric=load_time,
    )


def check_page_size(page: PageInput) -> RuleOutcome:
    fix = "Compress images, remove unused code, lazy load content"
    size = page.html_size or 0
    if size <= 0:
        return RuleOutcome(0, ItemStatus.FAIL, "Page size not measured", fix)

    size_kb = round_half_up(size / 1024)
    if size_kb <= HTML_SIZE_GOOD_KB:
        return RuleOutcome(5, ItemStatus.PASS, f"Page size is {size_kb}KB - good", metric=size_kb)
    if size_kb <= HTML_SIZE_LARGE_KB:
        points, status = HTML_SIZE_LARGE_POINTS, ItemStatus.WARNING
    else:
        points, status = HTML_SIZE_HUGE_POINTS, ItemStatus.FAIL
    return RuleOutcome(
        points, status, f"Page size is {size_kb}KB - consider reducing", fix, metric=size_kb
    )


def check_viewport(page: PageInput) -> RuleOutcome:
    return binary(
        detectors.has_viewport_meta(page.raw_html or ""), 5,
        "Mobile viewport meta tag is set",
        "Missing viewport tag - required for mobile responsiveness",
        "Add <meta name='viewport' content='width=device-width, initial-scale=1'>",
    )


# ============================================================================
# ACCESSIBILITY (0-20 points)
# ============================================================================

def check_alt_text(page: PageInput) -> RuleOutcome:
    total = len(page.images)
    if total == 0:
        return RuleOutcome(10, ItemStatus.PASS, "No images to check", metric=1.0)

    with_alt = sum(1 for img in page.images if img.has_alt)
    ratio = with_alt / total
    points = round_half_up(ratio * 10)

    if ratio >= ALT_TEXT_PASS_RATIO:
        return RuleOutcome(
            points, ItemStatus.PASS,
            f"{with_alt}/{total} images have alt text",
            metric=ratio,
        )
    status = ItemStatus.WARNING if ratio >= ALT_TEXT_WARNING_RATIO else ItemStatus.FAIL
    return RuleOutcome(
        points, status,
        f"Only {with_alt}/{total} images have alt text - important for accessibility",
        "Add descriptive alt text to all images",
        metric=ratio,
    )


def check_lang(page: PageInput) -> RuleOutcome:
    return binary(
        detectors.has_lang_attribute(page.raw_html or ""), 5,
        "HTML lang attribute is set",
        "Missing lang attribute on <html> tag",
        "Add lang='en' (or appropriate language) to your <html> tag",
        miss_status=ItemStatus.WARNING,
    )


def check_aria(page: PageInput) -> RuleOutcome:
    return binary(
        detectors.has_aria(page.raw_html or ""), 5,
        "ARIA attributes detected for accessibility",
        "No ARIA landmarks found - helps screen readers navigate",
        "Add role='main', role='navigation' and aria-label attributes",
        miss_status=ItemStatus.WARNING,
    )


SEO_RULES = (
    Rule("https", "HTTPS Enabled", "technical", 5, check_https),
    Rule("schema_markup", "Schema Markup", "technical", 5, check_schema_markup),
    Rule("internal_links", "Internal Linking", "technical", 5, check_internal_links),
    Rule("canonical", "Canonical Tag", "technical", 5, check_canonical),
    Rule("h1", "H1 Heading", "content", 5, check_h1),
    Rule("h2", "Subheadings (H2)", "content", 3, check_h2),
    Rule("content_length", "Content Length", "content", 7, check_content_length),
    Rule("keyword_in_h1", "Keyword in H1", "content", 5, check_keyword_in_h1),
    Rule("title", "Title Tag", "meta", 8, check_title),
    Rule("meta_description", "Meta Description", "meta", 8, check_meta_description),
    Rule("open_graph", "Open Graph Tags", "meta", 4, check_open_graph),
    Rule("load_time", "Page Load Time", "performance", 10, check_load_time),
    Rule("page_size", "Page Size", "performance", 5, check_page_size),
    Rule("viewport", "Mobile Viewport", "performance", 5, check_viewport),
    Rule("alt_text", "Image Alt Text", "accessibility", 10, check_alt_text),
    Rule("lang", "Language Attribute", "accessibility", 5, check_lang),
    Rule("aria", "ARIA/Accessibility", "accessibility", 5, check_aria),
)

validate_rule_table(SEO_RULES, SEOBreakdown.CATEGORIES)


def analyze_seo(page: PageInput) -> SEOBreakdown:
    """Score a page against the SEO rule table.

    Missing fields are scored as worst case; this never raises.
    """
    return SEOBreakdown(**evaluate_rules(SEO_RULES, page, SEOBreakdown.CATEGORIES))
