# src/seoaio/constants.py
"""Centralized constants for the SEO and AIO scorers.

Point allocations and band boundaries used by the rule tables in
seo_rules.py and aio_rules.py. Bands are ordered best-first as
(threshold, points, status) tuples.
"""

# =============================================================================
# Score Scales
# =============================================================================

# Every category is normalized to this many points
CATEGORY_MAX_SCORE = 20

# Overall SEO / AIO scores are normalized to this many points
TOTAL_MAX_SCORE = 100

# Default number of fixes returned per breakdown
DEFAULT_RECOMMENDATION_LIMIT = 5

# Default number of pooled fixes returned for a whole site
DEFAULT_SITE_FIX_LIMIT = 5

# Default number of fixes shown in the free-score teaser
DEFAULT_TEASER_FIX_LIMIT = 3


# =============================================================================
# SEO - Technical
# =============================================================================

# Internal links needed for full credit
INTERNAL_LINKS_TARGET = 3

# Partial credit cap (1 point per link)
INTERNAL_LINKS_PARTIAL_CAP = 4


# =============================================================================
# SEO - Content
# =============================================================================

H1_SINGLE_POINTS = 5
H1_MULTIPLE_POINTS = 3

H2_TARGET = 2
H2_TARGET_POINTS = 3
H2_SINGLE_POINTS = 2

# Minimum words (inclusive) for each band
WORD_COUNT_BANDS = (
    (1500, 7, "pass"),
    (800, 5, "pass"),
    (300, 3, "warning"),
    (100, 1, "warning"),
)

# Word count from which the content is described as comprehensive
WORD_COUNT_COMPREHENSIVE = 800
WORD_COUNT_MODERATE = 300

# Title words must be longer than this to count as keywords
MIN_TITLE_KEYWORD_LENGTH = 3


# =============================================================================
# SEO - Meta
# =============================================================================

# (min, max, points, status), inclusive ranges
TITLE_LENGTH_BANDS = (
    (50, 60, 8, "pass"),
    (30, 70, 6, "warning"),
)
TITLE_ANY_POINTS = 3

DESCRIPTION_LENGTH_BANDS = (
    (120, 160, 8, "pass"),
    (70, 180, 5, "warning"),
)
DESCRIPTION_ANY_POINTS = 2


# =============================================================================
# SEO - Performance
# =============================================================================

# Maximum milliseconds (inclusive) for each band
LOAD_TIME_BANDS_MS = (
    (1000, 10, "pass"),
    (2000, 8, "pass"),
    (3000, 5, "warning"),
    (5000, 2, "warning"),
)

# Load time up to which the page is described as fast
LOAD_TIME_FAST_MS = 2000

# HTML size in KB (inclusive)
HTML_SIZE_GOOD_KB = 100
HTML_SIZE_LARGE_KB = 200
HTML_SIZE_LARGE_POINTS = 3
HTML_SIZE_HUGE_POINTS = 1


# =============================================================================
# SEO - Accessibility
# =============================================================================

ALT_TEXT_PASS_RATIO = 0.9
ALT_TEXT_WARNING_RATIO = 0.5


# =============================================================================
# AIO - Quotability
# =============================================================================

# Word range (inclusive) of a self-contained, quotable sentence
QUOTABLE_MIN_WORDS = 15
QUOTABLE_MAX_WORDS = 60

# Quotable sentences needed for full credit
QUOTABLE_TARGET = 3
QUOTABLE_POINTS_PER_SENTENCE = 2
QUOTABLE_PARTIAL_CAP = 5

# Maximum average words per sentence (inclusive) for each band
SENTENCE_LENGTH_BANDS = (
    (15, 6, "pass"),
    (20, 5, "pass"),
    (25, 3, "warning"),
    (35, 1, "warning"),
)

# Average length up to which sentences are described as good for AI
SENTENCE_LENGTH_GOOD = 20

# Sentences that make up the opening paragraph
OPENING_SENTENCES = 3
OPENING_MIN_CHARS = 100


# =============================================================================
# Grading
# =============================================================================

# (minimum score, grade), checked top-down
GRADE_THRESHOLDS = (
    (90, "A+"),
    (80, "A"),
    (72, "B+"),
    (65, "B"),
    (57, "C+"),
    (50, "C"),
    (40, "D+"),
)
LOWEST_GRADE = "D"

SCORE_LABELS = (
    (90, "Excellent"),
    (70, "Good"),
    (50, "Average"),
    (30, "Poor"),
)
LOWEST_LABEL = "Critical"
