"""Letter grades and labels for 0-100 scores."""

from seoaio.constants import (
    GRADE_THRESHOLDS,
    LOWEST_GRADE,
    LOWEST_LABEL,
    SCORE_LABELS,
)


def _clamp(score: float) -> float:
    return max(0, min(100, score))


def score_to_grade(score: float) -> str:
    """Map a score to A+, A, B+, B, C+, C, D+ or D."""
    score = _clamp(score)
    for minimum, grade in GRADE_THRESHOLDS:
        if score >= minimum:
            return grade
    return LOWEST_GRADE


def score_label(score: float) -> str:
    """Map a score to Excellent, Good, Average, Poor or Critical."""
    score = _clamp(score)
    for minimum, label in SCORE_LABELS:
        if score >= minimum:
            return label
    return LOWEST_LABEL
