"""Shared fixtures for the scorer tests."""

import pytest

from seoaio.models import ImageRef, PageInput


FILLER_SENTENCE = (
    "Each section explains one idea in plain language so an answer engine can quote it cleanly."
)

RICH_TEXT_LINES = [
    "Generative engine optimization is the practice of structuring web content so that "
    "AI answer engines can quote it accurately.",
    "Our research across two thousand pages found that clear definitions and short answers "
    "earn far more citations than long essays.",
    "Key takeaways placed at the top of the article help readers and machines grasp the "
    "main point within seconds.",
    "Structured content versus unstructured prose is the single biggest difference between "
    "pages that get cited and pages that do not.",
    "\"Pages with a clear author and visible sources consistently win more citations in our "
    "tests,\" says Jane Doe of the research team.",
    "According to Gartner, 45% of searches will end inside an AI answer engine by the end "
    "of next year.",
    "Frequently asked questions give answer engines ready made pairs of questions and "
    "answers that they can lift verbatim.",
]

RICH_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <title>Generative Engine Optimization Guide: How AI Answers Work</title>
    <meta name="description" content="Learn how generative engine optimization works, why answer engines quote some pages and not others, and which fixes earn citations.">
    <link rel="canonical" href="https://example.com/geo-guide">
    <meta property="og:title" content="Generative Engine Optimization Guide">
    <script type="application/ld+json">{"@context": "https://schema.org", "@type": "FAQPage"}</script>
    <script type="application/ld+json">{"@context": "https://schema.org", "@type": "BlogPosting"}</script>
</head>
<body>
<main role="main">
    <article>
        <h1>Generative Engine Optimization Guide</h1>
        <p class="byline">Written by Jane Doe</p>
        <p>Published: 2024-03-01</p>
        <p>Last updated: 2025-01-15</p>
        <h2>What is generative engine optimization?</h2>
        <p><strong>Generative engine optimization</strong> is the practice of structuring content.</p>
        <h2>Frequently asked questions</h2>
        <ul><li>What is an answer engine?</li><li>How do citations work?</li></ul>
        <table><tr><th>Signal</th><th>Impact</th></tr><tr><td>FAQ</td><td>High</td></tr></table>
        <img src="/chart.png" alt="Citation share chart">
        <a href="/pricing">Pricing</a>
        <a href="/blog">Blog</a>
        <a href="https://example.com/about">About</a>
        <a href="https://gartner.com/report">Gartner</a>
    </article>
</main>
</body>
</html>
"""


def rich_text(filler_count: int = 100) -> str:
    return "\n".join(RICH_TEXT_LINES + [FILLER_SENTENCE] * filler_count)


@pytest.fixture
def rich_page():
    """A well-optimized page that should score highly on both dimensions."""
    return PageInput(
        url="https://example.com/geo-guide",
        title="Generative Engine Optimization Guide: How AI Answers Work",
        meta_description=(
            "Learn how generative engine optimization works, why answer engines quote some "
            "pages and not others, and which fixes earn citations."
        ),
        h1=("Generative Engine Optimization Guide",),
        h2=("What is generative engine optimization?", "Frequently asked questions"),
        word_count=1800,
        images=(ImageRef(src="/chart.png", alt="Citation share chart"),),
        internal_links=(
            "https://example.com/pricing",
            "https://example.com/blog",
            "https://example.com/about",
        ),
        external_links=("https://gartner.com/report",),
        load_time_ms=850,
        html_size=48_000,
        schema_markup=(
            {"@context": "https://schema.org", "@type": "FAQPage"},
            {"@context": "https://schema.org", "@type": "BlogPosting"},
        ),
        raw_html=RICH_HTML,
        text_content=rich_text(),
    )


@pytest.fixture
def bare_page():
    """A page with nothing but a URL and an empty document."""
    return PageInput(url="https://example.com/empty", word_count=0, raw_html="<html></html>")


@pytest.fixture
def rich_html():
    return RICH_HTML
