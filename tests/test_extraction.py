"""Tests for building PageInput from HTML."""

import pytest

from seoaio.analyzer import analyze_page_unified
from seoaio.extraction import page_input_from_html


@pytest.fixture
def extracted(rich_html):
    return page_input_from_html("https://example.com/geo-guide", rich_html, load_time_ms=640)


class TestPageInputFromHtml:
    """page_input_from_html."""

    def test_head_fields(self, extracted, rich_html):
        assert extracted.title == "Generative Engine Optimization Guide: How AI Answers Work"
        assert extracted.meta_description.startswith("Learn how generative engine optimization")
        assert extracted.load_time_ms == 640
        assert extracted.html_size == len(rich_html.encode("utf-8"))

    def test_headings(self, extracted):
        assert extracted.h1 == ("Generative Engine Optimization Guide",)
        assert extracted.h2 == ("What is generative engine optimization?", "Frequently asked questions")
        assert extracted.h3 == ()

    def test_images(self, extracted):
        assert len(extracted.images) == 1
        assert extracted.images[0].src == "/chart.png"
        assert extracted.images[0].has_alt

    def test_links_split_by_domain(self, extracted):
        assert extracted.internal_links == (
            "https://example.com/pricing",
            "https://example.com/blog",
            "https://example.com/about",
        )
        assert extracted.external_links == ("https://gartner.com/report",)

    def test_json_ld_blocks(self, extracted):
        types = [block["@type"] for block in extracted.schema_markup]
        assert types == ["FAQPage", "BlogPosting"]

    def test_text_excludes_scripts(self, extracted):
        assert "Written by Jane Doe" in extracted.text_content
        assert "schema.org" not in extracted.text_content
        assert extracted.word_count == len(extracted.text_content.split())

    def test_raw_html_is_kept(self, extracted, rich_html):
        assert extracted.raw_html == rich_html

    def test_invalid_json_ld_is_skipped(self):
        html = (
            '<html><head><script type="application/ld+json">{not json</script>'
            '<script type="application/ld+json">{"@type": "HowTo"}</script></head></html>'
        )
        page = page_input_from_html("https://a.com", html)
        assert page.schema_markup == ({"@type": "HowTo"},)

    def test_missing_fields(self):
        page = page_input_from_html("https://a.com", "<p>Hello</p>")
        assert page.title is None
        assert page.meta_description is None
        assert page.load_time_ms is None
        assert page.word_count == 1


def test_extracted_page_scores_well(extracted):
    result = analyze_page_unified(extracted)
    assert result.seo.details.find("Title Tag").score == 8
    assert result.seo.details.find("Internal Linking").score == 5
    assert result.aio.details.find("FAQ Schema").score == 5
    assert result.aio.details.find("Article Schema").score == 5
