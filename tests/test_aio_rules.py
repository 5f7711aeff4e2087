"""Tests for the AIO rule table."""

import pytest

from seoaio.aio_rules import AIO_RULES, analyze_aio, average_sentence_length
from seoaio.models import ItemStatus, PageInput
from seoaio.rules import category_totals
from seoaio.scoring import calculate_total_score


def text_item(text, name):
    return analyze_aio(PageInput(url="https://a.com", text_content=text)).find(name)


def html_item(html, name):
    return analyze_aio(PageInput(url="https://a.com", raw_html=html)).find(name)


class TestRuleTable:
    """The AIO table spends exactly 20 points per category."""

    def test_category_totals(self):
        assert category_totals(AIO_RULES) == {
            "structure": 20,
            "authority": 20,
            "schema": 20,
            "content_quality": 20,
            "quotability": 20,
        }

    def test_breakdown_max_is_100(self, bare_page):
        breakdown = analyze_aio(bare_page)
        assert sum(i.max_score for i in breakdown.items()) == 100


class TestStructure:
    """Structure category checks."""

    def test_direct_answer_needs_capitalized_line(self):
        assert text_item("Python is a programming language.", "Direct Answers").score == 5
        assert text_item("python is a programming language.", "Direct Answers").score == 0

    def test_direct_answer_matches_any_line(self):
        text = "welcome back\nA sitemap is a list of pages."
        assert text_item(text, "Direct Answers").status == ItemStatus.PASS

    @pytest.mark.parametrize("text", [
        "See our FAQ below",
        "Frequently Asked Questions",
        "Common questions about billing",
    ])
    def test_faq_section(self, text):
        assert text_item(text, "FAQ Section").score == 4

    def test_lists_and_tables(self):
        html = "<ol><li>a</li></ol><table class='x'></table>"
        assert html_item(html, "Lists & Steps").score == 4
        assert html_item(html, "Data Tables").score == 3

    def test_missing_table_is_a_warning(self):
        result = html_item("<p>none</p>", "Data Tables")
        assert result.status == ItemStatus.WARNING

    @pytest.mark.parametrize("text", ["Key takeaways", "In conclusion, it works", "TL;DR: yes", "tldr"])
    def test_key_takeaways(self, text):
        assert text_item(text, "Key Takeaways").score == 4

    def test_passing_items_keep_their_fix(self):
        result = text_item("Frequently asked questions", "FAQ Section")
        assert result.status == ItemStatus.PASS
        assert result.how_to_fix == "Add a 'Frequently Asked Questions' section with common queries"


class TestAuthority:
    """Authority category checks."""

    def test_author_byline(self):
        assert html_item('<span class="author">Sam</span>', "Author Information").score == 5
        assert html_item("<p>Written by Sam Lee</p>", "Author Information").score == 5
        assert html_item("<p>Nothing here</p>", "Author Information").status == ItemStatus.FAIL

    @pytest.mark.parametrize("text", [
        "Revenue doubled [1].",
        "According to Statista, usage grew.",
        "This was cited widely.",
        "See the reference list.",
    ])
    def test_citations(self, text):
        assert text_item(text, "Citations & Sources").score == 5

    def test_dates(self):
        html = "<p>Published: 2024-01-01</p><p>Last modified yesterday</p>"
        assert html_item(html, "Publish Date").score == 3
        assert html_item(html, "Last Updated").score == 4

    def test_missing_dates_are_warnings(self):
        assert html_item("<p></p>", "Publish Date").status == ItemStatus.WARNING
        assert html_item("<p></p>", "Last Updated").status == ItemStatus.WARNING

    def test_expert_quote(self):
        text = '"Clear answers beat clever prose every single time," said the editor.'
        assert text_item(text, "Expert Quotes").score == 3
        assert text_item('"Too short," said Bo.', "Expert Quotes").score == 0


class TestSchema:
    """Schema category checks."""

    def test_types_detected_in_markup(self):
        html = (
            '<script type="application/ld+json">'
            '{"@type": "FAQPage"} {"@type": "HowTo"} {"@type": "NewsArticle"}'
            "</script>"
        )
        breakdown = analyze_aio(PageInput(url="https://a.com", raw_html=html))
        assert [i.score for i in breakdown.schema] == [5, 5, 5, 5]

    def test_types_detected_in_blocks(self):
        page = PageInput(
            url="https://a.com",
            schema_markup=({"@graph": [{"@type": "FAQPage"}, {"@type": ["HowTo"]}]},),
        )
        breakdown = analyze_aio(page)
        assert breakdown.find("JSON-LD Present").score == 5
        assert breakdown.find("FAQ Schema").score == 5
        assert breakdown.find("HowTo Schema").score == 5
        assert breakdown.find("Article Schema").score == 0

    def test_each_type_is_independent(self):
        page = PageInput(url="https://a.com", schema_markup=({"@type": "BlogPosting"},))
        breakdown = analyze_aio(page)
        assert breakdown.find("Article Schema").status == ItemStatus.PASS
        assert breakdown.find("FAQ Schema").status == ItemStatus.FAIL
        assert breakdown.find("HowTo Schema").status == ItemStatus.WARNING


class TestContentQuality:
    """Content quality category checks."""

    def test_definitions(self):
        assert text_item("A crawler is a program.", "Definitions").score == 5
        assert text_item("GEO refers to answer engines.", "Definitions").score == 5

    @pytest.mark.parametrize("text", ["Up 12.5% this year", "3 million users", "The data shows growth"])
    def test_statistics(self, text):
        assert text_item(text, "Statistics & Data").score == 5

    @pytest.mark.parametrize("text", ["SEO vs GEO", "Python versus Go", "compared to last year"])
    def test_comparisons(self, text):
        assert text_item(text, "Comparisons").score == 4

    def test_original_research(self):
        assert text_item("We analyzed 500 sites.", "Original Research").score == 6
        assert text_item("They analyzed 500 sites.", "Original Research").score == 0


class TestQuotability:
    """Quotability category checks."""

    SIXTEEN = "one two three four five six seven eight nine ten eleven twelve thirteen fourteen fifteen sixteen"

    @pytest.mark.parametrize("count,score,status", [
        (0, 0, ItemStatus.FAIL),
        (1, 2, ItemStatus.WARNING),
        (2, 4, ItemStatus.WARNING),
        (3, 6, ItemStatus.PASS),
    ])
    def test_quotable_snippets(self, count, score, status):
        text = ". ".join([self.SIXTEEN] * count + ["Short one"]) + "."
        result = text_item(text, "Quotable Snippets")
        assert result.score == score
        assert result.status == status
        assert result.metric == count

    def test_overlong_sentences_are_not_quotable(self):
        text = " ".join(["word"] * 61) + "."
        assert text_item(text, "Quotable Snippets").metric == 0

    @pytest.mark.parametrize("words,score,status", [
        (10, 6, ItemStatus.PASS),
        (15, 6, ItemStatus.PASS),
        (18, 5, ItemStatus.PASS),
        (22, 3, ItemStatus.WARNING),
        (30, 1, ItemStatus.WARNING),
        (40, 0, ItemStatus.FAIL),
    ])
    def test_sentence_brevity(self, words, score, status):
        text = (" ".join(["word"] * words) + ". ") * 4
        result = text_item(text, "Sentence Brevity")
        assert result.score == score
        assert result.status == status
        assert result.metric == words

    def test_brevity_reason(self):
        text = (" ".join(["word"] * 22) + ". ") * 2
        result = text_item(text, "Sentence Brevity")
        assert result.reason == "Average 22 words/sentence - too long for AI"
        assert result.how_to_fix == "Shorten sentences to under 20 words on average"

    def test_no_text_earns_no_brevity_credit(self):
        result = text_item("", "Sentence Brevity")
        assert result.score == 0
        assert result.status == ItemStatus.FAIL
        assert result.metric == 0

    def test_average_sentence_length(self):
        assert average_sentence_length("One two. Three four five six!") == 3
        assert average_sentence_length("") == 0

    def test_strong_opening(self):
        opening = (
            "Schema markup is structured data that tells search engines and answer engines "
            "what a page is about. It uses JSON-LD."
        )
        assert text_item(opening, "Strong Opening").score == 5
        assert text_item("Hi. Short.", "Strong Opening").status == ItemStatus.WARNING

    def test_scannable_format(self):
        assert html_item("<p><em>key</em></p>", "Scannable Format").score == 3
        assert html_item("<p><strong class='x'>key</strong></p>", "Scannable Format").score == 0


class TestScenarios:
    """Whole-breakdown behaviour."""

    def test_rich_page_scores_above_80(self, rich_page):
        assert calculate_total_score(analyze_aio(rich_page)) > 80

    def test_bare_page_scores_zero(self, bare_page):
        assert calculate_total_score(analyze_aio(bare_page)) == 0
