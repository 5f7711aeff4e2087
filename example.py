"""Example usage of the page scorer - single page and site analysis."""

from seoaio import Config, PageAnalyzer, SiteAnalyzer, page_input_from_html, summarize
from seoaio.logging_config import setup_logging

HTML = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <title>What Is Schema Markup? A Practical Guide for Small Sites</title>
    <meta name="description" content="Schema markup is structured data that tells search and answer engines what a page is about. Learn the types that matter and how to add them.">
    <script type="application/ld+json">{"@context": "https://schema.org", "@type": "Article"}</script>
</head>
<body>
    <h1>Schema Markup Guide</h1>
    <p>Written by Alex Rivera. Published: 2024-05-02</p>
    <h2>What is schema markup?</h2>
    <p>Schema markup is structured data that describes a page to machines.</p>
    <h2>Key takeaways</h2>
    <ul><li>Start with Article schema.</li><li>Add FAQ schema for question pages.</li></ul>
    <a href="/blog">Blog</a>
</body>
</html>
"""


def main():
    """Run example page and site analysis."""

    config = Config.from_env()
    setup_logging(config.log_level)

    page = page_input_from_html("https://example.com/schema-guide", HTML, load_time_ms=1400)

    analyzer = PageAnalyzer(config)
    result = analyzer.analyze(page)
    summary = summarize(result)

    # Print results
    print(f"Page: {result.url}")
    print(f"SEO Score: {result.seo_score}/100")
    print(f"AIO Score: {result.aio_score}/100")
    print(f"Combined: {result.combined_score}/100 ({summary.grade}, {summary.label})")

    print("\nSEO Recommendations:")
    for rec in result.seo.recommendations:
        print(f"  • {rec}")

    print("\nAIO Recommendations:")
    for rec in result.aio.recommendations:
        print(f"  • {rec}")

    # Site analysis
    print("\n" + "=" * 60)
    print("Site Analysis")
    print("=" * 60)

    other = page_input_from_html("https://example.com/about", "<html><h1>About</h1></html>")
    site = SiteAnalyzer(config).analyze([page, other])

    print(f"Pages analyzed: {site.pages_analyzed}")
    print(f"Average SEO: {site.seo_score}  Average AIO: {site.aio_score}")
    print(f"Issues: {site.issues.critical} critical, {site.issues.warnings} warnings")

    print("\nTop fixes:")
    for fix in site.top_seo_fixes + site.top_aio_fixes:
        print(f"  • {fix}")


if __name__ == "__main__":
    main()
