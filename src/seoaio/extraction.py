"""Build a PageInput from an already-fetched HTML document."""

import json
import logging
from typing import Optional
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup

from seoaio.models import ImageRef, PageInput

logger = logging.getLogger(__name__)

# Elements whose text is never visible page copy
NON_CONTENT_TAGS = ("script", "style", "noscript", "template")


def page_input_from_html(
    url: str, html: str, load_time_ms: Optional[float] = None
) -> PageInput:
    """Extract the scoring inputs from HTML content.

    Args:
        url: The page URL
        html: HTML content as fetched by the crawler
        load_time_ms: Measured load time, if the crawler recorded one

    Returns:
        PageInput carrying the raw markup alongside the extracted fields
    """
    soup = BeautifulSoup(html, "html.parser")
    base_domain = urlparse(url).netloc

    # Title
    title = soup.find("title")
    title_text = title.get_text(strip=True) if title else None

    # Meta description
    description_tag = soup.find("meta", attrs={"name": "description"})
    description = description_tag.get("content") if description_tag else None

    # Headers
    headings = {
        level: tuple(tag.get_text(strip=True) for tag in soup.find_all(level))
        for level in ("h1", "h2", "h3")
    }

    # Images
    images = tuple(
        ImageRef(src=img.get("src", ""), alt=img.get("alt"))
        for img in soup.find_all("img")
    )

    # Links
    internal_links = []
    external_links = []
    for link in soup.find_all("a", href=True):
        href = link["href"]
        absolute_url = urljoin(url, href)
        if href.startswith("http") and urlparse(href).netloc != base_domain:
            external_links.append(absolute_url)
        else:
            internal_links.append(absolute_url)

    # Schema markup
    schema_markup = []
    for script in soup.find_all("script", type="application/ld+json"):
        try:
            if script.string:
                schema_markup.append(json.loads(script.string))
        except (json.JSONDecodeError, ValueError):
            logger.debug("Skipping invalid JSON-LD block on %s", url)

    # Visible text, one line per block so line-anchored patterns still work
    for tag in soup.find_all(list(NON_CONTENT_TAGS)):
        tag.decompose()
    text = soup.get_text(separator="\n", strip=True)

    return PageInput(
        url=url,
        title=title_text,
        meta_description=description,
        h1=headings["h1"],
        h2=headings["h2"],
        h3=headings["h3"],
        word_count=len(text.split()),
        images=images,
        internal_links=tuple(internal_links),
        external_links=tuple(external_links),
        load_time_ms=load_time_ms,
        html_size=len(html.encode("utf-8")),
        schema_markup=tuple(schema_markup),
        raw_html=html,
        text_content=text,
    )
