"""HTML extraction for patch listing pages and patch-note articles.

Listing pages are scanned with an escalating set of heuristics:

1. news links (href contains the news marker) whose text carries a version
   token or a "patch notes" phrase; the first one wins since listings are
   newest-first;
2. the page's og:title meta, if it carries a version token;
3. the page's first h1, if it carries a version token.

Nothing here touches the network; see resolver.py for fetching.
"""

from __future__ import annotations

import re
import urllib.parse
from typing import Iterable, Optional

from selectolax.parser import HTMLParser

from .base import ArticleDetail, ListingHit
from .version import VERSION_RE, find_patch

NEWS_MARKER = "/news/"
PATCH_NOTE_PHRASES = ("版本更新", r"Patch\s*Notes")


def _phrase_pattern(phrases: Iterable[str]) -> re.Pattern:
    return re.compile("|".join(f"(?:{p})" for p in phrases), re.IGNORECASE)


class ListingExtractor:
    """Configurable extractor for news-listing pages.

    Args:
        news_marker: substring an href must contain to count as a news article.
        phrases: regex fragments; link text matching any of them counts as a
            patch-notes link even without a version token.
    """

    def __init__(self, *, news_marker: str = NEWS_MARKER, phrases: Iterable[str] = PATCH_NOTE_PHRASES) -> None:
        self.news_marker = news_marker
        self.phrase_re = _phrase_pattern(phrases)

    def extract(self, html: str, page_url: str) -> Optional[ListingHit]:
        doc = HTMLParser(html)

        for a in doc.css("a[href]"):
            href = (a.attributes.get("href") or "").strip()
            if self.news_marker not in href:
                continue
            text = a.text(separator=" ", strip=True)
            if VERSION_RE.search(text) or self.phrase_re.search(text):
                return ListingHit(url=urllib.parse.urljoin(page_url, href), title=text)

        og = doc.css_first('meta[property="og:title"]')
        og_title = (og.attributes.get("content") or "").strip() if og else ""
        if og_title and VERSION_RE.search(og_title):
            return ListingHit(url=page_url, title=og_title)

        h1 = doc.css_first("h1")
        h1_text = h1.text(separator=" ", strip=True) if h1 else ""
        if h1_text and VERSION_RE.search(h1_text):
            return ListingHit(url=page_url, title=h1_text)

        return None


def extract_listing(html: str, page_url: str) -> Optional[ListingHit]:
    return ListingExtractor().extract(html, page_url)


def _published_at(doc: HTMLParser) -> Optional[str]:
    node = doc.css_first("time")
    if node is None:
        return None
    return (node.attributes.get("datetime") or "").strip() or node.text(strip=True) or None


def extract_published_at(html: str) -> Optional[str]:
    """Publish timestamp of an article: first <time>, datetime attribute preferred."""
    return _published_at(HTMLParser(html))


def extract_article(html: str, url: str) -> Optional[ArticleDetail]:
    """Version, heading and publish time from a patch-notes article page."""
    doc = HTMLParser(html)
    h1 = doc.css_first("h1")
    heading = h1.text(separator=" ", strip=True) if h1 else ""
    patch = find_patch(heading)
    if patch is None:
        title = doc.css_first("title")
        patch = find_patch(title.text(strip=True) if title else "")
    if patch is None:
        return None
    return ArticleDetail(patch=patch, url=url, title=heading or None, published_at=_published_at(doc))
