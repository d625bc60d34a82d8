"""Resolve the latest patch from an ordered list of news-listing pages.

Sources are tried strictly in order and the first one that yields a parsable
patch wins; there is no reconciliation across sources. A failing source
(network error, timeout, non-2xx, nothing extractable) is logged and skipped.
Only when every source fails is PatchResolutionError raised.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

import httpx

from wildrift.config import ACCEPT_LANGUAGE, DEFAULT_FETCH_TIMEOUT, USER_AGENT

from .base import PatchCandidate, PatchResolutionError
from .extractor import ListingExtractor, extract_article, extract_published_at
from .version import find_patch

logger = logging.getLogger(__name__)


@dataclass
class PatchResolver:
    timeout: float = DEFAULT_FETCH_TIMEOUT
    user_agent: str = USER_AGENT
    accept_language: str = ACCEPT_LANGUAGE
    extractor: ListingExtractor = field(default_factory=ListingExtractor)
    # Tests inject httpx.MockTransport here
    transport: Optional[httpx.AsyncBaseTransport] = None

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout,
            headers={
                "User-Agent": self.user_agent,
                "Accept-Language": self.accept_language,
            },
            follow_redirects=True,
            transport=self.transport,
        )

    async def _fetch_html(self, client: httpx.AsyncClient, url: str) -> str:
        # wait_for bounds the whole request, httpx timeouts are per phase
        resp = await asyncio.wait_for(client.get(url), timeout=self.timeout)
        resp.raise_for_status()
        return resp.text

    async def resolve(self, sources: Iterable[str]) -> PatchCandidate:
        sources = [s for s in (sources or []) if s]
        async with self._client() as client:
            for src in sources:
                try:
                    candidate = await self._resolve_source(client, src)
                except Exception as exc:
                    # Timeouts, HTTP errors and parser failures all mean "try the next source"
                    logger.warning("patch source fail: %s (%s: %s)", src, type(exc).__name__, exc)
                    continue
                if candidate is None:
                    logger.info("patch source yielded nothing: %s", src)
                    continue
                logger.info("patch %s resolved from %s", candidate.patch, src)
                return candidate
        raise PatchResolutionError(f"could not resolve the latest patch from {len(sources)} source(s)")

    async def _resolve_source(self, client: httpx.AsyncClient, src: str) -> Optional[PatchCandidate]:
        listing_html = await self._fetch_html(client, src)
        hit = self.extractor.extract(listing_html, src)
        if hit is None:
            return None

        patch = find_patch(hit.title)
        if patch:
            # Version already in the link text; the article is only needed for its timestamp
            article_html = listing_html if hit.url == src else await self._fetch_html(client, hit.url)
            return PatchCandidate(
                patch=patch,
                url=hit.url,
                source=src,
                title=hit.title,
                published_at=extract_published_at(article_html),
            )

        detail = extract_article(await self._fetch_html(client, hit.url), hit.url)
        if detail is None:
            return None
        return PatchCandidate(
            patch=detail.patch,
            url=detail.url,
            source=src,
            title=detail.title,
            published_at=detail.published_at,
        )


async def fetch_latest_patch(sources: Iterable[str], *, resolver: Optional[PatchResolver] = None) -> PatchCandidate:
    return await (resolver or PatchResolver()).resolve(sources)
