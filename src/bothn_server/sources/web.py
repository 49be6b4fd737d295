"""
Web Document Source

Fetches a web page and reduces it to the visible body text used by the
extraction session.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

import httpx
from bs4 import BeautifulSoup

from ..config import settings
from ..core.errors import DocumentFetchError

logger = logging.getLogger("bothn.sources")

_WHITESPACE_RUN_RE = re.compile(r"\s\s+")


def html_to_text(html: str) -> str:
    """
    Visible text of an HTML document.

    <script> and <style> elements are dropped. Block boundaries become
    newlines, then every run of two or more whitespace characters is
    collapsed to a single space.
    """
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style"]):
        tag.decompose()

    root = soup.body or soup
    text = root.get_text("\n")
    return _WHITESPACE_RUN_RE.sub(" ", text).strip()


class WebPageFetcher:
    def __init__(
        self,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.timeout = timeout or settings.fetch_timeout
        self._transport = transport

    async def fetch_html(self, url: str) -> str:
        """
        GET `url` and return the response body.

        Raises
        ------
        DocumentFetchError
            On transport errors or non-2xx responses.
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                resp = await client.get(url)
            resp.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.error(
                "Fetching %s failed (%s): %s",
                url,
                type(exc).__name__,
                str(exc),
            )
            raise DocumentFetchError(
                f"Fetching {url} failed: {type(exc).__name__}"
            ) from exc

        return resp.text

    async def fetch_text(self, url: str) -> str:
        html = await self.fetch_html(url)
        text = html_to_text(html)
        logger.info("Fetched %s: %d chars of text", url, len(text))
        return text
