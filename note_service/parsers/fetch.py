"""
ClipNotes v1 - Page Fetching

HTTP helpers shared by the parsers.
"""

import logging
from typing import Optional

import httpx
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/108.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
}


async def fetch_url(
    url: str,
    timeout: float = 30.0,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """
    Fetch HTML content from a URL.

    Args:
        url: The URL to fetch
        timeout: Request timeout in seconds
        client: Optional shared client; a short-lived one is opened otherwise

    Returns:
        HTML content as string

    Raises:
        httpx.HTTPError: If the request fails
    """
    logger.debug(f"GET {url}")

    if client is not None:
        response = await client.get(
            url, headers=DEFAULT_HEADERS, timeout=timeout, follow_redirects=True
        )
        response.raise_for_status()
        return response.text

    async with httpx.AsyncClient(follow_redirects=True, timeout=timeout) as owned_client:
        response = await owned_client.get(url, headers=DEFAULT_HEADERS)
        response.raise_for_status()
        return response.text


def meta_content(soup: BeautifulSoup, prop: str) -> Optional[str]:
    """Return the content of a <meta property=...> tag, if present and non-empty."""
    meta = soup.find("meta", attrs={"property": prop})
    if meta and meta.get("content"):
        return meta["content"]
    return None


def canonical_href(soup: BeautifulSoup) -> Optional[str]:
    """Return the href of <link rel="canonical">, if present and non-empty."""
    link = soup.find("link", attrs={"rel": "canonical"})
    if link and link.get("href"):
        return link["href"]
    return None
