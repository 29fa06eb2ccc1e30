"""
ClipNotes v1 - Test Configuration and Fixtures

Shared fixtures: a fake TikTok site served through httpx.MockTransport and
parsers wired to it.
"""

import asyncio
from typing import Dict, List, Union

import httpx
import pytest
import pytest_asyncio

from config import TikTokConfig
from note_service.parsers import ParserRegistry, TikTokParser

CANONICAL_URL = "https://www.tiktok.com/@someuser/video/1234567890123456789"
SHORT_URL = "https://vm.tiktok.com/ABCDEFG/"

# Renders every note field on its own line so tests can read them back
FIELDS_TEMPLATE = (
    "date={{date}}\n"
    "videoId={{videoId}}\n"
    "videoURL={{videoURL}}\n"
    "videoDescription={{videoDescription}}\n"
    "videoPlayer={{videoPlayer}}\n"
    "authorName={{authorName}}\n"
    "authorURL={{authorURL}}\n"
)


def html_page(canonical: str = None, og_url: str = None, og_description: str = None) -> str:
    """Build a minimal HTML page carrying the requested head tags."""
    head = ["<title>TikTok</title>"]
    if canonical:
        head.append(f'<link rel="canonical" href="{canonical}">')
    if og_url:
        head.append(f'<meta property="og:url" content="{og_url}">')
    if og_description is not None:
        head.append(f'<meta property="og:description" content="{og_description}">')
    return f"<html><head>{''.join(head)}</head><body><div id='app'></div></body></html>"


def read_fields(content: str) -> Dict[str, str]:
    """Parse the output of FIELDS_TEMPLATE back into a dict."""
    fields = {}
    for line in content.splitlines():
        key, _, value = line.partition("=")
        fields[key] = value
    return fields


PageSpec = Union[str, int, Exception]


class FakeTikTok:
    """
    Serves canned responses keyed by URL and records every request.

    A page spec may be HTML text (200), an int status code, or an exception
    to raise as a transport error.
    """

    def __init__(self):
        self.pages: Dict[str, PageSpec] = {}
        self.requests: List[httpx.Request] = []

    def add(self, url: str, page: PageSpec) -> None:
        self.pages[url] = page

    @property
    def requested_urls(self) -> List[str]:
        return [str(request.url) for request in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        page = self.pages.get(str(request.url))
        if page is None:
            return httpx.Response(404, text="not found")
        if isinstance(page, Exception):
            raise page
        if isinstance(page, int):
            return httpx.Response(page, text="")
        return httpx.Response(200, text=page, headers={"content-type": "text/html"})

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def fake_tiktok() -> FakeTikTok:
    """Fake TikTok with a canonical video page and a short link pointing at it."""
    site = FakeTikTok()
    site.add(CANONICAL_URL, html_page(
        canonical=CANONICAL_URL,
        og_url=CANONICAL_URL + "?is_from_webapp=1",
        og_description="desc",
    ))
    site.add(SHORT_URL, html_page(canonical=CANONICAL_URL))
    return site


@pytest.fixture
def tiktok_config() -> TikTokConfig:
    return TikTokConfig(
        embed_width=400,
        embed_height=700,
        note_template=FIELDS_TEMPLATE,
        title_template="{{authorName}} {{date}}",
        content_type_slug="tiktok-video",
        date_format="%Y-%m-%d",
        filename_date_format="%Y%m%d",
        fetch_timeout=5.0,
    )


@pytest.fixture
def sync_http_client(fake_tiktok: FakeTikTok):
    """Client for tests that drive their own event loop (TestClient, CliRunner)."""
    client = fake_tiktok.client()
    yield client
    asyncio.run(client.aclose())


@pytest_asyncio.fixture
async def http_client(fake_tiktok: FakeTikTok):
    async with fake_tiktok.client() as client:
        yield client


@pytest.fixture
def parser(tiktok_config: TikTokConfig, http_client: httpx.AsyncClient) -> TikTokParser:
    return TikTokParser(tiktok_config, client=http_client)


@pytest.fixture
def registry(parser: TikTokParser) -> ParserRegistry:
    registry = ParserRegistry()
    registry.register(parser)
    return registry
