"""
ClipNotes v1 - TikTok Parser

Recognizes TikTok video links (canonical and short), resolves short links,
and builds a note from the Open Graph tags of the video page.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import httpx
from bs4 import BeautifulSoup

from config import TikTokConfig
from ..templates import TemplateEngine
from .base import BaseParser, Note
from .fetch import canonical_href, fetch_url, meta_content
from .urls import CanonicalUrl, ShortLink, TikTokUrl, parse_tiktok_url

logger = logging.getLogger(__name__)


class ShortUrlResolutionError(Exception):
    """Raised when a short link page carries no canonical URL"""


class CanonicalUrlMismatchError(RuntimeError):
    """Raised when a URL accepted for extraction is not a canonical post URL"""


@dataclass(frozen=True)
class TikTokNoteData:
    """Fields extracted from one TikTok video page"""

    date: str
    video_id: str
    video_url: str
    video_description: str
    video_player: str
    author_name: str
    author_url: str

    def to_template_fields(self) -> dict:
        """Flat field map handed to the note template"""
        return {
            "date": self.date,
            "videoId": self.video_id,
            "videoURL": self.video_url,
            "videoDescription": self.video_description,
            "videoPlayer": self.video_player,
            "authorName": self.author_name,
            "authorURL": self.author_url,
        }


class TikTokParser(BaseParser):
    """
    Parser for TikTok video posts.

    Extracts:
    - Author handle and video id from the canonical URL
    - Video URL from og:url (falls back to the canonical URL)
    - Description from og:description (falls back to "")
    - An embeddable player iframe

    Short links (vm.tiktok.com/..., tiktok.com/t/...) are resolved by fetching
    them and reading <link rel="canonical"> or og:url from the response.
    """

    def __init__(
        self,
        config: Optional[TikTokConfig] = None,
        client: Optional[httpx.AsyncClient] = None,
        template_engine: Optional[TemplateEngine] = None,
    ):
        """
        Initialize TikTok parser.

        Args:
            config: Note templates, embed size and date formats
            client: Shared HTTP client; one is opened per fetch when omitted
            template_engine: Engine used to render note content and titles
        """
        self.config = config or TikTokConfig()
        self.client = client
        self.template_engine = template_engine or TemplateEngine()

    async def classify(self, content: str) -> Optional[CanonicalUrl]:
        """Return the canonical URL for TikTok video links, None otherwise."""
        content = content.strip()
        if not self.is_valid_url(content):
            return None

        parsed = parse_tiktok_url(content)
        if isinstance(parsed, CanonicalUrl):
            return parsed

        if isinstance(parsed, ShortLink):
            try:
                resolved = await self.resolve_short_url(parsed)
            except Exception as e:
                # Probing must never raise; extraction surfaces real errors
                logger.warning(f"Failed to resolve TikTok short URL {content}: {e!r}")
                return None
            if isinstance(resolved, CanonicalUrl):
                return resolved
            logger.info(f"Short URL {content} resolved to non-video URL {resolved.url}")

        return None

    async def resolve_short_url(self, link: ShortLink) -> TikTokUrl:
        """
        Fetch a short link and parse the canonical URL out of the response.

        Raises:
            httpx.HTTPError: If the request fails
            ShortUrlResolutionError: If the page names no canonical URL
        """
        html_content = await fetch_url(link.url, self.config.fetch_timeout, self.client)
        soup = BeautifulSoup(html_content, "html.parser")

        target = canonical_href(soup) or meta_content(soup, "og:url")
        if not target:
            raise ShortUrlResolutionError(f"Could not resolve canonical TikTok URL for {link.url}")

        logger.debug(f"Resolved {link.url} -> {target}")
        return parse_tiktok_url(target)

    async def prepare_note(self, content: str, resolved: Optional[CanonicalUrl] = None) -> Note:
        """Fetch the video page and render the note."""
        created_at = datetime.now()
        data = await self._parse_video(content.strip(), resolved, created_at)
        cfg = self.config

        body = self.template_engine.render(cfg.note_template, data.to_template_fields())
        title = self.template_engine.render(cfg.title_template, {
            "authorName": data.author_name,
            "date": self.format_date(created_at, cfg.filename_date_format),
        })

        logger.info(f"Prepared TikTok note for video {data.video_id} by {data.author_name}")
        return Note(
            filename=self.sanitize_filename(title) or data.video_id,
            extension="md",
            content=body,
            content_type_slug=cfg.content_type_slug,
            created_at=created_at,
        )

    async def _parse_video(
        self,
        url: str,
        resolved: Optional[CanonicalUrl],
        created_at: datetime,
    ) -> TikTokNoteData:
        """Resolve the URL if needed, fetch the page, and extract the fields."""
        canonical = resolved or await self._canonicalize(url)

        html_content = await fetch_url(canonical.url, self.config.fetch_timeout, self.client)
        soup = BeautifulSoup(html_content, "html.parser")

        return TikTokNoteData(
            date=self.format_date(created_at, self.config.date_format),
            video_id=canonical.video_id,
            video_url=meta_content(soup, "og:url") or canonical.url,
            video_description=meta_content(soup, "og:description") or "",
            video_player=self._build_player(canonical),
            author_name=canonical.handle,
            author_url=canonical.author_url,
        )

    async def _canonicalize(self, url: str) -> CanonicalUrl:
        parsed = parse_tiktok_url(url)
        if isinstance(parsed, ShortLink):
            parsed = await self.resolve_short_url(parsed)

        if not isinstance(parsed, CanonicalUrl):
            raise CanonicalUrlMismatchError(f"Not a canonical TikTok video URL: {parsed.url}")
        return parsed

    def _build_player(self, canonical: CanonicalUrl) -> str:
        return (
            f'<iframe width="{self.config.embed_width}" height="{self.config.embed_height}" '
            f'src="{canonical.embed_url}"></iframe>'
        )
