"""
ClipNotes v1 - TikTok URL Shapes

Classifies a string into one of the TikTok URL shapes the parser understands.
"""

import re
from dataclasses import dataclass
from typing import Union

TIKTOK_BASE_URL = "https://www.tiktok.com"

# tiktok.com/@handle/video/1234567890
CANONICAL_PATTERN = re.compile(
    r"(?:^|[/.])tiktok\.com/(?P<handle>[^\s/?#]+)/video/(?P<video_id>\d+)",
    re.IGNORECASE,
)

# vm.tiktok.com/TOKEN, vt.tiktok.com/TOKEN, www.tiktok.com/t/TOKEN
SHORT_PATTERNS = [
    re.compile(r"(?:^|//)(?:vm|vt)\.tiktok\.com/(?:t/)?(?P<token>[a-zA-Z0-9]+)", re.IGNORECASE),
    re.compile(r"(?:^|[/.])tiktok\.com/t/(?P<token>[a-zA-Z0-9]+)", re.IGNORECASE),
]


@dataclass(frozen=True)
class CanonicalUrl:
    """A post URL that carries its author handle and numeric video id"""
    url: str
    handle: str
    video_id: str

    @property
    def author_url(self) -> str:
        return f"{TIKTOK_BASE_URL}/{self.handle}"

    @property
    def embed_url(self) -> str:
        return f"{TIKTOK_BASE_URL}/embed/v2/{self.video_id}"


@dataclass(frozen=True)
class ShortLink:
    """A redirecting alias that has to be fetched to learn its target"""
    url: str
    token: str


@dataclass(frozen=True)
class Unrecognized:
    url: str


TikTokUrl = Union[CanonicalUrl, ShortLink, Unrecognized]


def parse_tiktok_url(url: str) -> TikTokUrl:
    """Match a URL against the canonical shape first, then the short-link shapes."""
    match = CANONICAL_PATTERN.search(url)
    if match:
        return CanonicalUrl(url=url, handle=match.group("handle"), video_id=match.group("video_id"))

    for pattern in SHORT_PATTERNS:
        match = pattern.search(url)
        if match:
            return ShortLink(url=url, token=match.group("token"))

    return Unrecognized(url=url)
