"""
ClipNotes v1 - Parser Plugins

Clipboard parsers that turn links into notes.
"""

from .base import BaseParser, Note, NoParserError, ParserRegistry
from .tiktok import (
    CanonicalUrlMismatchError,
    ShortUrlResolutionError,
    TikTokNoteData,
    TikTokParser,
)
from .urls import CanonicalUrl, ShortLink, Unrecognized, parse_tiktok_url
from .registry import get_default_registry, get_registry

__all__ = [
    "BaseParser",
    "Note",
    "NoParserError",
    "ParserRegistry",
    "TikTokParser",
    "TikTokNoteData",
    "ShortUrlResolutionError",
    "CanonicalUrlMismatchError",
    "CanonicalUrl",
    "ShortLink",
    "Unrecognized",
    "parse_tiktok_url",
    "get_default_registry",
    "get_registry",
]
