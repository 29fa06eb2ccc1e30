"""
ClipNotes v1 - Parser Base Class and Registry

This module defines the base clipboard parser interface, the Note produced
by parsers, and the registry that picks a parser for clipboard content.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Optional
import logging
import re
from urllib.parse import urlparse

logger = logging.getLogger(__name__)

# Characters rejected in file names by common file systems
ILLEGAL_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|#^\[\]]')


class NoParserError(ValueError):
    """Raised when no registered parser accepts the clipboard content"""


@dataclass(frozen=True)
class Note:
    """A rendered note, ready to be written by the caller"""

    filename: str
    extension: str
    content: str
    content_type_slug: str
    created_at: datetime

    @property
    def file_name_with_extension(self) -> str:
        return f"{self.filename}.{self.extension}"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return {
            "filename": self.filename,
            "extension": self.extension,
            "content": self.content,
            "content_type_slug": self.content_type_slug,
            "created_at": self.created_at.isoformat(),
        }


class BaseParser(ABC):
    """
    Abstract base class for clipboard parsers.

    Each parser must implement:
    - classify(content): Return the normalized match, or None if the parser
      does not apply. Must never raise.
    - prepare_note(content, resolved): Return the Note for the content

    test(content) is derived from classify().
    """

    @abstractmethod
    async def classify(self, content: str) -> Optional[Any]:
        """
        Probe the clipboard content.

        Args:
            content: Raw clipboard text

        Returns:
            A parser-specific resolved value when the parser applies,
            None otherwise
        """
        pass

    @abstractmethod
    async def prepare_note(self, content: str, resolved: Optional[Any] = None) -> Note:
        """
        Build the note for clipboard content this parser accepted.

        Args:
            content: Raw clipboard text
            resolved: Value returned by classify() for the same content, if
                the caller kept it

        Returns:
            The rendered Note
        """
        pass

    async def test(self, content: str) -> bool:
        """Return True if this parser should handle the clipboard content"""
        return await self.classify(content) is not None

    def is_valid_url(self, content: str) -> bool:
        """Helper to check that content is a single absolute URL"""
        if not content or any(ch.isspace() for ch in content):
            return False
        try:
            parsed = urlparse(content)
        except ValueError:
            return False
        return bool(parsed.scheme and parsed.netloc)

    def format_date(self, created_at: datetime, fmt: str) -> str:
        """Helper to format a timestamp for note content or file names"""
        return created_at.strftime(fmt)

    def sanitize_filename(self, name: str) -> str:
        """Helper to drop characters that can't appear in a file name"""
        cleaned = ILLEGAL_FILENAME_CHARS.sub("", name)
        return re.sub(r"\s+", " ", cleaned).strip()


class ParserRegistry:
    """
    Registry for managing parser instances.

    Parsers are probed in registration order, so register more specific
    parsers before generic ones.
    """

    def __init__(self):
        self._parsers: List[BaseParser] = []

    def register(self, parser: BaseParser) -> None:
        """
        Register a parser instance.

        Args:
            parser: Instance of a BaseParser subclass
        """
        self._parsers.append(parser)

    async def get_parser(self, content: str) -> Optional[BaseParser]:
        """
        Find the first parser whose test() accepts the content.

        Args:
            content: The clipboard content to find a parser for

        Returns:
            A parser instance if found, None otherwise
        """
        for parser in self._parsers:
            if await parser.test(content):
                return parser
        return None

    async def create_note(self, content: str) -> Note:
        """
        Create a note using the first parser that accepts the content.

        The value resolved while probing is handed to prepare_note() so a
        short link is not resolved twice.

        Raises:
            NoParserError: If no parser accepts the content
        """
        for parser in self._parsers:
            resolved = await parser.classify(content)
            if resolved is not None:
                logger.info(f"{parser.__class__.__name__} accepted clipboard content")
                return await parser.prepare_note(content, resolved)

        raise NoParserError(f"No parser found for content: {content[:200]}")

    def list_parsers(self) -> List[str]:
        """Get list of registered parser class names"""
        return [parser.__class__.__name__ for parser in self._parsers]
