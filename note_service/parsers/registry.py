"""
ClipNotes v1 - Parser Registry

Pre-configured parser registry with all available parsers.
Parsers are registered in order of specificity (most specific first).
"""

from typing import Optional

from config import TikTokConfig, get_config
from .base import ParserRegistry
from .tiktok import TikTokParser


def get_default_registry(tiktok_config: Optional[TikTokConfig] = None) -> ParserRegistry:
    """
    Create and return a parser registry with all default parsers.

    Args:
        tiktok_config: Settings snapshot for the TikTok parser; read from the
            environment when omitted
    """
    registry = ParserRegistry()
    registry.register(TikTokParser(tiktok_config or get_config().tiktok_config()))
    return registry


# Global default registry
_default_registry: Optional[ParserRegistry] = None


def get_registry() -> ParserRegistry:
    """Get the global default registry, creating it if necessary."""
    global _default_registry
    if _default_registry is None:
        _default_registry = get_default_registry()
    return _default_registry
