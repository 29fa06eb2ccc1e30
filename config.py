"""
ClipNotes v1 - Shared Configuration Module

This module provides centralized configuration management for the note
service. It loads settings from environment variables and provides typed
access, plus the frozen per-parser config injected into each parser.
"""

from dataclasses import dataclass
from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_TIKTOK_NOTE_TEMPLATE = """---
date: {{date}}
tags: tiktok
author: "[{{authorName}}]({{authorURL}})"
---

{{videoDescription}}

{{videoPlayer}}

[Open on TikTok]({{videoURL}})
"""

DEFAULT_TIKTOK_NOTE_TITLE_TEMPLATE = "TikTok - {{authorName}} - {{date}}"


@dataclass(frozen=True)
class TikTokConfig:
    """Immutable settings snapshot consumed by the TikTok parser"""
    embed_width: int = 325
    embed_height: int = 760
    note_template: str = DEFAULT_TIKTOK_NOTE_TEMPLATE
    title_template: str = DEFAULT_TIKTOK_NOTE_TITLE_TEMPLATE
    content_type_slug: str = "tiktok"
    date_format: str = "%Y-%m-%d"
    filename_date_format: str = "%Y-%m-%d"
    fetch_timeout: float = 30.0


class TikTokSettings(BaseSettings):
    """TikTok note configuration"""
    note_template: str = Field(default=DEFAULT_TIKTOK_NOTE_TEMPLATE, alias="TIKTOK_NOTE_TEMPLATE")
    title_template: str = Field(
        default=DEFAULT_TIKTOK_NOTE_TITLE_TEMPLATE,
        alias="TIKTOK_NOTE_TITLE_TEMPLATE"
    )
    embed_width: int = Field(default=325, ge=1, alias="TIKTOK_EMBED_WIDTH")
    embed_height: int = Field(default=760, ge=1, alias="TIKTOK_EMBED_HEIGHT")
    content_type_slug: str = Field(default="tiktok", alias="TIKTOK_CONTENT_TYPE_SLUG")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


class FormatSettings(BaseSettings):
    """Date formats used in note content and file names"""
    date_format: str = Field(default="%Y-%m-%d", alias="DATE_FORMAT")
    filename_date_format: str = Field(default="%Y-%m-%d", alias="FILENAME_DATE_FORMAT")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


class FetchSettings(BaseSettings):
    """Outbound HTTP configuration"""
    timeout: float = Field(default=30.0, gt=0, alias="FETCH_TIMEOUT")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


class AppSettings(BaseSettings):
    """General application settings"""
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


class Config:
    """Main configuration class that combines all settings"""

    def __init__(self):
        self.tiktok = TikTokSettings()
        self.formats = FormatSettings()
        self.fetch = FetchSettings()
        self.app = AppSettings()

    def tiktok_config(self) -> TikTokConfig:
        """Take a read-only snapshot of the TikTok parser settings"""
        return TikTokConfig(
            embed_width=self.tiktok.embed_width,
            embed_height=self.tiktok.embed_height,
            note_template=self.tiktok.note_template,
            title_template=self.tiktok.title_template,
            content_type_slug=self.tiktok.content_type_slug,
            date_format=self.formats.date_format,
            filename_date_format=self.formats.filename_date_format,
            fetch_timeout=self.fetch.timeout,
        )


# Global config instance
config = Config()


def get_config() -> Config:
    """Get the global configuration instance"""
    return config


def load_env(env_file: str = ".env") -> None:
    """Load environment variables from file"""
    from dotenv import load_dotenv
    env_path = Path(env_file)
    if env_path.exists():
        load_dotenv(env_path)
