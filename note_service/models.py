"""
ClipNotes v1 - Note Service Pydantic Models

API request/response models for the note service.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ClipboardRequest(BaseModel):
    """Request model for /test and /prepare_note"""
    content: str = Field(..., description="Raw clipboard content")


class ProbeResponse(BaseModel):
    """Response model for /test"""
    content: str = Field(..., description="Clipboard content that was probed")
    matches: bool = Field(..., description="Whether a parser accepts the content")
    parser: Optional[str] = Field(None, description="Name of the accepting parser")


class NoteResponse(BaseModel):
    """Response model for a prepared note"""
    filename: str = Field(..., description="File name without extension")
    extension: str = Field(..., description="File extension")
    content: str = Field(..., description="Rendered note body")
    content_type_slug: str = Field(..., description="Category tag for the note")
    created_at: datetime = Field(..., description="When the note was created")

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "filename": "TikTok - @someuser - 2026-10-19",
            "extension": "md",
            "content": "---\ndate: 2026-10-19\ntags: tiktok\n---\n\ndesc\n",
            "content_type_slug": "tiktok",
            "created_at": "2026-10-19T12:00:00",
        }
    })


class ErrorResponse(BaseModel):
    """Error response model"""
    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Detailed error information")
    url: Optional[str] = Field(None, description="Content that caused the error")


class HealthResponse(BaseModel):
    """Health check response"""
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Service version")
    parsers: list[str] = Field(..., description="Available parsers")
