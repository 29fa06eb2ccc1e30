"""
ClipNotes v1 - Note Service

FastAPI service that probes clipboard content and prepares notes from it.
"""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from config import get_config
from . import __version__
from .models import (
    ClipboardRequest,
    ProbeResponse,
    NoteResponse,
    ErrorResponse,
    HealthResponse,
)
from .parsers import CanonicalUrlMismatchError, NoParserError, ShortUrlResolutionError
from .parsers.registry import get_registry

# Configure logging
logging.basicConfig(
    level=get_config().app.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    registry = get_registry()
    logger.info(f"Note service starting with parsers: {registry.list_parsers()}")
    yield
    logger.info("Note service shutting down")


app = FastAPI(
    title="ClipNotes Note Service",
    description="Turns clipboard links into notes",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error(status_code: int, error: str, detail: str, content: str) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail=ErrorResponse(error=error, detail=detail, url=content).model_dump(),
    )


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Check service health and list available parsers."""
    registry = get_registry()
    return HealthResponse(
        status="healthy",
        version=__version__,
        parsers=registry.list_parsers(),
    )


@app.post("/test", response_model=ProbeResponse, tags=["Notes"])
async def probe_clipboard(request: ClipboardRequest):
    """
    Check whether any parser accepts the clipboard content.

    Never fails: unreachable short links simply don't match.
    """
    parser = await get_registry().get_parser(request.content)
    return ProbeResponse(
        content=request.content,
        matches=parser is not None,
        parser=parser.__class__.__name__ if parser else None,
    )


@app.post(
    "/prepare_note",
    response_model=NoteResponse,
    responses={
        400: {"model": ErrorResponse, "description": "No parser accepts the content"},
        502: {"model": ErrorResponse, "description": "Fetching the page failed"},
        500: {"model": ErrorResponse, "description": "Unexpected error"},
    },
    tags=["Notes"],
)
async def prepare_note(request: ClipboardRequest):
    """
    Build a note from clipboard content.

    The first parser that accepts the content fetches the page and renders
    the note. The note is returned, not written anywhere.
    """
    logger.info(f"Preparing note for: {request.content}")

    try:
        note = await get_registry().create_note(request.content)

    except NoParserError as e:
        logger.warning(f"No parser for content: {request.content}")
        raise _error(400, "No parser", str(e), request.content)

    except httpx.TimeoutException:
        logger.warning(f"Timeout fetching: {request.content}")
        raise _error(502, "Fetch timeout", "Request timed out", request.content)

    except httpx.HTTPStatusError as e:
        logger.warning(f"HTTP error fetching {request.content}: {e.response.status_code}")
        raise _error(502, "HTTP error", f"Received status {e.response.status_code}", request.content)

    except httpx.RequestError as e:
        logger.warning(f"Request error fetching {request.content}: {e}")
        raise _error(502, "Request failed", str(e), request.content)

    except ShortUrlResolutionError as e:
        logger.warning(f"Could not resolve short link {request.content}: {e}")
        raise _error(502, "Unresolvable short link", str(e), request.content)

    except CanonicalUrlMismatchError as e:
        logger.error(f"Resolved URL is not a video URL for {request.content}: {e}")
        raise _error(500, "Unexpected URL", str(e), request.content)

    except Exception as e:
        logger.exception(f"Unexpected error preparing note for {request.content}")
        raise _error(500, "Internal error", str(e), request.content)

    logger.info(f"Prepared note '{note.filename}' ({note.content_type_slug})")
    return NoteResponse(**note.to_dict())


@app.get("/parsers", tags=["Info"])
async def list_parsers():
    """List all available parsers."""
    return {"parsers": get_registry().list_parsers()}


# Run with: uvicorn note_service.main:app --host 0.0.0.0 --port 8001
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8001)
