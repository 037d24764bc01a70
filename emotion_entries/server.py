"""
FastAPI server for the Emotion Entries service.

This module exposes the entry mappers over HTTP. Clients post raw entry
records as returned by the backend and receive the derived Entry models.
The service is stateless: every request is mapped on its own.
"""

from typing import Any

from fastapi import Body, FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from . import __version__
from .mapper import MappingError, entries_from_raw, entry_from_raw
from .models import Entry

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000


# API Response Schemas
class EntryResponse(BaseModel):
    """Response model for single-entry mapping."""

    entry: Entry = Field(..., description="The mapped entry")


class EntriesResponse(BaseModel):
    """Response model for batch mapping."""

    entries: list[Entry] = Field(..., description="The mapped entries, in order")


def create_app() -> FastAPI:
    """
    Create the FastAPI application.

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="Emotion Entries",
        description="Maps raw entry records into entries with emotions",
        version=__version__,
    )

    @app.exception_handler(MappingError)
    async def mapping_error_handler(
        request: Request, exc: MappingError
    ) -> JSONResponse:
        """Report a malformed raw record as an unprocessable request."""
        return JSONResponse(
            status_code=422,
            content={"detail": {"path": exc.path, "reason": exc.reason}},
        )

    @app.get("/")
    async def root() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "ok", "service": "emotion-entries"}

    @app.post("/entries/map")
    async def map_entry(raw: Any = Body(...)) -> EntryResponse:
        """
        Map one raw entry record.

        Args:
            raw: A raw entry object, exactly as the backend returns it

        Returns:
            The mapped entry
        """
        return EntryResponse(entry=entry_from_raw(raw))

    @app.post("/entries/map-batch")
    async def map_entries(raws: Any = Body(...)) -> EntriesResponse:
        """
        Map a list of raw entry records.

        Args:
            raws: Raw entry objects, exactly as the backend returns them

        Returns:
            The mapped entries in input order
        """
        return EntriesResponse(entries=entries_from_raw(raws))

    return app


app = create_app()


def main(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
    """Main entry point for the server."""
    import uvicorn

    uvicorn.run(
        "emotion_entries.server:app",
        host=host,
        port=port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
