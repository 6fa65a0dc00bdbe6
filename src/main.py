"""Summarize Relay - text summarization backend for the browser extension.

FastAPI application factory and process entry point.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Awaitable, Callable, Optional

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.config import HOST, PORT, Settings, load_settings
from src.core.errors import SummaryError
from src.core.logging import setup_logging
from src.llm import GEMINI_MODEL, GeminiClient
from src.services.summarizer import SummarizerService
from src.services.summarizer import router as summarizer_router
from src.services.summarizer.router import (
    ALLOWED_METHODS,
    METHOD_NOT_ALLOWED,
    SUMMARIZE_PATH,
)

logger = logging.getLogger(__name__)

VERSION = "0.1.0"

# The extension calls from its own chrome-extension:// origin
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

GENERIC_FAILURE = "Failed to generate summary"


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup and shutdown."""
    logger.info(f"Starting {app.state.settings.app_name} (model: {GEMINI_MODEL})...")
    yield
    logger.info("Shutting down...")


async def add_cors_headers(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Attach the permissive CORS headers to every response."""
    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


async def handle_summary_error(request: Request, exc: SummaryError) -> Response:
    """Expose input errors verbatim; log upstream errors and hide their detail."""
    if exc.is_client_error:
        return PlainTextResponse(exc.message, status_code=400)

    logger.error(f"Error calling Gemini API [{exc.kind.value}]: {exc}")
    return PlainTextResponse(GENERIC_FAILURE, status_code=500)


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> Response:
    """Render framework HTTP errors (404, 405) as plain text."""
    # Starlette answers any unrouted method on /summarize with its own 405
    if exc.status_code == 405 and request.url.path == SUMMARIZE_PATH:
        return PlainTextResponse(
            METHOD_NOT_ALLOWED,
            status_code=405,
            headers={"Allow": ALLOWED_METHODS},
        )

    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


def create_app(
    settings: Optional[Settings] = None,
    llm_client: Optional[GeminiClient] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Settings are read once here and kept on app.state; the process exits
    if GEMINI_API_KEY is missing.
    """
    settings = settings or load_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Summarize Relay",
        description="Summarizes selected text for the browser extension via Gemini",
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.summarizer = SummarizerService(
        llm_client or GeminiClient(api_key=settings.gemini_api_key)
    )

    app.middleware("http")(add_cors_headers)
    app.add_exception_handler(SummaryError, handle_summary_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)

    app.include_router(summarizer_router)

    @app.get("/")
    async def root() -> dict:
        """Root endpoint with service info."""
        return {
            "name": settings.app_name,
            "version": VERSION,
            "description": "Text summarization relay for the browser extension",
            "services": ["summarizer"],
        }

    @app.get("/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Report that the process is up and serving."""
        return HealthResponse(status="healthy")

    return app


def run() -> None:
    """Start the HTTP server on the fixed port."""
    app = create_app()
    logger.info(f"Server starting on port {PORT}...")
    uvicorn.run(app, host=HOST, port=PORT, log_config=None)


if __name__ == "__main__":
    run()
