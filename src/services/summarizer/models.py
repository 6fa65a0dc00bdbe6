"""Pydantic models for the summarizer service."""

from typing import Optional

from pydantic import BaseModel


class SummarizeRequest(BaseModel):
    """Request body sent by the browser extension."""

    text: Optional[str] = None


class SummarizeResponse(BaseModel):
    """Response body returned to the browser extension."""

    summary: str
