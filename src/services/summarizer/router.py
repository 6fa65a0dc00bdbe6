"""FastAPI router for the summarize endpoint."""

import logging

from fastapi import APIRouter, Depends, Request, Response
from pydantic import ValidationError

from src.core.errors import ErrorKind, SummaryError
from src.services.summarizer.models import SummarizeRequest, SummarizeResponse
from src.services.summarizer.service import SummarizerService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["summarizer"])

SUMMARIZE_PATH = "/summarize"
ALLOWED_METHODS = "POST, OPTIONS"
METHOD_NOT_ALLOWED = "Only POST method is allowed"


def get_summarizer(request: Request) -> SummarizerService:
    """Return the summarizer service built at startup."""
    return request.app.state.summarizer


@router.post(SUMMARIZE_PATH, response_model=SummarizeResponse)
async def summarize(
    request: Request,
    summarizer: SummarizerService = Depends(get_summarizer),
) -> SummarizeResponse:
    """
    Summarize the text sent by the extension.

    The body is parsed by hand so that malformed JSON and a missing
    text field both map to 400 instead of FastAPI's default 422.
    """
    body = await request.body()
    try:
        payload = SummarizeRequest.model_validate_json(body)
    except ValidationError:
        raise SummaryError(ErrorKind.INPUT, "Invalid request body")

    if not payload.text:
        raise SummaryError(ErrorKind.INPUT, "Text field is required")

    summary = await summarizer.summarize(payload.text)
    return SummarizeResponse(summary=summary)


@router.options(SUMMARIZE_PATH)
async def summarize_preflight() -> Response:
    """Answer the CORS preflight sent before the extension's POST."""
    return Response(status_code=200)

