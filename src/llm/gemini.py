"""Google Gemini HTTP client for the generateContent REST endpoint."""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from src.core.errors import ErrorKind, SummaryError
from src.llm.models import GeminiRequest, GeminiResponse

logger = logging.getLogger(__name__)

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
GEMINI_MODEL = "gemini-2.0-flash"


class GeminiClient:
    """HTTP client for Google Gemini authenticated with an API key."""

    def __init__(
        self,
        api_key: str,
        model: str = GEMINI_MODEL,
        base_url: str = GEMINI_BASE_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self._transport = transport

    @property
    def endpoint(self) -> str:
        """Path of the generateContent call for the configured model."""
        return f"/models/{self.model}:generateContent"

    def _get_client(self) -> httpx.AsyncClient:
        """Create an async HTTP client bound to the Gemini API."""
        return httpx.AsyncClient(
            base_url=self.base_url,
            # No request timeout; callers needing bounded latency add their own
            timeout=None,
            transport=self._transport,
        )

    async def generate_content(self, prompt: str) -> str:
        """
        Send a prompt to Gemini and return the first candidate's text.

        Args:
            prompt: Full prompt text

        Returns:
            Text of candidates[0].content.parts[0]

        Raises:
            SummaryError: UPSTREAM on transport failure or non-200 status,
                DECODE when the body cannot be parsed or holds no text
        """
        payload = GeminiRequest.from_prompt(prompt).model_dump()

        async with self._get_client() as client:
            try:
                response = await client.post(
                    self.endpoint,
                    params={"key": self.api_key},
                    json=payload,
                )
            except httpx.HTTPError as e:
                raise SummaryError(
                    ErrorKind.UPSTREAM,
                    f"failed to make request to Gemini API: {type(e).__name__}: {e}",
                ) from e

            if response.status_code != 200:
                raise SummaryError(
                    ErrorKind.UPSTREAM,
                    "gemini API request failed",
                    status_code=response.status_code,
                    body=response.text,
                )

            try:
                data = GeminiResponse.model_validate_json(response.content)
            except ValidationError as e:
                raise SummaryError(
                    ErrorKind.DECODE,
                    f"failed to decode Gemini response: {e.error_count()} error(s)",
                ) from e

        text = data.first_text()
        if text is None:
            raise SummaryError(ErrorKind.DECODE, "no summary found in Gemini response")

        logger.debug(f"Generated content with {len(text)} characters")
        return text
