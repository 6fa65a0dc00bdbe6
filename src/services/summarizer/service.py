"""Text summarization service."""

import logging

from src.llm import GeminiClient

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = "Summarize the following text in 200 words:\n\n{text}"


def build_prompt(text: str) -> str:
    """Wrap user text in the fixed summarization instruction."""
    return PROMPT_TEMPLATE.format(text=text)


class SummarizerService:
    """Service that turns arbitrary text into a short summary via Gemini."""

    def __init__(self, llm_client: GeminiClient):
        self.llm_client = llm_client

    async def summarize(self, text: str) -> str:
        """
        Summarize text in roughly 200 words.

        Raises:
            SummaryError: If Gemini fails or returns no usable text
        """
        logger.info(f"Summarizing {len(text)} characters")
        return await self.llm_client.generate_content(build_prompt(text))
