"""LLM integrations for the summarize relay."""

from src.llm.gemini import GEMINI_MODEL, GeminiClient
from src.llm.models import GeminiRequest, GeminiResponse

__all__ = [
    "GEMINI_MODEL",
    "GeminiClient",
    "GeminiRequest",
    "GeminiResponse",
]
