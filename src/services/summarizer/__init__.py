"""Summarizer service module."""

from src.services.summarizer.router import router
from src.services.summarizer.service import SummarizerService

__all__ = ["router", "SummarizerService"]
