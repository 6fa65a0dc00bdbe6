"""Pydantic models for the Gemini generateContent wire format."""

from pydantic import BaseModel


class Part(BaseModel):
    """A single text fragment of a message."""

    text: str = ""


class Content(BaseModel):
    """A message made of one or more parts."""

    parts: list[Part] = []


class Candidate(BaseModel):
    """One generated answer from Gemini."""

    content: Content = Content()


class GeminiRequest(BaseModel):
    """Request body for the generateContent endpoint."""

    contents: list[Content]

    @classmethod
    def from_prompt(cls, prompt: str) -> "GeminiRequest":
        """Wrap a single prompt as a one-message, one-part request."""
        return cls(contents=[Content(parts=[Part(text=prompt)])])


class GeminiResponse(BaseModel):
    """Response body from the generateContent endpoint."""

    candidates: list[Candidate] = []

    def first_text(self) -> str | None:
        """Return the first candidate's first part text, if there is one."""
        if self.candidates and self.candidates[0].content.parts:
            return self.candidates[0].content.parts[0].text
        return None
