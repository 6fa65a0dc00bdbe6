"""Error taxonomy shared by the handler and the upstream client."""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Category of a summarization failure."""

    INPUT = "input"  # caller sent something unusable; safe to expose
    UPSTREAM = "upstream"  # network failure or non-200 from Gemini
    DECODE = "decode"  # Gemini answered 200 but not with a usable summary


class SummaryError(Exception):
    """Exception raised when a summary cannot be produced."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status_code = status_code
        self.body = body

    @property
    def is_client_error(self) -> bool:
        return self.kind is ErrorKind.INPUT

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.message} (status {self.status_code}): {self.body or ''}"
        return self.message
