"""Errors raised inside the generation pipeline.

Only request validation ever reaches an HTTP caller. The orchestrator
absorbs the others and answers with fallback content instead.
"""

from typing import Optional


class GenerationError(Exception):
    """Base class for generation pipeline errors."""


class UpstreamError(GenerationError):
    """The generation endpoint could not be reached or answered with an error."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ExtractionError(GenerationError):
    """No JSON object could be recovered from the generated text."""


class UnknownSectionError(GenerationError, ValueError):
    """The requested destination section has no templates."""

    def __init__(self, section: str):
        super().__init__(f"Unknown section: {section}")
        self.section = section
