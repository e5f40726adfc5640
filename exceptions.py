"""Exceptions raised by the photoshoot generation service."""
from typing import Optional


class PhotoshootError(RuntimeError):
    """Base exception for all service failures."""
    pass


class GeminiAPIError(PhotoshootError):
    """Raised when a Gemini/Imagen HTTP call returns a non-200 status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class GenerationError(PhotoshootError):
    pass


class NoImageGeneratedError(GenerationError):
    """The remote model answered but returned no image data."""
    pass


class GenerationBlockedError(GenerationError):
    """
    Raised when the remote model stops with an explicit finish reason.

    Attributes:
        reason: The finish/block reason string exactly as returned (e.g. "SAFETY").
    """
    def __init__(self, message: str, reason: str):
        super().__init__(message)
        self.reason = reason


class AdaptationError(PhotoshootError):
    pass


class RandomizationError(PhotoshootError):
    pass


class JSONExtractionError(PhotoshootError):
    pass


class NoJSONObjectError(JSONExtractionError):
    pass


class MalformedJSONError(JSONExtractionError):
    """
    Raised when a brace-delimited fragment is not valid JSON.

    The offending fragment is kept on the exception for logging only and is
    never part of the message.
    """
    def __init__(self, message: str, fragment: str = ""):
        super().__init__(message)
        self.fragment = fragment
