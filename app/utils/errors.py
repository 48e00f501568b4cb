"""
Error types raised by the tutorial generation pipeline.

Every failure that aborts a request derives from TutorialError so callers
(the API layer, the CLI, the Streamlit app) can surface ``message`` directly.
An unavailable transcript is not an error and never appears here.
"""

from typing import Optional


class TutorialError(Exception):
    """Base class for errors that abort a tutorial request."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(TutorialError):
    """The supplied URL does not contain a recognisable YouTube video id."""


class ConfigurationError(TutorialError):
    """A required credential or setting is missing."""


class NotFound(TutorialError):
    """The metadata service reported no video for the id."""


class UpstreamError(TutorialError):
    """An external service failed or returned a malformed response."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class GenerationCancelled(TutorialError):
    """The request was cancelled before the next section call was issued."""
