"""
Errors
======

Exception hierarchy shared by the pipeline, the HTTP API and the CLI.

Every error carries a user-facing message and the HTTP status the API
should answer with.
"""

from typing import Optional


class ScriptStyleError(RuntimeError):
    """Base error for anything the pipeline reports back to the user."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ScriptStyleError):
    """Missing or malformed user input."""
    status_code = 400


class NotFoundError(ScriptStyleError):
    """Channel or resource does not exist."""
    status_code = 404


class UpstreamError(ScriptStyleError):
    """A third-party API answered with an error or could not be reached."""
    status_code = 500


class NoTranscriptsError(ScriptStyleError):
    """None of the attempted videos produced a transcript."""
    status_code = 400


class TranscriptUnavailableError(ScriptStyleError):
    """Transcript retrieval failed for a single video."""
    status_code = 404

    def __init__(self, video_id: str, reason: str = ""):
        super().__init__("Could not fetch transcript for this video")
        self.video_id = video_id
        self.reason = reason


class ConfigurationError(ScriptStyleError):
    """A required credential or setting is missing."""
    status_code = 500
