"""
Error taxonomy for TubeSummarize.

Every failure the core raises carries an ``ErrorKind`` so callers (the HTTP
layer, the CLI) can branch on the kind instead of inspecting messages.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Kinds of failure surfaced by the core."""
    INVALID_URL = "invalid_url"
    NOT_FOUND = "not_found"
    CAPTIONS_UNAVAILABLE = "captions_unavailable"
    UPSTREAM = "upstream"
    VIDEO_TOO_LONG = "video_too_long"


class UpstreamReason(str, Enum):
    """Why an external provider call failed."""
    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    GENERIC = "generic"


class TubeSummarizeError(Exception):
    """Base class for all errors raised by the core."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidUrlError(TubeSummarizeError):
    """The submitted URL is not a supported YouTube URL shape."""

    kind = ErrorKind.INVALID_URL

    def __init__(self, url: str):
        super().__init__(f"Invalid YouTube URL: {url}")
        self.url = url


class NotFoundError(TubeSummarizeError):
    """A video (or its summary) could not be resolved."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str, video_id: Optional[str] = None):
        super().__init__(message)
        self.video_id = video_id


class CaptionsUnavailableError(TubeSummarizeError):
    """The caption provider reports that no captions exist for the video."""

    kind = ErrorKind.CAPTIONS_UNAVAILABLE

    def __init__(self, video_id: str, message: Optional[str] = None):
        super().__init__(message or f"No captions available for video {video_id}")
        self.video_id = video_id


class VideoTooLongError(TubeSummarizeError):
    """The video exceeds the configured maximum duration."""

    kind = ErrorKind.VIDEO_TOO_LONG

    def __init__(self, video_id: str, duration_seconds: int, max_minutes: int):
        super().__init__(
            f"Video {video_id} is longer than the {max_minutes} minute limit"
        )
        self.video_id = video_id
        self.duration_seconds = duration_seconds
        self.max_minutes = max_minutes


class UpstreamError(TubeSummarizeError):
    """A transport, auth, or rate-limit failure from an external provider."""

    kind = ErrorKind.UPSTREAM

    def __init__(
        self,
        dependency: str,
        message: str,
        reason: UpstreamReason = UpstreamReason.GENERIC,
        status_code: Optional[int] = None,
    ):
        super().__init__(f"{dependency}: {message}")
        self.dependency = dependency
        self.reason = reason
        self.status_code = status_code

    @staticmethod
    def reason_for_status(status_code: Optional[int]) -> UpstreamReason:
        """Classify an HTTP status code into an upstream failure reason."""
        if status_code in (401, 403):
            return UpstreamReason.AUTH
        if status_code == 429:
            return UpstreamReason.RATE_LIMIT
        if status_code in (408, 504):
            return UpstreamReason.TIMEOUT
        return UpstreamReason.GENERIC
