"""
Domain exceptions for stream sniffing, transcoding and resampling.
"""

from core.constants import ErrorMessages


class ImageStreamError(Exception):
    """Base class for image stream errors."""


class InvalidStreamError(ImageStreamError, ValueError):
    """Stream argument is missing or unusable (fails fast, no work performed)."""

    def __init__(self, message: str = ErrorMessages.STREAM_MISSING):
        super().__init__(message)


class ImageParseError(ImageStreamError):
    """Codec could not parse a stream it was asked to decode as the legacy format."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(ErrorMessages.PARSE_FAILED.format(detail=detail))
