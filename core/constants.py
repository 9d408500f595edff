"""
Constants and configuration values for Image Normalize Flow.
Centralizes all magic numbers and configuration constants.
"""


# Stream Sniffing Constants
class StreamConstants:
    """Constants related to tail capture and footer sniffing."""

    # Tail capture
    DEFAULT_WINDOW_SIZE = 1024
    MIN_WINDOW_SIZE = 26  # Must hold a whole footer
    MAX_WINDOW_SIZE = 1024 * 1024

    # Legacy (TGA 2.0) footer
    FOOTER_SIZE = 26
    FOOTER_SIGNATURE = "TRUEVISION-XFILE"
    FOOTER_ENCODING = "latin-1"  # Byte-preserving, never fails to decode

    # Pre-buffering of unseekable streams
    COPY_CHUNK_SIZE = 64 * 1024


# Image Constants
class ImageConstants:
    """Constants related to decode, transcode and resample."""

    # Codec formats (Pillow format names)
    LEGACY_FORMAT = "TGA"
    OUTPUT_FORMAT = "PNG"
    OUTPUT_MODE = "RGBA"  # 32-bit color with alpha

    # Canvas limits
    DEFAULT_CANVAS_WIDTH = 500
    DEFAULT_CANVAS_HEIGHT = 500
    MIN_CANVAS_DIMENSION = 1
    MAX_CANVAS_DIMENSION = 8192

    # Rect fitting
    MIN_DEST_EXTENT = 1  # Degenerate extents are clamped to one pixel
    FULL_ASPECT = 1.0


# API Constants
class APIConstants:
    """Constants for API endpoints."""

    MAX_UPLOAD_SIZE_MB = 25


# System Constants
class SystemConstants:
    """Constants for system operations."""

    LOG_LEVEL_DEFAULT = "INFO"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# Error Messages
class ErrorMessages:
    """Standard error messages."""

    # Stream errors
    STREAM_MISSING = "Stream must not be None"
    STREAM_NOT_SEEKABLE = (
        "Stream does not support absolute seeking; pre-buffer it with buffer_stream()"
    )
    INVALID_WINDOW_SIZE = "Window size must be between {min} and {max}, got {value}"

    # Codec errors
    PARSE_FAILED = "Failure to parse image: {detail}"
    INVALID_BASE64 = "Invalid base64 image payload: {error}"
    PAYLOAD_TOO_LARGE = "Image payload of {size_mb:.1f} MB exceeds limit of {limit_mb} MB"

    # Resample errors
    INVALID_SOURCE_SIZE = "Source image has invalid size: {width}x{height}"
