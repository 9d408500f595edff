"""
Container sniffing by trailing footer signature.

A stream is considered legacy-footer-tagged (TGA 2.0) when its last 26 bytes
contain the ASCII string "TRUEVISION-XFILE". Only the 2.0 footer can be
detected; TGA 1.0 files classify as natively decodable and, if the native
codec rejects them, fail later at decode time.
"""

import logging
from typing import BinaryIO

from core.constants import StreamConstants
from core.enums import ContainerFormat
from core.stream.tail_reader import StreamTailReader

logger = logging.getLogger(__name__)


class ContainerSniffer:
    """Classifies streams by inspecting their trailing footer window."""

    def __init__(
        self,
        window_size: int = StreamConstants.DEFAULT_WINDOW_SIZE,
        footer_size: int = StreamConstants.FOOTER_SIZE,
        signature: str = StreamConstants.FOOTER_SIGNATURE,
    ):
        """
        Initialize sniffer.

        Args:
            window_size: Tail capture chunk size
            footer_size: Number of trailing bytes searched for the signature
            signature: Signature searched for anywhere inside the footer
        """
        self.window_size = window_size
        self.footer_size = footer_size
        self.signature = signature

    def classify(self, stream: BinaryIO) -> ContainerFormat:
        """
        Classify a stream without moving its read position.

        Args:
            stream: Seekable binary stream

        Returns:
            LEGACY_FOOTER_TAGGED if the footer carries the signature,
            UNKNOWN if the stream is too short to hold a footer,
            NATIVELY_DECODABLE otherwise

        Raises:
            InvalidStreamError: If stream is None or unseekable
        """
        capture = StreamTailReader.capture_tail(stream, self.window_size)

        if capture.total_bytes_read < self.footer_size:
            logger.debug(
                f"Stream too short for a footer ({capture.total_bytes_read} bytes), not tagged"
            )
            return ContainerFormat.UNKNOWN

        footer = capture.footer(self.footer_size).decode(StreamConstants.FOOTER_ENCODING)

        # Producers place the signature inconsistently, search the whole footer
        if self.signature in footer:
            logger.debug(f"Footer signature found in {capture.total_bytes_read} byte stream")
            return ContainerFormat.LEGACY_FOOTER_TAGGED

        return ContainerFormat.NATIVELY_DECODABLE

    def is_legacy_tagged(self, stream: BinaryIO) -> bool:
        """Check whether the stream needs transcoding before generic decode."""
        return self.classify(stream).needs_transcode
