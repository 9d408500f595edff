"""
Transcoding of legacy footer-tagged streams to PNG.

Pixel decode and encode are delegated to Pillow; this module only decides
whether a stream needs transcoding and keeps both streams reusable.
"""

import io
import logging
from typing import BinaryIO, Optional

from PIL import Image, UnidentifiedImageError

from core.constants import ImageConstants
from core.enums import ContainerFormat
from core.exceptions import ImageParseError
from core.image.converters import ImageConverters
from core.image.sniffer import ContainerSniffer
from core.stream.tail_reader import ensure_stream

logger = logging.getLogger(__name__)


class FormatTranscoder:
    """Converts TGA 2.0 streams into PNG streams."""

    def __init__(self, sniffer: Optional[ContainerSniffer] = None):
        self.sniffer = sniffer or ContainerSniffer()

    def transcode(
        self, stream: BinaryIO, container: Optional[ContainerFormat] = None
    ) -> Optional[io.BytesIO]:
        """
        Transcode a legacy-tagged stream to PNG.

        Args:
            stream: Seekable binary stream
            container: Classification already made for this stream, sniffed when omitted

        Returns:
            PNG stream positioned at 0, or None if no transcoding is needed

        Raises:
            InvalidStreamError: If stream is None or unseekable
            ImageParseError: If the codec cannot parse the legacy stream
            OSError: If the legacy pixel data is truncated or corrupt
        """
        stream = ensure_stream(stream)
        if container is None:
            container = self.sniffer.classify(stream)
        if not container.needs_transcode:
            return None

        start = stream.tell()
        try:
            try:
                with Image.open(stream, formats=[ImageConstants.LEGACY_FORMAT]) as image:
                    image.load()
                    output = ImageConverters.encode_png(image)
            except (UnidentifiedImageError, SyntaxError) as e:
                logger.error(f"Failed to parse legacy image: {e}")
                raise ImageParseError(str(e)) from e
        finally:
            stream.seek(start)

        logger.info(
            f"Transcoded {ImageConstants.LEGACY_FORMAT} stream to "
            f"{ImageConstants.OUTPUT_FORMAT} ({output.getbuffer().nbytes} bytes)"
        )
        return output
