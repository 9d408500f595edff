"""
Image loading facade.

Routes legacy footer-tagged streams through the transcoder and hands
everything else straight to the native codec.
"""

import logging
from typing import BinaryIO, Optional

from PIL import Image

from core.enums import ContainerFormat
from core.image.transcoder import FormatTranscoder
from core.stream.tail_reader import ensure_stream

logger = logging.getLogger(__name__)


class ImageLoader:
    """Loads any supported stream into a fully decoded PIL Image."""

    def __init__(self, transcoder: Optional[FormatTranscoder] = None):
        self.transcoder = transcoder or FormatTranscoder()

    def load(
        self, stream: BinaryIO, container: Optional[ContainerFormat] = None
    ) -> Image.Image:
        """
        Decode a stream, transcoding it first when needed.

        The stream read position is restored on every exit path. The returned
        image is fully loaded and independent of the stream; callers own it
        and should close it when done.

        Args:
            stream: Seekable binary stream
            container: Classification already made for this stream, sniffed when omitted

        Returns:
            Decoded PIL Image

        Raises:
            InvalidStreamError: If stream is None or unseekable
            ImageParseError: If a legacy-tagged stream cannot be parsed
            PIL.UnidentifiedImageError: If the native codec cannot decode the stream
            OSError: If the pixel data is truncated or corrupt
        """
        stream = ensure_stream(stream)
        start = stream.tell()

        try:
            transcoded = self.transcoder.transcode(stream, container)
            if transcoded is not None:
                with transcoded:
                    return self._decode(transcoded)

            return self._decode(stream)
        finally:
            stream.seek(start)

    @staticmethod
    def _decode(source: BinaryIO) -> Image.Image:
        # The returned copy holds no reference to source
        with Image.open(source) as opened:
            opened.load()
            image = opened.copy()
            image.format = opened.format

        logger.debug(f"Decoded {image.format} image {image.width}x{image.height} ({image.mode})")
        return image
