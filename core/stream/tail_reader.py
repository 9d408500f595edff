"""
Tail capture for byte streams of unknown length.

Reads a stream forward in fixed-size chunks, keeping only the last two chunks
(a double buffer), so memory stays at 2 x window_size no matter how long the
stream is. The read position is restored to its entry value before returning.
"""

import io
import logging
from dataclasses import dataclass
from typing import BinaryIO

from core.constants import ErrorMessages, StreamConstants
from core.exceptions import InvalidStreamError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TailCapture:
    """Result of a tail capture."""

    tail: bytes  # older chunk (zero-filled if never read) + last chunk
    total_bytes_read: int
    last_chunk_length: int
    window_size: int
    start_position: int  # entry position, restored after the capture

    def footer(self, footer_size: int) -> bytes:
        """
        Return the last footer_size bytes of the stream.

        Offset is window_size + last_chunk_length - footer_size, which matches
        the layout of the tail view. Returns b"" when the stream is too short.
        """
        if self.total_bytes_read < footer_size:
            return b""
        end = self.window_size + self.last_chunk_length
        return self.tail[end - footer_size : end]


def ensure_stream(stream) -> BinaryIO:
    """
    Validate the stream precondition shared by every entry point.

    Raises:
        InvalidStreamError: If stream is None or cannot seek
    """
    if stream is None:
        raise InvalidStreamError(ErrorMessages.STREAM_MISSING)

    seekable = getattr(stream, "seekable", None)
    if seekable is None or not seekable():
        raise InvalidStreamError(ErrorMessages.STREAM_NOT_SEEKABLE)

    return stream


def buffer_stream(stream, chunk_size: int = StreamConstants.COPY_CHUNK_SIZE) -> io.BytesIO:
    """
    Copy a forward-only stream into memory so it can be sniffed.

    Args:
        stream: Readable binary stream (seekable or not)
        chunk_size: Copy chunk size

    Returns:
        BytesIO positioned at 0
    """
    if stream is None:
        raise InvalidStreamError(ErrorMessages.STREAM_MISSING)

    buffer = io.BytesIO()
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        buffer.write(chunk)

    buffer.seek(0)
    logger.debug(f"Buffered {buffer.getbuffer().nbytes} bytes from unseekable stream")
    return buffer


class StreamTailReader:
    """Captures the trailing window of a stream with a two-slot ring buffer."""

    @staticmethod
    def capture_tail(
        stream: BinaryIO, window_size: int = StreamConstants.DEFAULT_WINDOW_SIZE
    ) -> TailCapture:
        """
        Read the stream to its end, retaining the last two chunks.

        A short read (fewer bytes than requested) ends the capture. The stream
        position is restored to its entry value on every exit path.

        Args:
            stream: Seekable binary stream
            window_size: Chunk size, also the size of each buffer slot

        Returns:
            TailCapture with the reconstructed tail view

        Raises:
            InvalidStreamError: If stream is None, unseekable, or window_size invalid
        """
        stream = ensure_stream(stream)

        if not StreamConstants.MIN_WINDOW_SIZE <= window_size <= StreamConstants.MAX_WINDOW_SIZE:
            raise InvalidStreamError(
                ErrorMessages.INVALID_WINDOW_SIZE.format(
                    min=StreamConstants.MIN_WINDOW_SIZE,
                    max=StreamConstants.MAX_WINDOW_SIZE,
                    value=window_size,
                )
            )

        slots = (bytearray(window_size), bytearray(window_size))
        use_second = False
        total = 0
        last_length = 0

        start = stream.tell()
        try:
            while True:
                chunk = stream.read(window_size) or b""
                last_length = len(chunk)
                slot = slots[1] if use_second else slots[0]
                slot[:last_length] = chunk
                total += last_length
                use_second = not use_second

                if last_length < window_size:
                    break
        finally:
            stream.seek(start)

        # The flag now points at the slot written before the last one
        older = slots[1] if use_second else slots[0]
        last = slots[0] if use_second else slots[1]
        tail = bytes(older) + bytes(last[:last_length])

        return TailCapture(
            tail=tail,
            total_bytes_read=total,
            last_chunk_length=last_length,
            window_size=window_size,
            start_position=start,
        )
