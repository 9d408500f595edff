"""
Stream utilities - bounded-memory tail capture for forward-only reads.
"""

from core.stream.tail_reader import StreamTailReader, TailCapture, buffer_stream

__all__ = ["StreamTailReader", "TailCapture", "buffer_stream"]
