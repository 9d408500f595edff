"""
Image Service - Business logic for normalization and resampling.

This service orchestrates the core pipeline:
classify -> (transcode) -> decode -> aspect-fit resample -> PNG.
Each call works on its own in-memory stream, so the service is safe to call
from many worker threads at once.
"""

import io
import logging
from typing import Dict, Optional, Union

from core.constants import ErrorMessages, StreamConstants
from core.enums import EdgePolicy, InterpolationMode
from core.image.converters import ImageConverters
from core.image.loader import ImageLoader
from core.image.resampler import AspectFitResampler
from core.image.sniffer import ContainerSniffer
from core.image.transcoder import FormatTranscoder
from core.utils.decorators import timer
from core.utils.enum_converter import enum_to_string
from schemas import ResampleSpec

logger = logging.getLogger(__name__)

ImageSource = Union[bytes, str]


class ImageService:
    """
    Service for container sniffing, normalization and resampling.

    Accepts raw bytes or base64 strings and returns PNG bytes with metadata.
    """

    def __init__(
        self,
        window_size: int = StreamConstants.DEFAULT_WINDOW_SIZE,
        edge_policy: EdgePolicy = EdgePolicy.REFLECT,
        interpolation: InterpolationMode = InterpolationMode.BICUBIC,
        max_upload_mb: Optional[float] = None,
        default_spec: Optional[ResampleSpec] = None,
    ):
        """
        Initialize image service.

        Args:
            window_size: Tail capture window for footer sniffing
            edge_policy: Default policy for the letterbox margin
            interpolation: Interpolation used when scaling into the canvas
            max_upload_mb: Optional payload size limit
            default_spec: Canvas used when a request omits its size
        """
        self.sniffer = ContainerSniffer(window_size=window_size)
        self.transcoder = FormatTranscoder(sniffer=self.sniffer)
        self.loader = ImageLoader(transcoder=self.transcoder)
        self.resampler = AspectFitResampler(interpolation=interpolation, edge_policy=edge_policy)
        self.max_upload_mb = max_upload_mb
        self.default_spec = default_spec or ResampleSpec()

    def _to_bytes(self, source: ImageSource) -> bytes:
        """Decode base64 payloads and enforce the size limit."""
        data = ImageConverters.from_base64(source) if isinstance(source, str) else source

        if self.max_upload_mb is not None:
            size_mb = len(data) / (1024 * 1024)
            if size_mb > self.max_upload_mb:
                raise ValueError(
                    ErrorMessages.PAYLOAD_TOO_LARGE.format(
                        size_mb=size_mb, limit_mb=self.max_upload_mb
                    )
                )

        return data

    def classify(self, source: ImageSource) -> Dict:
        """
        Classify the container of an image payload.

        Returns:
            Dict with format and size_bytes
        """
        data = self._to_bytes(source)
        with io.BytesIO(data) as stream:
            container = self.sniffer.classify(stream)

        logger.info(f"Classified {len(data)} byte payload as {enum_to_string(container)}")
        return {"format": container, "size_bytes": len(data)}

    def normalize(self, source: ImageSource) -> Dict:
        """
        Decode any supported payload and re-encode it as PNG.

        Legacy-tagged payloads are transcoded by the loader; native ones are
        decoded directly. Either way the result is re-encoded as PNG.

        Returns:
            Dict with format, width, height, png bytes and processing_time_ms
        """
        data = self._to_bytes(source)

        with timer() as t:
            with io.BytesIO(data) as stream:
                container = self.sniffer.classify(stream)
                with self.loader.load(stream, container) as image:
                    width, height = image.size
                    png_bytes = ImageConverters.encode_png(image).getvalue()

        logger.info(
            f"Normalized {enum_to_string(container)} payload to {width}x{height} PNG "
            f"in {t['ms']} ms"
        )
        return {
            "format": container,
            "width": width,
            "height": height,
            "png": png_bytes,
            "processing_time_ms": t["ms"],
        }

    def resample(
        self,
        source: ImageSource,
        spec: ResampleSpec,
        edge_policy: Optional[EdgePolicy] = None,
    ) -> Dict:
        """
        Letterbox an image payload into a fixed-size PNG canvas.

        Returns:
            Dict with width, height, dest_rect, png bytes and processing_time_ms
        """
        data = self._to_bytes(source)

        with timer() as t:
            with io.BytesIO(data) as stream, self.loader.load(stream) as image:
                plan = self.resampler.plan(image.width, image.height, spec, edge_policy)
                with self.resampler.resample(image, spec, plan=plan) as output:
                    png_bytes = output.getvalue()

        logger.info(
            f"Resampled payload to {spec.desired_width}x{spec.desired_height} "
            f"(dest {plan.dest_rect.to_dict()}) in {t['ms']} ms"
        )
        return {
            "width": spec.desired_width,
            "height": spec.desired_height,
            "dest_rect": plan.dest_rect,
            "png": png_bytes,
            "processing_time_ms": t["ms"],
        }
