"""
Tests for AspectFitResampler
"""

import io

import numpy as np
import pytest
from PIL import Image
from pydantic import ValidationError

from core.enums import EdgePolicy, InterpolationMode
from core.image.resampler import AspectFitResampler
from schemas import Rect, ResampleSpec


def spec(width: int, height: int) -> ResampleSpec:
    return ResampleSpec(desired_width=width, desired_height=height)


class TestFitRect:
    """Test destination rectangle computation"""

    def test_wide_source_into_square(self):
        """2000x1000 into 512x512 uses full width and half height"""
        rect = AspectFitResampler.fit_rect(2000, 1000, spec(512, 512))
        assert rect == Rect(x=0, y=0, width=512, height=256)

    def test_tall_source_into_square(self):
        """1000x2000 into 512x512 is centered horizontally"""
        rect = AspectFitResampler.fit_rect(1000, 2000, spec(512, 512))
        assert rect == Rect(x=128, y=0, width=256, height=512)

    @pytest.mark.parametrize(
        "src, canvas",
        [((100, 100), (50, 50)), ((1920, 1080), (640, 360)), ((300, 200), (600, 400))],
    )
    def test_equal_aspect_fills_canvas(self, src, canvas):
        """No padding when aspects match"""
        rect = AspectFitResampler.fit_rect(*src, spec(*canvas))
        assert rect == Rect.full(*canvas)

    @pytest.mark.parametrize(
        "src, canvas",
        [((400, 100), (200, 200)), ((1920, 1080), (500, 500)), ((640, 480), (400, 400))],
    )
    def test_wider_source(self, src, canvas):
        """Wider source: full width at x=0, shorter height"""
        rect = AspectFitResampler.fit_rect(*src, spec(*canvas))

        assert rect.x == 0
        assert rect.y == 0
        assert rect.width == canvas[0]
        assert rect.height < canvas[1]

    @pytest.mark.parametrize(
        "src, canvas",
        [((100, 400), (200, 200)), ((1080, 1920), (500, 500)), ((480, 640), (400, 400))],
    )
    def test_taller_source_is_centered(self, src, canvas):
        """Taller source: full height, narrower width, symmetric x"""
        rect = AspectFitResampler.fit_rect(*src, spec(*canvas))

        assert rect.y == 0
        assert rect.height == canvas[1]
        assert rect.width < canvas[0]
        assert rect.x > 0
        assert abs((canvas[0] - rect.width - rect.x) - rect.x) <= 1

    def test_rounding_of_height(self):
        """Height is rounded, not truncated"""
        # 1000x300 into 100x100: relative aspect 3.333..., height 30
        rect = AspectFitResampler.fit_rect(1000, 300, spec(100, 100))
        assert rect.height == 30

        # 300x200 into 100x100: relative aspect 1.5, height 66.67 -> 67
        rect = AspectFitResampler.fit_rect(300, 200, spec(100, 100))
        assert rect.height == 67

    def test_degenerate_extent_clamped(self):
        """Extremely thin sources still get a one-pixel rect"""
        rect = AspectFitResampler.fit_rect(1, 10000, spec(512, 512))

        assert rect.width == 1
        assert rect.fits_within(512, 512)

    @pytest.mark.parametrize("width, height", [(0, 10), (10, 0)])
    def test_invalid_source_size(self, width, height):
        """Zero-sized sources are rejected"""
        with pytest.raises(ValueError):
            AspectFitResampler.fit_rect(width, height, spec(10, 10))

    @pytest.mark.parametrize("width, height", [(0, 10), (10, 0), (-5, 5), (10, 100000)])
    def test_invalid_spec(self, width, height):
        """Canvas dimensions must be positive and bounded"""
        with pytest.raises(ValidationError):
            ResampleSpec(desired_width=width, desired_height=height)

    def test_plan_defaults(self):
        """Default plan is bicubic with mirror-tiled edges"""
        plan = AspectFitResampler().plan(2000, 1000, spec(512, 512))

        assert plan.interpolation is InterpolationMode.BICUBIC
        assert plan.edge_policy is EdgePolicy.REFLECT
        assert plan.dest_rect.height == 256

    def test_plan_uses_configured_interpolation(self):
        """Interpolation chosen at construction flows into the plan"""
        resampler = AspectFitResampler(interpolation=InterpolationMode.AREA)
        plan = resampler.plan(2000, 1000, spec(512, 512))

        assert plan.interpolation is InterpolationMode.AREA
        canvas = resampler.compose(Image.new("RGB", (2000, 1000)), spec(512, 512), plan=plan)
        assert canvas.shape == (512, 512, 4)


class TestCompose:
    """Test canvas composition and PNG output"""

    @pytest.fixture
    def resampler(self):
        return AspectFitResampler()

    @pytest.mark.parametrize(
        "src, canvas",
        [
            ((320, 160), (512, 512)),
            ((160, 320), (512, 512)),
            ((320, 160), (100, 300)),
            ((7, 3), (1, 1)),
            ((1, 1), (640, 480)),
            ((1000, 3), (200, 150)),
            ((3, 1000), (200, 150)),
        ],
    )
    def test_canvas_size_is_exact(self, resampler, src, canvas):
        """Output canvas always matches the desired size"""
        image = Image.new("RGB", src, (90, 40, 200))
        canvas_array = resampler.compose(image, spec(*canvas))

        assert canvas_array.shape == (canvas[1], canvas[0], 4)
        assert canvas_array.dtype == np.uint8

    def test_resample_returns_rgba_png(self, resampler, test_image):
        """Resample output is a rewound RGBA PNG of the canvas size"""
        output = resampler.resample(test_image, spec(300, 200))

        assert output.tell() == 0
        with Image.open(output) as decoded:
            assert decoded.format == "PNG"
            assert decoded.mode == "RGBA"
            assert decoded.size == (300, 200)

    def test_reflect_margin_mirrors_source(self, resampler):
        """Default edge policy fills the margin with mirrored source pixels"""
        image = Image.new("RGB", (200, 100), (255, 0, 0))
        canvas = resampler.compose(image, spec(100, 100))

        # Destination rect is the top half; bottom half is mirrored red
        margin = canvas[60:, :, :].astype(int)
        assert np.all(np.abs(margin - [255, 0, 0, 255]) <= 1)

    def test_constant_margin_is_transparent(self, resampler):
        """Constant edge policy leaves a transparent border"""
        image = Image.new("RGB", (200, 100), (255, 0, 0))
        canvas = resampler.compose(image, spec(100, 100), edge_policy=EdgePolicy.CONSTANT)

        assert np.all(canvas[60:, :, 3] == 0)
        assert np.all(np.abs(canvas[:50, :, :].astype(int) - [255, 0, 0, 255]) <= 1)

    def test_reflect_margin_follows_source_content(self, resampler):
        """Mirrored margin reflects the edge rows of the scaled source"""
        array = np.zeros((100, 200, 3), dtype=np.uint8)
        array[:50] = (0, 0, 255)  # blue top half
        array[50:] = (0, 255, 0)  # green bottom half
        canvas = resampler.compose(Image.fromarray(array), spec(100, 100))

        # Rows just below the rect mirror the green bottom edge
        assert canvas[52, 50, 1] > 200
        assert canvas[52, 50, 2] < 50

    def test_centered_content_for_tall_source(self, resampler):
        """Tall source occupies the horizontal center of the canvas"""
        image = Image.new("RGBA", (100, 200), (0, 255, 0, 255))
        canvas = resampler.compose(image, spec(200, 200), edge_policy=EdgePolicy.CONSTANT)

        assert np.all(canvas[:, :50, 3] == 0)
        assert np.all(canvas[:, 150:, 3] == 0)
        assert np.all(canvas[:, 55:145, 3] == 255)

    def test_alpha_source_preserved(self, resampler):
        """Source alpha is carried into the canvas"""
        image = Image.new("RGBA", (50, 50), (10, 20, 30, 100))
        canvas = resampler.compose(image, spec(25, 25))

        assert np.all(np.abs(canvas[:, :, 3].astype(int) - 100) <= 1)

    def test_grayscale_source(self, resampler):
        """Non-RGB modes are converted before composing"""
        image = Image.new("L", (64, 32), 128)
        output = resampler.resample(image, spec(32, 32))

        with Image.open(io.BytesIO(output.getvalue())) as decoded:
            assert decoded.size == (32, 32)
            assert decoded.mode == "RGBA"

    def test_resample_is_deterministic(self, resampler, test_image):
        """Same input produces identical PNG bytes"""
        first = resampler.resample(test_image, spec(128, 128)).getvalue()
        second = resampler.resample(test_image, spec(128, 128)).getvalue()
        assert first == second
