"""Tests for letterbox resize and centered padding."""

from __future__ import annotations

import numpy as np
import pytest
from PIL import Image

from food_classifier.errors import InvalidImageError
from food_classifier.transforms import (
    LetterboxPad,
    letterbox,
    letterbox_size,
    padding_offsets,
)


class TestLetterboxSize:
    @pytest.mark.parametrize("side", [1, 50, 224, 1000])
    def test_square_fills_canvas(self, side: int) -> None:
        assert letterbox_size(side, side) == (224, 224)
        assert padding_offsets(224, 224) == (0, 0)

    def test_landscape(self) -> None:
        assert letterbox_size(400, 200) == (224, 112)

    def test_portrait(self) -> None:
        assert letterbox_size(300, 700) == (96, 224)

    def test_short_edge_is_floored(self) -> None:
        # 224 * 100 / 333 = 67.26...
        assert letterbox_size(333, 100) == (224, 67)

    def test_small_image_is_upscaled(self) -> None:
        assert letterbox_size(20, 10) == (224, 112)

    def test_extreme_aspect_ratio_clamped_to_one_pixel(self) -> None:
        assert letterbox_size(5000, 1) == (224, 1)

    @pytest.mark.parametrize("size", [(0, 10), (10, 0), (0, 0)])
    def test_zero_dimension_rejected(self, size: tuple[int, int]) -> None:
        with pytest.raises(InvalidImageError, match="at least 1x1"):
            letterbox_size(*size)


class TestPaddingOffsets:
    def test_landscape_offsets(self) -> None:
        assert padding_offsets(224, 112) == (0, 56)

    def test_odd_remainder_floors(self) -> None:
        assert padding_offsets(224, 67) == (0, 78)


class TestLetterbox:
    def test_output_is_rgb_canvas(self) -> None:
        result = letterbox(Image.new("RGB", (400, 200), (10, 20, 30)))
        assert result.mode == "RGB"
        assert result.size == (224, 224)

    def test_border_left_at_zero(self) -> None:
        result = np.asarray(letterbox(Image.new("RGB", (400, 200), (255, 255, 255))))
        assert (result[:56] == 0).all()
        assert (result[168:] == 0).all()
        assert (result[56:168] == 255).all()

    def test_portrait_border_on_sides(self) -> None:
        result = np.asarray(letterbox(Image.new("RGB", (100, 200), (255, 255, 255))))
        # new size 112x224, pad_x = 56
        assert (result[:, :56] == 0).all()
        assert (result[:, 168:] == 0).all()
        assert (result[:, 56:168] == 255).all()

    def test_transparent_source_keeps_color(self) -> None:
        img = Image.new("RGBA", (224, 224), (0, 200, 0, 0))
        result = np.asarray(letterbox(img))
        assert (result == [0, 200, 0]).all()

    def test_grayscale_converted(self) -> None:
        result = letterbox(Image.new("L", (50, 50), 128))
        assert result.mode == "RGB"
        assert np.asarray(result)[100, 100].tolist() == [128, 128, 128]

    def test_deterministic(self) -> None:
        rng = np.random.default_rng(0)
        img = Image.fromarray(rng.integers(0, 255, (97, 151, 3), dtype=np.uint8))
        assert np.array_equal(np.asarray(letterbox(img)), np.asarray(letterbox(img)))


class TestLetterboxPad:
    def test_output_is_pil_image(self) -> None:
        result = LetterboxPad()(Image.new("RGB", (30, 60)))
        assert isinstance(result, Image.Image)
        assert result.size == (224, 224)

    def test_custom_size(self) -> None:
        result = LetterboxPad(size=64)(Image.new("RGB", (30, 60)))
        assert result.size == (64, 64)

    def test_passes_extra_inputs_through(self) -> None:
        img, label = LetterboxPad()(Image.new("RGB", (30, 60)), 7)
        assert img.size == (224, 224)
        assert label == 7

    def test_invalid_size(self) -> None:
        with pytest.raises(ValueError, match="size must be positive"):
            LetterboxPad(size=0)

    def test_rejects_non_pil(self) -> None:
        with pytest.raises(TypeError, match="PIL Image"):
            LetterboxPad()("not_an_image")
