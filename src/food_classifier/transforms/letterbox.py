"""Aspect-preserving resize onto a fixed, centered square canvas."""

from __future__ import annotations

from typing import Any

from PIL import Image
from torchvision.transforms import v2

from food_classifier.errors import InvalidImageError


def letterbox_size(width: int, height: int, target: int = 224) -> tuple[int, int]:
    """Scale ``(width, height)`` so the long edge becomes exactly ``target``.

    The short edge is floor-divided, so it never exceeds ``target``.  Images
    smaller than ``target`` are scaled up.  Extreme aspect ratios whose short
    edge would round down to zero are clamped to one pixel.

    Raises:
        InvalidImageError: If either dimension is smaller than one pixel.
    """
    if width < 1 or height < 1:
        raise InvalidImageError(
            f"Image dimensions must be at least 1x1, got {width}x{height}"
        )
    if width > height:
        new_width, new_height = target, (target * height) // width
    else:
        new_width, new_height = (target * width) // height, target
    return max(1, new_width), max(1, new_height)


def padding_offsets(
    new_width: int, new_height: int, target: int = 224
) -> tuple[int, int]:
    """Top-left offset that centers a ``new_width x new_height`` image."""
    return (target - new_width) // 2, (target - new_height) // 2


def letterbox(
    image: Image.Image,
    size: int = 224,
    resample: Image.Resampling = Image.Resampling.BILINEAR,
) -> Image.Image:
    """Resize ``image`` into a ``size x size`` RGB canvas, padding with zeros.

    Alpha in the source is discarded before resizing, so transparent pixels
    keep their color rather than being premultiplied to black.  The canvas
    starts fully transparent black; every pasted pixel is forced opaque, then
    the alpha channel is dropped.
    """
    width, height = image.size
    new_width, new_height = letterbox_size(width, height, size)
    resized = image.convert("RGB").resize((new_width, new_height), resample)

    canvas = Image.new("RGBA", (size, size))
    pad_x, pad_y = padding_offsets(new_width, new_height, size)
    canvas.paste(resized.convert("RGBA"), (pad_x, pad_y))
    return canvas.convert("RGB")


class LetterboxPad(v2.Transform):
    """Letterbox a PIL image to a fixed square canvas.

    Should be placed *before* ``ToFloat32Tensor`` in the pipeline.

    Args:
        size: Side length of the output canvas.
        resample: PIL resampling filter. Defaults to ``BILINEAR`` (triangle).
    """

    def __init__(
        self,
        size: int = 224,
        resample: Image.Resampling = Image.Resampling.BILINEAR,
    ) -> None:
        super().__init__()
        if size < 1:
            raise ValueError(f"size must be positive, got {size}")
        self.size = size
        self.resample = resample

    def forward(self, *inputs: Any) -> Any:
        img = inputs[0]
        rest = inputs[1:]

        if not isinstance(img, Image.Image):
            raise TypeError(f"LetterboxPad expects a PIL Image, got {type(img)}")

        result = letterbox(img, self.size, self.resample)
        return (result, *rest) if rest else result
