"""Image-to-tensor normalization for the classification model."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

from PIL import Image
from torchvision.transforms import v2

from food_classifier.errors import InvalidImageError
from food_classifier.transforms.conversion import ToFloat32Tensor, to_batched_array
from food_classifier.transforms.letterbox import LetterboxPad
from food_classifier.types import NormalizedTensor

INPUT_SIZE = 224
IMAGENET_MEAN = (0.485, 0.456, 0.406)
IMAGENET_STD = (0.229, 0.224, 0.225)


def build_normalizer(
    size: int = INPUT_SIZE,
    mean: Sequence[float] = IMAGENET_MEAN,
    std: Sequence[float] = IMAGENET_STD,
) -> v2.Compose:
    """Letterbox -> float32 in [0, 1] -> per-channel ``(x - mean) / std``."""
    return v2.Compose(
        [
            LetterboxPad(size=size),
            ToFloat32Tensor(scale=True),
            v2.Normalize(mean=list(mean), std=list(std)),
        ]
    )


@lru_cache(maxsize=1)
def _default_normalizer() -> v2.Compose:
    return build_normalizer()


def normalize(
    image: Image.Image, transform: v2.Compose | None = None
) -> NormalizedTensor:
    """Turn a decoded image into a ``(1, 3, 224, 224)`` float32 array.

    Raises:
        InvalidImageError: If the image has zero width or height.
    """
    if image.width < 1 or image.height < 1:
        raise InvalidImageError(
            f"Image dimensions must be at least 1x1, got {image.width}x{image.height}"
        )
    if transform is None:
        transform = _default_normalizer()
    return to_batched_array(transform(image))
