"""Torchvision v2 preprocessing for the classification model.

Letterbox resize with centered zero padding, float conversion and ImageNet
normalization, composed into a single deterministic pipeline.
"""

from food_classifier.transforms.conversion import ToFloat32Tensor, to_batched_array
from food_classifier.transforms.letterbox import (
    LetterboxPad,
    letterbox,
    letterbox_size,
    padding_offsets,
)
from food_classifier.transforms.normalize import (
    IMAGENET_MEAN,
    IMAGENET_STD,
    INPUT_SIZE,
    build_normalizer,
    normalize,
)

__all__ = [
    "IMAGENET_MEAN",
    "IMAGENET_STD",
    "INPUT_SIZE",
    "LetterboxPad",
    "ToFloat32Tensor",
    "build_normalizer",
    "letterbox",
    "letterbox_size",
    "normalize",
    "padding_offsets",
    "to_batched_array",
]
