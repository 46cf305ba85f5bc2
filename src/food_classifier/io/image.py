"""Decode uploaded image files."""

from __future__ import annotations

from pathlib import Path

from loguru import logger
from PIL import Image, UnidentifiedImageError

from food_classifier.errors import InvalidImageError


def load_image(path: str | Path) -> Image.Image:
    """Open and fully decode an image file.

    Raises:
        InvalidImageError: If the file is not a readable raster image or
            has zero width or height.
    """
    try:
        with Image.open(path) as img:
            img.load()
            image = img.copy()
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        SyntaxError,
        ValueError,
    ) as exc:
        logger.warning(f"Failed to decode image {path}: {exc}")
        raise InvalidImageError("Invalid image file") from exc

    if image.width < 1 or image.height < 1:
        raise InvalidImageError(
            f"Image dimensions must be at least 1x1, got {image.width}x{image.height}"
        )
    return image
