"""File I/O: image decoding, upload staging and labels files."""

from food_classifier.io.image import load_image
from food_classifier.io.labels import load_labels
from food_classifier.io.upload import staged_upload

__all__ = [
    "load_image",
    "load_labels",
    "staged_upload",
]
