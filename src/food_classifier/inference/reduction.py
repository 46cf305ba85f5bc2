"""Reduce per-class scores to a prediction."""

from __future__ import annotations

import numpy as np

from food_classifier.errors import InferenceError
from food_classifier.types import ClassScores


def _comparable(scores: ClassScores) -> np.ndarray:  # type: ignore[type-arg]
    """Flatten to 1-D float64 with NaN replaced by -inf."""
    values = np.asarray(scores, dtype=np.float64).reshape(-1)
    if values.size == 0:
        raise InferenceError("Model returned an empty score vector")
    nan_mask = np.isnan(values)
    if nan_mask.all():
        raise InferenceError("Model returned only NaN scores")
    return np.where(nan_mask, -np.inf, values)


def argmax(scores: ClassScores) -> int:
    """Index of the highest score.

    Ties resolve to the lowest index.  NaN scores are never selected.

    Raises:
        InferenceError: If ``scores`` is empty or entirely NaN.
    """
    return int(np.argmax(_comparable(scores)))


def softmax(scores: ClassScores) -> np.ndarray:  # type: ignore[type-arg]
    """Numerically stable softmax over a 1-D score vector; NaN maps to 0."""
    values = _comparable(scores)
    top = values.max()
    if not np.isfinite(top):
        # Entries equal to an infinite maximum share the mass equally.
        hits = (values == top).astype(np.float64)
        return hits / hits.sum()
    exp = np.exp(values - top)
    return exp / exp.sum()
