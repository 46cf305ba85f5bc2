"""Abstract base class for score models."""

from __future__ import annotations

from abc import ABC, abstractmethod

from food_classifier.types import ClassScores, NormalizedTensor


class BaseScoreModel(ABC):
    """Base class for runnable classification models.

    Implementations must be read-only after construction so that one
    instance can serve concurrent ``run`` calls without locking.
    """

    @abstractmethod
    def run(self, tensor: NormalizedTensor) -> ClassScores:
        """Run a single ``(1, 3, H, W)`` tensor through the model.

        Returns a 1-D vector of per-class scores.
        """
