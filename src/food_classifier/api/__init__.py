"""HTTP layer for the classification service."""

from food_classifier.api.app import PipelineHolder, create_app

__all__ = [
    "PipelineHolder",
    "create_app",
]
