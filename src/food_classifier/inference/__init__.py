"""Classification inference: ONNX model loading, execution and reduction."""

from food_classifier.inference.base import BaseScoreModel
from food_classifier.inference.onnx_model import (
    INPUT_SHAPE,
    ClassificationModel,
    load_model,
)
from food_classifier.inference.reduction import argmax, softmax

__all__ = [
    "INPUT_SHAPE",
    "BaseScoreModel",
    "ClassificationModel",
    "argmax",
    "load_model",
    "softmax",
]
