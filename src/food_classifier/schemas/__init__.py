"""Classification result schemas."""

from food_classifier.schemas.prediction import FoodItem, FoodName, Prediction

__all__ = [
    "FoodItem",
    "FoodName",
    "Prediction",
]
