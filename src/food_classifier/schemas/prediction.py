"""Prediction and label schemas."""

from __future__ import annotations

from pydantic import BaseModel


class FoodName(BaseModel, frozen=True):
    """Display names of a class in Thai and English."""

    th: str
    en: str


class FoodItem(BaseModel, frozen=True):
    """A labelled class, keyed by its model output index."""

    id: int
    name: FoodName


class Prediction(BaseModel, frozen=True):
    """A single classification result.

    ``label`` is ``None`` when no labels file is configured or the index is
    not listed in it.
    """

    predicted_class: int
    confidence: float
    label: FoodItem | None = None
