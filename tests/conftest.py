"""Shared pytest fixtures for food_classifier tests."""

from __future__ import annotations

import io
from unittest.mock import MagicMock

import numpy as np
import pytest
from PIL import Image

from food_classifier.inference.base import BaseScoreModel
from food_classifier.schemas import FoodItem, FoodName
from food_classifier.types import ClassScores, NormalizedTensor


class FakeScoreModel(BaseScoreModel):
    """Returns fixed scores and records every tensor it was given."""

    def __init__(self, scores: list[float]) -> None:
        self.scores = np.asarray(scores, dtype=np.float32)
        self.calls: list[NormalizedTensor] = []

    def run(self, tensor: NormalizedTensor) -> ClassScores:
        self.calls.append(tensor)
        return self.scores


def encode_image(image: Image.Image, fmt: str = "PNG") -> bytes:
    buf = io.BytesIO()
    image.save(buf, format=fmt)
    return buf.getvalue()


def make_session_mock(
    shape: list[object] | None = None,
    input_type: str = "tensor(float)",
    n_inputs: int = 1,
    scores: list[float] | None = None,
) -> MagicMock:
    """Mock ``ort.InferenceSession`` instance with a classifier signature."""
    session = MagicMock()
    inputs = []
    for i in range(n_inputs):
        node = MagicMock()
        node.name = "input" if i == 0 else f"input_{i}"
        node.shape = shape if shape is not None else [1, 3, 224, 224]
        node.type = input_type
        inputs.append(node)
    output = MagicMock()
    output.name = "logits"
    session.get_inputs.return_value = inputs
    session.get_outputs.return_value = [output]
    session.get_providers.return_value = ["CPUExecutionProvider"]
    session.run.return_value = [np.array([scores or [0.1, 0.7, 0.2]], dtype=np.float32)]
    return session


@pytest.fixture()
def fake_model() -> FakeScoreModel:
    return FakeScoreModel([0.1, 2.5, 0.3, 2.5])


@pytest.fixture()
def labels() -> dict[int, FoodItem]:
    return {
        0: FoodItem(id=0, name=FoodName(th="ข้าวผัด", en="Fried rice")),
        1: FoodItem(id=1, name=FoodName(th="ผัดไทย", en="Pad thai")),
    }


@pytest.fixture()
def red_image() -> Image.Image:
    """400x200 fully opaque red image."""
    return Image.new("RGBA", (400, 200), color=(255, 0, 0, 255))


@pytest.fixture()
def png_bytes() -> bytes:
    return encode_image(Image.new("RGB", (64, 48), color=(30, 120, 200)))
