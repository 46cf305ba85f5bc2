"""Tests for scripts/classify_images.py."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from PIL import Image

# Add scripts to path so we can import
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "scripts"))

from classify_images import classify_images, print_results  # noqa: E402
from conftest import FakeScoreModel  # noqa: E402
from food_classifier.pipeline import ClassificationPipeline  # noqa: E402
from food_classifier.schemas import FoodItem  # noqa: E402


def test_classifies_and_reports_bad_files(
    tmp_path: Path,
    fake_model: FakeScoreModel,
    labels: dict[int, FoodItem],
    capsys: pytest.CaptureFixture[str],
) -> None:
    good = tmp_path / "good.png"
    Image.new("RGB", (20, 30)).save(good)
    bad = tmp_path / "bad.jpg"
    bad.write_bytes(b"nope")

    results = classify_images(ClassificationPipeline(fake_model, labels), [good, bad])

    assert results[0][1] is not None
    assert results[0][1].predicted_class == 1
    assert results[1][1] is None
    assert results[1][2] == "Invalid image file"

    print_results(results)
    out = capsys.readouterr().out
    assert "good.png" in out
    assert "Pad thai" in out
