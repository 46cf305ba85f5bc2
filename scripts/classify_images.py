#!/usr/bin/env python3
"""Classify local image files with an ONNX model, without the HTTP server.

Runs the same letterbox + normalize + argmax pipeline the service uses and
prints one row per image.

Usage::

    python scripts/classify_images.py \\
        --model-path models/best/model.onnx \\
        --labels labels.json \\
        photos/pad_thai.jpg photos/*.png
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger
from rich.console import Console
from rich.table import Table
from tqdm import tqdm

# Add project root to path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from food_classifier.config import ServiceConfig  # noqa: E402
from food_classifier.errors import ClassifierError, InvalidImageError  # noqa: E402
from food_classifier.pipeline import ClassificationPipeline  # noqa: E402
from food_classifier.schemas import Prediction  # noqa: E402


def classify_images(
    pipeline: ClassificationPipeline, images: list[Path]
) -> list[tuple[Path, Prediction | None, str | None]]:
    """Classify each image; undecodable files are reported, not fatal."""
    results: list[tuple[Path, Prediction | None, str | None]] = []
    for path in tqdm(images, desc="Classifying", disable=len(images) < 2):
        try:
            results.append((path, pipeline.predict_file_detailed(path), None))
        except InvalidImageError as exc:
            results.append((path, None, exc.message))
    return results


def print_results(results: list[tuple[Path, Prediction | None, str | None]]) -> None:
    """Print a rich table of predictions."""
    console = Console()
    table = Table(title="Predictions")
    table.add_column("Image", style="bold")
    table.add_column("Class", justify="right")
    table.add_column("Confidence", justify="right")
    table.add_column("Label")

    for path, prediction, error in results:
        if prediction is None:
            table.add_row(path.name, "-", "-", f"[red]{error}[/red]")
            continue
        label = prediction.label
        name = f"{label.name.en} ({label.name.th})" if label is not None else ""
        table.add_row(
            path.name,
            str(prediction.predicted_class),
            f"{prediction.confidence:.2%}",
            name,
        )

    console.print(table)


def main() -> None:
    parser = argparse.ArgumentParser(description="Classify local image files")
    parser.add_argument("images", type=Path, nargs="+", help="Image files to classify")
    parser.add_argument(
        "--model-path",
        type=Path,
        default=Path("model.onnx"),
        help="Path to ONNX model file (default: model.onnx)",
    )
    parser.add_argument(
        "--labels",
        type=Path,
        default=None,
        help="Optional labels JSON with Thai/English names",
    )
    args = parser.parse_args()

    config = ServiceConfig(
        model_path=str(args.model_path),
        labels_path=str(args.labels) if args.labels else None,
    )
    try:
        pipeline = ClassificationPipeline.from_config(config)
    except ClassifierError as exc:
        logger.error(f"Could not load model: {exc}")
        sys.exit(1)

    print_results(classify_images(pipeline, args.images))


if __name__ == "__main__":
    main()
