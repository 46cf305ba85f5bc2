"""Labels file reader using orjson."""

from __future__ import annotations

from pathlib import Path

import orjson
from pydantic import TypeAdapter, ValidationError

from food_classifier.errors import LabelsLoadError
from food_classifier.schemas.prediction import FoodItem

_ITEMS = TypeAdapter(list[FoodItem])


def load_labels(path: str | Path) -> dict[int, FoodItem]:
    """Read a JSON list of food items into an ``{id: item}`` mapping.

    Expected format::

        [{"id": 0, "name": {"th": "ข้าวผัด", "en": "Fried rice"}}, ...]

    Raises:
        LabelsLoadError: If the file is missing, not JSON, fails validation or
            repeats an id.
    """
    path = Path(path)
    try:
        raw = orjson.loads(path.read_bytes())
    except OSError as exc:
        raise LabelsLoadError(f"Cannot read labels file {path}: {exc}") from exc
    except orjson.JSONDecodeError as exc:
        raise LabelsLoadError(f"Labels file {path} is not valid JSON: {exc}") from exc

    try:
        items = _ITEMS.validate_python(raw)
    except ValidationError as exc:
        raise LabelsLoadError(f"Labels file {path} is malformed: {exc}") from exc

    labels: dict[int, FoodItem] = {}
    for item in items:
        if item.id in labels:
            raise LabelsLoadError(f"Labels file {path} repeats id {item.id}")
        labels[item.id] = item
    return labels
