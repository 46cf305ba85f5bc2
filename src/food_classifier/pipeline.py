"""End-to-end classification: decode -> normalize -> run -> reduce."""

from __future__ import annotations

from pathlib import Path

from loguru import logger
from PIL import Image

from food_classifier.config import ServiceConfig
from food_classifier.inference import BaseScoreModel, argmax, load_model, softmax
from food_classifier.io import load_image, load_labels, staged_upload
from food_classifier.schemas import FoodItem, Prediction
from food_classifier.transforms import normalize


class ClassificationPipeline:
    """Classify one image per call with a shared, read-only model.

    Args:
        model: Loaded score model.
        labels: Optional ``{class_id: FoodItem}`` mapping for detailed results.
        upload_prefix: Directory prefix for staged uploads.
    """

    def __init__(
        self,
        model: BaseScoreModel,
        labels: dict[int, FoodItem] | None = None,
        upload_prefix: str = "temp_uploads",
    ) -> None:
        self.model = model
        self.labels = labels or {}
        self.upload_prefix = upload_prefix

    @classmethod
    def from_config(cls, config: ServiceConfig) -> ClassificationPipeline:
        """Load the model (and labels, if configured) described by ``config``."""
        model = load_model(
            config.model_path, intra_op_num_threads=config.intra_op_num_threads
        )
        labels = load_labels(config.labels_path) if config.labels_path else None
        if labels:
            logger.info(f"Loaded {len(labels)} labels from {config.labels_path}")
        return cls(model, labels=labels, upload_prefix=config.upload_prefix)

    def predict(self, image: Image.Image) -> int:
        """Return the arg-max class index for ``image``."""
        scores = self.model.run(normalize(image))
        predicted_class = argmax(scores)
        logger.info(f"Predicted class: {predicted_class}")
        return predicted_class

    def predict_detailed(self, image: Image.Image) -> Prediction:
        """Like :meth:`predict`, with softmax confidence and label lookup."""
        scores = self.model.run(normalize(image))
        predicted_class = argmax(scores)
        confidence = float(softmax(scores)[predicted_class])
        logger.info(f"Predicted class: {predicted_class} ({confidence:.3f})")
        return Prediction(
            predicted_class=predicted_class,
            confidence=confidence,
            label=self.labels.get(predicted_class),
        )

    def predict_file(self, path: str | Path) -> int:
        return self.predict(load_image(path))

    def predict_file_detailed(self, path: str | Path) -> Prediction:
        return self.predict_detailed(load_image(path))

    def predict_bytes(self, data: bytes) -> int:
        """Stage ``data`` to a scoped temp file, then classify it."""
        with staged_upload([data], prefix=self.upload_prefix) as path:
            return self.predict_file(path)

    def predict_bytes_detailed(self, data: bytes) -> Prediction:
        with staged_upload([data], prefix=self.upload_prefix) as path:
            return self.predict_file_detailed(path)
