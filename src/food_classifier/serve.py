"""Serving entrypoint for food_classifier.

Usage:
    food-classifier-serve                                   # defaults
    food-classifier-serve model_path=models/best/model.onnx
    food-classifier-serve labels_path=labels.json port=9000
    food-classifier-serve eager_load=false log_level=DEBUG
"""

import sys
from typing import Any

import hydra
import uvicorn
from loguru import logger
from omegaconf import DictConfig, OmegaConf

from food_classifier.api import create_app
from food_classifier.config import ServiceConfig


def build_config(cfg: DictConfig) -> ServiceConfig:
    """Validate a composed Hydra config into a frozen ServiceConfig."""
    values: dict[str, Any] = OmegaConf.to_container(cfg, resolve=True)  # type: ignore[assignment]
    return ServiceConfig(**values)


def setup_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)


@hydra.main(version_base=None, config_path="conf", config_name="serve")
def main(cfg: DictConfig) -> None:
    """Start the HTTP service with the given Hydra config."""
    config = build_config(cfg)
    setup_logging(config.log_level)

    logger.info(f"Configuration:\n{OmegaConf.to_yaml(cfg)}")
    logger.info(f"Server running at http://{config.host}:{config.port}")

    # uvicorn has no SUCCESS level
    uvicorn_level = "info" if config.log_level == "SUCCESS" else config.log_level.lower()

    app = create_app(config)
    uvicorn.run(app, host=config.host, port=config.port, log_level=uvicorn_level)


if __name__ == "__main__":
    main()
