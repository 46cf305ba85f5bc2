"""FastAPI application factory and HTTP routes."""

from __future__ import annotations

import threading
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, File, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.concurrency import run_in_threadpool

from food_classifier import __version__
from food_classifier.config import ServiceConfig
from food_classifier.errors import ClassifierError
from food_classifier.pipeline import ClassificationPipeline
from food_classifier.schemas import Prediction

PipelineFactory = Callable[[ServiceConfig], ClassificationPipeline]


class PipelineHolder:
    """Process-wide, build-once holder for the classification pipeline.

    The pipeline is read-only once built; only construction takes the lock.
    """

    def __init__(
        self,
        config: ServiceConfig,
        factory: PipelineFactory = ClassificationPipeline.from_config,
    ) -> None:
        self._config = config
        self._factory = factory
        self._pipeline: ClassificationPipeline | None = None
        self._lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        return self._pipeline is not None

    def get(self) -> ClassificationPipeline:
        if self._pipeline is None:
            with self._lock:
                if self._pipeline is None:
                    self._pipeline = self._factory(self._config)
        return self._pipeline


def create_app(
    config: ServiceConfig | None = None,
    pipeline_factory: PipelineFactory = ClassificationPipeline.from_config,
) -> FastAPI:
    """Build the classification API.

    With ``config.eager_load`` the model is loaded during startup and a load
    failure aborts it; otherwise the first request loads it.
    """
    config = config or ServiceConfig()
    holder = PipelineHolder(config, pipeline_factory)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if config.eager_load:
            await run_in_threadpool(holder.get)
        yield

    app = FastAPI(title="Food Classifier API", version=__version__, lifespan=lifespan)
    app.state.pipeline_holder = holder

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ClassifierError)
    async def classifier_error_handler(
        request: Request, exc: ClassifierError
    ) -> JSONResponse:
        logger.warning(f"{request.url.path} failed with {exc.category}: {exc}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.category, "detail": exc.message},
        )

    @app.get("/health", tags=["system"])
    async def health() -> dict[str, str | bool]:
        """Readiness probe; reports whether the model is in memory."""
        return {"status": "ok", "model_loaded": holder.loaded}

    @app.post("/predict", tags=["inference"])
    async def predict(file: UploadFile = File(...)) -> int:
        """Classify an uploaded image and return the bare class index."""
        data = await file.read()
        return await run_in_threadpool(lambda: holder.get().predict_bytes(data))

    @app.post("/predict/details", tags=["inference"])
    async def predict_details(file: UploadFile = File(...)) -> Prediction:
        """Classify an uploaded image with confidence and label."""
        data = await file.read()
        return await run_in_threadpool(
            lambda: holder.get().predict_bytes_detailed(data)
        )

    return app
