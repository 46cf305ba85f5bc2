"""Pydantic frozen configuration models for food_classifier."""

from pydantic import BaseModel, Field, field_validator, model_validator

_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class ServiceConfig(BaseModel, frozen=True):
    """Configuration for the classification service.

    All fields are validated at construction time. Frozen, no mutation after creation.
    """

    model_path: str = "model.onnx"
    labels_path: str | None = None
    host: str = "127.0.0.1"
    port: int = Field(default=8080, ge=1, le=65535)
    log_level: str = "INFO"
    eager_load: bool = True
    cors_origins: tuple[str, ...] = ("*",)
    intra_op_num_threads: int | None = None
    upload_prefix: str = "temp_uploads"

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}, got {value!r}")
        return level

    @model_validator(mode="after")
    def _non_positive_threads_means_default(self) -> "ServiceConfig":
        """onnxruntime treats 0 as 'pick for me'; normalise <= 0 to None."""
        if self.intra_op_num_threads is not None and self.intra_op_num_threads <= 0:
            # Use object.__setattr__ because model is frozen
            object.__setattr__(self, "intra_op_num_threads", None)
        return self
