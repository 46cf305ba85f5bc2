"""Error taxonomy for the classification pipeline.

Every error carries a stable ``category`` and the HTTP ``status_code`` the
service responds with.  The API layer maps them in a single exception handler.
"""

from __future__ import annotations


class ClassifierError(Exception):
    """Base class for all pipeline failures."""

    category: str = "internal"
    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidImageError(ClassifierError):
    """Undecodable upload or degenerate (zero width/height) image."""

    category = "invalid_image"
    status_code = 400


class ModelLoadError(ClassifierError):
    """Model could not be loaded, optimized or compiled.

    Args:
        message: Human-readable diagnostic.
        stage: Phase that failed: ``"load"``, ``"optimize"`` or ``"compile"``.
    """

    category = "model_load"
    status_code = 500

    def __init__(self, message: str, stage: str = "load") -> None:
        super().__init__(message)
        self.stage = stage

    def __str__(self) -> str:
        return f"[{self.stage}] {self.message}"


class LabelsLoadError(ModelLoadError):
    """Labels sidecar is missing or malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(message, stage="labels")


class InferenceError(ClassifierError):
    """Model rejected the tensor or failed during execution."""

    category = "inference"
    status_code = 500


class ResourceError(ClassifierError):
    """Scratch resources for staging an upload could not be acquired."""

    category = "resource"
    status_code = 500
