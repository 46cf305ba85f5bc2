"""ONNX Runtime model loading and execution."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import onnxruntime as ort
from loguru import logger
from onnxruntime.capi.onnxruntime_pybind11_state import InvalidProtobuf

from food_classifier.errors import InferenceError, ModelLoadError
from food_classifier.inference.base import BaseScoreModel
from food_classifier.transforms.normalize import INPUT_SIZE
from food_classifier.types import ClassScores, NormalizedTensor

INPUT_SHAPE = (1, 3, INPUT_SIZE, INPUT_SIZE)
_FLOAT_TYPE = "tensor(float)"


class ClassificationModel(BaseScoreModel):
    """A compiled ONNX classifier taking one ``(1, 3, 224, 224)`` float32 input.

    Instances are built by :func:`load_model` and never mutated afterwards.
    ``InferenceSession.run`` is safe to call from several threads at once.

    Args:
        session: Optimized ONNX Runtime session.
        input_name: Name of the graph's single input.
        output_name: Name of the graph output holding class scores.
        path: Where the model was loaded from, for diagnostics.
    """

    def __init__(
        self,
        session: ort.InferenceSession,
        input_name: str,
        output_name: str,
        path: Path | None = None,
    ) -> None:
        self.session = session
        self.input_name = input_name
        self.output_name = output_name
        self.path = path

    def run(self, tensor: NormalizedTensor) -> ClassScores:
        """Execute the graph on one batch element and return flat class scores."""
        if not isinstance(tensor, np.ndarray):
            raise InferenceError(f"Expected a numpy array, got {type(tensor).__name__}")
        if tensor.dtype != np.float32:
            raise InferenceError(f"Expected float32 input, got {tensor.dtype}")
        if tensor.shape != INPUT_SHAPE:
            raise InferenceError(
                f"Expected input shape {INPUT_SHAPE}, got {tuple(tensor.shape)}"
            )

        try:
            outputs = self.session.run([self.output_name], {self.input_name: tensor})
        except Exception as exc:
            logger.error(f"Model inference failed: {exc}")
            raise InferenceError(f"Model inference failed: {exc}") from exc

        return np.asarray(outputs[0]).reshape(-1)


def _read_model_bytes(path: Path) -> bytes:
    if not path.is_file():
        raise ModelLoadError(f"Model file not found: {path}", stage="load")
    try:
        return path.read_bytes()
    except OSError as exc:
        raise ModelLoadError(f"Cannot read model file {path}: {exc}", stage="load") from exc


def _build_session(
    model_bytes: bytes, path: Path, intra_op_num_threads: int | None
) -> ort.InferenceSession:
    options = ort.SessionOptions()
    options.graph_optimization_level = ort.GraphOptimizationLevel.ORT_ENABLE_ALL
    if intra_op_num_threads is not None:
        options.intra_op_num_threads = intra_op_num_threads

    try:
        return ort.InferenceSession(
            model_bytes, sess_options=options, providers=["CPUExecutionProvider"]
        )
    except InvalidProtobuf as exc:
        raise ModelLoadError(f"Cannot parse ONNX model {path}: {exc}", stage="load") from exc
    except Exception as exc:
        raise ModelLoadError(
            f"Failed to optimize ONNX model {path}: {exc}", stage="optimize"
        ) from exc


def _static_dim_matches(dim: object, expected: int) -> bool:
    # Symbolic (str) or unknown (None) dims are resolved at run time.
    return not isinstance(dim, int) or dim == expected


def _bind_signature(session: ort.InferenceSession, path: Path) -> tuple[str, str]:
    inputs = session.get_inputs()
    outputs = session.get_outputs()
    if len(inputs) != 1:
        raise ModelLoadError(
            f"Model {path} must have exactly one input, found {len(inputs)}",
            stage="compile",
        )
    if not outputs:
        raise ModelLoadError(f"Model {path} declares no outputs", stage="compile")

    graph_input = inputs[0]
    if graph_input.type != _FLOAT_TYPE:
        raise ModelLoadError(
            f"Model input {graph_input.name!r} must be {_FLOAT_TYPE}, "
            f"got {graph_input.type}",
            stage="compile",
        )
    shape = list(graph_input.shape)
    if len(shape) != len(INPUT_SHAPE) or not all(
        _static_dim_matches(dim, expected)
        for dim, expected in zip(shape, INPUT_SHAPE, strict=True)
    ):
        raise ModelLoadError(
            f"Model input {graph_input.name!r} must have shape {INPUT_SHAPE}, "
            f"got {shape}",
            stage="compile",
        )
    return graph_input.name, outputs[0].name


def load_model(
    path: str | Path, *, intra_op_num_threads: int | None = None
) -> ClassificationModel:
    """Load, optimize and compile an ONNX classifier.

    The three phases run in order and fail independently; the failing phase
    is reported in :attr:`ModelLoadError.stage`.

    Raises:
        ModelLoadError: If the file is missing or unparsable (``"load"``), the
            graph cannot be optimized (``"optimize"``), or its signature does
            not match a ``(1, 3, 224, 224)`` float32 classifier (``"compile"``).
    """
    path = Path(path)

    logger.info(f"Loading ONNX model from {path}")
    model_bytes = _read_model_bytes(path)

    logger.debug(f"Optimizing ONNX graph ({len(model_bytes) / 1024:.1f} KB)")
    session = _build_session(model_bytes, path, intra_op_num_threads)

    input_name, output_name = _bind_signature(session, path)
    logger.info(
        f"Model ready: input={input_name!r} output={output_name!r} "
        f"providers={session.get_providers()}"
    )
    return ClassificationModel(session, input_name, output_name, path=path)
