"""Image classification service: letterbox preprocessing and ONNX inference."""

__version__ = "0.0.1"
