"""Data conversion transforms for classification inputs."""

from __future__ import annotations

from typing import Any

import numpy as np
import torch
from torchvision.transforms import v2

from food_classifier.types import NormalizedTensor


class ToFloat32Tensor(v2.Transform):
    """Convert PIL images to float32 CHW tensors.

    Wraps ``v2.ToImage`` + ``v2.ToDtype`` into a single transform.

    Args:
        scale: If ``True`` (default), scale pixel values from ``[0, 255]`` to
            ``[0.0, 1.0]``.  If ``False``, keep the 0-255 range as float32.
    """

    def __init__(self, scale: bool = True) -> None:
        super().__init__()
        self._to_image = v2.ToImage()
        self._to_dtype = v2.ToDtype(torch.float32, scale=scale)

    def forward(self, *inputs: Any) -> Any:
        outputs = self._to_image(*inputs)
        if not isinstance(outputs, tuple):
            outputs = (outputs,)
        return self._to_dtype(*outputs)


def to_batched_array(tensor: torch.Tensor) -> NormalizedTensor:
    """Add the batch axis and hand the tensor over as a contiguous float32 array."""
    if tensor.ndim != 3:
        raise ValueError(f"Expected a CHW tensor, got shape {tuple(tensor.shape)}")
    array = torch.as_tensor(tensor).unsqueeze(0).detach().cpu().numpy()
    return np.ascontiguousarray(array, dtype=np.float32)
