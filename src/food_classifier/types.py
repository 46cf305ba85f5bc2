"""Type aliases for food_classifier inter-module contracts."""

import numpy as np
import numpy.typing as npt

# Float32 array of shape (1, 3, H, W), normalized with ImageNet stats.
NormalizedTensor = npt.NDArray[np.float32]

# 1-D float array of per-class scores, index-aligned with the model's label space.
ClassScores = npt.NDArray[np.floating]
