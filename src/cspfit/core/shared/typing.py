"""Shared typing aliases used across CSPFit."""

import numpy as np
import numpy.typing as npt

FloatArray = npt.NDArray[np.float64]
