"""The QED kernel L0 when x and y are both non-zero, assembled from STV terms."""

from __future__ import annotations

import numpy as np

from kqed.generic_high import high_components
from kqed.generic_low import low_components
from kqed.kernels import KERNEL_SHAPE
from kqed.stv import STV


def construct_kernel(stv: STV) -> np.ndarray:
    """Return the kernel indexed [rho-sigma][mu][nu][lambda], shape (6, 4, 4, 4)."""
    flat = np.concatenate((low_components(stv), high_components(stv)))
    return flat.reshape(KERNEL_SHAPE)