"""Symmetrisation of the kernels under the exchange of x and y."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from kqed.kernels import (
    KernelFunction,
    KernelPair,
    Kernels,
    QEDKernels,
    compute_all_kernels,
)


def _symmetrise(pair: KernelPair) -> np.ndarray:
    return (pair.xy + pair.yx.swapaxes(1, 2)) / 2


def compute_all_kernels_symxy_v2(
    xv: Sequence[float], yv: Sequence[float], l0: KernelFunction
) -> Kernels:
    """Return each L(x,y) averaged with L_{mu<->nu}(y,x)."""
    w = compute_all_kernels(xv, yv, l0)
    return Kernels(
        l0=_symmetrise(w.l0),
        l1=_symmetrise(w.l1),
        l2=_symmetrise(w.l2),
        l3=_symmetrise(w.l3),
    )


def compute_all_kernels_symxy(
    xv: Sequence[float], yv: Sequence[float], l0: KernelFunction
) -> QEDKernels:
    """Symmetrised kernels, with each (y, x) entry set to the mu<->nu swap of (x, y)."""
    w = compute_all_kernels(xv, yv, l0)
    pairs = []
    for pair in (w.l0, w.l1, w.l2, w.l3):
        xy = _symmetrise(pair)
        pairs.append(KernelPair(xy=xy, yx=np.ascontiguousarray(xy.swapaxes(1, 2))))
    return QEDKernels(*pairs)