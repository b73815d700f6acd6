"""Full symmetrisation of the kernels over all permutations of the photon legs."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from kqed.kernels import (
    KernelFunction,
    KernelPair,
    Kernels,
    QEDKernels,
    _evaluate,
    _vector,
)

_ZERO = np.zeros(4)


def _p(kernel: np.ndarray, order: str) -> np.ndarray:
    """Kernel indexed as kernel[r][order] and returned indexed [r][m][n][l]."""
    return np.einsum(f"r{order}->rmnl", kernel)


def _symmetrised(x: np.ndarray, y: np.ndarray, l0: KernelFunction) -> Kernels:
    xmy = x - y
    ymx = -xmy

    lxy = _evaluate(l0, x, y)
    ly_x = _evaluate(l0, y, x)
    lxmy_x = _evaluate(l0, xmy, x)
    lymx_y = _evaluate(l0, ymx, y)
    lx_xmy = _evaluate(l0, x, xmy)
    ly_ymx = _evaluate(l0, y, ymx)

    lx_0 = _evaluate(l0, x, _ZERO)
    l0_x = _evaluate(l0, _ZERO, x)
    ly_0 = _evaluate(l0, y, _ZERO)
    l0_y = _evaluate(l0, _ZERO, y)
    lxmy_0 = _evaluate(l0, xmy, _ZERO)
    l0_xmy = _evaluate(l0, _ZERO, xmy)

    k0 = (
        lxy
        + _p(ly_x, "nml")
        - _p(lxmy_x, "nlm")
        - _p(lymx_y, "mln")
        - _p(lx_xmy, "lnm")
        - _p(ly_ymx, "lmn")
    ) / 6

    apc = lx_0 - _p(lx_0, "lnm") + _p(ly_0, "nml") - _p(ly_0, "lmn")

    k1 = k0 + (
        -apc
        + _p(lx_0, "lmn") - _p(lx_0, "mln")
        + _p(ly_0, "lnm") - _p(ly_0, "nlm")
        + _p(lxmy_0, "nml") - lxmy_0
        + _p(lxmy_0, "nlm") - _p(lxmy_0, "mln")
    ) / 12

    k2 = k0 - (
        apc
        + _p(l0_x, "nml") - _p(l0_x, "nlm")
        + l0_y - _p(l0_y, "mln")
        + _p(lxmy_0, "mln") - _p(lxmy_0, "nlm")
        + _p(l0_xmy, "lmn") - _p(l0_xmy, "lnm")
    ) / 6.0

    k3 = k2 + (
        l0_x - _p(l0_x, "lnm")
        + _p(l0_y, "nml") - _p(l0_y, "lmn")
        + _p(l0_xmy, "mln") - _p(l0_xmy, "nlm")
    ) / 6.0

    return Kernels(l0=k0, l1=k1, l2=k2, l3=k3)


def compute_all_kernels_symxy0_v2(
    xv: Sequence[float], yv: Sequence[float], l0: KernelFunction
) -> Kernels:
    """Return L0..L3 symmetrised over every permutation of (x, y, 0) legs."""
    return _symmetrised(_vector(xv, "xv"), _vector(yv, "yv"), l0)


def compute_all_kernels_symxy0(
    xv: Sequence[float], yv: Sequence[float], l0: KernelFunction
) -> QEDKernels:
    """Fully symmetrised kernels, with each (y, x) entry the mu<->nu swap of (x, y)."""
    k = _symmetrised(_vector(xv, "xv"), _vector(yv, "yv"), l0)
    return QEDKernels(
        *(
            KernelPair(xy=xy, yx=np.ascontiguousarray(xy.swapaxes(1, 2)))
            for xy in (k.l0, k.l1, k.l2, k.l3)
        )
    )