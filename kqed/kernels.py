"""Containers for QED kernels and the combinations that build L1, L2, L3 from L0."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

import numpy as np

KERNEL_SHAPE = (6, 4, 4, 4)
KernelFunction = Callable[[np.ndarray, np.ndarray], np.ndarray]

_ZERO = np.zeros(4)


@dataclass(eq=False)
class Kernels:
    """The four kernels L0..L3, each indexed [rho-sigma][mu][nu][lambda]."""

    l0: np.ndarray
    l1: np.ndarray
    l2: np.ndarray
    l3: np.ndarray


@dataclass(eq=False)
class KernelPair:
    """A kernel evaluated at (x, y) and at (y, x)."""

    xy: np.ndarray
    yx: np.ndarray


@dataclass(eq=False)
class QEDKernels:
    """The four kernels L0..L3, each at (x, y) and (y, x)."""

    l0: KernelPair
    l1: KernelPair
    l2: KernelPair
    l3: KernelPair


def _vector(v: Sequence[float], name: str) -> np.ndarray:
    arr = np.asarray(v, dtype=float)
    if arr.shape != (4,):
        raise ValueError(f"{name} must have four components, got shape {arr.shape}")
    return arr


def _evaluate(l0: KernelFunction, xv: np.ndarray, yv: np.ndarray) -> np.ndarray:
    out = np.asarray(l0(xv, yv), dtype=float)
    if out.shape != KERNEL_SHAPE:
        raise ValueError(f"kernel function returned shape {out.shape}, expected {KERNEL_SHAPE}")
    return out


def _swap_munu(kernel: np.ndarray) -> np.ndarray:
    return np.ascontiguousarray(kernel.swapaxes(1, 2))


def _swap_mulambda(kernel: np.ndarray) -> np.ndarray:
    return np.ascontiguousarray(kernel.swapaxes(1, 3))


def _projection(kernel: np.ndarray, v: np.ndarray, axis: int) -> np.ndarray:
    """v along `axis` times the contraction of `kernel` with v over that axis."""
    contracted = np.expand_dims(np.tensordot(kernel, v, axes=([axis], [0])), axis)
    shape = [1, 1, 1, 1]
    shape[axis] = 4
    return v.reshape(shape) * contracted


def average_kernels(k: Kernels, w: Kernels) -> Kernels:
    """Return the element-wise mean of two Kernels."""
    return Kernels(
        l0=0.5 * (k.l0 + w.l0),
        l1=0.5 * (k.l1 + w.l1),
        l2=0.5 * (k.l2 + w.l2),
        l3=0.5 * (k.l3 + w.l3),
    )


def _average_pair(a: KernelPair, b: KernelPair) -> KernelPair:
    return KernelPair(xy=0.5 * (a.xy + b.xy), yx=0.5 * (a.yx + b.yx))


def average_qed_kernels(k: QEDKernels, w: QEDKernels) -> QEDKernels:
    """Return the element-wise mean of two QEDKernels."""
    return QEDKernels(
        l0=_average_pair(k.l0, w.l0),
        l1=_average_pair(k.l1, w.l1),
        l2=_average_pair(k.l2, w.l2),
        l3=_average_pair(k.l3, w.l3),
    )


def compute_all_kernels(
    xv: Sequence[float], yv: Sequence[float], l0: KernelFunction
) -> QEDKernels:
    """Build L0..L3 at (x, y) and (y, x) from six evaluations of the L0 kernel."""
    x = _vector(xv, "xv")
    y = _vector(yv, "yv")
    l0xy = _evaluate(l0, x, y)
    l0yx = _evaluate(l0, y, x)
    lx0 = _evaluate(l0, x, _ZERO)
    l0x = _evaluate(l0, _ZERO, x)
    ly0 = _evaluate(l0, y, _ZERO)
    l0y = _evaluate(l0, _ZERO, y)

    lx0_mulam = _swap_mulambda(lx0)
    ly0_mulam = _swap_mulambda(ly0)
    f1 = (lx0_mulam + ly0_mulam) / 2.0
    f2 = lx0 + l0y
    f3 = l0x - l0y
    f4 = l0x + ly0

    return QEDKernels(
        l0=KernelPair(xy=l0xy, yx=l0yx),
        l1=KernelPair(xy=l0xy + f1, yx=l0yx + f1),
        l2=KernelPair(xy=l0xy - f2, yx=l0yx - f4),
        l3=KernelPair(xy=l0xy + lx0_mulam + f3, yx=l0yx + ly0_mulam - f3),
    )


@dataclass
class _MassTerms:
    ex: np.ndarray
    ey: np.ndarray
    m: np.ndarray


def _mass_terms(m: Sequence[float], x: np.ndarray, y: np.ndarray) -> _MassTerms:
    masses = _vector(m, "m")
    return _MassTerms(
        ex=np.exp(-masses * (x @ x) / 2.0),
        ey=np.exp(-masses * (y @ y) / 2.0),
        m=masses,
    )


def compute_all_mkernels(
    m: Sequence[float], xv: Sequence[float], yv: Sequence[float], l0: KernelFunction
) -> QEDKernels:
    """Build four Gaussian-subtracted kernels, one for each mass in `m`.

    Entry a of the result holds L(x,y) and L(y,x) with the subtraction for mass m[a].
    """
    x = _vector(xv, "xv")
    y = _vector(yv, "yv")
    terms = _mass_terms(m, x, y)
    lxy = _evaluate(l0, x, y)
    lyx = _evaluate(l0, y, x)
    lx0 = _evaluate(l0, x, _ZERO)
    l0x = _evaluate(l0, _ZERO, x)
    ly0 = _evaluate(l0, y, _ZERO)
    l0y = _evaluate(l0, _ZERO, y)

    p_l0y = _projection(l0y, x, 1)
    p_lx0 = _projection(lx0, y, 2)
    p_l0x = _projection(l0x, y, 1)
    p_ly0 = _projection(ly0, x, 2)

    pairs = []
    for mass, ex, ey in zip(terms.m, terms.ex, terms.ey):
        xy_term = ex * (l0y - mass * p_l0y) + ey * (lx0 - mass * p_lx0)
        yx_term = ey * (l0x - mass * p_l0x) + ex * (ly0 - mass * p_ly0)
        pairs.append(KernelPair(xy=lxy - xy_term, yx=lyx - yx_term))
    return QEDKernels(*pairs)


def compute_all_mkernels_v2(
    m: Sequence[float], xv: Sequence[float], yv: Sequence[float], l0: KernelFunction
) -> QEDKernels:
    """Gaussian-subtracted kernels with L(x,y) + L_{mu<->nu}(y,x) in xy and L(x,-y) in yx."""
    x = _vector(xv, "xv")
    y = _vector(yv, "yv")
    terms = _mass_terms(m, x, y)
    lxy = _evaluate(l0, x, y)
    lxmy = _evaluate(l0, x, -y)
    lyx = _evaluate(l0, y, x)
    lx0 = _evaluate(l0, x, _ZERO)
    l0x = _evaluate(l0, _ZERO, x)
    ly0 = _evaluate(l0, y, _ZERO)
    l0y = _evaluate(l0, _ZERO, y)

    p_l0y = _projection(l0y, x, 1)
    p_lx0 = _projection(lx0, y, 2)
    p_l0x = _projection(l0x, y, 1)
    p_ly0 = _projection(ly0, x, 2)

    pairs = []
    for mass, ex, ey in zip(terms.m, terms.ex, terms.ey):
        x_part = ex * (l0y - mass * p_l0y)
        y_part = ey * (lx0 - mass * p_lx0)
        yx_term = ey * (l0x - mass * p_l0x) + ex * (ly0 - mass * p_ly0)
        symmetric = lxy - (x_part + y_part) + _swap_munu(lyx - yx_term)
        reflected = lxmy - (y_part - x_part)
        pairs.append(KernelPair(xy=symmetric, yx=reflected))
    return QEDKernels(*pairs)


def swap_munu_lyx(kernels: QEDKernels) -> QEDKernels:
    """Return a copy with the mu and nu indices of every (y, x) kernel exchanged."""
    return QEDKernels(
        *(
            KernelPair(xy=pair.xy.copy(), yx=_swap_munu(pair.yx))
            for pair in (kernels.l0, kernels.l1, kernels.l2, kernels.l3)
        )
    )