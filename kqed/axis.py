"""The QED kernel L0 when one of its two arguments sits at the origin."""

from __future__ import annotations

from typing import Any, Callable, Sequence, Tuple

import numpy as np

from kqed.axis_high import high_components
from kqed.axis_low import low_components
from kqed.kernels import KERNEL_SHAPE
from kqed.stv import STV

TabdFunction = Callable[[np.ndarray, Any], Tuple[Any, Any, Any]]


def construct_axis_kernel(stv: STV) -> np.ndarray:
    """Return the kernel indexed [rho-sigma][mu][nu][lambda], shape (6, 4, 4, 4).

    ``stv.vv`` is the vector term, ``stv.txv`` and ``stv.tyv`` the tensor terms
    with the scalar contribution already included.
    """
    flat = np.concatenate((low_components(stv), high_components(stv)))
    return flat.reshape(KERNEL_SHAPE)


def kernel_on_axis(qv: Sequence[float], grid: Any, tabd: TabdFunction) -> np.ndarray:
    """Evaluate the kernel for a zero argument via a Taylor-expansion routine.

    ``tabd(qv, grid)`` must return ``(vv, txv, tyv)``, each of shape (4, 4, 4);
    any exception it raises (for example when ``qv`` lies beyond the grid)
    propagates to the caller.
    """
    q = np.asarray(qv, dtype=float)
    if q.shape != (4,):
        raise ValueError(f"qv must have four components, got shape {q.shape}")
    vv, txv, tyv = tabd(q, grid)
    return construct_axis_kernel(STV(vv=vv, txv=txv, tyv=tyv))