"""Form factors and their derivatives that feed the QED kernel at a point (x, y)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

import numpy as np

_VECTOR_SHAPE = (4,)
_TENSOR_SHAPE = (4, 4, 4)


class FlatSTV(NamedTuple):
    """Row-major flattened components of an STV, as plain floats."""

    vv: tuple[float, ...]
    sxv: tuple[float, ...]
    syv: tuple[float, ...]
    txv: tuple[float, ...]
    tyv: tuple[float, ...]


def _as_array(value, shape: tuple[int, ...], name: str) -> np.ndarray:
    arr = np.array(value, dtype=float)
    if arr.shape != shape:
        raise ValueError(f"{name} must have shape {shape}, got {arr.shape}")
    return arr


@dataclass(eq=False)
class STV:
    """Scalar (S), tensor (T) and vector (V) derivative terms of the kernel.

    ``sxv``/``syv`` are the x and y derivatives of the scalar part, shape (4,);
    ``txv``/``tyv`` the x and y derivatives of the tensor part and ``vv`` the
    mixed vector term, each shape (4, 4, 4) indexed [alpha][beta][delta].
    """

    sxv: np.ndarray = field(default_factory=lambda: np.zeros(_VECTOR_SHAPE))
    syv: np.ndarray = field(default_factory=lambda: np.zeros(_VECTOR_SHAPE))
    txv: np.ndarray = field(default_factory=lambda: np.zeros(_TENSOR_SHAPE))
    tyv: np.ndarray = field(default_factory=lambda: np.zeros(_TENSOR_SHAPE))
    vv: np.ndarray = field(default_factory=lambda: np.zeros(_TENSOR_SHAPE))

    def __post_init__(self) -> None:
        self.sxv = _as_array(self.sxv, _VECTOR_SHAPE, "sxv")
        self.syv = _as_array(self.syv, _VECTOR_SHAPE, "syv")
        self.txv = _as_array(self.txv, _TENSOR_SHAPE, "txv")
        self.tyv = _as_array(self.tyv, _TENSOR_SHAPE, "tyv")
        self.vv = _as_array(self.vv, _TENSOR_SHAPE, "vv")

    @classmethod
    def zeros(cls) -> "STV":
        """Return an STV with every component zero."""
        return cls()

    def flat(self) -> FlatSTV:
        """Return the components flattened in row-major order."""
        return FlatSTV(
            vv=tuple(self.vv.ravel().tolist()),
            sxv=tuple(self.sxv.tolist()),
            syv=tuple(self.syv.tolist()),
            txv=tuple(self.txv.ravel().tolist()),
            tyv=tuple(self.tyv.ravel().tolist()),
        )