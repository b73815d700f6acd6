# kqed

Tools for assembling and symmetrising the position-space QED kernel
`L_{[rho,sigma];mu,nu,lambda}(x, y)` used in the hadronic light-by-light
contribution to the anomalous magnetic moment of the muon.

Every kernel is a NumPy array of shape `(6, 4, 4, 4)`. Its first index runs
over the six antisymmetric pairs `[rho, sigma]`; the other three are the
Lorentz indices `mu`, `nu` and `lambda`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `kqed.cheby`: Clenshaw sums of Chebyshev-U series and of their first, second
  and third derivatives: `cheb_u_sum(co, x)`, `dcheb_u_sum(co, x)`,
  `ddcheb_u_sum(co, x)`, `dddcheb_u_sum(co, x)`. An empty coefficient list
  raises `ValueError`.
- `kqed.stv`: the `STV` dataclass holding the scalar derivatives `sxv`, `syv`
  (shape `(4,)`), the tensor derivatives `txv`, `tyv` and the vector term `vv`
  (shape `(4, 4, 4)`). Missing fields default to zeros, wrong shapes raise
  `ValueError`. `STV.zeros()` returns an all-zero instance and `STV.flat()`
  returns the components flattened in row-major order.
- `kqed.generic`: `construct_kernel(stv)` builds the 384 kernel components for
  the case where neither `x` nor `y` is zero. `kqed.generic_low.low_components`
  and `kqed.generic_high.high_components` return its two halves (entries
  0..191 and 192..383).
- `kqed.axis`: `construct_axis_kernel(stv)` builds the kernel when one argument
  is at the origin; only `vv`, `txv` and `tyv` enter. Its halves come from
  `kqed.axis_low.low_components` and `kqed.axis_high.high_components`.
  `kernel_on_axis(qv, grid, tabd)` calls `tabd(qv, grid)`, which must return
  `(vv, txv, tyv)`, and builds the kernel from them; any exception from `tabd`
  reaches the caller.
- `kqed.kernels`: the containers `Kernels` (fields `l0`..`l3`), `KernelPair`
  (fields `xy`, `yx`) and `QEDKernels` (fields `l0`..`l3`, each a
  `KernelPair`), and functions working on them:
  - `compute_all_kernels(xv, yv, l0)` builds L0..L3 at `(x, y)` and `(y, x)`
    from six calls of the L0 kernel.
  - `compute_all_mkernels(m, xv, yv, l0)` builds Gaussian-subtracted kernels
    for the four masses in `m`; field `l0`..`l3` of the result holds the
    kernel for `m[0]`..`m[3]`.
  - `compute_all_mkernels_v2(m, xv, yv, l0)` does the same but puts
    `L(x,y) + L_{mu<->nu}(y,x)` in `xy` and the subtracted `L(x,-y)` in `yx`.
  - `average_kernels(k, w)` and `average_qed_kernels(k, w)` return element-wise
    means.
  - `swap_munu_lyx(kernels)` returns a copy with `mu` and `nu` exchanged in
    every `yx` kernel.
- `kqed.symxy`: symmetrisation under `x <-> y`.
  `compute_all_kernels_symxy_v2(xv, yv, l0)` returns `Kernels` with each
  `L(x,y)` averaged with `L_{mu<->nu}(y,x)`; `compute_all_kernels_symxy`
  returns `QEDKernels` with that result in `xy` and its `mu<->nu` swap in `yx`.
- `kqed.symxy0`: symmetrisation over all permutations of the three vertices,
  `compute_all_kernels_symxy0_v2(xv, yv, l0)` (returns `Kernels`) and
  `compute_all_kernels_symxy0(xv, yv, l0)` (returns `QEDKernels`, `yx` being
  the `mu<->nu` swap of `xy`).

Position vectors must have four components; anything else raises `ValueError`,
as does an `l0` callable that does not return shape `(6, 4, 4, 4)`.

## Usage

The kernel functions take the base kernel L0 as a callable,
`l0(xv, yv) -> ndarray` of shape `(6, 4, 4, 4)`:

```python
import numpy as np
from kqed.kernels import compute_all_kernels
from kqed.symxy import compute_all_kernels_symxy

def l0(xv, yv):
    # stand-in for a real evaluation of L^(0)(x, y)
    return np.einsum("i,j,k,l->ijkl", np.ones(6), xv, yv, np.asarray(xv) + yv)

x = np.array([0.1, 0.2, 0.3, 0.4])
y = np.array([0.4, -0.1, 0.2, 0.0])

kernels = compute_all_kernels(x, y, l0)
print(kernels.l1.xy.shape)  # (6, 4, 4, 4)

symmetric = compute_all_kernels_symxy(x, y, l0)
```

Building a kernel directly from form-factor derivatives:

```python
from kqed.stv import STV
from kqed.generic import construct_kernel

kernel = construct_kernel(STV.zeros())  # all zeros, shape (6, 4, 4, 4)
```

Chebyshev sums:

```python
from kqed.cheby import cheb_u_sum, dcheb_u_sum

coefficients = [1.0, 0.5, 0.25]
value = cheb_u_sum(coefficients, 0.3)
slope = dcheb_u_sum(coefficients, 0.3)
```

## What this package does not do

The package assembles and symmetrises kernels from quantities handed to it.
It does not tabulate, load or interpolate the form-factor grids, and it does
not compute the `STV` terms at a point `(x, y)` or the Taylor expansions used
when an argument is zero: `construct_kernel` needs a filled `STV`, and
`kernel_on_axis` needs a `tabd` routine and `grid` object supplied by the
caller. There is no command-line program.