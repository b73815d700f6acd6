import numpy as np
import pytest

from kqed.kernels import compute_all_kernels
from kqed.symxy import compute_all_kernels_symxy, compute_all_kernels_symxy_v2

SHAPE = (6, 4, 4, 4)
_RNG = np.random.default_rng(11)
A = _RNG.normal(size=SHAPE)
B = _RNG.normal(size=SHAPE)
C = _RNG.normal(size=SHAPE)

XV = np.array([0.6, -0.1, 0.8, 0.25])
YV = np.array([-0.4, 0.9, -0.3, 0.7])


def generic_l0(xv, yv):
    return A * float(np.sum(xv)) + B * float(np.sum(yv) ** 2) + C * float(xv[0] * yv[3])


def symmetric_l0(xv, yv):
    cs = C + C.swapaxes(1, 2)
    return (
        A * float(np.sum(xv))
        + A.swapaxes(1, 2) * float(np.sum(yv))
        + cs * float(xv @ yv)
    )


def _pairs(k):
    return [k.l0, k.l1, k.l2, k.l3]


def test_yx_is_munu_swap_of_xy():
    k = compute_all_kernels_symxy(XV, YV, generic_l0)
    for pair in _pairs(k):
        np.testing.assert_allclose(pair.yx, pair.xy.transpose(0, 2, 1, 3))


def test_v2_matches_xy_entries():
    k = compute_all_kernels_symxy(XV, YV, generic_l0)
    v2 = compute_all_kernels_symxy_v2(XV, YV, generic_l0)
    for pair, single in zip(_pairs(k), (v2.l0, v2.l1, v2.l2, v2.l3)):
        np.testing.assert_allclose(single, pair.xy)


def test_symmetric_kernel_is_unchanged():
    plain = compute_all_kernels(XV, YV, symmetric_l0)
    k = compute_all_kernels_symxy(XV, YV, symmetric_l0)
    np.testing.assert_allclose(k.l0.xy, plain.l0.xy, atol=1e-12)


def test_exchanging_arguments_swaps_indices():
    k = compute_all_kernels_symxy_v2(XV, YV, generic_l0)
    r = compute_all_kernels_symxy_v2(YV, XV, generic_l0)
    np.testing.assert_allclose(r.l0, k.l0.transpose(0, 2, 1, 3), atol=1e-12)


def test_result_is_mean_of_orderings():
    plain = compute_all_kernels(XV, YV, generic_l0)
    v2 = compute_all_kernels_symxy_v2(XV, YV, generic_l0)
    np.testing.assert_allclose(
        2 * v2.l2, plain.l2.xy + plain.l2.yx.transpose(0, 2, 1, 3), atol=1e-12
    )


def test_bad_vector_rejected():
    with pytest.raises(ValueError):
        compute_all_kernels_symxy(XV, [1.0, 2.0], generic_l0)