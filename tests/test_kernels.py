import numpy as np
import pytest

from kqed.kernels import (
    KernelPair,
    Kernels,
    QEDKernels,
    average_kernels,
    average_qed_kernels,
    compute_all_kernels,
    compute_all_mkernels,
    compute_all_mkernels_v2,
    swap_munu_lyx,
)

SHAPE = (6, 4, 4, 4)
_RNG = np.random.default_rng(7)
A = _RNG.normal(size=SHAPE)
B = _RNG.normal(size=SHAPE)
C = _RNG.normal(size=SHAPE)
D = _RNG.normal(size=SHAPE)

XV = np.array([0.3, -0.7, 1.1, 0.4])
YV = np.array([-0.2, 0.5, 0.9, -1.3])


def bilinear(xv, yv):
    return C * float(xv @ yv) + D * float(xv[0] * yv[1])


def fake_l0(xv, yv):
    return A * float(np.sum(xv)) + B * float(np.sum(yv)) + bilinear(xv, yv)


def vanishing_l0(xv, yv):
    return bilinear(xv, yv)


def _pairs(k):
    return [k.l0, k.l1, k.l2, k.l3]


def test_l0_pair_is_direct_evaluation():
    k = compute_all_kernels(XV, YV, fake_l0)
    np.testing.assert_allclose(k.l0.xy, fake_l0(XV, YV))
    np.testing.assert_allclose(k.l0.yx, fake_l0(YV, XV))


def test_kernels_vanishing_at_origin_are_unchanged():
    k = compute_all_kernels(XV, YV, vanishing_l0)
    for pair in _pairs(k):
        np.testing.assert_allclose(pair.xy, k.l0.xy)
        np.testing.assert_allclose(pair.yx, k.l0.yx)


def test_l1_shift_is_shared_between_orderings():
    k = compute_all_kernels(XV, YV, fake_l0)
    np.testing.assert_allclose(k.l1.xy - k.l0.xy, k.l1.yx - k.l0.yx)


def test_l3_shifts_sum_to_twice_l1_shift():
    k = compute_all_kernels(XV, YV, fake_l0)
    total = (k.l3.xy - k.l0.xy) + (k.l3.yx - k.l0.yx)
    np.testing.assert_allclose(total, 2 * (k.l1.xy - k.l0.xy), atol=1e-12)


def test_l2_removes_single_argument_parts():
    k = compute_all_kernels(XV, YV, fake_l0)
    np.testing.assert_allclose(k.l2.xy, bilinear(XV, YV), atol=1e-12)
    np.testing.assert_allclose(k.l2.yx, bilinear(YV, XV), atol=1e-12)


def test_bad_vector_shape_rejected():
    with pytest.raises(ValueError):
        compute_all_kernels([1.0, 2.0, 3.0], YV, fake_l0)


def test_bad_kernel_shape_rejected():
    with pytest.raises(ValueError):
        compute_all_kernels(XV, YV, lambda x, y: np.zeros((4, 4)))


def test_average_kernels_with_self_is_identity():
    k = Kernels(A, B, C, D)
    avg = average_kernels(k, k)
    for got, want in zip((avg.l0, avg.l1, avg.l2, avg.l3), (A, B, C, D)):
        np.testing.assert_allclose(got, want)


def test_average_kernels_with_zero_halves():
    k = Kernels(A, B, C, D)
    z = Kernels(*(np.zeros(SHAPE) for _ in range(4)))
    avg = average_kernels(k, z)
    np.testing.assert_allclose(avg.l2, C / 2)
    np.testing.assert_allclose(avg.l3, D / 2)


def test_average_qed_kernels_is_midpoint():
    k = compute_all_kernels(XV, YV, fake_l0)
    w = compute_all_kernels(YV, XV, fake_l0)
    avg = average_qed_kernels(k, w)
    for a, b, c in zip(_pairs(avg), _pairs(k), _pairs(w)):
        np.testing.assert_allclose(2 * a.xy, b.xy + c.xy)
        np.testing.assert_allclose(2 * a.yx, b.yx + c.yx)


def test_swap_munu_lyx_swaps_only_yx():
    k = compute_all_kernels(XV, YV, fake_l0)
    s = swap_munu_lyx(k)
    for orig, new in zip(_pairs(k), _pairs(s)):
        np.testing.assert_allclose(new.xy, orig.xy)
        np.testing.assert_allclose(new.yx, orig.yx.transpose(0, 2, 1, 3))


def test_swap_munu_lyx_twice_is_identity():
    k = compute_all_kernels(XV, YV, fake_l0)
    s = swap_munu_lyx(swap_munu_lyx(k))
    for orig, new in zip(_pairs(k), _pairs(s)):
        np.testing.assert_allclose(new.yx, orig.yx)


def test_mkernels_with_zero_mass_match_l2():
    plain = compute_all_kernels(XV, YV, fake_l0)
    mk = compute_all_mkernels(np.zeros(4), XV, YV, fake_l0)
    for pair in _pairs(mk):
        np.testing.assert_allclose(pair.xy, plain.l2.xy, atol=1e-12)
        np.testing.assert_allclose(pair.yx, plain.l2.yx, atol=1e-12)


def test_mkernels_zero_mass_entry_in_mixed_masses():
    plain = compute_all_kernels(XV, YV, fake_l0)
    mk = compute_all_mkernels([0.0, 0.5, 1.0, 2.0], XV, YV, fake_l0)
    np.testing.assert_allclose(mk.l0.xy, plain.l2.xy, atol=1e-12)
    assert not np.allclose(mk.l1.xy, plain.l2.xy)


def test_mkernels_vanishing_l0_unchanged():
    mk = compute_all_mkernels([0.1, 0.5, 1.0, 2.0], XV, YV, vanishing_l0)
    for pair in _pairs(mk):
        np.testing.assert_allclose(pair.xy, vanishing_l0(XV, YV), atol=1e-12)
        np.testing.assert_allclose(pair.yx, vanishing_l0(YV, XV), atol=1e-12)


def test_mkernels_heavy_mass_suppresses_subtraction():
    mk = compute_all_mkernels([1e4] * 4, XV, YV, fake_l0)
    np.testing.assert_allclose(mk.l3.xy, fake_l0(XV, YV), atol=1e-12)
    np.testing.assert_allclose(mk.l3.yx, fake_l0(YV, XV), atol=1e-12)


def test_mkernels_rejects_bad_mass_shape():
    with pytest.raises(ValueError):
        compute_all_mkernels([1.0, 2.0], XV, YV, fake_l0)


def test_mkernels_v2_combines_both_orderings():
    mk = compute_all_mkernels([0.0, 0.5, 1.0, 2.0], XV, YV, fake_l0)
    v2 = compute_all_mkernels_v2([0.0, 0.5, 1.0, 2.0], XV, YV, fake_l0)
    for a, b in zip(_pairs(mk), _pairs(v2)):
        np.testing.assert_allclose(b.xy, a.xy + a.yx.transpose(0, 2, 1, 3), atol=1e-12)


def test_mkernels_v2_reflected_for_vanishing_l0():
    v2 = compute_all_mkernels_v2([0.1, 0.5, 1.0, 2.0], XV, YV, vanishing_l0)
    for pair in _pairs(v2):
        np.testing.assert_allclose(pair.yx, vanishing_l0(XV, -YV), atol=1e-12)


def test_containers_hold_given_arrays():
    pair = KernelPair(xy=A, yx=B)
    q = QEDKernels(pair, pair, pair, pair)
    assert q.l2.yx is B